"""
Entry store — persistence boundary for ledger entries.

The store owns entry identity and persistence and nothing else.
It never computes or saves a balance. Each mutating call is its
own unit of work: it either commits fully or rolls back and
raises StoreError.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from account_statement.exceptions import StoreError
from account_statement.models.entry import Entry

logger = logging.getLogger(__name__)


class EntryStore(ABC):
    """
    Abstract interface for entry storage.

    Any backend must return list_all() sorted ascending by date,
    with entries sharing a date kept in insertion order.
    """

    @abstractmethod
    def list_all(self) -> list[Entry]:
        """Return every entry sorted by date, then insertion order."""

    @abstractmethod
    def get(self, entry_id: int) -> Entry | None:
        """Return one entry, or None if it does not exist."""

    @abstractmethod
    def insert(self, fields: dict[str, Any]) -> Entry:
        """Persist a new entry and return it with its assigned id."""

    @abstractmethod
    def update(self, entry_id: int, fields: dict[str, Any]) -> Entry | None:
        """Replace an entry's fields. Returns None if the id is unknown."""

    @abstractmethod
    def delete(self, entry_id: int) -> bool:
        """Remove an entry. Returns False if the id is unknown."""


class SqlAlchemyEntryStore(EntryStore):
    """
    Entry store backed by a SQLAlchemy session.

    The session is supplied by the caller (one per request), so
    no state is shared across requests.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Entry]:
        try:
            entries = self.db.execute(
                select(Entry).order_by(Entry.date.asc(), Entry.id.asc())
            ).scalars().all()
        except SQLAlchemyError as e:
            logger.exception("Listing entries failed")
            raise StoreError("list entries", str(e)) from e
        return list(entries)

    def get(self, entry_id: int) -> Entry | None:
        try:
            return self.db.get(Entry, entry_id)
        except SQLAlchemyError as e:
            logger.exception("Loading entry %s failed", entry_id)
            raise StoreError("load entry", str(e)) from e

    def insert(self, fields: dict[str, Any]) -> Entry:
        entry = Entry(**fields)
        try:
            self.db.add(entry)
            self.db.commit()
            self.db.refresh(entry)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Inserting entry failed")
            raise StoreError("create entry", str(e)) from e
        return entry

    def update(self, entry_id: int, fields: dict[str, Any]) -> Entry | None:
        entry = self.get(entry_id)
        if entry is None:
            return None
        try:
            for name, value in fields.items():
                setattr(entry, name, value)
            self.db.commit()
            self.db.refresh(entry)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Updating entry %s failed", entry_id)
            raise StoreError("update entry", str(e)) from e
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get(entry_id)
        if entry is None:
            return False
        try:
            self.db.delete(entry)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Deleting entry %s failed", entry_id)
            raise StoreError("delete entry", str(e)) from e
        return True
