"""
Entry service — the ledger use cases.

This service enforces the boundary rules before anything is
written:
1. particulars must be present
2. at least one of debit or credit must be non-zero

Reads always go through the balance engine, so every caller
sees balances derived from the current state of the store.
"""

import logging

from pydantic import ValidationError as SchemaValidationError

from account_statement.exceptions import NotFoundError, StoreError, ValidationError
from account_statement.schemas.entry import (
    EntryCreate,
    EntryFields,
    EntryResponse,
    EntryUpdate,
)
from account_statement.schemas.statement import StatementFilter, StatementFormat
from account_statement.services.balance import compute_balances
from account_statement.services.entry_store import EntryStore
from account_statement.services.export import ExportSink
from account_statement.services.filtering import filter_entries
from account_statement.services.formatter import format_statement

logger = logging.getLogger(__name__)


class EntryService:
    """
    All entry operations pass through this service.

    The store is passed in by the caller, which keeps the
    service free of any database or HTTP concerns.
    """

    def __init__(self, store: EntryStore, date_format: str | None = None):
        self.store = store
        self.date_format = date_format

    @staticmethod
    def _validate(request: EntryFields) -> None:
        if not request.particulars:
            raise ValidationError("Missing required fields: particulars is required")
        if not request.debit and not request.credit:
            raise ValidationError(
                "Missing required fields: debit or credit must be non-zero"
            )

    def list_entries(self) -> list[EntryResponse]:
        """
        Every entry in date order with its running balance.

        A stored row that cannot be read as an entry is a store
        failure, not a caller error.
        """
        rows = self.store.list_all()
        try:
            return compute_balances(rows)
        except SchemaValidationError as e:
            logger.exception("Stored entries could not be read")
            raise StoreError("read entries", str(e)) from e

    def _balanced(self, entry_id: int) -> EntryResponse:
        for line in self.list_entries():
            if line.id == entry_id:
                return line
        raise NotFoundError(entry_id)

    def create_entry(self, request: EntryCreate) -> EntryResponse:
        """
        Validate and store a new entry.

        Raises ValidationError without touching the store if the
        request is incomplete. The returned line carries the running
        balance at its position in the ledger.
        """
        self._validate(request)
        entry = self.store.insert(request.model_dump())
        logger.info("Created entry %s dated %s", entry.id, entry.date)
        return self._balanced(entry.id)

    def update_entry(self, entry_id: int, request: EntryUpdate):
        """Replace every field of an existing entry except its id."""
        self._validate(request)
        entry = self.store.update(entry_id, request.model_dump())
        if entry is None:
            logger.warning("Update for unknown entry %s", entry_id)
            raise NotFoundError(entry_id)
        logger.info("Updated entry %s", entry_id)
        return entry

    def delete_entry(self, entry_id: int) -> None:
        if not self.store.delete(entry_id):
            logger.warning("Delete for unknown entry %s", entry_id)
            raise NotFoundError(entry_id)
        logger.info("Deleted entry %s", entry_id)

    def build_statement(self, criteria: StatementFilter) -> list[EntryResponse]:
        """
        Balanced entries matching the filter.

        Balances come from the whole ledger and are not re-based
        on the filtered subset.
        """
        return filter_entries(self.list_entries(), criteria)

    def render_statement(
        self, criteria: StatementFilter, target: StatementFormat
    ) -> str:
        return format_statement(
            self.build_statement(criteria), target, self.date_format
        )

    def share_statement(self, criteria: StatementFilter, sink: ExportSink) -> str:
        """Render the statement as share text and hand it to a sink."""
        content = self.render_statement(criteria, StatementFormat.TEXT)
        return sink.deliver(content)
