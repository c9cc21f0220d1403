"""Business logic services."""

from account_statement.services.entry_service import EntryService
from account_statement.services.entry_store import EntryStore, SqlAlchemyEntryStore

__all__ = ["EntryService", "EntryStore", "SqlAlchemyEntryStore"]
