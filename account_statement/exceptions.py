"""
Typed exceptions for the ledger.

Every error carries a machine-readable ``code`` and the HTTP
status class the API maps it to. Callers catch by type,
never by parsing the message.

    LedgerError (base, 500)
    +-- ValidationError (400)  request rejected before the store is touched
    +-- NotFoundError   (404)  update/delete for an unknown entry id
    +-- StoreError      (500)  underlying persistence failure
"""


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    code: str = "LEDGER_ERROR"
    status_code: int = 500


class ValidationError(LedgerError):
    """Entry data failed boundary validation."""

    code: str = "VALIDATION_ERROR"
    status_code: int = 400


class NotFoundError(LedgerError):
    """Entry with given ID was not found."""

    code: str = "ENTRY_NOT_FOUND"
    status_code: int = 404

    def __init__(self, entry_id: int):
        self.entry_id = entry_id
        super().__init__(f"Entry {entry_id} not found")


class StoreError(LedgerError):
    """The entry store failed to read or persist data."""

    code: str = "STORE_ERROR"
    status_code: int = 500

    def __init__(self, operation: str, message: str = ""):
        self.operation = operation
        detail = f"Failed to {operation}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)
