"""
Entry API endpoints.

The API layer is thin: it maps domain errors to status codes
and delegates everything else to EntryService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from account_statement.exceptions import LedgerError
from account_statement.models.base import get_db
from account_statement.services.entry_service import EntryService
from account_statement.services.entry_store import SqlAlchemyEntryStore
from account_statement.schemas.entry import (
    EntryCreate,
    EntryUpdate,
    EntryResponse,
    MessageResponse,
)

router = APIRouter(prefix="/entries", tags=["Entries"])


def _service(db: Session) -> EntryService:
    return EntryService(SqlAlchemyEntryStore(db))


@router.get("", response_model=list[EntryResponse])
def list_entries(db: Session = Depends(get_db)):
    """
    List all entries sorted by date with running balances.

    Balances are recomputed from the stored entries on every call.
    """
    try:
        return _service(db).list_entries()
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("", response_model=EntryResponse, status_code=201)
def create_entry(
    request: EntryCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new entry.

    Requires particulars and a non-zero debit or credit.
    The response includes the running balance at the new
    entry's position in the ledger.
    """
    try:
        return _service(db).create_entry(request)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.put("/{entry_id}", response_model=MessageResponse)
def update_entry(
    entry_id: int,
    request: EntryUpdate,
    db: Session = Depends(get_db),
):
    """Replace an entry's date, particulars and amounts."""
    try:
        _service(db).update_entry(entry_id, request)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return MessageResponse(message="Entry updated successfully")


@router.delete("/{entry_id}", response_model=MessageResponse)
def delete_entry(
    entry_id: int,
    db: Session = Depends(get_db),
):
    """Delete an entry. Later balances shift on the next read."""
    try:
        _service(db).delete_entry(entry_id)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return MessageResponse(message="Entry deleted successfully")
