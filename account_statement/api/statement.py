"""
Statement API endpoints — filtered view, export and share.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from account_statement.config import get_settings
from account_statement.exceptions import LedgerError
from account_statement.models.base import get_db
from account_statement.services.entry_service import EntryService
from account_statement.services.entry_store import SqlAlchemyEntryStore
from account_statement.services.export import ShareLinkSink, DEFAULT_EXPORT_FILENAME
from account_statement.schemas.entry import EntryResponse
from account_statement.schemas.statement import (
    StatementFilter,
    StatementFormat,
    ShareResponse,
)

router = APIRouter(prefix="/statement", tags=["Statement"])


def _service(db: Session) -> EntryService:
    return EntryService(
        SqlAlchemyEntryStore(db),
        date_format=get_settings().DATE_DISPLAY_FORMAT,
    )


def statement_filter(
    particulars: str | None = Query(default=None),
    start_date: str | None = Query(default=None),
    end_date: str | None = Query(default=None),
) -> StatementFilter:
    """
    Build a filter from query parameters.

    Blank parameters (as sent by an empty form field) mean
    "no criterion"; malformed dates are a 400.
    """
    try:
        return StatementFilter(
            text_query=particulars,
            start_date=start_date,
            end_date=end_date,
        )
    except SchemaValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[EntryResponse])
def get_statement(
    criteria: StatementFilter = Depends(statement_filter),
    db: Session = Depends(get_db),
):
    """
    Entries matching the filter, with balances from the full ledger.
    """
    try:
        return _service(db).build_statement(criteria)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/export")
def export_statement(
    format: StatementFormat = StatementFormat.CSV,
    criteria: StatementFilter = Depends(statement_filter),
    db: Session = Depends(get_db),
):
    """
    Download the filtered statement as CSV or plain text.
    """
    try:
        content = _service(db).render_statement(criteria, format)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    if format is StatementFormat.CSV:
        return Response(
            content=content,
            media_type="text/csv",
            headers={
                "Content-Disposition": (
                    f'attachment; filename="{DEFAULT_EXPORT_FILENAME}"'
                )
            },
        )
    return PlainTextResponse(content)


@router.post("/share", response_model=ShareResponse)
def share_statement(
    criteria: StatementFilter,
    db: Session = Depends(get_db),
):
    """
    Build a share link carrying the filtered statement text.

    The link is returned, not opened.
    """
    sink = ShareLinkSink(get_settings().SHARE_BASE_URL)
    try:
        url = _service(db).share_statement(criteria, sink)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return ShareResponse(url=url)
