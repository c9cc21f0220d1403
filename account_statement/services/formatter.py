"""
Statement formatter — renders balanced entries as CSV or share text.

Pure string building, no I/O. Delivering the result somewhere
(download, share link, file) is the job of an export sink.

Display conventions:
- columns are always date, particulars, debit country, debit,
  credit country, credit, balance
- a zero amount shows as "-" in the four amount columns; the
  balance is always shown
- dates use the configured display format, never ISO storage form
"""

import csv
import io
from decimal import Decimal
from typing import Iterable

from account_statement.config import get_settings
from account_statement.schemas.entry import EntryResponse
from account_statement.schemas.statement import StatementFormat

PLACEHOLDER = "-"

HEADER = [
    "Date",
    "Particulars",
    "Debit Country",
    "Debit (Out)",
    "Credit Country",
    "Credit (In)",
    "Balance",
]

TEXT_TITLE = "Account Statement:"


def format_amount(amount: Decimal) -> str:
    """Plain decimal text without trailing zeros: 100.0000 -> "100"."""
    if amount == 0:
        return "0"
    return f"{amount.normalize():f}"


def display_amount(amount: Decimal | None) -> str:
    """Amount column value, with the placeholder for zero or missing."""
    if not amount:
        return PLACEHOLDER
    return format_amount(amount)


def display_date(line: EntryResponse, date_format: str | None = None) -> str:
    fmt = date_format or get_settings().DATE_DISPLAY_FORMAT
    return line.date.strftime(fmt)


def statement_row(line: EntryResponse, date_format: str | None = None) -> list[str]:
    """One entry as the seven display columns."""
    return [
        display_date(line, date_format),
        line.particulars,
        display_amount(line.debit_country),
        display_amount(line.debit),
        display_amount(line.credit_country),
        display_amount(line.credit),
        format_amount(line.balance),
    ]


def to_csv(lines: Iterable[EntryResponse], date_format: str | None = None) -> str:
    """
    Header row plus one row per entry.

    Fields containing commas, quotes or newlines are quoted the
    RFC 4180 way, so free-text particulars cannot break the columns.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for line in lines:
        writer.writerow(statement_row(line, date_format))
    return buffer.getvalue()


def to_text(lines: Iterable[EntryResponse], date_format: str | None = None) -> str:
    """Message body for sharing: a title line, a blank line, one line per entry."""
    out = [TEXT_TITLE, ""]
    for line in lines:
        date_text, particulars, debit_country, debit, credit_country, credit, balance = (
            statement_row(line, date_format)
        )
        out.append(
            f"{date_text} | {particulars} | "
            f"Debit Country: {debit_country} | Debit: {debit} | "
            f"Credit Country: {credit_country} | Credit: {credit} | "
            f"Balance: {balance}"
        )
    return "\n".join(out) + "\n"


def format_statement(
    lines: Iterable[EntryResponse],
    target: StatementFormat | str,
    date_format: str | None = None,
) -> str:
    """Render balanced lines for the requested target."""
    target = StatementFormat(target)
    if target is StatementFormat.CSV:
        return to_csv(lines, date_format)
    return to_text(lines, date_format)
