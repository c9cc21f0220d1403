"""
Filter engine — narrows a statement by particulars and date range.

All criteria are ANDed together and an absent criterion always
matches. Order is preserved and the input is never modified.
Dates are real date objects, so the range check compares
calendar dates rather than strings.
"""

from typing import Sequence, TypeVar

from account_statement.schemas.statement import StatementFilter

T = TypeVar("T")


def matches(entry, criteria: StatementFilter) -> bool:
    """Return True if a single entry satisfies every present criterion."""
    query = (criteria.text_query or "").strip()
    if query and query.casefold() not in entry.particulars.casefold():
        return False
    if criteria.start_date is not None and entry.date < criteria.start_date:
        return False
    if criteria.end_date is not None and entry.date > criteria.end_date:
        return False
    return True


def filter_entries(entries: Sequence[T], criteria: StatementFilter) -> list[T]:
    """Return the matching subsequence as a new list."""
    return [entry for entry in entries if matches(entry, criteria)]
