"""
Balance engine — derives the running balance of the statement.

The balance is never read from storage. Every read folds
(credit - debit) over the entries in the order the store
returned them, starting from zero. Entries are expected to be
sorted by date already; this module never re-sorts, so equal
dates keep the store's insertion order.

All arithmetic is Decimal. Float never enters the running total.
"""

from typing import Any, Iterable

from account_statement.schemas.entry import EntryResponse, ZERO


def compute_balances(entries: Iterable[Any]) -> list[EntryResponse]:
    """
    Annotate each entry with the running balance up to and including it.

    Accepts stored Entry rows, EntryResponse objects or plain dicts.
    Missing amounts count as zero. The input is left untouched and
    a new list is returned; an empty input gives an empty list.
    """
    running = ZERO
    result = []
    for entry in entries:
        line = EntryResponse.model_validate(entry)
        running = running + line.credit - line.debit
        result.append(line.model_copy(update={"balance": running}))
    return result
