"""
Ledger entry model.

One dated line of the account statement: a debit and/or a
credit against a counterparty, with optional "country" amounts
that are carried along for display only.

There is no balance column. The running balance is derived
from the ordered entries on every read. Amounts are stored as
integer ten-thousandths (see models/types.py).
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from account_statement.models.base import Base
from account_statement.models.types import Amount


class Entry(Base):
    __tablename__ = "entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    particulars: Mapped[str] = mapped_column(String(255), nullable=False)
    debit_country: Mapped[Decimal] = mapped_column(
        Amount(), nullable=False, default=Decimal("0")
    )
    debit: Mapped[Decimal] = mapped_column(
        Amount(), nullable=False, default=Decimal("0")
    )
    credit_country: Mapped[Decimal] = mapped_column(
        Amount(), nullable=False, default=Decimal("0")
    )
    credit: Mapped[Decimal] = mapped_column(
        Amount(), nullable=False, default=Decimal("0")
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<Entry {self.id} {self.date.isoformat()} {self.particulars!r} "
            f"debit={self.debit} credit={self.credit}>"
        )
