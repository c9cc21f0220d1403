"""
Pydantic schemas for ledger entries.

These define the API contract. They are separate from the
database model: the stored row has no balance, the response
always carries one.
"""

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, Field, field_validator

from account_statement.models.types import MAX_AMOUNT, quantize_amount

ZERO = Decimal("0")

AMOUNT_FIELDS = ("debit_country", "debit", "credit_country", "credit")


def coerce_amount(value: Any) -> Decimal:
    """
    Leniently turn a caller-supplied amount into a Decimal.

    Numbers and numeric strings are rounded to the four decimal
    places the store keeps, so validation sees the stored value.
    Anything that does not parse (None, "", "abc", NaN, Infinity,
    booleans) becomes 0 instead of failing the request.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            return ZERO
    if not amount.is_finite():
        return ZERO
    try:
        return quantize_amount(amount)
    except InvalidOperation:
        # Too many digits to quantize; the le=MAX_AMOUNT bound rejects it
        return amount


# --- Request Schemas ---

class EntryFields(BaseModel):
    """
    Particulars and amounts shared by create and update requests.

    Whether particulars and at least one of debit/credit are present
    is checked by EntryService before anything reaches the store.
    """
    particulars: str = Field(default="", max_length=255)
    debit_country: Decimal = Field(default=ZERO, ge=0, le=MAX_AMOUNT)
    debit: Decimal = Field(default=ZERO, ge=0, le=MAX_AMOUNT)
    credit_country: Decimal = Field(default=ZERO, ge=0, le=MAX_AMOUNT)
    credit: Decimal = Field(default=ZERO, ge=0, le=MAX_AMOUNT)

    @field_validator("particulars", mode="before")
    @classmethod
    def strip_particulars(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator(*AMOUNT_FIELDS, mode="before")
    @classmethod
    def lenient_amount(cls, v: Any) -> Decimal:
        return coerce_amount(v)


class EntryCreate(EntryFields):
    """A new ledger line. The date defaults to today when omitted or blank."""
    date: dt.date = Field(default_factory=dt.date.today)

    @field_validator("date", mode="before")
    @classmethod
    def blank_date_means_today(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return dt.date.today()
        return v


class EntryUpdate(EntryFields):
    """
    Replacement values for an existing entry. Every field except id.

    The date is required: an update never moves an entry to today
    implicitly.
    """
    date: dt.date


# --- Response Schemas ---

class EntryResponse(BaseModel):
    """A stored entry annotated with its running balance."""
    id: int
    date: dt.date
    particulars: str
    debit_country: Decimal = ZERO
    debit: Decimal = ZERO
    credit_country: Decimal = ZERO
    credit: Decimal = ZERO
    balance: Decimal = ZERO

    model_config = {"from_attributes": True}

    @field_validator(*AMOUNT_FIELDS, mode="before")
    @classmethod
    def missing_amount_is_zero(cls, v: Any) -> Decimal:
        return coerce_amount(v)


class MessageResponse(BaseModel):
    message: str
