"""
Tests for request schema coercion and validation.
"""

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError as SchemaValidationError

from account_statement.models.types import MAX_AMOUNT
from account_statement.schemas.entry import EntryCreate, EntryUpdate, coerce_amount
from account_statement.schemas.statement import StatementFilter


class TestCoerceAmount:

    @pytest.mark.parametrize("value, expected", [
        (10, Decimal("10")),
        ("10.25", Decimal("10.25")),
        (" 7 ", Decimal("7")),
        (2.5, Decimal("2.5")),
        (Decimal("3.10"), Decimal("3.10")),
    ])
    def test_numbers_are_kept(self, value, expected):
        assert coerce_amount(value) == expected

    @pytest.mark.parametrize("value, expected", [
        ("0.00001", Decimal("0")),
        ("0.00005", Decimal("0.0001")),
        ("1.23456", Decimal("1.2346")),
    ])
    def test_rounded_to_four_places(self, value, expected):
        assert coerce_amount(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "NaN", "Infinity", True, [1]])
    def test_unparseable_becomes_zero(self, value):
        assert coerce_amount(value) == 0


class TestEntryCreate:

    def test_defaults(self):
        request = EntryCreate()
        assert request.date == dt.date.today()
        assert request.particulars == ""
        assert request.debit == 0
        assert request.credit == 0

    def test_blank_date_means_today(self):
        assert EntryCreate(date="").date == dt.date.today()

    def test_iso_date_is_parsed(self):
        assert EntryCreate(date="2024-01-02").date == dt.date(2024, 1, 2)

    @pytest.mark.parametrize("value", ["2024-13-01", "02/01/2024", "yesterday"])
    def test_non_canonical_date_is_rejected(self, value):
        with pytest.raises(SchemaValidationError):
            EntryCreate(date=value)

    def test_particulars_are_trimmed(self):
        assert EntryCreate(particulars="  Alice  ").particulars == "Alice"

    def test_negative_amount_is_rejected(self):
        with pytest.raises(SchemaValidationError):
            EntryCreate(particulars="Alice", debit="-5")

    def test_garbage_amount_is_zero_not_an_error(self):
        assert EntryCreate(particulars="Alice", credit="n/a").credit == 0

    def test_largest_storable_amount_is_accepted(self):
        assert EntryCreate(particulars="Alice", credit=MAX_AMOUNT).credit == MAX_AMOUNT

    def test_amount_beyond_storage_is_rejected(self):
        with pytest.raises(SchemaValidationError):
            EntryCreate(particulars="Alice", credit=MAX_AMOUNT + 1)


class TestEntryUpdate:

    def test_date_is_required(self):
        with pytest.raises(SchemaValidationError):
            EntryUpdate(particulars="Alice", credit=1)

    def test_blank_date_is_rejected(self):
        with pytest.raises(SchemaValidationError):
            EntryUpdate(date="", particulars="Alice", credit=1)

    def test_iso_date_is_parsed(self):
        request = EntryUpdate(date="2024-01-02", particulars="Alice", credit=1)
        assert request.date == dt.date(2024, 1, 2)


class TestStatementFilter:

    def test_blank_values_are_absent(self):
        criteria = StatementFilter(text_query="", start_date="", end_date=" ")
        assert criteria.text_query is None
        assert criteria.start_date is None
        assert criteria.end_date is None

    def test_bad_date_is_rejected(self):
        with pytest.raises(SchemaValidationError):
            StatementFilter(start_date="not-a-date")
