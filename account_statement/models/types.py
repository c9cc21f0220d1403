"""
Column types shared by the models.
"""

from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import BigInteger
from sqlalchemy.types import TypeDecorator

# Amounts carry four decimal places everywhere: in requests,
# in the database and in the running balance.
AMOUNT_PLACES = 4
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_PLACES)

# Largest amount whose ten-thousandths fit in a signed 64-bit integer.
MAX_AMOUNT = Decimal(2 ** 63 - 1).scaleb(-AMOUNT_PLACES)


def quantize_amount(amount: Decimal) -> Decimal:
    """Round to the stored precision (four places, half up)."""
    return amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


class Amount(TypeDecorator):
    """
    Decimal amount stored as an integer count of ten-thousandths.

    Contract:
        process_bind_param: Decimal("12.5") -> 125000 on INSERT/UPDATE.
        process_result_value: 125000 -> Decimal("12.5000") on SELECT.

    Every backend stores BIGINT exactly, including SQLite, which has
    no native decimal type and would otherwise round-trip through float.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return int(quantize_amount(value).scaleb(AMOUNT_PLACES))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(int(value)).scaleb(-AMOUNT_PLACES)
