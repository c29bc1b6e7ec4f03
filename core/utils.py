from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]

ZERO = Decimal(0)
ONE = Decimal(1)
HUNDRED = Decimal(100)


def to_decimal(value: Optional[Number], default: Number = 0) -> Decimal:
    """Exact Decimal from an input number; floats go through str() so 0.06 stays 0.06."""
    if value is None:
        value = default
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_decimal_rate(value: Number) -> Decimal:
    """
    Percentage-or-decimal convention: 5 means 5%, 0.05 means 5%.
    Anything strictly above 1 is a percentage; exactly 1 is kept as 100%.
    """
    rate = to_decimal(value)
    return rate / HUNDRED if rate > ONE else rate


def excel_round(x: Decimal, decimals: int = 2) -> Decimal:
    """Excel ROUND: half away from zero."""
    return x.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def compound(base: Decimal, rate: Decimal, periods: int) -> Decimal:
    """base * (1 + rate) ** periods, with periods clamped at 0."""
    if periods <= 0:
        return base
    return base * (ONE + rate) ** periods
