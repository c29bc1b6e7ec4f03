from decimal import Decimal

from core.utils import compound, excel_round, to_decimal, to_decimal_rate


def test_percentage_integers_become_decimal_rates():
    assert to_decimal_rate(5) == Decimal("0.05")
    assert to_decimal_rate(80) == Decimal("0.8")
    assert to_decimal_rate(1.5) == Decimal("0.015")


def test_decimal_rates_pass_through():
    assert to_decimal_rate(0.05) == Decimal("0.05")
    assert to_decimal_rate(0) == 0


def test_rate_of_exactly_one_is_read_as_one_hundred_percent():
    assert to_decimal_rate(1) == Decimal(1)
    assert to_decimal_rate(1.0) == Decimal(1)
    assert to_decimal_rate(1.01) == Decimal("0.0101")


def test_to_decimal_keeps_float_literal_digits():
    assert to_decimal(0.06) == Decimal("0.06")
    assert to_decimal(None) == 0
    assert to_decimal(None, 7) == 7


def test_excel_round_is_half_away_from_zero():
    assert excel_round(Decimal("2.345")) == Decimal("2.35")
    assert excel_round(Decimal("-2.345")) == Decimal("-2.35")
    assert excel_round(Decimal("2.344")) == Decimal("2.34")
    assert excel_round(Decimal("2.5"), 0) == Decimal("3")


def test_compound_growth_and_zero_periods():
    assert compound(Decimal(100), Decimal("0.1"), 2) == Decimal(121)
    assert compound(Decimal(100), Decimal("0.1"), 0) == Decimal(100)
    assert compound(Decimal(100), Decimal("0.1"), -3) == Decimal(100)
    assert compound(Decimal(100), Decimal(-1), 0) == Decimal(100)
