from decimal import Decimal

from engine.cashflow import AssetYearFigures
from pm.aggregator import aggregate_year


def _figures(name="A", **overrides) -> AssetYearFigures:
    values = dict(
        key=name,
        name=name,
        asset_type="investmentProperty",
        gross_income=Decimal(30000),
        operating_expenses=Decimal(5000),
        interest_paid=Decimal(12000),
        principal_paid=Decimal(4000),
        loan_balance_end=Decimal(196000),
        asset_value=Decimal(400000),
        loan_phase="amortizing",
    )
    values.update(overrides)
    return AssetYearFigures(**values)


def test_portfolio_totals_and_gaps():
    result = aggregate_year(
        2030,
        [_figures("A"), _figures("B", principal_paid=Decimal(0), interest_paid=Decimal(0))],
        passive_income_goal=Decimal(50000),
    )

    assert result.year == 2030
    assert result.number_of_assets == 2
    assert result.gross_income == Decimal("60000.00")
    assert result.expenses == Decimal("22000.00")  # 2 x 5000 operating + 12000 interest
    assert result.net_income == Decimal("38000.00")
    assert result.total_principal_paid == Decimal("4000.00")
    assert result.cash_flow_after_principal == Decimal("34000.00")
    assert result.gap_to_income_goal == Decimal("12000.00")
    assert result.real_gap_to_goal == Decimal("16000.00")
    assert result.asset_value == Decimal("800000.00")
    assert result.asset_loan_balance == Decimal("392000.00")
    assert result.equity == Decimal("408000.00")


def test_gap_is_negative_when_goal_exceeded():
    result = aggregate_year(2030, [_figures()], passive_income_goal=Decimal(1000))

    assert result.gap_to_income_goal == Decimal("-12000.00")
    assert result.real_gap_to_goal == Decimal("-8000.00")


def test_per_asset_breakdown_is_rounded_and_derived():
    result = aggregate_year(
        2030,
        [_figures(gross_income=Decimal("30000.005"), asset_value=Decimal("400000.125"))],
        passive_income_goal=Decimal(0),
    )
    row = result.assets[0]

    assert row.gross_income == Decimal("30000.01")
    assert row.asset_value == Decimal("400000.13")
    assert row.net_income == Decimal("13000.01")
    assert row.cash_flow_after_principal == Decimal("9000.01")
    assert row.loan_phase == "amortizing"


def test_rounding_happens_once_on_totals():
    # three half-cent incomes: summed first (0.015 -> 0.02), not rounded one by one
    parts = [
        _figures(str(i), gross_income=Decimal("0.005"), operating_expenses=Decimal(0), interest_paid=Decimal(0))
        for i in range(3)
    ]
    result = aggregate_year(2030, parts, passive_income_goal=Decimal(0))
    assert result.gross_income == Decimal("0.02")


def test_equity_identity_survives_rounding():
    result = aggregate_year(
        2030,
        [_figures(asset_value=Decimal("1000.005"), loan_balance_end=Decimal("0.004"))],
        passive_income_goal=Decimal(0),
    )
    assert result.equity == result.asset_value - result.asset_loan_balance
    assert result.equity == Decimal("1000.01")


def test_empty_year():
    result = aggregate_year(2020, [], passive_income_goal=Decimal(100))

    assert result.number_of_assets == 0
    assert result.net_income == 0
    assert result.gap_to_income_goal == Decimal("100.00")
    assert result.assets == ()
