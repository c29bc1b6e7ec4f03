"""
Roll per-asset yearly figures into one portfolio-level YearResult.

  netIncome              = grossIncome - expenses         (expenses include interest)
  cashFlowAfterPrincipal = netIncome - totalPrincipalPaid
  gapToIncomeGoal        = goal - netIncome
  realGapToGoal          = goal - cashFlowAfterPrincipal  (negative = goal exceeded)
  equity                 = assetValue - assetLoanBalance

Sums run at full Decimal precision; excel_round() only when the record is built.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Sequence

from core.results import AssetYearBreakdown, YearResult
from core.utils import ZERO, excel_round

if TYPE_CHECKING:
    from engine.cashflow import AssetYearFigures


def breakdown_row(figures: AssetYearFigures, *, decimals: int = 2) -> AssetYearBreakdown:
    def r(x: Decimal) -> Decimal:
        return excel_round(x, decimals)

    return AssetYearBreakdown(
        key=figures.key,
        name=figures.name,
        asset_type=figures.asset_type,
        gross_income=r(figures.gross_income),
        operating_expenses=r(figures.operating_expenses),
        interest_paid=r(figures.interest_paid),
        principal_paid=r(figures.principal_paid),
        net_income=r(figures.net_income),
        cash_flow_after_principal=r(figures.cash_flow_after_principal),
        loan_balance_end=r(figures.loan_balance_end),
        asset_value=r(figures.asset_value),
        loan_phase=figures.loan_phase,
    )


def aggregate_year(
    year: int,
    figures: Sequence[AssetYearFigures],
    *,
    passive_income_goal: Decimal,
    decimals: int = 2,
) -> YearResult:
    """
    Parameters
    ----------
    year : int
        Calendar year of the snapshot
    figures : sequence of AssetYearFigures
        Active assets only, in input order (the breakdown keeps that order)
    passive_income_goal : Decimal
        Target net passive income per year
    """
    gross_income = sum((f.gross_income for f in figures), ZERO)
    expenses = sum((f.expenses for f in figures), ZERO)
    principal = sum((f.principal_paid for f in figures), ZERO)
    asset_value = sum((f.asset_value for f in figures), ZERO)
    loan_balance = sum((f.loan_balance_end for f in figures), ZERO)

    net_income = gross_income - expenses
    cash_flow = net_income - principal

    asset_value_r = excel_round(asset_value, decimals)
    loan_balance_r = excel_round(loan_balance, decimals)

    return YearResult(
        year=year,
        gross_income=excel_round(gross_income, decimals),
        expenses=excel_round(expenses, decimals),
        net_income=excel_round(net_income, decimals),
        total_principal_paid=excel_round(principal, decimals),
        cash_flow_after_principal=excel_round(cash_flow, decimals),
        gap_to_income_goal=excel_round(passive_income_goal - net_income, decimals),
        real_gap_to_goal=excel_round(passive_income_goal - cash_flow, decimals),
        number_of_assets=len(figures),
        asset_value=asset_value_r,
        asset_loan_balance=loan_balance_r,
        # from the rounded totals so the identity holds on the published figures
        equity=asset_value_r - loan_balance_r,
        assets=tuple(breakdown_row(f, decimals=decimals) for f in figures),
    )
