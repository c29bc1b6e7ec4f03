"""
Per-asset yearly figures — compounding growth plus the loan step.

  value    = purchaseMarketValue * (1 + capitalGrowthRate) ** yearsHeld
  income   = incomePerYear      * (1 + incomeGrowthRate)  ** yearsHeld
  expenses = expensesPerYear    * (1 + expenseGrowthRate) ** yearsHeld

Figures stay at full precision; pm/aggregator.py rounds them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.utils import compound
from data_prep.normalizer import NormalizedAsset

from .amortization import LoanState


@dataclass(frozen=True)
class AssetYearFigures:
    key: str
    name: str
    asset_type: str
    gross_income: Decimal
    operating_expenses: Decimal
    interest_paid: Decimal
    principal_paid: Decimal
    loan_balance_end: Decimal
    asset_value: Decimal
    loan_phase: str

    @property
    def expenses(self) -> Decimal:
        """Operating expenses plus loan interest."""
        return self.operating_expenses + self.interest_paid

    @property
    def net_income(self) -> Decimal:
        return self.gross_income - self.expenses

    @property
    def cash_flow_after_principal(self) -> Decimal:
        return self.net_income - self.principal_paid


def project_asset_year(
    asset: NormalizedAsset,
    loan: LoanState,
    forecast_year: int,
) -> Optional[AssetYearFigures]:
    """
    Figures for one asset in one calendar year, advancing its loan state.
    Returns None (and leaves the loan untouched) before the purchase year.
    """
    years_held = forecast_year - asset.purchase_year
    if years_held < 0:
        return None

    loan_year = loan.advance(years_held)

    return AssetYearFigures(
        key=asset.key,
        name=asset.name,
        asset_type=asset.asset_type,
        gross_income=compound(asset.income_per_year, asset.income_growth_rate, years_held),
        operating_expenses=compound(asset.expenses_per_year, asset.expense_growth_rate, years_held),
        interest_paid=loan_year.interest,
        principal_paid=loan_year.principal,
        loan_balance_end=loan_year.closing_balance,
        asset_value=compound(asset.purchase_market_value, asset.capital_growth_rate, years_held),
        loan_phase=loan_year.phase.value,
    )
