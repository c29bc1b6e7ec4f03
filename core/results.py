"""
Output records — one YearResult per forecast year, with a per-asset breakdown.
Values are Decimals already rounded at the output boundary (pm/aggregator.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AssetYearBreakdown:
    key: str
    name: str
    asset_type: str
    gross_income: Decimal
    operating_expenses: Decimal
    interest_paid: Decimal
    principal_paid: Decimal
    net_income: Decimal
    cash_flow_after_principal: Decimal
    loan_balance_end: Decimal
    asset_value: Decimal
    loan_phase: str

    def to_dict(self) -> Dict[str, Any]:
        """camelCase record for chart/table consumers."""
        return {
            "name": self.name,
            "type": self.asset_type,
            "grossIncome": float(self.gross_income),
            "operatingExpenses": float(self.operating_expenses),
            "interestPaid": float(self.interest_paid),
            "principalPaid": float(self.principal_paid),
            "netIncome": float(self.net_income),
            "cashFlowAfterPrincipal": float(self.cash_flow_after_principal),
            "loanBalanceEnd": float(self.loan_balance_end),
            "assetValue": float(self.asset_value),
            "loanPhase": self.loan_phase,
        }


@dataclass(frozen=True)
class YearResult:
    """Portfolio snapshot for one calendar year."""

    year: int
    gross_income: Decimal
    expenses: Decimal  # operating + interest
    net_income: Decimal
    total_principal_paid: Decimal
    cash_flow_after_principal: Decimal
    gap_to_income_goal: Decimal
    real_gap_to_goal: Decimal
    number_of_assets: int
    asset_value: Decimal
    asset_loan_balance: Decimal
    equity: Decimal
    assets: Tuple[AssetYearBreakdown, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currentYear": self.year,
            "grossIncome": float(self.gross_income),
            "expenses": float(self.expenses),
            "netIncome": float(self.net_income),
            "totalPrincipalPaid": float(self.total_principal_paid),
            "cashFlowAfterPrincipal": float(self.cash_flow_after_principal),
            "gapToIncomeGoal": float(self.gap_to_income_goal),
            "realGapToGoal": float(self.real_gap_to_goal),
            "numberOfAssets": self.number_of_assets,
            "assetValue": float(self.asset_value),
            "assetLoanBalance": float(self.asset_loan_balance),
            "equity": float(self.equity),
            "assets": [a.to_dict() for a in self.assets],
        }
