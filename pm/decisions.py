"""
Goal report — turns the yearly snapshots into answers a planner can act on:
  Q1: "When does net income cover my passive-income goal?"
  Q2: "When does it cover it after principal repayments?" (the real gap)
  Q3: "Where do I stand in my target year?" → net income, gaps, equity
  Q4: "When am I debt free, and when does equity peak?"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from core.results import YearResult
from core.utils import to_decimal


@dataclass
class GoalReport:
    """Structured goal-tracking output."""
    passive_income_goal: Decimal
    first_year: int
    last_year: int

    # Goal achievement
    goal_met_year: Optional[int]       # net income >= goal
    real_goal_met_year: Optional[int]  # cash flow after principal >= goal

    # Target year snapshot (None when the target lies outside the forecast)
    target_year: Optional[int]
    target_net_income: Optional[Decimal]
    target_gap_to_goal: Optional[Decimal]
    target_real_gap_to_goal: Optional[Decimal]
    target_equity: Optional[Decimal]

    # Debt and equity
    debt_free_year: Optional[int]
    peak_equity: Decimal
    peak_equity_year: int

    # Flags
    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""

        def money(v: Optional[Decimal]) -> str:
            return "N/A" if v is None else f"{v:,.2f}"

        def year(v: Optional[int]) -> str:
            return "not reached" if v is None else str(v)

        rows = [
            {"Metric": "Passive Income Goal", "Value": money(self.passive_income_goal), "Unit": "$/yr"},
            {"Metric": "Forecast Years", "Value": f"{self.first_year}-{self.last_year}", "Unit": ""},
            {"Metric": "Goal Met (net income)", "Value": year(self.goal_met_year), "Unit": "year"},
            {"Metric": "Goal Met (after principal)", "Value": year(self.real_goal_met_year), "Unit": "year"},
            {"Metric": "Debt Free", "Value": year(self.debt_free_year), "Unit": "year"},
            {"Metric": "Peak Equity", "Value": money(self.peak_equity), "Unit": f"in {self.peak_equity_year}"},
        ]
        if self.target_year is not None:
            rows += [
                {"Metric": "Target Year", "Value": str(self.target_year), "Unit": ""},
                {"Metric": "Net Income at Target", "Value": money(self.target_net_income), "Unit": "$/yr"},
                {"Metric": "Gap to Goal at Target", "Value": money(self.target_gap_to_goal), "Unit": "$/yr"},
                {"Metric": "Real Gap at Target", "Value": money(self.target_real_gap_to_goal), "Unit": "$/yr"},
                {"Metric": "Equity at Target", "Value": money(self.target_equity), "Unit": "$"},
            ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def _first_year(years: np.ndarray, mask: np.ndarray) -> Optional[int]:
    hits = np.flatnonzero(mask)
    return int(years[hits[0]]) if len(hits) else None


def goal_report(
    results: Sequence[YearResult],
    *,
    passive_income_goal,
    target_year: Optional[int] = None,
) -> GoalReport:
    """
    Generate a goal report from a forecast.

    Parameters
    ----------
    results : sequence of YearResult
        Output of engine.run_forecast(), ascending by year
    passive_income_goal : number
        Target net passive income per year
    target_year : int, optional
        Year to snapshot (e.g. currentYear + yearsToGoal)
    """
    if len(results) == 0:
        raise ValueError("No forecast years to report on.")

    goal = to_decimal(passive_income_goal)
    years = np.array([r.year for r in results])
    net = np.array([float(r.net_income) for r in results])
    cash = np.array([float(r.cash_flow_after_principal) for r in results])
    balance = np.array([float(r.asset_loan_balance) for r in results])
    equity = np.array([float(r.equity) for r in results])
    active = np.array([r.number_of_assets for r in results]) > 0

    goal_met_year = _first_year(years, active & (net >= float(goal)))
    real_goal_met_year = _first_year(years, active & (cash >= float(goal)))

    # debt free = first year after the last year with an outstanding balance
    indebted = np.flatnonzero(balance > 0)
    debt_free_year = None
    if len(indebted) and indebted[-1] + 1 < len(years):
        debt_free_year = int(years[indebted[-1] + 1])

    peak = int(np.argmax(equity))

    target = None
    if target_year is not None:
        target = next((r for r in results if r.year == target_year), None)

    # Flags
    flags = []
    if goal_met_year is None:
        flags.append("GOAL_NOT_REACHED: net income never meets the goal within the forecast")
    elif real_goal_met_year is None:
        flags.append("PRINCIPAL_DRAG: goal met on net income but never after principal repayments")
    n_negative_cash = int(np.sum(active & (cash < 0)))
    if n_negative_cash:
        flags.append(f"NEGATIVE_CASH_FLOW: {n_negative_cash} years with negative cash flow after principal")
    if np.any(equity < 0):
        flags.append("NEGATIVE_EQUITY: loan balance exceeds asset value in at least one year")
    if len(indebted) and debt_free_year is None:
        flags.append("DEBT_OUTSTANDING: loans remain at the end of the forecast")

    return GoalReport(
        passive_income_goal=goal,
        first_year=int(years[0]),
        last_year=int(years[-1]),
        goal_met_year=goal_met_year,
        real_goal_met_year=real_goal_met_year,
        target_year=target_year,
        target_net_income=target.net_income if target else None,
        target_gap_to_goal=target.gap_to_income_goal if target else None,
        target_real_gap_to_goal=target.real_gap_to_goal if target else None,
        target_equity=target.equity if target else None,
        debt_free_year=debt_free_year,
        peak_equity=results[peak].equity,
        peak_equity_year=int(years[peak]),
        flags=flags,
    )
