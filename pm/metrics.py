"""
Tabular views of a forecast — one row per year, or one row per (year, asset).
Used by the CLI and by chart/table consumers that prefer DataFrames.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from core.results import YearResult

YEAR_COLUMNS = [
    "year",
    "gross_income",
    "expenses",
    "net_income",
    "total_principal_paid",
    "cash_flow_after_principal",
    "gap_to_income_goal",
    "real_gap_to_goal",
    "number_of_assets",
    "asset_value",
    "asset_loan_balance",
    "equity",
]

ASSET_COLUMNS = [
    "year",
    "key",
    "name",
    "asset_type",
    "gross_income",
    "operating_expenses",
    "interest_paid",
    "principal_paid",
    "net_income",
    "cash_flow_after_principal",
    "loan_balance_end",
    "asset_value",
    "loan_phase",
]

_TEXT_COLUMNS = {"year", "key", "name", "asset_type", "loan_phase", "number_of_assets"}


def _row(obj, columns, **extra) -> dict:
    row = {}
    for col in columns:
        value = extra[col] if col in extra else getattr(obj, col)
        row[col] = value if col in _TEXT_COLUMNS else float(value)
    return row


def results_to_frame(results: Sequence[YearResult]) -> pd.DataFrame:
    """
    Returns
    -------
    DataFrame with one row per forecast year (float money columns), in year order.
    """
    rows = [_row(r, YEAR_COLUMNS) for r in results]
    return pd.DataFrame(rows, columns=YEAR_COLUMNS)


def asset_breakdown_frame(results: Sequence[YearResult]) -> pd.DataFrame:
    """Long format: one row per active asset per year, in input asset order within a year."""
    rows = [
        _row(a, ASSET_COLUMNS, year=r.year)
        for r in results
        for a in r.assets
    ]
    return pd.DataFrame(rows, columns=ASSET_COLUMNS)
