"""
Forecast engine — loan amortization, per-asset growth, and the yearly runner.
"""

from .amortization import LoanPhase, LoanState, LoanYear, annual_pi_payment, loan_phase
from .cashflow import AssetYearFigures, project_asset_year
from .runner import run_forecast, run_forecast_dict

__all__ = [
    "LoanPhase",
    "LoanState",
    "LoanYear",
    "annual_pi_payment",
    "loan_phase",
    "AssetYearFigures",
    "project_asset_year",
    "run_forecast",
    "run_forecast_dict",
]
