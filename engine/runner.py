"""
Forecast runner — drives the year-by-year simulation across the asset set.

Flow:
  Profile + Settings
    -> select_forecast_assets (drop hidden / incomplete)
    -> normalize_assets       (canonical Decimal records)
    -> LoanState.open         (once per asset, keyed by asset key)
    -> for each year: project_asset_year per asset, aggregate_year
    -> List[YearResult], ascending from the start year

A run is a pure function of its inputs. Loan states live only inside one call,
and Decimal precision is set through a local context, so concurrent runs
never share mutable state.
"""

from __future__ import annotations

import logging
from decimal import localcontext
from typing import Any, Dict, List, Mapping, Optional

from core.config import ForecastConfig
from core.results import YearResult
from core.schema import Profile, Settings
from core.utils import to_decimal
from data_prep.normalizer import normalize_assets, resolve_start_year
from data_prep.validators import select_forecast_assets
from pm.aggregator import aggregate_year

from .amortization import LoanState
from .cashflow import project_asset_year

logger = logging.getLogger(__name__)


def forecast_horizon(profile: Profile, config: ForecastConfig) -> int:
    """Profile override if given, else the configured default (50 years)."""
    if profile.forecast_years is not None:
        return profile.forecast_years
    return config.horizon_years


def run_forecast(
    profile: Profile,
    settings: Optional[Settings] = None,
    *,
    config: Optional[ForecastConfig] = None,
) -> List[YearResult]:
    """
    Run the portfolio forecast.

    Parameters
    ----------
    profile : Profile
        currentYear / optional startYear, passive income goal, asset list
    settings : Settings, optional
        Defaults for any field an asset leaves empty
    config : ForecastConfig, optional
        Horizon, rounding and precision settings

    Returns
    -------
    One YearResult per forecast year, ascending from the start year. Each
    result's per-asset breakdown follows the input asset order.
    """
    cfg = config or ForecastConfig()
    if settings is None:
        settings = Settings()

    horizon = forecast_horizon(profile, cfg)
    if horizon < 0:
        raise ValueError(f"Forecast horizon must be >= 0 years, got {horizon}.")

    assets = normalize_assets(select_forecast_assets(profile.assets), settings)
    start_year = resolve_start_year(profile)
    goal = to_decimal(profile.passive_income_goal)

    logger.debug(
        "Forecasting %d assets over %d years from %d (goal %s)",
        len(assets), horizon, start_year, goal,
    )

    results: List[YearResult] = []
    with localcontext() as ctx:
        ctx.prec = cfg.decimal_precision

        loan_states: Dict[str, LoanState] = {a.key: LoanState.open(a) for a in assets}

        # ========= MAIN YEAR LOOP =========
        for year_offset in range(horizon):
            forecast_year = start_year + year_offset

            figures = []
            for asset in assets:
                row = project_asset_year(asset, loan_states[asset.key], forecast_year)
                if row is not None:
                    figures.append(row)

            results.append(
                aggregate_year(
                    forecast_year,
                    figures,
                    passive_income_goal=goal,
                    decimals=cfg.decimals,
                )
            )

    return results


def run_forecast_dict(
    profile: Mapping[str, Any],
    settings: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[ForecastConfig] = None,
) -> List[Dict[str, Any]]:
    """
    Same as run_forecast, but on the raw camelCase contract: dicts in, dicts out.
    Structural problems raise pydantic's ValidationError.
    """
    results = run_forecast(
        Profile.model_validate(profile),
        Settings.model_validate(settings or {}),
        config=config,
    )
    return [r.to_dict() for r in results]
