"""
Forecast run configuration.
Domain defaults (growth rates, loan terms) live in core/schema.py (Settings).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastConfig:
    # number of yearly snapshots; consumers slice for display
    horizon_years: int = 50

    # output rounding (half away from zero), applied only when building results
    decimals: int = 2

    # significant digits for the decimal context of one run
    decimal_precision: int = 34
