"""
Data quality checks for profiles before they enter the engine.

The engine itself never rejects data (it degrades to documented defaults), so
these checks are advisory: they surface inputs that forecast "successfully"
but probably not the way the user meant.
- Negative money amounts
- Rates sitting exactly on the percentage/decimal threshold
- Loans that never amortize within their term
- Loans above their loan-to-value ratio
- Assets bought after the forecast horizon ends
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from core.config import ForecastConfig
from core.schema import ASSET_RATE_FIELDS, ASSET_REQUIRED_FIELDS, Asset, Profile, Settings

from .normalizer import normalize_assets, resolve_start_year

logger = logging.getLogger(__name__)

_MONEY_FIELDS = (
    "purchase_market_value",
    "income_per_year",
    "income_per_week",
    "expenses_per_year",
    "loan_amount",
)

_SETTINGS_RATE_FIELDS = (
    "default_capital_growth_rate",
    "default_income_growth_rate",
    "default_expense_growth_rate",
    "default_loan_to_value_ratio",
    "default_loan_interest_rate",
)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a profile."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def is_asset_complete(asset: Asset) -> bool:
    return all(getattr(asset, f) is not None for f in ASSET_REQUIRED_FIELDS)


def select_forecast_assets(assets: Sequence[Asset]) -> List[Asset]:
    """
    Pre-filter applied before the engine sees the list: drop hidden assets and
    assets the form has not filled in yet. Input order is preserved.
    """
    selected = []
    for asset in assets:
        if asset.hidden:
            logger.debug("Skipping hidden asset %r", asset.name)
            continue
        if not is_asset_complete(asset):
            logger.warning("Skipping incomplete asset %r (needs %s)", asset.name, ", ".join(ASSET_REQUIRED_FIELDS))
            continue
        selected.append(asset)
    return selected


def validate_profile(
    profile: Profile,
    settings: Settings,
    *,
    config: Optional[ForecastConfig] = None,
) -> ValidationResult:
    """
    Run all advisory checks on a profile.
    Returns a ValidationResult with errors (nonsensical input) and warnings (informational).
    """
    cfg = config or ForecastConfig()
    result = ValidationResult()

    # --- Settings ---
    for name in _SETTINGS_RATE_FIELDS:
        if getattr(settings, name) == 1:
            result.warnings.append(f"Settings.{name} is exactly 1; read as 100%, not 1%.")

    assets = select_forecast_assets(profile.assets)
    if not assets:
        result.warnings.append("No visible, complete assets; every year will be empty.")
        return result

    start_year = resolve_start_year(profile)
    horizon = profile.forecast_years if profile.forecast_years is not None else cfg.horizon_years
    last_year = start_year + horizon - 1

    for asset, norm in zip(assets, normalize_assets(assets, settings)):
        label = f"Asset {asset.name or norm.key!r}"

        # --- Amounts ---
        for name in _MONEY_FIELDS:
            value = getattr(asset, name)
            if value is not None and value < 0:
                result.errors.append(f"{label}: negative {name} ({value}).")

        if asset.income_per_year is not None and asset.income_per_week is not None:
            result.warnings.append(f"{label}: both incomePerYear and incomePerWeek given, using incomePerYear.")

        # --- Rates ---
        for name in ASSET_RATE_FIELDS:
            if getattr(asset, name) == 1:
                result.warnings.append(f"{label}: {name} is exactly 1; read as 100%, not 1%.")

        # --- Loan ---
        if norm.loan_amount > 0:
            if norm.loan_interest_only_period >= norm.loan_term_years:
                result.warnings.append(
                    f"{label}: interest-only period ({norm.loan_interest_only_period}) covers the whole "
                    f"loan term ({norm.loan_term_years}), so the loan is never amortized."
                )
            if norm.loan_amount > norm.purchase_market_value:
                result.warnings.append(f"{label}: loan exceeds purchase value, check units.")
            elif norm.loan_amount > norm.purchase_market_value * norm.loan_to_value_ratio:
                result.warnings.append(
                    f"{label}: loan is above the {norm.loan_to_value_ratio * 100:.0f}% loan-to-value ratio."
                )

        # --- Timing ---
        if norm.purchase_year > last_year:
            result.warnings.append(
                f"{label}: purchased in {norm.purchase_year}, after the forecast ends ({last_year})."
            )

    return result
