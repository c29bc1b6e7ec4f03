"""
Asset normalization — one canonical, fully-populated record per asset.

All historical field shapes are mapped here, before any calculation runs:
  1. Rates: value > 1 is a percentage (5 -> 0.05), otherwise already decimal.
     The same rule applies to Settings defaults (always percentage integers).
  2. incomePerWeek (legacy) -> incomePerYear = weekly x 52; annual wins if both given.
  3. Loan term: asset value, else the residence default or the general default.
  4. Other numeric fields default to 0; rates and IO period default from Settings.

Nothing here raises: absent or invalid numbers degrade to 0 or the documented default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence, Set

from core.schema import Asset, AssetType, Profile, Settings
from core.utils import to_decimal, to_decimal_rate

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52

# fallbacks when Settings carries a zero term
FALLBACK_LOAN_TERM_YEARS = 30
FALLBACK_RESIDENCE_LOAN_TERM_YEARS = 20


@dataclass(frozen=True)
class NormalizedAsset:
    key: str
    name: str
    asset_type: str
    purchase_year: int

    purchase_market_value: Decimal
    capital_growth_rate: Decimal

    income_per_year: Decimal
    income_growth_rate: Decimal

    expenses_per_year: Decimal
    expense_growth_rate: Decimal

    loan_amount: Decimal
    loan_to_value_ratio: Decimal
    loan_interest_rate: Decimal
    loan_interest_only_period: Decimal
    loan_term_years: Decimal


def _rate_or_default(value: Optional[float], default_percentage: float) -> Decimal:
    return to_decimal_rate(value if value is not None else default_percentage)


def default_loan_term(asset_type: str, settings: Settings) -> Decimal:
    if asset_type == AssetType.PRINCIPAL_PLACE_OF_RESIDENCE.value:
        term = settings.default_principal_residence_loan_term_years or FALLBACK_RESIDENCE_LOAN_TERM_YEARS
    else:
        term = settings.default_loan_term_years or FALLBACK_LOAN_TERM_YEARS
    return to_decimal(term)


def annual_income(asset: Asset) -> Decimal:
    """incomePerYear, or the legacy weekly figure x 52."""
    if asset.income_per_year is not None:
        return to_decimal(asset.income_per_year)
    if asset.income_per_week is not None:
        logger.debug("Asset %r: converting weekly income %s to annual", asset.name, asset.income_per_week)
        return to_decimal(asset.income_per_week) * WEEKS_PER_YEAR
    return Decimal(0)


def asset_keys(assets: Sequence[Asset]) -> List[str]:
    """
    Stable per-asset identifiers: explicit id, else type:name:purchaseYear.
    Collisions get the lowest free #n suffix (n >= 2) in input order, so a
    suffixed key never clashes with an explicit id that looks the same.
    """
    keys: List[str] = []
    issued: Set[str] = set()
    for asset in assets:
        base = asset.id or f"{asset.asset_type.value}:{asset.name}:{asset.purchase_year}"
        key, n = base, 1
        while key in issued:
            n += 1
            key = f"{base}#{n}"
        issued.add(key)
        keys.append(key)
    return keys


def normalize_asset(asset: Asset, settings: Settings, *, key: Optional[str] = None) -> NormalizedAsset:
    asset_type = asset.asset_type.value

    if asset.loan_term_years is not None:
        loan_term_years = to_decimal(asset.loan_term_years)
    else:
        loan_term_years = default_loan_term(asset_type, settings)

    io_period = asset.loan_interest_only_period
    if io_period is None:
        io_period = settings.default_loan_interest_only_period

    return NormalizedAsset(
        key=key or asset_keys([asset])[0],
        name=asset.name,
        asset_type=asset_type,
        purchase_year=int(asset.purchase_year),
        purchase_market_value=to_decimal(asset.purchase_market_value),
        capital_growth_rate=_rate_or_default(asset.capital_growth_rate, settings.default_capital_growth_rate),
        income_per_year=annual_income(asset),
        income_growth_rate=_rate_or_default(asset.income_growth_rate, settings.default_income_growth_rate),
        expenses_per_year=to_decimal(asset.expenses_per_year),
        expense_growth_rate=_rate_or_default(asset.expense_growth_rate, settings.default_expense_growth_rate),
        loan_amount=to_decimal(asset.loan_amount),
        loan_to_value_ratio=_rate_or_default(asset.loan_to_value_ratio, settings.default_loan_to_value_ratio),
        loan_interest_rate=_rate_or_default(asset.loan_interest_rate, settings.default_loan_interest_rate),
        loan_interest_only_period=to_decimal(io_period),
        loan_term_years=loan_term_years,
    )


def normalize_assets(assets: Sequence[Asset], settings: Settings) -> List[NormalizedAsset]:
    """Normalize in input order; keys are assigned across the whole list."""
    keys = asset_keys(assets)
    return [normalize_asset(a, settings, key=k) for a, k in zip(assets, keys)]


def earliest_purchase_year(assets: Iterable[Asset]) -> Optional[int]:
    years = [a.purchase_year for a in assets]
    return min(years) if years else None


def resolve_start_year(profile: Profile) -> int:
    """Explicit startYear wins; otherwise the forecast starts at currentYear."""
    if profile.start_year is not None:
        return profile.start_year
    return profile.current_year
