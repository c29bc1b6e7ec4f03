"""
Data preparation — loading profiles, pre-filtering, validation, and asset normalization.
"""

from .loader import load_profile_json, load_settings_json, load_assets_csv
from .normalizer import (
    NormalizedAsset,
    normalize_asset,
    normalize_assets,
    earliest_purchase_year,
    resolve_start_year,
)
from .validators import ValidationResult, select_forecast_assets, validate_profile

__all__ = [
    "load_profile_json",
    "load_settings_json",
    "load_assets_csv",
    "NormalizedAsset",
    "normalize_asset",
    "normalize_assets",
    "earliest_purchase_year",
    "resolve_start_year",
    "ValidationResult",
    "select_forecast_assets",
    "validate_profile",
]
