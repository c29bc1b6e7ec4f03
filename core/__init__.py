"""
Core package — input schema, run configuration, output records, and shared utilities.
No business logic lives here.
"""

from .schema import Asset, AssetType, Profile, Settings
from .config import ForecastConfig
from .results import AssetYearBreakdown, YearResult
from .utils import to_decimal, to_decimal_rate, excel_round, compound

__all__ = [
    "Asset",
    "AssetType",
    "Profile",
    "Settings",
    "ForecastConfig",
    "AssetYearBreakdown",
    "YearResult",
    "to_decimal",
    "to_decimal_rate",
    "excel_round",
    "compound",
]
