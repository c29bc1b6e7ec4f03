"""
Input schema — the Profile / Settings / Asset contract produced by the form layer.

Field names follow the external camelCase contract (purchaseYear, loanTermYears, ...);
snake_case names are accepted too. Structural problems (wrong types, missing
purchaseYear) are rejected here by pydantic; numeric blanks from HTML forms are
treated as "absent" so that the normalizer can apply its defaults.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class AssetType(str, Enum):
    INVESTMENT_PROPERTY = "investmentProperty"
    COMMERCIAL_PROPERTY = "commercialProperty"
    SELF_MANAGED_SUPER_FUND = "selfManagedSuperFund"
    STOCK_PORTFOLIO = "stockPortfolio"
    PRINCIPAL_PLACE_OF_RESIDENCE = "principalPlaceOfResidence"


# Optional numeric asset fields (everything numeric except purchaseYear).
ASSET_NUMERIC_FIELDS = (
    "purchase_market_value",
    "capital_growth_rate",
    "income_per_year",
    "income_per_week",
    "income_growth_rate",
    "expenses_per_year",
    "expense_growth_rate",
    "loan_amount",
    "loan_to_value_ratio",
    "loan_interest_rate",
    "loan_interest_only_period",
    "loan_term_years",
)

# Rate-style fields subject to the percentage-or-decimal convention.
ASSET_RATE_FIELDS = (
    "capital_growth_rate",
    "income_growth_rate",
    "expense_growth_rate",
    "loan_to_value_ratio",
    "loan_interest_rate",
)

# Fields the form layer must fill before an asset is forecast at all.
ASSET_REQUIRED_FIELDS = ("purchase_year", "purchase_market_value")


def _number_or_none(value: Any) -> Any:
    """Blank or unparseable numeric input means "not supplied"."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    if isinstance(value, (int, float, Decimal)):
        return value if math.isfinite(value) else None
    return None


_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class Asset(BaseModel):
    """One portfolio holding, as entered by the user."""

    model_config = _MODEL_CONFIG

    id: Optional[str] = None
    name: str = ""
    asset_type: AssetType = Field(AssetType.INVESTMENT_PROPERTY, alias="type")
    purchase_year: int

    purchase_market_value: Optional[float] = None
    capital_growth_rate: Optional[float] = None

    income_per_year: Optional[float] = None
    income_per_week: Optional[float] = None  # legacy
    income_growth_rate: Optional[float] = None

    expenses_per_year: Optional[float] = None
    expense_growth_rate: Optional[float] = None

    loan_amount: Optional[float] = None
    loan_to_value_ratio: Optional[float] = None
    loan_interest_rate: Optional[float] = None
    loan_interest_only_period: Optional[float] = None
    loan_term_years: Optional[float] = None

    hidden: bool = False

    @field_validator(*ASSET_NUMERIC_FIELDS, mode="before")
    @classmethod
    def _blank_numbers_are_absent(cls, value: Any) -> Any:
        return _number_or_none(value)

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_blank(cls, value: Any) -> Any:
        return "" if value is None else str(value)


class Settings(BaseModel):
    """
    Global defaults, used only where an asset leaves a field empty.
    Rates are percentage integers (5 means 5%); the two term fields are years.
    Null, blank or unparseable values fall back to the field default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    default_capital_growth_rate: float = 5
    default_income_growth_rate: float = 3
    default_expense_growth_rate: float = 3
    default_loan_to_value_ratio: float = 80
    default_loan_interest_rate: float = 5
    default_loan_interest_only_period: float = 3
    default_loan_term_years: float = 30
    default_principal_residence_loan_term_years: float = 20

    @field_validator("*", mode="before")
    @classmethod
    def _blank_falls_back_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        number = _number_or_none(value)
        if number is None:
            return cls.model_fields[info.field_name].default
        return number


class Profile(BaseModel):
    model_config = _MODEL_CONFIG

    current_year: int
    start_year: Optional[int] = None
    passive_income_goal: float = 0
    assets: List[Asset] = Field(default_factory=list)

    # horizon override; the engine default applies when absent
    forecast_years: Optional[int] = None
    # legacy field from older shared profiles; only used to pick a target year
    years_to_goal: Optional[int] = None

    @field_validator("start_year", "forecast_years", "years_to_goal", mode="before")
    @classmethod
    def _blank_years_are_absent(cls, value: Any) -> Any:
        value = _number_or_none(value)
        return None if value is None else int(value)

    @field_validator("passive_income_goal", mode="before")
    @classmethod
    def _blank_goal_is_zero(cls, value: Any) -> Any:
        value = _number_or_none(value)
        return 0 if value is None else value
