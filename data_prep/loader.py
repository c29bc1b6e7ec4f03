from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

import pandas as pd
from pydantic import ValidationError

from core.schema import Asset, Profile, Settings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_json(path: PathLike) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: not valid JSON ({exc})") from exc


def load_profile_json(path: PathLike) -> Profile:
    """Load a Profile (currentYear, passiveIncomeGoal, assets, ...) from a JSON file."""
    try:
        profile = Profile.model_validate(_read_json(path))
    except ValidationError as exc:
        raise ValueError(f"{path}: invalid profile\n{exc}") from exc
    logger.debug("Loaded profile from %s with %d assets", path, len(profile.assets))
    return profile


def load_settings_json(path: PathLike) -> Settings:
    """Load Settings from JSON; missing keys keep their defaults."""
    try:
        return Settings.model_validate(_read_json(path))
    except ValidationError as exc:
        raise ValueError(f"{path}: invalid settings\n{exc}") from exc


def load_assets_csv(path: PathLike) -> List[Asset]:
    """
    Load an asset list from CSV (one row per asset).
    Headers may be camelCase (purchaseYear) or snake_case (purchase_year);
    blank cells are treated as absent.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    assets = []
    for i, row in enumerate(df.to_dict(orient="records")):
        record = {k.strip(): v for k, v in row.items() if v != ""}
        try:
            assets.append(Asset.model_validate(record))
        except ValidationError as exc:
            raise ValueError(f"{path}: invalid asset on row {i + 1}\n{exc}") from exc
    logger.debug("Loaded %d assets from %s", len(assets), path)
    return assets
