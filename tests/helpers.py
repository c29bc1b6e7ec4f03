import copy
import json
from pathlib import Path

from core.schema import Profile


def make_profile(*assets: dict, current_year: int = 2025, goal: float = 100000, **extra) -> Profile:
    data = {
        "currentYear": current_year,
        "passiveIncomeGoal": goal,
        "assets": [copy.deepcopy(a) for a in assets],
    }
    data.update(extra)
    return Profile.model_validate(data)


def by_year(results) -> dict:
    return {r.year: r for r in results}


def write_json(tmp_path: Path, data, filename: str = "profile.json") -> Path:
    path = tmp_path / filename
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
