"""
Portfolio forecast — command-line entry point.

  portfolio-forecast profile.json
  portfolio-forecast profile.json --settings settings.json --format json
  portfolio-forecast profile.json --assets-csv assets.csv --from-earliest --report

The profile JSON follows the camelCase contract (currentYear, passiveIncomeGoal,
assets: [...]). Display slicing (--years) only trims the printed rows; the
engine always computes the full horizon.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from core.config import ForecastConfig
from core.schema import Settings
from data_prep.loader import load_assets_csv, load_profile_json, load_settings_json
from data_prep.normalizer import earliest_purchase_year
from data_prep.validators import select_forecast_assets, validate_profile
from engine.runner import run_forecast
from pm.decisions import goal_report
from pm.metrics import results_to_frame

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-forecast",
        description="Year-by-year income, equity and goal-gap forecast for an asset portfolio.",
    )
    parser.add_argument("profile", help="Profile JSON file")
    parser.add_argument("--settings", help="Settings JSON file (defaults used when omitted)")
    parser.add_argument("--assets-csv", help="CSV asset list replacing the profile's assets")
    parser.add_argument("--horizon", type=int, help="Number of forecast years (default 50)")
    parser.add_argument(
        "--from-earliest",
        action="store_true",
        help="Start at the earliest purchase year instead of currentYear",
    )
    parser.add_argument("--years", type=int, help="Only print the first N years")
    parser.add_argument("--format", choices=["table", "json", "csv"], default="table")
    parser.add_argument("--report", action="store_true", help="Print the goal report")
    parser.add_argument("--validate", action="store_true", help="Print data quality checks")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        profile = load_profile_json(args.profile)
        settings = load_settings_json(args.settings) if args.settings else Settings()
        if args.assets_csv:
            profile = profile.model_copy(update={"assets": load_assets_csv(args.assets_csv)})
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    if args.horizon is not None:
        profile = profile.model_copy(update={"forecast_years": args.horizon})
    if args.from_earliest:
        earliest = earliest_purchase_year(select_forecast_assets(profile.assets))
        if earliest is not None:
            profile = profile.model_copy(update={"start_year": earliest})

    config = ForecastConfig()

    if args.validate:
        print(validate_profile(profile, settings, config=config).summary(), file=sys.stderr)

    try:
        results = run_forecast(profile, settings, config=config)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    shown = results[: args.years] if args.years is not None else results

    if args.format == "json":
        print(json.dumps([r.to_dict() for r in shown], indent=2))
    elif args.format == "csv":
        print(results_to_frame(shown).to_csv(index=False), end="")
    else:
        print(results_to_frame(shown).to_string(index=False))

    if args.report and results:
        target_year = None
        if profile.years_to_goal is not None:
            target_year = profile.current_year + profile.years_to_goal
        report = goal_report(results, passive_income_goal=profile.passive_income_goal, target_year=target_year)
        print(report.to_dataframe().to_string(index=False), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
