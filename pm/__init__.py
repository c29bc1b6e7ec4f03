"""
Portfolio outputs — yearly aggregation, tabular views, and goal tracking.
"""

from .aggregator import aggregate_year
from .metrics import results_to_frame, asset_breakdown_frame
from .decisions import GoalReport, goal_report

__all__ = [
    "aggregate_year",
    "results_to_frame",
    "asset_breakdown_frame",
    "GoalReport",
    "goal_report",
]
