"""Weekly aggregation and the local report."""

from planner_engine.aggregation.local_report import build_local_report
from planner_engine.aggregation.weekly import (
    aggregate_week,
    daily_totals,
    percent_of_goal,
    round_half_up,
)

__all__ = [
    "aggregate_week",
    "build_local_report",
    "daily_totals",
    "percent_of_goal",
    "round_half_up",
]
