"""Log/schedule reconciliation."""

from planner_engine.reconciliation.engine import ReconciliationEngine
from planner_engine.reconciliation.projection import (
    project_log_to_schedule,
    project_schedule_to_log,
)
from planner_engine.reconciliation.session import ReconciliationSession

__all__ = [
    "ReconciliationEngine",
    "ReconciliationSession",
    "project_log_to_schedule",
    "project_schedule_to_log",
]
