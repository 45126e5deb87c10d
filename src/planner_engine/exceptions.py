"""Exception hierarchy for the planner engine."""

from __future__ import annotations


class PlannerError(Exception):
    """Base exception for all planner_engine errors."""


class StoreError(PlannerError):
    """A document store operation failed."""


class StoreReadError(StoreError):
    """A document could not be read (store unavailable, corrupt document)."""


class StoreWriteError(StoreError):
    """A document write was not applied."""


class SyncInProgressError(PlannerError):
    """Another reconciliation pass holds the (user, day) slot."""

    def __init__(self, user_id: str, day: object) -> None:
        super().__init__(f"Reconciliation already running for {user_id} on {day}")
        self.user_id = user_id
        self.day = day


class TaskNotFoundError(PlannerError):
    """No task with the given id exists in the schedule."""
