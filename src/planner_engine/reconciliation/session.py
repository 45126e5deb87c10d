"""ReconciliationSession: one projection pass for one (user, day)."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date

from planner_engine.models.daily_log import DailyLog
from planner_engine.models.enums import Weekday
from planner_engine.models.schedule import WeeklySchedule, week_start_for
from planner_engine.models.sync import SyncDirection, SyncResult, SyncStatus
from planner_engine.reconciliation.projection import (
    project_log_to_schedule,
    project_schedule_to_log,
)
from planner_engine.stores.base import DocumentStore

logger = logging.getLogger(__name__)


class ReconciliationSession:
    """Holds the snapshot a pass works on and writes back only on change.

    Sessions are handed out by ``ReconciliationEngine.session()``, which
    guarantees that no other session for the same (user, day) is active.
    The snapshot (``daily_log``, ``schedule``) is replaced only after the
    store accepted the write, so a failed write leaves it at its
    pre-mutation value.
    """

    def __init__(self, store: DocumentStore, user_id: str, day: date) -> None:
        self.store = store
        self.user_id = user_id
        self.day = day
        self.weekday = Weekday(day.weekday())
        self.week_start = week_start_for(day)
        self.daily_log = DailyLog(date=day)
        self.schedule = WeeklySchedule(week_start=self.week_start)
        self.writes = 0

    async def load(self) -> None:
        """Read the day's log and the week's schedule (missing reads as empty).

        Raises StoreReadError if either read fails.
        """
        self.daily_log = await self.store.get_daily_log(self.user_id, self.day, strict=True) or DailyLog(
            date=self.day
        )
        self.schedule = await self.store.get_schedule(self.user_id, self.week_start, strict=True) or WeeklySchedule(
            week_start=self.week_start
        )

    async def project_log_to_schedule(self) -> SyncResult:
        """Rebuild the day's derived tasks from the log.

        Raises StoreWriteError if the schedule write fails.
        """
        tasks = self.schedule.tasks_for(self.weekday)
        new_tasks = project_log_to_schedule(tasks, self.daily_log.workouts, self.daily_log.meals)
        if new_tasks == tasks:
            logger.debug("Schedule for %s %s already matches log", self.user_id, self.day)
            return SyncResult(SyncDirection.LOG_TO_SCHEDULE, SyncStatus.UNCHANGED)

        updated = self.schedule.with_tasks(self.weekday, new_tasks)
        await self.store.put_schedule(self.user_id, updated)
        self.schedule = updated
        self.writes += 1
        logger.info(
            "Projected log onto %s schedule for %s (%d tasks)",
            self.weekday.label,
            self.user_id,
            len(new_tasks),
        )
        return SyncResult(SyncDirection.LOG_TO_SCHEDULE, SyncStatus.APPLIED, writes=1)

    async def project_schedule_to_log(self) -> SyncResult:
        """Rebuild the day's schedule-originated log entries from manual tasks.

        Raises StoreWriteError if the log write fails.
        """
        workouts, meals = project_schedule_to_log(
            self.schedule.tasks_for(self.weekday),
            self.daily_log.workouts,
            self.daily_log.meals,
        )
        if workouts == self.daily_log.workouts and meals == self.daily_log.meals:
            logger.debug("Log for %s %s already matches schedule", self.user_id, self.day)
            return SyncResult(SyncDirection.SCHEDULE_TO_LOG, SyncStatus.UNCHANGED)

        updated = dataclasses.replace(self.daily_log, workouts=workouts, meals=meals)
        written = await self.store.put_daily_log(self.user_id, updated)
        self.daily_log = written
        self.writes += 1
        logger.info(
            "Materialized %s schedule into log for %s (%d workouts, %d meals)",
            self.weekday.label,
            self.user_id,
            len(workouts),
            len(meals),
        )
        return SyncResult(SyncDirection.SCHEDULE_TO_LOG, SyncStatus.APPLIED, writes=1)
