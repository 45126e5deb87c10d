"""ReconciliationEngine: user actions on logs and schedules, kept in sync.

Every user action follows the same pipeline: read the current document,
write the edited one, wait a short settle delay, then run the one
projection the change calls for on the same event loop. The two
projection directions never call each other; ``sync_day`` is the only
place both run, one after the other.

Reads that feed a write are strict: if the current document cannot be
read, the action is abandoned and nothing is written.
"""

from __future__ import annotations

import asyncio
import dataclasses
import functools
import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, Sequence

from planner_engine.exceptions import StoreError, StoreReadError, StoreWriteError, SyncInProgressError
from planner_engine.models.daily_log import DailyLog
from planner_engine.models.entries import MealEntry, WorkoutEntry
from planner_engine.models.enums import MoveDirection, Weekday
from planner_engine.models.schedule import WeeklySchedule, week_start_for
from planner_engine.models.sync import ActionResult, SyncDirection, SyncResult, SyncStatus
from planner_engine.models.task import Task
from planner_engine.reconciliation import schedule_ops
from planner_engine.reconciliation.session import ReconciliationSession
from planner_engine.stores.base import DocumentStore, utc_now_iso

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_DELAY_S = 0.05


def _abort_on_read_failure(action):
    """Turn a StoreReadError raised by a user action into an unsaved result."""

    @functools.wraps(action)
    async def wrapper(self, user_id: str, *args, **kwargs) -> ActionResult:
        try:
            return await action(self, user_id, *args, **kwargs)
        except StoreReadError as exc:
            logger.error("%s for %s abandoned, nothing written: %s", action.__name__, user_id, exc)
            return ActionResult(saved=False, error=str(exc))

    return wrapper


class ReconciliationEngine:
    """Entry point for every mutation of daily logs and weekly schedules.

    Usage:
        engine = ReconciliationEngine(MemoryStore())
        result = await engine.update_workouts("uid", date.today(), workouts)
        if not result.ok:
            notify_user(result.error)
    """

    def __init__(self, store: DocumentStore, settle_delay_s: float = DEFAULT_SETTLE_DELAY_S) -> None:
        self.store = store
        self.settle_delay_s = settle_delay_s
        self._active: set[tuple[str, date]] = set()

    # ------------------------------------------------------------------
    # Sessions and passes
    # ------------------------------------------------------------------

    def is_syncing(self, user_id: str, day: date) -> bool:
        return (user_id, day) in self._active

    @asynccontextmanager
    async def session(self, user_id: str, day: date) -> AsyncIterator[ReconciliationSession]:
        """Claim the (user, day) slot for one pass.

        Raises SyncInProgressError if the slot is taken. The slot is
        released when the block exits, whatever the outcome.
        """
        key = (user_id, day)
        if key in self._active:
            raise SyncInProgressError(user_id, day)
        self._active.add(key)
        try:
            session = ReconciliationSession(self.store, user_id, day)
            await session.load()
            yield session
        finally:
            self._active.discard(key)

    async def sync_log_to_schedule(self, user_id: str, day: date) -> SyncResult:
        """Project the day's log onto its schedule tasks."""
        return await self._run_pass(user_id, day, SyncDirection.LOG_TO_SCHEDULE)

    async def sync_schedule_to_log(self, user_id: str, day: date) -> SyncResult:
        """Materialize the day's manual tasks into its log."""
        return await self._run_pass(user_id, day, SyncDirection.SCHEDULE_TO_LOG)

    async def sync_day(self, user_id: str, day: date) -> tuple[SyncResult, SyncResult]:
        """Manual re-sync: schedule -> log, then log -> schedule."""
        to_log = await self.sync_schedule_to_log(user_id, day)
        to_schedule = await self.sync_log_to_schedule(user_id, day)
        return to_log, to_schedule

    async def _run_pass(self, user_id: str, day: date, direction: SyncDirection) -> SyncResult:
        try:
            async with self.session(user_id, day) as session:
                if direction == SyncDirection.LOG_TO_SCHEDULE:
                    return await session.project_log_to_schedule()
                return await session.project_schedule_to_log()
        except SyncInProgressError:
            logger.info("Skipping %s for %s on %s: pass already running", direction.name, user_id, day)
            return SyncResult(direction, SyncStatus.SKIPPED)
        except StoreError as exc:
            logger.error("%s for %s on %s failed: %s", direction.name, user_id, day, exc)
            return SyncResult(direction, SyncStatus.FAILED, error=str(exc))

    async def _settle(self) -> None:
        await asyncio.sleep(self.settle_delay_s)

    # ------------------------------------------------------------------
    # Daily log actions
    # ------------------------------------------------------------------

    async def get_daily_log(self, user_id: str, day: date) -> DailyLog:
        """The day's log for display; an unreadable log reads as empty."""
        return await self.store.get_daily_log(user_id, day) or DailyLog(date=day)

    async def _load_log(self, user_id: str, day: date) -> DailyLog:
        return await self.store.get_daily_log(user_id, day, strict=True) or DailyLog(date=day)

    @_abort_on_read_failure
    async def update_workouts(self, user_id: str, day: date, workouts: Sequence[WorkoutEntry]) -> ActionResult:
        """Replace the day's workout list and project it onto the schedule."""
        log = await self._load_log(user_id, day)
        return await self._save_log_then_project(user_id, dataclasses.replace(log, workouts=tuple(workouts)))

    @_abort_on_read_failure
    async def update_meals(self, user_id: str, day: date, meals: Sequence[MealEntry]) -> ActionResult:
        """Replace the day's meal list and project it onto the schedule."""
        log = await self._load_log(user_id, day)
        return await self._save_log_then_project(user_id, dataclasses.replace(log, meals=tuple(meals)))

    @_abort_on_read_failure
    async def add_water(self, user_id: str, day: date, amount_ml: int) -> ActionResult:
        log = await self._load_log(user_id, day)
        return await self._save_log(user_id, dataclasses.replace(log, water=max(0, log.water + amount_ml)))

    async def subtract_water(self, user_id: str, day: date, amount_ml: int) -> ActionResult:
        """Remove water intake, never going below zero."""
        return await self.add_water(user_id, day, -amount_ml)

    @_abort_on_read_failure
    async def set_weight(self, user_id: str, day: date, weight_kg: float | None) -> ActionResult:
        if weight_kg is not None and weight_kg <= 0:
            raise ValueError(f"Body weight must be positive, got {weight_kg}")
        log = await self._load_log(user_id, day)
        return await self._save_log(user_id, dataclasses.replace(log, weight=weight_kg))

    async def _save_log(self, user_id: str, log: DailyLog) -> ActionResult:
        try:
            await self.store.put_daily_log(user_id, log)
        except StoreWriteError as exc:
            logger.error("Saving daily log %s/%s failed: %s", user_id, log.date, exc)
            return ActionResult(saved=False, error=str(exc))
        return ActionResult(saved=True)

    async def _save_log_then_project(self, user_id: str, log: DailyLog) -> ActionResult:
        saved = await self._save_log(user_id, log)
        if not saved.saved:
            return saved
        await self._settle()
        sync = await self.sync_log_to_schedule(user_id, log.date)
        return ActionResult(saved=True, syncs=(sync,))

    # ------------------------------------------------------------------
    # Weekly schedule actions
    # ------------------------------------------------------------------

    async def get_schedule(self, user_id: str, week_start: date) -> WeeklySchedule:
        """The week's schedule for display; an unreadable schedule reads as empty."""
        week_start = week_start_for(week_start)
        return await self.store.get_schedule(user_id, week_start) or WeeklySchedule(week_start=week_start)

    async def _load_schedule(self, user_id: str, day: date) -> WeeklySchedule:
        week_start = week_start_for(day)
        schedule = await self.store.get_schedule(user_id, week_start, strict=True)
        return schedule or WeeklySchedule(week_start=week_start)

    @_abort_on_read_failure
    async def add_task(self, user_id: str, day: date, task: Task) -> ActionResult:
        """Add a task to *day*; schedule-linked tasks are materialized into the log."""
        schedule = await self._load_schedule(user_id, day)
        updated = schedule_ops.add_task(schedule, Weekday(day.weekday()), task)
        return await self._save_schedule_then_project(user_id, updated, [day] if task.is_schedule_linked else [])

    @_abort_on_read_failure
    async def toggle_task(self, user_id: str, day: date, task_id: str) -> ActionResult:
        schedule = await self._load_schedule(user_id, day)
        updated, task = schedule_ops.toggle_task(schedule, Weekday(day.weekday()), task_id)
        return await self._save_schedule_then_project(user_id, updated, [day] if task.is_schedule_linked else [])

    @_abort_on_read_failure
    async def remove_task(self, user_id: str, day: date, task_id: str) -> ActionResult:
        """Remove a task; a schedule-linked task's log entry goes with it."""
        schedule = await self._load_schedule(user_id, day)
        updated, task = schedule_ops.remove_task(schedule, Weekday(day.weekday()), task_id)
        return await self._save_schedule_then_project(user_id, updated, [day] if task.is_schedule_linked else [])

    @_abort_on_read_failure
    async def move_task(self, user_id: str, from_day: date, to_day: date, task_id: str) -> ActionResult:
        """Move a task to another day of the same week."""
        if week_start_for(from_day) != week_start_for(to_day):
            raise ValueError("Tasks can only be moved within one week")
        schedule = await self._load_schedule(user_id, from_day)
        updated, task = schedule_ops.move_task(
            schedule, task_id, Weekday(from_day.weekday()), Weekday(to_day.weekday())
        )
        days = [from_day, to_day] if task.is_schedule_linked and from_day != to_day else []
        return await self._save_schedule_then_project(user_id, updated, days)

    @_abort_on_read_failure
    async def reorder_task(self, user_id: str, day: date, task_id: str, direction: MoveDirection) -> ActionResult:
        schedule = await self._load_schedule(user_id, day)
        weekday = Weekday(day.weekday())
        updated = schedule_ops.reorder_task(schedule, weekday, task_id, direction)
        if updated == schedule:
            return ActionResult(saved=True)
        linked = any(t.id == task_id and t.is_schedule_linked for t in schedule.tasks_for(weekday))
        return await self._save_schedule_then_project(user_id, updated, [day] if linked else [])

    @_abort_on_read_failure
    async def copy_week(self, user_id: str, source_week: date, target_week: date) -> ActionResult:
        """Paste the manual tasks of one week over another's.

        The target keeps its log-derived tasks, which mirror its own logs.
        Days that gain or lose schedule-linked tasks are reconciled.
        """
        source = await self._load_schedule(user_id, source_week)
        target = await self._load_schedule(user_id, target_week)
        pasted = schedule_ops.paste_week(source, target.week_start, created_at=utc_now_iso())
        days = []
        for day in Weekday:
            derived = tuple(t for t in target.tasks_for(day) if t.is_derived)
            if derived:
                pasted = pasted.with_tasks(day, pasted.tasks_for(day) + derived)
            if any(t.is_schedule_linked for t in (*target.tasks_for(day), *pasted.tasks_for(day))):
                days.append(pasted.date_of(day))
        return await self._save_schedule_then_project(user_id, pasted, days)

    async def _save_schedule_then_project(
        self, user_id: str, schedule: WeeklySchedule, days: Sequence[date]
    ) -> ActionResult:
        try:
            await self.store.put_schedule(user_id, schedule)
        except StoreWriteError as exc:
            logger.error("Saving schedule %s/%s failed: %s", user_id, schedule.week_start, exc)
            return ActionResult(saved=False, error=str(exc))
        if not days:
            return ActionResult(saved=True)
        await self._settle()
        syncs = []
        for day in days:
            syncs.append(await self.sync_schedule_to_log(user_id, day))
        return ActionResult(saved=True, syncs=tuple(syncs))
