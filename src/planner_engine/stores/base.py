"""Abstract async document store.

Concrete stores implement three primitives over slash-free path tuples
such as ``("users", uid, "dailyLogs", "2025-03-10")``. The typed methods
here add the codec, timestamps and the read-side degradation policy: a
read that fails is logged and treated as "no data yet", while a failed
write raises ``StoreWriteError`` to the caller. Reads that precede a
write pass ``strict=True`` and get ``StoreReadError`` instead, so a
transient failure is never written back as an empty document.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from typing import Any

from planner_engine.exceptions import StoreReadError
from planner_engine.models.daily_log import DailyLog
from planner_engine.models.profile import UserProfile
from planner_engine.models.report import WeeklyReport
from planner_engine.models.schedule import WeeklySchedule, week_start_for
from planner_engine.serialization import (
    daily_log_from_document,
    daily_log_to_document,
    profile_from_document,
    profile_to_document,
    report_from_document,
    report_to_document,
    schedule_from_document,
    schedule_to_document,
)

logger = logging.getLogger(__name__)

Path = tuple[str, ...]

_DAILY_LOGS = "dailyLogs"
_SCHEDULES = "weeklySchedules"
_PROFILE = "profile"
_REPORTS = "weeklyReports"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def report_id_for(week_start: date) -> str:
    """ISO year-week key for a report, e.g. '2025-W11'."""
    year, week, _ = week_start.isocalendar()
    return f"{year}-W{week:02d}"


class DocumentStore(ABC):
    """Base class for all planner stores."""

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @abstractmethod
    async def _read_document(self, path: Path) -> dict[str, Any] | None:
        """Return the document at *path*, or None if absent.

        Raises StoreReadError when the store cannot be read.
        """

    @abstractmethod
    async def _write_document(self, path: Path, document: dict[str, Any], merge: bool = False) -> None:
        """Set (or shallow-merge into) the document at *path*.

        Raises StoreWriteError when the write is not applied.
        """

    @abstractmethod
    async def _list_documents(self, collection: Path) -> dict[str, dict[str, Any]]:
        """Return ``{key: document}`` for every document in *collection*."""

    # ------------------------------------------------------------------
    # Daily logs
    # ------------------------------------------------------------------

    async def get_daily_log(self, user_id: str, day: date, strict: bool = False) -> DailyLog | None:
        """The stored log for *day*, or None.

        With *strict*, read failures and malformed documents raise
        ``StoreReadError`` instead of reading as missing.
        """
        doc = await self._read(("users", user_id, _DAILY_LOGS, day.isoformat()), strict)
        if doc is None:
            return None
        try:
            return daily_log_from_document(doc, day=day)
        except (KeyError, TypeError, ValueError) as exc:
            if strict:
                raise StoreReadError(f"Malformed daily log {user_id}/{day}: {exc}") from exc
            logger.warning("Ignoring malformed daily log %s/%s: %s", user_id, day, exc)
            return None

    async def get_daily_logs(self, user_id: str, start: date, end: date) -> dict[date, DailyLog]:
        """Logs for every date in ``[start, end]`` that has one."""
        logs: dict[date, DailyLog] = {}
        current = start
        while current <= end:
            log = await self.get_daily_log(user_id, current)
            if log is not None:
                logs[current] = log
            current += timedelta(days=1)
        return logs

    async def put_daily_log(self, user_id: str, log: DailyLog) -> DailyLog:
        """Create the log if absent, else merge-update it. Returns what was written."""
        now = utc_now_iso()
        doc = daily_log_to_document(log)
        doc["createdAt"] = log.created_at or now
        doc["updatedAt"] = now
        await self._write_document(("users", user_id, _DAILY_LOGS, log.date.isoformat()), doc, merge=True)
        logger.debug("Saved daily log %s/%s", user_id, log.date.isoformat())
        return daily_log_from_document(doc)

    # ------------------------------------------------------------------
    # Weekly schedules
    # ------------------------------------------------------------------

    async def get_schedule(self, user_id: str, week_start: date, strict: bool = False) -> WeeklySchedule | None:
        """The schedule of the week containing *week_start*, or None.

        Any date of the week finds it; schedules are keyed by their Monday.
        """
        week_start = week_start_for(week_start)
        doc = await self._read(("users", user_id, _SCHEDULES, week_start.isoformat()), strict)
        if doc is None:
            return None
        try:
            return schedule_from_document(doc, week_start=week_start)
        except (KeyError, TypeError, ValueError) as exc:
            if strict:
                raise StoreReadError(f"Malformed schedule {user_id}/{week_start}: {exc}") from exc
            logger.warning("Ignoring malformed schedule %s/%s: %s", user_id, week_start, exc)
            return None

    async def put_schedule(self, user_id: str, schedule: WeeklySchedule) -> None:
        """Full-document set of a week's schedule."""
        await self._write_document(
            ("users", user_id, _SCHEDULES, schedule.week_start.isoformat()),
            schedule_to_document(schedule),
        )
        logger.debug("Saved schedule %s/%s", user_id, schedule.week_start.isoformat())

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    async def get_profile(self, user_id: str) -> UserProfile | None:
        doc = await self._safe_read(("users", user_id, _PROFILE, "data"))
        return profile_from_document(doc) if doc is not None else None

    async def put_profile(self, user_id: str, profile: UserProfile) -> None:
        doc = profile_to_document(profile)
        doc["updatedAt"] = utc_now_iso()
        await self._write_document(("users", user_id, _PROFILE, "data"), doc, merge=True)

    # ------------------------------------------------------------------
    # Weekly reports
    # ------------------------------------------------------------------

    async def save_weekly_report(self, user_id: str, week_start: date, report: WeeklyReport) -> str:
        """Persist a report under its ISO week key. Returns the key."""
        report_id = report_id_for(week_start)
        year, week, _ = week_start.isocalendar()
        doc = report_to_document(report)
        doc.update(
            {
                "weekStart": week_start.isoformat(),
                "weekEnd": (week_start + timedelta(days=6)).isoformat(),
                "weekNumber": week,
                "year": year,
                "createdAt": utc_now_iso(),
            }
        )
        await self._write_document(("users", user_id, _REPORTS, report_id), doc)
        logger.info("Saved weekly report %s for %s", report_id, user_id)
        return report_id

    async def previous_reports(self, user_id: str, limit: int = 5) -> list[tuple[str, WeeklyReport]]:
        """Most recently created reports first, as ``(report_id, report)`` pairs."""
        try:
            docs = await self._list_documents(("users", user_id, _REPORTS))
        except StoreReadError as exc:
            logger.warning("Could not list reports for %s: %s", user_id, exc)
            return []
        ordered = sorted(docs.items(), key=lambda item: (str(item[1].get("createdAt", "")), item[0]), reverse=True)
        return [(key, report_from_document(doc)) for key, doc in ordered[:limit]]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _read(self, path: Path, strict: bool) -> dict[str, Any] | None:
        if strict:
            return await self._read_document(path)
        return await self._safe_read(path)

    async def _safe_read(self, path: Path) -> dict[str, Any] | None:
        try:
            return await self._read_document(path)
        except StoreReadError as exc:
            logger.warning("Read of %s failed, treating as empty: %s", "/".join(path), exc)
            return None
