"""Weekly report job: aggregates a week of logs and saves the report.

Usage:
    python -m scheduler.weekly_report --once                    # last full week
    python -m scheduler.weekly_report --once --week 2024-03-04  # a given week
    python -m scheduler.weekly_report --daemon                  # APScheduler loop
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import date, timedelta

from planner_engine.aggregation import aggregate_week
from planner_engine.exceptions import StoreError
from planner_engine.models import WeeklyReport, week_start_for
from planner_engine.stores import DocumentStore, JsonFileStore
from report_client import ReportClient, ReportNotConfiguredError, generate_weekly_report

from scheduler.config import (
    DATA_DIR,
    REPORT_API_BASE_URL,
    REPORT_API_KEY,
    REPORT_HOUR,
    REPORT_MINUTE,
    REPORT_MODEL,
    REPORT_WEEKDAY,
    USER_ID,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _last_full_week(today: date) -> date:
    """Monday of the most recent week that has fully ended before *today*.

    On a Sunday the current week counts as ended.
    """
    monday = week_start_for(today)
    if today.weekday() == 6:
        return monday
    return monday - timedelta(days=7)


def _build_client() -> ReportClient | None:
    try:
        return ReportClient(api_key=REPORT_API_KEY, base_url=REPORT_API_BASE_URL, model=REPORT_MODEL)
    except ReportNotConfiguredError:
        logger.warning("REPORT_API_KEY not set, reports will use the local summary")
        return None


async def run_weekly_report(
    store: DocumentStore,
    user_id: str,
    week_start: date,
    client: ReportClient | None = None,
) -> tuple[str, WeeklyReport]:
    """Aggregate one week for *user_id*, generate its report and save it.

    Returns:
        (report id, report).
    """
    start = week_start_for(week_start)
    end = start + timedelta(days=6)
    profile = await store.get_profile(user_id)
    logs = await store.get_daily_logs(user_id, start, end)
    aggregate = aggregate_week(logs, start, profile)
    logger.info(
        "Aggregated %s..%s for %s: %d workouts, %d days logged",
        start,
        end,
        user_id,
        aggregate.stats.total_workouts,
        len(logs),
    )

    # The model call is blocking; keep the loop free for store I/O.
    report = await asyncio.to_thread(generate_weekly_report, aggregate, client)
    report_id = await store.save_weekly_report(user_id, start, report)
    logger.info("Saved report %s for %s (demo=%s)", report_id, user_id, report.is_demo)
    return report_id, report


def weekly_report_job(week_start: date | None = None) -> None:
    """Execute one cycle: report on *week_start* or on the last full week."""
    week_start = week_start or _last_full_week(date.today())
    logger.info("Starting weekly report job for week of %s", week_start)

    store = JsonFileStore(DATA_DIR)
    client = _build_client()
    try:
        asyncio.run(run_weekly_report(store, USER_ID, week_start, client))
    except StoreError as exc:
        logger.error("Weekly report job failed: %s", exc)
        return

    logger.info("Weekly report job complete")


def main() -> None:
    parser = argparse.ArgumentParser(description="FitTrack weekly report scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    parser.add_argument("--week", type=date.fromisoformat, help="Any date in the week to report on (with --once)")
    args = parser.parse_args()

    if args.once:
        weekly_report_job(args.week)
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            weekly_report_job,
            "cron",
            day_of_week=REPORT_WEEKDAY,
            hour=REPORT_HOUR,
            minute=REPORT_MINUTE,
            id="weekly_report_job",
        )
        logger.info(
            "Scheduler started, weekly report on %s at %02d:%02d",
            REPORT_WEEKDAY,
            REPORT_HOUR,
            REPORT_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
