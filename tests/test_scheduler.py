"""Tests for the weekly report job."""

from __future__ import annotations

import asyncio
from datetime import date
from unittest.mock import patch

import pytest

from planner_engine.models import DailyLog
from planner_engine.stores import JsonFileStore, MemoryStore
from scheduler import weekly_report
from scheduler.weekly_report import _last_full_week, run_weekly_report

UID = "user-1"


class TestLastFullWeek:
    def test_midweek_reports_previous_week(self):
        assert _last_full_week(date(2025, 3, 12)) == date(2025, 3, 3)

    def test_sunday_reports_current_week(self):
        assert _last_full_week(date(2025, 3, 16)) == date(2025, 3, 10)

    def test_monday_reports_week_just_ended(self):
        assert _last_full_week(date(2025, 3, 17)) == date(2025, 3, 10)


class TestRunWeeklyReport:
    @pytest.mark.asyncio
    async def test_saves_local_report_without_client(self, store, monday, bench_press, chicken_meal, profile):
        await store.put_profile(UID, profile)
        await store.put_daily_log(
            UID, DailyLog(date=monday, workouts=(bench_press,), meals=(chicken_meal,), water=4000, weight=78.2)
        )

        report_id, report = await run_weekly_report(store, UID, date(2025, 3, 13))

        assert report_id == "2025-W11"
        assert report.is_demo is True
        assert report.stats.total_workouts == 1
        assert report.stats.water_goal_days == 1
        saved = await store.previous_reports(UID)
        assert [key for key, _ in saved] == ["2025-W11"]
        assert saved[0][1].summary == report.summary

    @pytest.mark.asyncio
    async def test_empty_week_without_profile(self, store, monday):
        report_id, report = await run_weekly_report(store, UID, monday)
        assert report_id == "2025-W11"
        assert report.stats.total_workouts == 0
        assert report.stats.weight_change == 0


class TestWeeklyReportJob:
    def test_writes_report_to_data_dir(self, tmp_path):
        with (
            patch.object(weekly_report, "DATA_DIR", tmp_path),
            patch.object(weekly_report, "USER_ID", UID),
            patch.object(weekly_report, "REPORT_API_KEY", ""),
        ):
            weekly_report.weekly_report_job(date(2025, 3, 12))

        reports = asyncio.run(JsonFileStore(tmp_path).previous_reports(UID))
        assert [key for key, _ in reports] == ["2025-W11"]
        assert reports[0][1].is_demo is True

    def test_store_failure_is_logged(self, caplog):
        failing = MemoryStore()
        failing.fail_writes = True
        with (
            patch.object(weekly_report, "JsonFileStore", return_value=failing),
            patch.object(weekly_report, "REPORT_API_KEY", ""),
        ):
            weekly_report.weekly_report_job(date(2025, 3, 12))

        assert "Weekly report job failed" in caplog.text
