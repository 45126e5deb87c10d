"""Tests for prompt building and fail-soft report generation."""

from __future__ import annotations

import dataclasses
import logging
from unittest.mock import MagicMock

import pytest

from planner_engine.models import UserProfile
from report_client.client import ReportClient
from report_client.exceptions import ReportAPIError, ReportRateLimitError
from report_client.generator import generate_weekly_report
from report_client.prompt import SYSTEM_PROMPT, build_analysis_prompt


@pytest.fixture
def model_client():
    return MagicMock(spec=ReportClient)


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------


class TestAnalysisPrompt:
    def test_contains_week_data(self, week_aggregate):
        prompt = build_analysis_prompt(week_aggregate)

        assert "for a 180cm, 78kg individual" in prompt
        assert "WEEKLY DATA (2025-03-10 to 2025-03-16):" in prompt
        assert "WORKOUTS COMPLETED: 2 sessions" in prompt
        assert "- Bench Press: 4x8 @ 80kg (Push)" in prompt
        assert "- Daily Avg Protein: 4g (Goal: 150-160g)" in prompt
        assert "- Days Goal Met: 2/7" in prompt
        assert "2025-03-12: 80.4kg" in prompt
        assert "6. TREND ANALYSIS" in prompt

    def test_unknown_profile_values(self, week_aggregate):
        aggregate = dataclasses.replace(week_aggregate, profile=UserProfile())
        assert "for a unknown, unknown individual" in build_analysis_prompt(aggregate)


# ---------------------------------------------------------------------------
# generate_weekly_report
# ---------------------------------------------------------------------------


class TestGenerateWeeklyReport:
    def test_model_answer_parsed(self, week_aggregate, model_client, sample_answer):
        model_client.complete.return_value = sample_answer

        report = generate_weekly_report(week_aggregate, model_client, generated_at="2025-03-16T20:00:00+00:00")

        assert report.is_demo is False
        assert report.stats == week_aggregate.stats
        assert report.generated_at == "2025-03-16T20:00:00+00:00"
        system_prompt, user_prompt = model_client.complete.call_args.args
        assert system_prompt == SYSTEM_PROMPT
        assert "WORKOUTS COMPLETED" in user_prompt

    def test_unconfigured_falls_back(self, week_aggregate, caplog):
        with caplog.at_level(logging.WARNING, logger="report_client.generator"):
            report = generate_weekly_report(week_aggregate, None)
        assert report.is_demo is True
        assert "not configured" in caplog.text

    @pytest.mark.parametrize("error", [ReportAPIError("boom", status_code=503), ReportRateLimitError()])
    def test_api_failure_falls_back(self, week_aggregate, model_client, error):
        model_client.complete.side_effect = error

        report = generate_weekly_report(week_aggregate, model_client)

        assert report.is_demo is True
        assert report.strengths
        assert report.recommendations
        assert report.stats == week_aggregate.stats
        assert report.generated_at

    def test_unparseable_answer_falls_back(self, week_aggregate, model_client):
        model_client.complete.return_value = "Sorry, no."
        assert generate_weekly_report(week_aggregate, model_client).is_demo is True
