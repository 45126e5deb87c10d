"""Fixtures: a mocked OpenAI-compatible client and a realistic model answer."""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from planner_engine.aggregation import aggregate_week
from planner_engine.models import DailyLog
from report_client.client import ReportClient

SAMPLE_ANSWER = """\
### 1. WEEKLY PERFORMANCE SUMMARY
Solid week with 4 sessions logged. Protein intake averaged 142g, just under target.

### 2. KEY STRENGTHS
- Trained four days with good exercise variety
- Hit the water goal on 5/7 days

### 3. AREAS FOR IMPROVEMENT
- Add a protein-rich snack on rest days
- Log body weight at the same time each morning

### 4. NEXT WEEK RECOMMENDATIONS
1. Add 2.5kg to bench press if all sets hit 8 reps
2. Spread protein over 4 meals of 35-40g
3. Keep a consistent sleep window

### 5. MUSCLE BUILDING INSIGHTS
Protein timing around training supports recovery. Progressive overload on compound lifts remains the main driver.

### 6. TREND ANALYSIS
Weight is up 0.4kg, consistent with lean gain.
"""


def _completion(content: str | None) -> SimpleNamespace:
    """Shape of an openai ChatCompletion as far as the client reads it."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class _StatusError(Exception):
    """Stand-in for an API error carrying an HTTP status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


@pytest.fixture
def make_completion():
    return _completion


@pytest.fixture
def status_error():
    return _StatusError


@pytest.fixture
def mock_openai():
    return MagicMock()


@pytest.fixture
def report_client(mock_openai) -> ReportClient:
    return ReportClient.from_openai(mock_openai)


@pytest.fixture
def sample_answer() -> str:
    """Model answer following the six requested sections."""
    return SAMPLE_ANSWER


@pytest.fixture
def week_aggregate(bench_press, squat, chicken_meal, profile):
    logs = {
        date(2025, 3, 10): DailyLog(
            date=date(2025, 3, 10), workouts=(bench_press, squat), meals=(chicken_meal,), water=4200, weight=80.0
        ),
        date(2025, 3, 12): DailyLog(date=date(2025, 3, 12), water=4000, weight=80.4),
    }
    return aggregate_week(logs, date(2025, 3, 10), profile)
