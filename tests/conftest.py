"""Shared test fixtures: sample log entries, schedule tasks, stores and engines."""

from __future__ import annotations

from datetime import date

import pytest

from planner_engine.models import (
    BasicTask,
    MealEntry,
    NutritionTask,
    TaskCategory,
    UserProfile,
    WorkoutEntry,
    WorkoutTask,
)
from planner_engine.reconciliation import ReconciliationEngine
from planner_engine.stores import MemoryStore


@pytest.fixture
def monday() -> date:
    """Monday 2025-03-10, start of ISO week 11."""
    return date(2025, 3, 10)


@pytest.fixture
def tuesday() -> date:
    return date(2025, 3, 11)


@pytest.fixture
def bench_press() -> WorkoutEntry:
    """Logged workout from the workout logger (scenario A)."""
    return WorkoutEntry(
        id="w1",
        exercise="Bench Press",
        sets=4,
        reps=8,
        weight=80.0,
        machine="Barbell",
        workout_type="Push",
        logged_at="2025-03-10T07:30:00+00:00",
    )


@pytest.fixture
def squat() -> WorkoutEntry:
    return WorkoutEntry(
        id="w2",
        exercise="Squat",
        sets=5,
        reps=5,
        weight=100.0,
        workout_type="Legs",
        completed=True,
        logged_at="2025-03-10T07:45:00+00:00",
        completed_at="2025-03-10T08:15:00+00:00",
    )


@pytest.fixture
def chicken_meal() -> MealEntry:
    return MealEntry(
        id="m1",
        food="Chicken Breast (100g)",
        meal_type="Lunch",
        protein=31.0,
        carbs=0.0,
        fats=3.6,
        calories=165.0,
        logged_at="2025-03-10T12:00:00+00:00",
    )


@pytest.fixture
def oats_task() -> NutritionTask:
    """Manually planned meal with no log entry yet (scenario C)."""
    return NutritionTask(id="1700000000000", title="Oats", calories=389.0)


@pytest.fixture
def pull_up_task() -> WorkoutTask:
    return WorkoutTask(id="1700000000001", title="Pull Ups", exercise="Pull Ups", sets=4, reps=6)


@pytest.fixture
def sleep_task() -> BasicTask:
    return BasicTask(id="1700000000002", title="Sleep 8h", category=TaskCategory.SLEEP)


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(display_name="Sam", height_cm=180.0, current_weight_kg=78.0, age=29)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def engine(store) -> ReconciliationEngine:
    """Engine over the in-memory store with no settle delay."""
    return ReconciliationEngine(store, settle_delay_s=0)
