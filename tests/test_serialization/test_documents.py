"""Tests for the store document codec."""

from __future__ import annotations

from datetime import date

import pytest

from planner_engine.models import (
    BasicTask,
    DailyLog,
    NutritionTask,
    Origin,
    TaskCategory,
    UserProfile,
    Weekday,
    WeeklyReport,
    WeeklySchedule,
    WeeklyStats,
    WorkoutTask,
)
from planner_engine.reconciliation.projection import derive_meal_task, materialize_meal
from planner_engine.serialization import (
    daily_log_from_document,
    daily_log_to_document,
    meal_entry_from_document,
    meal_entry_to_document,
    profile_from_document,
    report_from_document,
    report_to_document,
    schedule_from_document,
    schedule_to_document,
    task_from_document,
    task_to_document,
    workout_entry_from_document,
    workout_entry_to_document,
)


# ---------------------------------------------------------------------------
# Log entries
# ---------------------------------------------------------------------------


class TestEntries:
    def test_workout_keys_are_camel_case(self, bench_press):
        doc = workout_entry_to_document(bench_press)
        assert doc["type"] == "Push"
        assert doc["loggedAt"] == bench_press.logged_at
        assert doc["source"] == "logger"
        assert doc["origin"] == "manual"

    def test_schedule_meal_tagged(self, oats_task):
        doc = meal_entry_to_document(materialize_meal(oats_task))
        assert doc["source"] == "schedule"
        assert doc["sourceTaskId"] == oats_task.id

    def test_legacy_schedule_entry_by_source_tag(self):
        entry = meal_entry_from_document(
            {"id": "schedule_meal_1700000000000", "food": "Oats", "calories": 389, "source": "schedule"}
        )
        assert entry.origin == Origin.DERIVED_FROM_SCHEDULE
        assert entry.source_task_id == "1700000000000"

    def test_legacy_logger_entry(self):
        entry = workout_entry_from_document({"id": "17000", "exercise": "Squat", "sets": "5", "reps": 5})
        assert entry.origin == Origin.MANUAL
        assert entry.sets == 5
        assert entry.weight == 0.0
        assert entry.source_task_id is None

    def test_meal_defaults(self):
        entry = meal_entry_from_document({"id": "m", "food": "Rice"})
        assert (entry.quantity, entry.unit, entry.calories) == (1.0, "serving", 0.0)

    def test_entry_round_trip(self, squat, chicken_meal):
        log = DailyLog(date=date(2025, 3, 10), workouts=(squat,), meals=(chicken_meal,), water=1500, weight=78.2)
        assert daily_log_from_document(daily_log_to_document(log)) == log


# ---------------------------------------------------------------------------
# Daily log
# ---------------------------------------------------------------------------


class TestDailyLog:
    def test_missing_fields_default(self):
        log = daily_log_from_document({"date": "2025-03-10"})
        assert log == DailyLog(date=date(2025, 3, 10))
        assert log.is_empty

    def test_date_from_key_when_absent(self):
        log = daily_log_from_document({"water": 250}, day=date(2025, 3, 11))
        assert log.date == date(2025, 3, 11)
        assert log.water == 250

    def test_negative_water_clamped(self):
        assert daily_log_from_document({"date": "2025-03-10", "water": -100}).water == 0

    def test_malformed_entries_skipped(self):
        log = daily_log_from_document({"date": "2025-03-10", "meals": ["oops", {"id": "m", "food": "Egg"}]})
        assert [m.food for m in log.meals] == ["Egg"]

    def test_no_date_rejected(self):
        with pytest.raises(ValueError):
            daily_log_from_document({})


# ---------------------------------------------------------------------------
# Tasks and schedule
# ---------------------------------------------------------------------------


class TestTasks:
    @pytest.mark.parametrize(
        "task_id, expected",
        [
            ("workout_w1", Origin.DERIVED_FROM_LOG),
            ("meal_m1", Origin.DERIVED_FROM_LOG),
            ("nutrition_m1", Origin.DERIVED_FROM_LOG),
            ("1700000000000", Origin.MANUAL),
        ],
    )
    def test_legacy_origin_from_prefix(self, task_id, expected):
        task = task_from_document({"id": task_id, "title": "x", "category": "Nutrition"})
        assert task.origin == expected

    def test_origin_field_wins_over_prefix(self):
        task = task_from_document({"id": "workout_plan", "title": "Plan", "category": "Workout", "origin": "manual"})
        assert task.is_manual

    def test_nutrition_back_reference_in_meal_data(self, chicken_meal):
        doc = task_to_document(derive_meal_task(chicken_meal))
        assert doc["mealData"] == {"id": "m1"}
        assert task_from_document(doc).source_entry_id == "m1"

    def test_bare_manual_tasks_get_defaults(self):
        workout = task_from_document({"id": "1", "title": "Rows", "category": "Workout"})
        meal = task_from_document({"id": "2", "title": "Oats", "category": "Nutrition", "calories": 389})
        assert isinstance(workout, WorkoutTask)
        assert (workout.sets, workout.reps, workout.weight) == (3, 10, 0.0)
        assert isinstance(meal, NutritionTask)
        assert (meal.calories, meal.protein, meal.carbs, meal.fats) == (389.0, 20.0, 30.0, 10.0)

    def test_derived_task_keeps_zeroes(self):
        task = task_from_document(
            {"id": "workout_c1", "title": "Run", "category": "Workout", "sets": 0, "reps": 0, "duration": 30}
        )
        assert (task.sets, task.reps, task.duration) == (0, 0, 30)

    def test_manual_zeroes_survive_round_trip(self):
        cardio = WorkoutTask(id="1", title="Bike", sets=0, reps=0, duration=30)
        coffee = NutritionTask(id="2", title="Black coffee", protein=0, carbs=0, fats=0, calories=5)

        assert task_from_document(task_to_document(cardio)) == cardio
        assert task_from_document(task_to_document(coffee)) == coffee

    def test_null_fields_on_manual_task_take_defaults(self):
        task = task_from_document({"id": "5", "title": "Rows", "category": "Workout", "sets": None, "reps": 12})
        assert (task.sets, task.reps) == (3, 12)

    def test_other_categories_are_basic(self):
        task = task_from_document({"id": "3", "title": "Creatine", "category": "Supplements"})
        assert type(task) is BasicTask
        assert task.category == TaskCategory.SUPPLEMENTS

    def test_unknown_category_is_other(self):
        assert task_from_document({"id": "4", "title": "?", "category": "Yoga"}).category == TaskCategory.OTHER

    def test_schedule_round_trip(self, monday, oats_task, pull_up_task, sleep_task, chicken_meal):
        schedule = WeeklySchedule(week_start=monday)
        schedule = schedule.with_tasks(Weekday.MONDAY, (oats_task, derive_meal_task(chicken_meal)))
        schedule = schedule.with_tasks(Weekday.FRIDAY, (pull_up_task, sleep_task))
        doc = schedule_to_document(schedule)
        assert list(doc)[1:] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
        assert schedule_from_document(doc) == schedule

    def test_schedule_without_week_start(self, monday):
        schedule = schedule_from_document({"Monday": []}, week_start=monday)
        assert schedule.week_start == monday
        assert schedule.task_count == 0


# ---------------------------------------------------------------------------
# Profile and report
# ---------------------------------------------------------------------------


class TestProfileAndReport:
    def test_profile_defaults(self):
        profile = profile_from_document({"displayName": "Sam", "currentWeight": "78"})
        assert profile.current_weight_kg == 78.0
        assert profile.water_goal_ml == 4000
        assert profile.effective_protein_goal == 150

    def test_profile_goal_override(self):
        profile = profile_from_document({"proteinGoal": 170, "waterGoal": 3000})
        assert profile == UserProfile(protein_goal_g=170, water_goal_ml=3000)

    def test_report_stats_keys(self):
        report = WeeklyReport(
            summary="Good week",
            strengths=("Consistent",),
            stats=WeeklyStats(total_workouts=4, average_protein=142, workout_types=("Push", "Pull")),
            is_demo=True,
        )
        doc = report_to_document(report)
        assert doc["weeklyStats"]["avgProtein"] == 142
        assert doc["weeklyStats"]["workoutTypes"] == ["Push", "Pull"]
        assert doc["isDemo"] is True
        assert "rawResponse" not in doc
        assert report_from_document(doc) == report
