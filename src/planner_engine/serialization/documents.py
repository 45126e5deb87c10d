"""Document codec for the planner's stores.

Documents are JSON-compatible dicts with camelCase keys, the shape the
daily log, weekly schedule, profile and report records are stored in.

Decoding never rejects a record for a missing or malformed optional
field: the field falls back to its default (absent ``water`` reads as 0).
Documents written before the ``origin`` field existed are classified by
their id prefix.

All functions are pure (no I/O).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from planner_engine.models.daily_log import DailyLog
from planner_engine.models.entries import MealEntry, WorkoutEntry
from planner_engine.models.enums import (
    CATEGORY_BY_LABEL,
    CATEGORY_LABELS,
    DEFAULT_TASK_CALORIES,
    DEFAULT_TASK_CARBS_G,
    DEFAULT_TASK_FATS_G,
    DEFAULT_TASK_PROTEIN_G,
    DEFAULT_TASK_REPS,
    DEFAULT_TASK_SETS,
    DEFAULT_TASK_WEIGHT_KG,
    LEGACY_NUTRITION_TASK_PREFIX,
    MEAL_TASK_PREFIX,
    SCHEDULE_MEAL_PREFIX,
    SCHEDULE_WORKOUT_PREFIX,
    WATER_GOAL_ML,
    WORKOUT_TASK_PREFIX,
    Origin,
    TaskCategory,
    Weekday,
)
from planner_engine.models.profile import UserProfile
from planner_engine.models.report import WeeklyReport, WeeklyStats
from planner_engine.models.schedule import WeeklySchedule
from planner_engine.models.task import BasicTask, NutritionTask, Task, WorkoutTask

_ORIGIN_LABELS = {
    Origin.MANUAL: "manual",
    Origin.DERIVED_FROM_LOG: "derivedFromLog",
    Origin.DERIVED_FROM_SCHEDULE: "derivedFromSchedule",
}
_ORIGIN_BY_LABEL = {v: k for k, v in _ORIGIN_LABELS.items()}

# Legacy entry provenance tag
_SOURCE_LOGGER = "logger"
_SOURCE_SCHEDULE = "schedule"

_DERIVED_TASK_PREFIXES = (WORKOUT_TASK_PREFIX, MEAL_TASK_PREFIX, LEGACY_NUTRITION_TASK_PREFIX)


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------


def _as_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def _as_optional_int(value: Any) -> int | None:
    if value in (None, ""):
        return None
    result = _as_int(value, default=-1)
    return None if result < 0 else result


def _as_optional_float(value: Any) -> float | None:
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _as_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _drop_none(doc: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in doc.items() if v is not None}


# ---------------------------------------------------------------------------
# Provenance
# ---------------------------------------------------------------------------


def _task_origin(doc: dict[str, Any]) -> Origin:
    label = doc.get("origin")
    if label in _ORIGIN_BY_LABEL:
        return _ORIGIN_BY_LABEL[label]
    task_id = _as_str(doc.get("id"))
    if task_id.startswith(_DERIVED_TASK_PREFIXES):
        return Origin.DERIVED_FROM_LOG
    return Origin.MANUAL


def _entry_origin(doc: dict[str, Any], schedule_prefix: str) -> Origin:
    label = doc.get("origin")
    if label in _ORIGIN_BY_LABEL:
        return _ORIGIN_BY_LABEL[label]
    if doc.get("source") == _SOURCE_SCHEDULE or _as_str(doc.get("id")).startswith(schedule_prefix):
        return Origin.DERIVED_FROM_SCHEDULE
    return Origin.MANUAL


def _entry_source_task_id(doc: dict[str, Any], origin: Origin, schedule_prefix: str) -> str | None:
    if origin != Origin.DERIVED_FROM_SCHEDULE:
        return None
    if doc.get("sourceTaskId"):
        return _as_str(doc["sourceTaskId"])
    entry_id = _as_str(doc.get("id"))
    if entry_id.startswith(schedule_prefix):
        return entry_id[len(schedule_prefix):]
    return None


def _entry_provenance(origin: Origin, source_task_id: str | None) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "origin": _ORIGIN_LABELS[origin],
        "source": _SOURCE_SCHEDULE if origin == Origin.DERIVED_FROM_SCHEDULE else _SOURCE_LOGGER,
    }
    if source_task_id is not None:
        doc["sourceTaskId"] = source_task_id
    return doc


# ---------------------------------------------------------------------------
# Log entries
# ---------------------------------------------------------------------------


def workout_entry_to_document(entry: WorkoutEntry) -> dict[str, Any]:
    doc = {
        "id": entry.id,
        "exercise": entry.exercise,
        "sets": entry.sets,
        "reps": entry.reps,
        "weight": entry.weight,
        "machine": entry.machine,
        "duration": entry.duration,
        "type": entry.workout_type,
        "notes": entry.notes,
        "completed": entry.completed,
        "loggedAt": entry.logged_at,
        "completedAt": entry.completed_at,
    }
    doc.update(_entry_provenance(entry.origin, entry.source_task_id))
    return doc


def workout_entry_from_document(doc: dict[str, Any]) -> WorkoutEntry:
    origin = _entry_origin(doc, SCHEDULE_WORKOUT_PREFIX)
    return WorkoutEntry(
        id=_as_str(doc.get("id")),
        exercise=_as_str(doc.get("exercise")),
        sets=_as_int(doc.get("sets")),
        reps=_as_int(doc.get("reps")),
        weight=_as_float(doc.get("weight")),
        machine=_as_str(doc.get("machine")),
        duration=_as_optional_int(doc.get("duration")),
        workout_type=_as_str(doc.get("type")),
        notes=_as_str(doc.get("notes")),
        completed=bool(doc.get("completed", False)),
        logged_at=_as_str(doc.get("loggedAt") or doc.get("createdAt")),
        completed_at=doc.get("completedAt"),
        origin=origin,
        source_task_id=_entry_source_task_id(doc, origin, SCHEDULE_WORKOUT_PREFIX),
    )


def meal_entry_to_document(entry: MealEntry) -> dict[str, Any]:
    doc = {
        "id": entry.id,
        "food": entry.food,
        "mealType": entry.meal_type,
        "quantity": entry.quantity,
        "unit": entry.unit,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fats": entry.fats,
        "calories": entry.calories,
        "notes": entry.notes,
        "completed": entry.completed,
        "loggedAt": entry.logged_at,
        "completedAt": entry.completed_at,
    }
    doc.update(_entry_provenance(entry.origin, entry.source_task_id))
    return doc


def meal_entry_from_document(doc: dict[str, Any]) -> MealEntry:
    origin = _entry_origin(doc, SCHEDULE_MEAL_PREFIX)
    return MealEntry(
        id=_as_str(doc.get("id")),
        food=_as_str(doc.get("food")),
        meal_type=_as_str(doc.get("mealType")),
        quantity=_as_float(doc.get("quantity"), 1.0),
        unit=_as_str(doc.get("unit"), "serving"),
        protein=_as_float(doc.get("protein")),
        carbs=_as_float(doc.get("carbs")),
        fats=_as_float(doc.get("fats")),
        calories=_as_float(doc.get("calories")),
        notes=_as_str(doc.get("notes")),
        completed=bool(doc.get("completed", False)),
        logged_at=_as_str(doc.get("loggedAt") or doc.get("createdAt")),
        completed_at=doc.get("completedAt"),
        origin=origin,
        source_task_id=_entry_source_task_id(doc, origin, SCHEDULE_MEAL_PREFIX),
    )


# ---------------------------------------------------------------------------
# Daily log
# ---------------------------------------------------------------------------


def daily_log_to_document(log: DailyLog) -> dict[str, Any]:
    return {
        "date": log.date.isoformat(),
        "workouts": [workout_entry_to_document(w) for w in log.workouts],
        "meals": [meal_entry_to_document(m) for m in log.meals],
        "water": log.water,
        "weight": log.weight,
        "createdAt": log.created_at,
        "updatedAt": log.updated_at,
    }


def daily_log_from_document(doc: dict[str, Any], day: date | None = None) -> DailyLog:
    """Decode a daily log. *day* is used when the document lacks a date."""
    log_date = _as_date(doc["date"]) if doc.get("date") else day
    if log_date is None:
        raise ValueError("Daily log document has no date")
    return DailyLog(
        date=log_date,
        workouts=tuple(
            workout_entry_from_document(w) for w in _as_list(doc.get("workouts")) if isinstance(w, dict)
        ),
        meals=tuple(
            meal_entry_from_document(m) for m in _as_list(doc.get("meals")) if isinstance(m, dict)
        ),
        water=max(0, _as_int(doc.get("water"))),
        weight=_as_optional_float(doc.get("weight")) or None,
        created_at=_as_str(doc.get("createdAt")),
        updated_at=_as_str(doc.get("updatedAt")),
    )


# ---------------------------------------------------------------------------
# Tasks and schedule
# ---------------------------------------------------------------------------


def task_to_document(task: Task) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "id": task.id,
        "title": task.title,
        "category": CATEGORY_LABELS[task.category],
        "description": task.description,
        "completed": task.completed,
        "createdAt": task.created_at,
        "origin": _ORIGIN_LABELS[task.origin],
    }
    if isinstance(task, WorkoutTask):
        doc.update(
            {
                "exercise": task.exercise,
                "sets": task.sets,
                "reps": task.reps,
                "weight": task.weight,
                "machine": task.machine,
                "duration": task.duration,
                "type": task.workout_type,
            }
        )
        if task.source_entry_id is not None:
            doc["sourceEntryId"] = task.source_entry_id
    elif isinstance(task, NutritionTask):
        doc.update(
            {
                "food": task.food,
                "quantity": task.quantity,
                "unit": task.unit,
                "mealType": task.meal_type,
                "protein": task.protein,
                "carbs": task.carbs,
                "fats": task.fats,
                "calories": task.calories,
            }
        )
        if task.source_entry_id is not None:
            doc["mealData"] = {"id": task.source_entry_id}
    elif task.source_entry_id is not None:
        doc["sourceEntryId"] = task.source_entry_id
    return _drop_none(doc)


def _task_source_entry_id(doc: dict[str, Any]) -> str | None:
    meal_data = doc.get("mealData")
    if isinstance(meal_data, dict) and meal_data.get("id"):
        return _as_str(meal_data["id"])
    if doc.get("sourceEntryId"):
        return _as_str(doc["sourceEntryId"])
    return None


def _number_or_default(doc: dict[str, Any], key: str, default: float, fill: bool) -> float:
    value = doc.get(key)
    if value is None and fill:
        return default
    return _as_float(value)


def task_from_document(doc: dict[str, Any]) -> Task:
    """Decode a task.

    Missing workout/nutrition numbers on a manual task take the task
    defaults. Explicit zeros are kept, and derived tasks keep what their
    log entry said.
    """
    category = CATEGORY_BY_LABEL.get(_as_str(doc.get("category")), TaskCategory.OTHER)
    origin = _task_origin(doc)
    fill = origin == Origin.MANUAL
    common = dict(
        id=_as_str(doc.get("id")),
        title=_as_str(doc.get("title")),
        description=_as_str(doc.get("description")),
        completed=bool(doc.get("completed", False)),
        created_at=_as_str(doc.get("createdAt")),
        origin=origin,
        source_entry_id=_task_source_entry_id(doc),
    )
    if category == TaskCategory.WORKOUT:
        return WorkoutTask(
            **common,
            exercise=_as_str(doc.get("exercise")),
            sets=int(_number_or_default(doc, "sets", DEFAULT_TASK_SETS, fill)),
            reps=int(_number_or_default(doc, "reps", DEFAULT_TASK_REPS, fill)),
            weight=_as_float(doc.get("weight"), DEFAULT_TASK_WEIGHT_KG),
            machine=_as_str(doc.get("machine")),
            duration=_as_optional_int(doc.get("duration")),
            workout_type=_as_str(doc.get("type")),
        )
    if category == TaskCategory.NUTRITION:
        return NutritionTask(
            **common,
            food=_as_str(doc.get("food")),
            quantity=_as_float(doc.get("quantity"), 1.0),
            unit=_as_str(doc.get("unit"), "serving"),
            meal_type=_as_str(doc.get("mealType")),
            protein=_number_or_default(doc, "protein", DEFAULT_TASK_PROTEIN_G, fill),
            carbs=_number_or_default(doc, "carbs", DEFAULT_TASK_CARBS_G, fill),
            fats=_number_or_default(doc, "fats", DEFAULT_TASK_FATS_G, fill),
            calories=_number_or_default(doc, "calories", DEFAULT_TASK_CALORIES, fill),
        )
    return BasicTask(category=category, **common)


def schedule_to_document(schedule: WeeklySchedule) -> dict[str, Any]:
    doc: dict[str, Any] = {"weekStart": schedule.week_start.isoformat()}
    for day in Weekday:
        doc[day.label] = [task_to_document(t) for t in schedule.tasks_for(day)]
    return doc


def schedule_from_document(doc: dict[str, Any], week_start: date | None = None) -> WeeklySchedule:
    start = _as_date(doc["weekStart"]) if doc.get("weekStart") else week_start
    if start is None:
        raise ValueError("Schedule document has no weekStart")
    days = {
        day: tuple(
            task_from_document(t) for t in _as_list(doc.get(day.label)) if isinstance(t, dict)
        )
        for day in Weekday
    }
    return WeeklySchedule(week_start=start, days=days)


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


def profile_to_document(profile: UserProfile) -> dict[str, Any]:
    return {
        "displayName": profile.display_name,
        "height": profile.height_cm,
        "currentWeight": profile.current_weight_kg,
        "targetWeight": profile.target_weight_kg,
        "age": profile.age,
        "gender": profile.gender,
        "activityLevel": profile.activity_level,
        "waterGoal": profile.water_goal_ml,
        "calorieGoal": profile.calorie_goal,
        "proteinGoal": profile.protein_goal_g,
        "carbGoal": profile.carb_goal_g,
        "fatGoal": profile.fat_goal_g,
    }


def profile_from_document(doc: dict[str, Any]) -> UserProfile:
    return UserProfile(
        display_name=_as_str(doc.get("displayName")),
        height_cm=_as_optional_float(doc.get("height")),
        current_weight_kg=_as_optional_float(doc.get("currentWeight")),
        target_weight_kg=_as_optional_float(doc.get("targetWeight")),
        age=_as_optional_int(doc.get("age")),
        gender=_as_str(doc.get("gender")),
        activity_level=_as_str(doc.get("activityLevel")),
        water_goal_ml=_as_int(doc.get("waterGoal"), WATER_GOAL_ML) or WATER_GOAL_ML,
        calorie_goal=_as_optional_int(doc.get("calorieGoal")),
        protein_goal_g=_as_optional_int(doc.get("proteinGoal")),
        carb_goal_g=_as_optional_int(doc.get("carbGoal")),
        fat_goal_g=_as_optional_int(doc.get("fatGoal")),
    )


# ---------------------------------------------------------------------------
# Weekly report
# ---------------------------------------------------------------------------


def _stats_to_document(stats: WeeklyStats) -> dict[str, Any]:
    return {
        "totalWorkouts": stats.total_workouts,
        "avgProtein": stats.average_protein,
        "avgCalories": stats.average_calories,
        "avgWater": stats.average_water,
        "proteinGoalDays": stats.protein_goal_days,
        "waterGoalDays": stats.water_goal_days,
        "weightChange": stats.weight_change,
        "workoutTypes": list(stats.workout_types),
        "totalVolume": stats.total_volume,
    }


def _stats_from_document(doc: dict[str, Any]) -> WeeklyStats:
    return WeeklyStats(
        total_workouts=_as_int(doc.get("totalWorkouts")),
        average_protein=_as_int(doc.get("avgProtein")),
        average_calories=_as_int(doc.get("avgCalories")),
        average_water=_as_int(doc.get("avgWater")),
        protein_goal_days=_as_int(doc.get("proteinGoalDays")),
        water_goal_days=_as_int(doc.get("waterGoalDays")),
        weight_change=_as_float(doc.get("weightChange")),
        workout_types=tuple(_as_str(t) for t in _as_list(doc.get("workoutTypes"))),
        total_volume=_as_float(doc.get("totalVolume")),
    )


def report_to_document(report: WeeklyReport) -> dict[str, Any]:
    return _drop_none(
        {
            "summary": report.summary,
            "strengths": list(report.strengths),
            "improvements": list(report.improvements),
            "recommendations": list(report.recommendations),
            "insights": report.insights,
            "trends": report.trends,
            "weeklyStats": _stats_to_document(report.stats),
            "generatedAt": report.generated_at,
            "isDemo": report.is_demo,
            "rawResponse": report.raw_response,
        }
    )


def report_from_document(doc: dict[str, Any]) -> WeeklyReport:
    stats = doc.get("weeklyStats")
    return WeeklyReport(
        summary=_as_str(doc.get("summary")),
        strengths=tuple(_as_str(s) for s in _as_list(doc.get("strengths"))),
        improvements=tuple(_as_str(s) for s in _as_list(doc.get("improvements"))),
        recommendations=tuple(_as_str(s) for s in _as_list(doc.get("recommendations"))),
        insights=_as_str(doc.get("insights")),
        trends=_as_str(doc.get("trends")),
        stats=_stats_from_document(stats) if isinstance(stats, dict) else WeeklyStats(),
        generated_at=_as_str(doc.get("generatedAt")),
        is_demo=bool(doc.get("isDemo", False)),
        raw_response=doc.get("rawResponse"),
    )
