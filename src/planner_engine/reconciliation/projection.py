"""Pure projections between a day's log entries and its schedule tasks.

Both directions only ever remove records whose ``origin`` they own:
log -> schedule replaces DERIVED_FROM_LOG tasks, schedule -> log replaces
DERIVED_FROM_SCHEDULE entries. Manual records on either side are never
dropped. Ids are derived from the source record, so running a projection
twice over unchanged input returns equal output.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable, Sequence

from planner_engine.models.entries import MealEntry, WorkoutEntry
from planner_engine.models.enums import (
    MEAL_TASK_PREFIX,
    SCHEDULE_MEAL_PREFIX,
    SCHEDULE_WORKOUT_PREFIX,
    WORKOUT_TASK_PREFIX,
    Origin,
    TaskCategory,
)
from planner_engine.models.task import NutritionTask, Task, WorkoutTask

_PROJECTED_CATEGORIES = frozenset({TaskCategory.WORKOUT, TaskCategory.NUTRITION})


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Render 450.0 as '450' and 12.5 as '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def describe_workout(sets: int, reps: int, duration: int | None = None) -> str:
    """Summary line for a workout task, e.g. '4 sets × 8 reps'."""
    if sets and reps:
        return f"{sets} sets × {reps} reps"
    if duration:
        return f"{duration} min"
    return ""


def describe_meal(calories: float) -> str:
    return f"{format_number(calories)} cal"


# ---------------------------------------------------------------------------
# Log -> schedule
# ---------------------------------------------------------------------------


def derive_workout_task(entry: WorkoutEntry) -> WorkoutTask:
    """Project one logged workout onto a schedule task."""
    return WorkoutTask(
        id=f"{WORKOUT_TASK_PREFIX}{entry.id}",
        title=entry.exercise,
        description=describe_workout(entry.sets, entry.reps, entry.duration),
        completed=entry.completed,
        created_at=entry.logged_at,
        origin=Origin.DERIVED_FROM_LOG,
        source_entry_id=entry.id,
        exercise=entry.exercise,
        sets=entry.sets,
        reps=entry.reps,
        weight=entry.weight,
        machine=entry.machine,
        duration=entry.duration,
        workout_type=entry.workout_type,
    )


def derive_meal_task(entry: MealEntry) -> NutritionTask:
    """Project one logged meal onto a schedule task."""
    return NutritionTask(
        id=f"{MEAL_TASK_PREFIX}{entry.id}",
        title=entry.food,
        description=describe_meal(entry.calories),
        completed=entry.completed,
        created_at=entry.logged_at,
        origin=Origin.DERIVED_FROM_LOG,
        source_entry_id=entry.id,
        food=entry.food,
        quantity=entry.quantity,
        unit=entry.unit,
        meal_type=entry.meal_type,
        protein=entry.protein,
        carbs=entry.carbs,
        fats=entry.fats,
        calories=entry.calories,
    )


def _unique_by_id(entries: Iterable) -> list:
    seen: set[str] = set()
    unique = []
    for entry in entries:
        if entry.id in seen:
            continue
        seen.add(entry.id)
        unique.append(entry)
    return unique


def project_log_to_schedule(
    tasks: Sequence[Task],
    workouts: Sequence[WorkoutEntry],
    meals: Sequence[MealEntry],
) -> tuple[Task, ...]:
    """Rebuild a day's derived tasks from its log entries.

    Every task keeps its position: derived tasks are rebuilt in place and
    new ones are appended in log order. Entries materialized from the
    schedule are not projected back as new tasks. Their ``completed`` flag
    is copied onto the manual task they came from instead.

    Args:
        tasks: The day's current task list.
        workouts: The day's full workout list.
        meals: The day's full meal list.

    Returns:
        The new task list for the day.
    """
    completion = {
        entry.source_task_id: entry.completed
        for entry in (*workouts, *meals)
        if entry.is_schedule_originated and entry.source_task_id
    }

    logged_workouts = _unique_by_id(w for w in workouts if not w.is_schedule_originated)
    logged_meals = _unique_by_id(m for m in meals if not m.is_schedule_originated)
    derived: dict[str, Task] = {t.id: t for t in map(derive_workout_task, logged_workouts)}
    derived.update((t.id, t) for t in map(derive_meal_task, logged_meals))

    result: list[Task] = []
    for task in tasks:
        if task.is_derived and task.category in _PROJECTED_CATEGORIES:
            # Rebuilt in place; dropped if its entry is gone.
            if task.id in derived:
                result.append(derived.pop(task.id))
            continue
        if task.is_manual and task.id in completion and task.completed != completion[task.id]:
            task = dataclasses.replace(task, completed=completion[task.id])
        result.append(task)
    result.extend(derived.values())
    return tuple(result)


# ---------------------------------------------------------------------------
# Schedule -> log
# ---------------------------------------------------------------------------


def _carried_completed_at(previous, completed: bool) -> str | None:
    if previous is not None and previous.completed == completed:
        return previous.completed_at
    return None


def materialize_workout(task: WorkoutTask, previous: WorkoutEntry | None = None) -> WorkoutEntry:
    """Build the log entry for a manual workout task.

    Notes and completion time are log-side annotations and survive
    re-materialization when *previous* is the entry built last pass.
    """
    return WorkoutEntry(
        id=f"{SCHEDULE_WORKOUT_PREFIX}{task.id}",
        exercise=task.exercise or task.title,
        sets=task.sets,
        reps=task.reps,
        weight=task.weight,
        machine=task.machine,
        duration=task.duration,
        workout_type=task.workout_type,
        notes=previous.notes if previous is not None else task.description,
        completed=task.completed,
        logged_at=task.created_at,
        completed_at=_carried_completed_at(previous, task.completed),
        origin=Origin.DERIVED_FROM_SCHEDULE,
        source_task_id=task.id,
    )


def materialize_meal(task: NutritionTask, previous: MealEntry | None = None) -> MealEntry:
    """Build the log entry for a manual nutrition task."""
    return MealEntry(
        id=f"{SCHEDULE_MEAL_PREFIX}{task.id}",
        food=task.food or task.title,
        meal_type=task.meal_type,
        quantity=task.quantity,
        unit=task.unit,
        protein=task.protein,
        carbs=task.carbs,
        fats=task.fats,
        calories=task.calories,
        notes=previous.notes if previous is not None else task.description,
        completed=task.completed,
        logged_at=task.created_at,
        completed_at=_carried_completed_at(previous, task.completed),
        origin=Origin.DERIVED_FROM_SCHEDULE,
        source_task_id=task.id,
    )


def project_schedule_to_log(
    tasks: Sequence[Task],
    workouts: Sequence[WorkoutEntry],
    meals: Sequence[MealEntry],
) -> tuple[tuple[WorkoutEntry, ...], tuple[MealEntry, ...]]:
    """Rebuild a day's schedule-originated entries from its manual tasks.

    The whole schedule-originated subset is replaced in one pass, so the
    entry of a deleted task disappears and a toggled task's ``completed``
    reaches its entry. Entries logged directly are kept unchanged and in
    order, ahead of the materialized ones.

    Returns:
        A ``(workouts, meals)`` pair for the day.
    """
    previous_workouts = {w.source_task_id: w for w in workouts if w.is_schedule_originated}
    previous_meals = {m.source_task_id: m for m in meals if m.is_schedule_originated}

    new_workouts: list[WorkoutEntry] = [w for w in workouts if not w.is_schedule_originated]
    new_meals: list[MealEntry] = [m for m in meals if not m.is_schedule_originated]

    for task in _unique_by_id(t for t in tasks if t.is_manual):
        if isinstance(task, WorkoutTask):
            new_workouts.append(materialize_workout(task, previous_workouts.get(task.id)))
        elif isinstance(task, NutritionTask):
            new_meals.append(materialize_meal(task, previous_meals.get(task.id)))

    return tuple(new_workouts), tuple(new_meals)
