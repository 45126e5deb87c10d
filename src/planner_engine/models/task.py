"""Weekly schedule tasks.

Tasks are a small tagged union: ``WorkoutTask`` and ``NutritionTask`` carry
the fields needed to materialize a log entry, ``BasicTask`` covers every
other category. Use :func:`make_task` to build the right variant from a
category.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from planner_engine.models.enums import (
    DEFAULT_TASK_CALORIES,
    DEFAULT_TASK_CARBS_G,
    DEFAULT_TASK_FATS_G,
    DEFAULT_TASK_PROTEIN_G,
    DEFAULT_TASK_REPS,
    DEFAULT_TASK_SETS,
    DEFAULT_TASK_WEIGHT_KG,
    Origin,
    TaskCategory,
)


@dataclass(frozen=True)
class BasicTask:
    """A planned item with no category-specific payload."""

    id: str
    title: str
    category: TaskCategory = TaskCategory.OTHER
    description: str = ""
    completed: bool = False
    created_at: str = ""
    origin: Origin = Origin.MANUAL
    source_entry_id: str | None = None  # back-reference for DERIVED_FROM_LOG tasks

    @property
    def is_manual(self) -> bool:
        return self.origin == Origin.MANUAL

    @property
    def is_derived(self) -> bool:
        return self.origin == Origin.DERIVED_FROM_LOG

    @property
    def is_schedule_linked(self) -> bool:
        """True when reconciling this task touches the daily log."""
        return self.is_manual and self.category in _LINKED_CATEGORIES


@dataclass(frozen=True)
class WorkoutTask(BasicTask):
    category: TaskCategory = TaskCategory.WORKOUT
    exercise: str = ""
    sets: int = DEFAULT_TASK_SETS
    reps: int = DEFAULT_TASK_REPS
    weight: float = DEFAULT_TASK_WEIGHT_KG
    machine: str = ""
    duration: int | None = None
    workout_type: str = ""

    def __post_init__(self) -> None:
        if self.category != TaskCategory.WORKOUT:
            raise ValueError(f"WorkoutTask must have category WORKOUT, got {self.category.name}")


@dataclass(frozen=True)
class NutritionTask(BasicTask):
    category: TaskCategory = TaskCategory.NUTRITION
    food: str = ""
    quantity: float = 1.0
    unit: str = "serving"
    meal_type: str = ""
    protein: float = DEFAULT_TASK_PROTEIN_G
    carbs: float = DEFAULT_TASK_CARBS_G
    fats: float = DEFAULT_TASK_FATS_G
    calories: float = DEFAULT_TASK_CALORIES

    def __post_init__(self) -> None:
        if self.category != TaskCategory.NUTRITION:
            raise ValueError(f"NutritionTask must have category NUTRITION, got {self.category.name}")


Task = Union[BasicTask, WorkoutTask, NutritionTask]

_LINKED_CATEGORIES = frozenset({TaskCategory.WORKOUT, TaskCategory.NUTRITION})

_TASK_TYPES: dict[TaskCategory, type] = {
    TaskCategory.WORKOUT: WorkoutTask,
    TaskCategory.NUTRITION: NutritionTask,
}


def make_task(category: TaskCategory, **fields) -> Task:
    """Build the task variant for *category*.

    Unknown keyword fields raise ``TypeError`` like any dataclass
    constructor, so callers must only pass fields of that variant.
    """
    cls = _TASK_TYPES.get(category, BasicTask)
    if cls is BasicTask:
        return BasicTask(category=category, **fields)
    return cls(**fields)
