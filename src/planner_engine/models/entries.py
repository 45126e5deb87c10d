"""Daily log entries: what was actually trained and eaten."""

from __future__ import annotations

from dataclasses import dataclass

from planner_engine.models.enums import Origin


@dataclass(frozen=True)
class WorkoutEntry:
    """One exercise logged for a day."""

    id: str
    exercise: str
    sets: int = 0
    reps: int = 0
    weight: float = 0.0  # kg
    machine: str = ""
    duration: int | None = None  # minutes
    workout_type: str = ""
    notes: str = ""
    completed: bool = False
    logged_at: str = ""
    completed_at: str | None = None
    origin: Origin = Origin.MANUAL
    source_task_id: str | None = None  # set for DERIVED_FROM_SCHEDULE entries

    @property
    def is_schedule_originated(self) -> bool:
        return self.origin == Origin.DERIVED_FROM_SCHEDULE

    @property
    def volume(self) -> float:
        """Training volume (sets x reps x weight) in kg."""
        return self.sets * self.reps * self.weight


@dataclass(frozen=True)
class MealEntry:
    """One food item logged for a day."""

    id: str
    food: str
    meal_type: str = ""
    quantity: float = 1.0
    unit: str = "serving"
    protein: float = 0.0  # g
    carbs: float = 0.0  # g
    fats: float = 0.0  # g
    calories: float = 0.0  # kcal
    notes: str = ""
    completed: bool = False
    logged_at: str = ""
    completed_at: str | None = None
    origin: Origin = Origin.MANUAL
    source_task_id: str | None = None

    @property
    def is_schedule_originated(self) -> bool:
        return self.origin == Origin.DERIVED_FROM_SCHEDULE
