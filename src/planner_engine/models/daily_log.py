"""Daily log: one record per user per calendar date."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from planner_engine.models.entries import MealEntry, WorkoutEntry


@dataclass(frozen=True)
class DailyLog:
    """Everything logged for one calendar date.

    Mutate with ``dataclasses.replace``; stores persist the whole record.
    """

    date: date
    workouts: tuple[WorkoutEntry, ...] = field(default_factory=tuple)
    meals: tuple[MealEntry, ...] = field(default_factory=tuple)
    water: int = 0  # ml
    weight: float | None = None  # kg
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.workouts and not self.meals and self.water == 0 and self.weight is None
