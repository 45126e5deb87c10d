"""Weekly aggregation and report models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from planner_engine.models.entries import WorkoutEntry
from planner_engine.models.profile import UserProfile


@dataclass(frozen=True)
class DailyNutrition:
    """Macro totals for one day (zero-filled when nothing was logged)."""

    date: date
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    calories: float = 0.0
    meal_count: int = 0


@dataclass(frozen=True)
class DailyWater:
    date: date
    intake_ml: int = 0


@dataclass(frozen=True)
class WeightPoint:
    date: date
    weight_kg: float


@dataclass(frozen=True)
class DatedWorkout:
    """A workout entry together with the date it was logged on."""

    date: date
    entry: WorkoutEntry


@dataclass(frozen=True)
class WeeklyStats:
    total_workouts: int = 0
    average_protein: int = 0
    average_calories: int = 0
    average_water: int = 0
    protein_goal_days: int = 0
    water_goal_days: int = 0
    weight_change: float = 0.0
    workout_types: tuple[str, ...] = field(default_factory=tuple)
    total_volume: float = 0.0


@dataclass(frozen=True)
class WeeklyAggregate:
    """Output of aggregate_week(): per-day series plus scalar stats."""

    profile: UserProfile
    start_date: date
    end_date: date
    workouts: tuple[DatedWorkout, ...] = field(default_factory=tuple)
    nutrition: tuple[DailyNutrition, ...] = field(default_factory=tuple)
    water: tuple[DailyWater, ...] = field(default_factory=tuple)
    weights: tuple[WeightPoint, ...] = field(default_factory=tuple)
    stats: WeeklyStats = field(default_factory=WeeklyStats)


@dataclass(frozen=True)
class WeeklyReport:
    """Narrative weekly report, from the LLM or the local fallback."""

    summary: str
    strengths: tuple[str, ...] = field(default_factory=tuple)
    improvements: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)
    insights: str = ""
    trends: str = ""
    stats: WeeklyStats = field(default_factory=WeeklyStats)
    generated_at: str = ""
    is_demo: bool = False
    raw_response: str | None = None
