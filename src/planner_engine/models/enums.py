"""Enumerations and goal constants for the planner engine.

Labels are the strings stored in documents; the enums are what the code
compares against.
"""

from enum import IntEnum, auto


class TaskCategory(IntEnum):
    """Weekly schedule task categories."""

    WORKOUT = auto()
    NUTRITION = auto()
    MEAL_PREP = auto()
    WATER = auto()
    SUPPLEMENTS = auto()
    SLEEP = auto()
    RECOVERY = auto()
    OTHER = auto()


class Origin(IntEnum):
    """Provenance of a task or log entry.

    MANUAL records were authored by the user. DERIVED_FROM_LOG tasks are
    projections of daily log entries; DERIVED_FROM_SCHEDULE entries are
    materialized from manual schedule tasks.
    """

    MANUAL = auto()
    DERIVED_FROM_LOG = auto()
    DERIVED_FROM_SCHEDULE = auto()


class Weekday(IntEnum):
    """Weekdays numbered like ``date.weekday()`` (Monday = 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> "Weekday":
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday: {label!r}") from None


class MoveDirection(IntEnum):
    """Reorder direction within a single weekday list."""

    UP = -1
    DOWN = 1


CATEGORY_LABELS: dict[TaskCategory, str] = {
    TaskCategory.WORKOUT: "Workout",
    TaskCategory.NUTRITION: "Nutrition",
    TaskCategory.MEAL_PREP: "Meal Prep",
    TaskCategory.WATER: "Water",
    TaskCategory.SUPPLEMENTS: "Supplements",
    TaskCategory.SLEEP: "Sleep",
    TaskCategory.RECOVERY: "Recovery",
    TaskCategory.OTHER: "Other",
}

CATEGORY_BY_LABEL: dict[str, TaskCategory] = {v: k for k, v in CATEGORY_LABELS.items()}

# ---------------------------------------------------------------------------
# Id prefixes (legacy documents carry provenance in the id only)
# ---------------------------------------------------------------------------
WORKOUT_TASK_PREFIX = "workout_"
MEAL_TASK_PREFIX = "meal_"
LEGACY_NUTRITION_TASK_PREFIX = "nutrition_"
SCHEDULE_WORKOUT_PREFIX = "schedule_workout_"
SCHEDULE_MEAL_PREFIX = "schedule_meal_"

# ---------------------------------------------------------------------------
# Defaults for entries materialized from bare schedule tasks
# ---------------------------------------------------------------------------
DEFAULT_TASK_SETS = 3
DEFAULT_TASK_REPS = 10
DEFAULT_TASK_WEIGHT_KG = 0.0

DEFAULT_TASK_CALORIES = 300.0
DEFAULT_TASK_PROTEIN_G = 20.0
DEFAULT_TASK_CARBS_G = 30.0
DEFAULT_TASK_FATS_G = 10.0

# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------
PROTEIN_GOAL_G = 150  # daily protein goal used for proteinGoalDays
WATER_GOAL_ML = 4000  # daily water goal
WORKOUTS_PER_WEEK_TARGET = 4
FALLBACK_BODY_WEIGHT_KG = 75.0  # stands in when neither logs nor profile carry a weight
DAYS_PER_WEEK = 7
