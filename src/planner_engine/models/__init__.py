"""Data models for the planner engine."""

from planner_engine.models.daily_log import DailyLog
from planner_engine.models.entries import MealEntry, WorkoutEntry
from planner_engine.models.enums import (
    CATEGORY_LABELS,
    MoveDirection,
    Origin,
    TaskCategory,
    Weekday,
)
from planner_engine.models.profile import UserProfile
from planner_engine.models.report import (
    DailyNutrition,
    DailyWater,
    DatedWorkout,
    WeeklyAggregate,
    WeeklyReport,
    WeeklyStats,
    WeightPoint,
)
from planner_engine.models.schedule import WeeklySchedule, week_start_for
from planner_engine.models.sync import ActionResult, SyncDirection, SyncResult, SyncStatus
from planner_engine.models.task import BasicTask, NutritionTask, Task, WorkoutTask, make_task

__all__ = [
    "ActionResult",
    "BasicTask",
    "CATEGORY_LABELS",
    "DailyLog",
    "DailyNutrition",
    "DailyWater",
    "DatedWorkout",
    "MealEntry",
    "MoveDirection",
    "NutritionTask",
    "Origin",
    "SyncDirection",
    "SyncResult",
    "SyncStatus",
    "Task",
    "TaskCategory",
    "UserProfile",
    "Weekday",
    "WeeklyAggregate",
    "WeeklyReport",
    "WeeklySchedule",
    "WeeklyStats",
    "WeightPoint",
    "WorkoutEntry",
    "WorkoutTask",
    "make_task",
    "week_start_for",
]
