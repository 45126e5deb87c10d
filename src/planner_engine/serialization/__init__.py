"""Serialization module: convert models to and from store documents."""

from planner_engine.serialization.documents import (
    daily_log_from_document,
    daily_log_to_document,
    meal_entry_from_document,
    meal_entry_to_document,
    profile_from_document,
    profile_to_document,
    report_from_document,
    report_to_document,
    schedule_from_document,
    schedule_to_document,
    task_from_document,
    task_to_document,
    workout_entry_from_document,
    workout_entry_to_document,
)

__all__ = [
    "daily_log_from_document",
    "daily_log_to_document",
    "meal_entry_from_document",
    "meal_entry_to_document",
    "profile_from_document",
    "profile_to_document",
    "report_from_document",
    "report_to_document",
    "schedule_from_document",
    "schedule_to_document",
    "task_from_document",
    "task_to_document",
    "workout_entry_from_document",
    "workout_entry_to_document",
]
