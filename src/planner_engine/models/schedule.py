"""Weekly schedule: planned tasks grouped by weekday, Monday-anchored."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta

from planner_engine.models.enums import Weekday
from planner_engine.models.task import Task


def week_start_for(day: date) -> date:
    """Return the Monday of the week containing *day*."""
    return day - timedelta(days=day.weekday())


def _empty_days() -> dict[Weekday, tuple[Task, ...]]:
    return {day: () for day in Weekday}


@dataclass(frozen=True)
class WeeklySchedule:
    """Seven ordered task lists for the week starting at ``week_start``."""

    week_start: date
    days: dict[Weekday, tuple[Task, ...]] = field(default_factory=_empty_days)

    def __post_init__(self) -> None:
        if self.week_start.weekday() != Weekday.MONDAY:
            raise ValueError(f"week_start must be a Monday, got {self.week_start.isoformat()}")

    def tasks_for(self, day: Weekday) -> tuple[Task, ...]:
        return self.days.get(day, ())

    def with_tasks(self, day: Weekday, tasks: tuple[Task, ...]) -> "WeeklySchedule":
        """Return a copy with *day*'s list replaced."""
        days = dict(self.days)
        days[day] = tuple(tasks)
        return WeeklySchedule(week_start=self.week_start, days=days)

    def date_of(self, day: Weekday) -> date:
        return self.week_start + timedelta(days=int(day))

    def find_task(self, task_id: str) -> tuple[Weekday, Task] | None:
        for day in Weekday:
            for task in self.tasks_for(day):
                if task.id == task_id:
                    return day, task
        return None

    @property
    def task_count(self) -> int:
        return sum(len(tasks) for tasks in self.days.values())
