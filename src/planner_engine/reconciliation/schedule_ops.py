"""List operations on a weekly schedule.

All functions are pure: they return a new WeeklySchedule and never touch
daily logs. Callers decide whether the change needs a reconciliation pass
(see ``BasicTask.is_schedule_linked``).
"""

from __future__ import annotations

import dataclasses
import time
from datetime import date
from typing import Callable

from planner_engine.exceptions import TaskNotFoundError
from planner_engine.models.enums import MoveDirection, Weekday
from planner_engine.models.schedule import WeeklySchedule
from planner_engine.models.task import Task


def new_task_id() -> str:
    """Timestamp-based id for a manually created task (milliseconds)."""
    return str(time.time_ns() // 1_000_000)


def _index_of(tasks: tuple[Task, ...], task_id: str, day: Weekday) -> int:
    for i, task in enumerate(tasks):
        if task.id == task_id:
            return i
    raise TaskNotFoundError(f"No task {task_id!r} on {day.label}")


def add_task(schedule: WeeklySchedule, day: Weekday, task: Task) -> WeeklySchedule:
    """Append *task* to *day*. Ids must be unique across the week."""
    if schedule.find_task(task.id) is not None:
        raise ValueError(f"Task id {task.id!r} already exists in week {schedule.week_start.isoformat()}")
    return schedule.with_tasks(day, schedule.tasks_for(day) + (task,))


def toggle_task(schedule: WeeklySchedule, day: Weekday, task_id: str) -> tuple[WeeklySchedule, Task]:
    """Flip a task's ``completed`` flag. Returns the schedule and the updated task."""
    tasks = schedule.tasks_for(day)
    i = _index_of(tasks, task_id, day)
    toggled = dataclasses.replace(tasks[i], completed=not tasks[i].completed)
    return schedule.with_tasks(day, tasks[:i] + (toggled,) + tasks[i + 1:]), toggled


def remove_task(schedule: WeeklySchedule, day: Weekday, task_id: str) -> tuple[WeeklySchedule, Task]:
    """Remove a task. Returns the schedule and the removed task."""
    tasks = schedule.tasks_for(day)
    i = _index_of(tasks, task_id, day)
    return schedule.with_tasks(day, tasks[:i] + tasks[i + 1:]), tasks[i]


def move_task(
    schedule: WeeklySchedule, task_id: str, from_day: Weekday, to_day: Weekday
) -> tuple[WeeklySchedule, Task]:
    """Move a task to the end of another day's list."""
    if from_day == to_day:
        tasks = schedule.tasks_for(from_day)
        return schedule, tasks[_index_of(tasks, task_id, from_day)]
    without, task = remove_task(schedule, from_day, task_id)
    return without.with_tasks(to_day, without.tasks_for(to_day) + (task,)), task


def reorder_task(
    schedule: WeeklySchedule, day: Weekday, task_id: str, direction: MoveDirection
) -> WeeklySchedule:
    """Swap a task with its neighbour. Moving past either end is a no-op."""
    tasks = list(schedule.tasks_for(day))
    i = _index_of(tuple(tasks), task_id, day)
    j = i + int(direction)
    if j < 0 or j >= len(tasks):
        return schedule
    tasks[i], tasks[j] = tasks[j], tasks[i]
    return schedule.with_tasks(day, tuple(tasks))


def paste_week(
    source: WeeklySchedule,
    target_week_start: date,
    created_at: str,
    id_factory: Callable[[], str] = new_task_id,
) -> WeeklySchedule:
    """Copy the manual tasks of *source* into a fresh week.

    Pasted tasks get new ids, ``completed=False`` and *created_at*.
    Derived tasks are skipped: they mirror another week's logs.
    """
    base = id_factory()
    pasted = WeeklySchedule(week_start=target_week_start)
    counter = 0
    for day in Weekday:
        tasks = []
        for task in source.tasks_for(day):
            if not task.is_manual:
                continue
            tasks.append(
                dataclasses.replace(
                    task, id=f"{base}_{counter}", completed=False, created_at=created_at
                )
            )
            counter += 1
        pasted = pasted.with_tasks(day, tuple(tasks))
    return pasted
