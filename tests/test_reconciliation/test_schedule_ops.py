"""Tests for pure weekly schedule list operations."""

from __future__ import annotations

from datetime import date

import pytest

from planner_engine.exceptions import TaskNotFoundError
from planner_engine.models import MoveDirection, Origin, Weekday, WeeklySchedule, WorkoutTask
from planner_engine.reconciliation import schedule_ops


@pytest.fixture
def week(monday, oats_task, pull_up_task, sleep_task) -> WeeklySchedule:
    schedule = WeeklySchedule(week_start=monday)
    schedule = schedule.with_tasks(Weekday.MONDAY, (oats_task, pull_up_task, sleep_task))
    derived = WorkoutTask(id="workout_w1", title="Bench Press", origin=Origin.DERIVED_FROM_LOG)
    return schedule.with_tasks(Weekday.TUESDAY, (derived,))


class TestAddTask:
    def test_appends(self, week):
        task = WorkoutTask(id="new", title="Dips")
        updated = schedule_ops.add_task(week, Weekday.MONDAY, task)
        assert updated.tasks_for(Weekday.MONDAY)[-1] == task
        assert week.task_count == 4  # original untouched

    def test_duplicate_id_rejected(self, week, oats_task):
        with pytest.raises(ValueError, match="already exists"):
            schedule_ops.add_task(week, Weekday.FRIDAY, oats_task)


class TestToggleAndRemove:
    def test_toggle(self, week, oats_task):
        updated, task = schedule_ops.toggle_task(week, Weekday.MONDAY, oats_task.id)
        assert task.completed is True
        assert updated.tasks_for(Weekday.MONDAY)[0].completed is True

    def test_toggle_unknown(self, week):
        with pytest.raises(TaskNotFoundError):
            schedule_ops.toggle_task(week, Weekday.MONDAY, "nope")

    def test_remove(self, week, pull_up_task):
        updated, removed = schedule_ops.remove_task(week, Weekday.MONDAY, pull_up_task.id)
        assert removed == pull_up_task
        assert pull_up_task not in updated.tasks_for(Weekday.MONDAY)


class TestMoveAndReorder:
    def test_move_to_other_day(self, week, pull_up_task):
        updated, task = schedule_ops.move_task(week, pull_up_task.id, Weekday.MONDAY, Weekday.THURSDAY)
        assert task == pull_up_task
        assert updated.tasks_for(Weekday.THURSDAY) == (pull_up_task,)
        assert updated.find_task(pull_up_task.id) == (Weekday.THURSDAY, pull_up_task)

    def test_move_same_day_is_noop(self, week, pull_up_task):
        updated, _ = schedule_ops.move_task(week, pull_up_task.id, Weekday.MONDAY, Weekday.MONDAY)
        assert updated == week

    def test_reorder_up(self, week, oats_task, pull_up_task, sleep_task):
        updated = schedule_ops.reorder_task(week, Weekday.MONDAY, pull_up_task.id, MoveDirection.UP)
        assert updated.tasks_for(Weekday.MONDAY) == (pull_up_task, oats_task, sleep_task)

    def test_reorder_past_end_is_noop(self, week, sleep_task):
        updated = schedule_ops.reorder_task(week, Weekday.MONDAY, sleep_task.id, MoveDirection.DOWN)
        assert updated is week


class TestPasteWeek:
    def test_copies_manual_tasks_only(self, week):
        target = date(2025, 3, 17)
        ids = iter(["555"])
        pasted = schedule_ops.paste_week(week, target, created_at="2025-03-16T00:00:00+00:00", id_factory=lambda: next(ids))
        assert pasted.week_start == target
        assert [t.id for t in pasted.tasks_for(Weekday.MONDAY)] == ["555_0", "555_1", "555_2"]
        assert pasted.tasks_for(Weekday.TUESDAY) == ()
        assert all(not t.completed for t in pasted.tasks_for(Weekday.MONDAY))
        assert all(t.created_at == "2025-03-16T00:00:00+00:00" for t in pasted.tasks_for(Weekday.MONDAY))

    def test_resets_completed(self, week, oats_task):
        done, _ = schedule_ops.toggle_task(week, Weekday.MONDAY, oats_task.id)
        pasted = schedule_ops.paste_week(done, date(2025, 3, 17), created_at="")
        assert pasted.tasks_for(Weekday.MONDAY)[0].completed is False


class TestWeeklySchedule:
    def test_week_start_must_be_monday(self):
        with pytest.raises(ValueError, match="Monday"):
            WeeklySchedule(week_start=date(2025, 3, 11))

    def test_date_of(self, week):
        assert week.date_of(Weekday.SUNDAY) == date(2025, 3, 16)

    def test_new_task_id_is_numeric(self):
        assert schedule_ops.new_task_id().isdigit()
