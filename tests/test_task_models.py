# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from taskmate.errors import UnsupportedOperationError
from taskmate.tasks.durations import Duration, DurationUnit
from taskmate.tasks.task_models import (
    Deadline,
    Event,
    Frequency,
    RecurringDeadline,
    TaskKind,
    ToDo,
)


def test_new_task_is_incomplete_with_creation_time() -> None:
    task = ToDo("buy milk")
    assert task.kind is TaskKind.TODO
    assert task.is_completed is False
    assert task.completed_at is None
    assert isinstance(task.created_at, datetime)


def test_complete_sets_flag_and_timestamp_together() -> None:
    task = ToDo("buy milk")
    when = datetime(2026, 10, 19, 9, 30)
    task.complete(now=when)
    assert task.is_completed is True
    assert task.completed_at == when


def test_deadline_tracks_on_time_completion() -> None:
    due = datetime(2026, 10, 20, 18, 0)

    early = Deadline("report", due)
    early.complete(now=due - timedelta(hours=1))
    assert early.completed_on_time is True

    late = Deadline("report", due)
    late.complete(now=due + timedelta(minutes=1))
    assert late.completed_on_time is False


def test_snooze_shifts_only_the_due_time() -> None:
    created = datetime(2026, 10, 1, 8, 0)
    task = Deadline("report", datetime(2026, 10, 20, 18, 0), created_at=created)
    task.snooze(Duration(2, DurationUnit.DAY))
    assert task.due_at == datetime(2026, 10, 22, 18, 0)
    assert task.description == "report"
    assert task.created_at == created
    assert task.is_completed is False


@pytest.mark.parametrize("task", [ToDo("read"), Event("party", "sat 8pm")])
def test_snooze_is_unsupported_without_a_deadline(task) -> None:
    with pytest.raises(UnsupportedOperationError):
        task.snooze(Duration(1, DurationUnit.DAY))


def test_clone_is_equal_but_independent() -> None:
    original = RecurringDeadline(
        "gym",
        datetime(2026, 10, 20, 7, 0),
        Frequency.WEEKLY,
        datetime(2026, 12, 31, 23, 59),
    )
    copy = original.clone()
    assert copy == original
    assert copy is not original
    assert type(copy) is RecurringDeadline

    copy.complete()
    assert original.is_completed is False
    assert original.completed_at is None


def test_recurring_deadline_next_occurrence() -> None:
    task = RecurringDeadline("rent", datetime(2026, 1, 31, 9, 0), Frequency.MONTHLY)
    assert task.next_due_at() == datetime(2026, 2, 28, 9, 0)

    bounded = RecurringDeadline(
        "standup",
        datetime(2026, 10, 20, 9, 0),
        Frequency.DAILY,
        datetime(2026, 10, 20, 23, 59),
    )
    assert bounded.next_due_at() is None


def test_sort_keys_per_variant() -> None:
    created = datetime(2026, 3, 1, 12, 0)
    assert ToDo("a", created_at=created).sort_key() == created
    assert Deadline("b", datetime(2026, 3, 5), created_at=created).sort_key() == datetime(2026, 3, 5)
    assert Event("c", "2026-03-04 10:00", created_at=created).sort_key() == datetime(2026, 3, 4, 10, 0)


def test_event_sort_key_falls_back_to_creation_time() -> None:
    created = datetime(2026, 3, 1, 12, 0)
    event = Event("c", "whenever", created_at=created)
    assert event.sort_key() == created
    # no dependence on the wall clock
    assert event.sort_key() == event.sort_key()
