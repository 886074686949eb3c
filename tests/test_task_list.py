# tests/test_task_list.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from taskmate.errors import (
    AlreadyCompletedError,
    EmptySortError,
    IndexOutOfBoundsError,
    WrongTaskTypeError,
)
from taskmate.tasks.durations import Duration, DurationUnit
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_models import Deadline, Event, ToDo


def _done(task, when: datetime = datetime(2026, 1, 2)):
    task.complete(now=when)
    return task


def test_empty_and_non_empty_construction() -> None:
    assert TaskList().size() == 0
    assert len(TaskList([ToDo("Item 1"), ToDo("Item 2")])) == 2


def test_add_and_get() -> None:
    tl = TaskList()
    task = ToDo("Placeholder")
    tl.add(task)
    assert tl.size() == 1
    assert tl.get(0) is task


@pytest.mark.parametrize("index", [0, 1, -1])
def test_get_and_remove_validate_bounds(index: int) -> None:
    tl = TaskList() if index == 0 else TaskList([ToDo("only")])
    with pytest.raises(IndexOutOfBoundsError) as exc:
        tl.get(index)
    assert exc.value.message == "You're referring to a task which does not exist!"
    with pytest.raises(IndexOutOfBoundsError):
        tl.remove(index)


def test_remove() -> None:
    first, second = ToDo("a"), ToDo("b")
    tl = TaskList([first, second])
    assert tl.remove(0) is first
    assert tl.tasks == [second]


def test_complete_once_then_already_completed() -> None:
    tl = TaskList([ToDo("Testing using this!")])
    task = tl.complete(0)
    assert task.is_completed
    stamp = task.completed_at

    with pytest.raises(AlreadyCompletedError) as exc:
        tl.complete(0)
    assert exc.value.message == "You have already completed this task!"
    assert tl.get(0).completed_at == stamp


def test_remove_all_keeps_archive() -> None:
    tl = TaskList([ToDo("a"), ToDo("b")], [_done(ToDo("old"))])
    assert tl.remove_all() == 2
    assert tl.size() == 0
    assert tl.archive_size() == 1


def test_find_is_case_insensitive_and_keeps_indices() -> None:
    tl = TaskList([ToDo("Placeholder"), ToDo("hello"), ToDo("PLACE an order")])
    hits = tl.find("place")
    assert [(t.description, i) for t, i in hits] == [("Placeholder", 0), ("PLACE an order", 2)]


def test_find_empty_matches_all_and_no_match_is_empty() -> None:
    tl = TaskList([ToDo("a"), ToDo("b")])
    assert len(tl.find("")) == 2
    assert len(tl.find("   ")) == 2
    assert tl.find("zzz-no-match") == []


def test_sort_empty_raises() -> None:
    with pytest.raises(EmptySortError):
        TaskList().sort()


def test_sort_single_is_noop() -> None:
    task = ToDo("only")
    tl = TaskList([task])
    tl.sort()
    assert tl.tasks == [task]


def test_sort_puts_incomplete_first_then_chronological() -> None:
    jan1 = datetime(2026, 1, 1)
    done = _done(ToDo("x", created_at=jan1))
    deadline = Deadline("a", datetime(2026, 1, 5), created_at=jan1)
    todo = ToDo("c", created_at=datetime(2026, 1, 3))
    event = Event("b", "2026-01-04 10:00", created_at=jan1)

    tl = TaskList([done, deadline, todo, event])
    tl.sort()
    assert tl.tasks == [todo, event, deadline, done]


def test_sort_is_stable_for_ties() -> None:
    same = datetime(2026, 1, 1)
    a, b, c = ToDo("a", created_at=same), ToDo("b", created_at=same), ToDo("c", created_at=same)
    tl = TaskList([b, a, c])
    tl.sort()
    assert [t.description for t in tl] == ["b", "a", "c"]
    tl.sort()
    assert [t.description for t in tl] == ["b", "a", "c"]


def test_archive_moves_completed_tasks_in_order() -> None:
    first = _done(ToDo("first"))
    keep = ToDo("keep")
    second = _done(ToDo("second"))
    tl = TaskList([first, keep, second], [_done(ToDo("older"))])

    assert tl.archive_completed() == 2
    assert tl.tasks == [keep]
    assert [t.description for t in tl.archive] == ["older", "first", "second"]
    assert not any(t in tl.archive for t in tl.tasks)


def test_archive_with_nothing_completed_is_noop() -> None:
    tl = TaskList([ToDo("a")])
    assert tl.archive_completed() == 0
    assert tl.size() == 1
    assert tl.archive_size() == 0


def test_find_never_returns_archived_tasks() -> None:
    tl = TaskList([_done(ToDo("milk run")), ToDo("milk again")])
    tl.archive_completed()
    assert [t.description for t, _ in tl.find("milk")] == ["milk again"]


def test_snooze_checks_task_type() -> None:
    due = datetime(2026, 10, 20, 18, 0)
    tl = TaskList([ToDo("a"), Deadline("b", due)])
    with pytest.raises(WrongTaskTypeError):
        tl.snooze(0, Duration(2, DurationUnit.DAY))
    task = tl.snooze(1, Duration(2, DurationUnit.DAY))
    assert task.due_at == due + timedelta(days=2)
    with pytest.raises(IndexOutOfBoundsError):
        tl.snooze(2, Duration(2, DurationUnit.DAY))
