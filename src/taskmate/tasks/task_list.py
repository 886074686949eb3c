# src/taskmate/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ..errors import (
    AlreadyCompletedError,
    EmptySortError,
    IndexOutOfBoundsError,
    WrongTaskTypeError,
)
from .durations import Duration
from .task_models import DEADLINE_KINDS, Task

if TYPE_CHECKING:
    from .undo import SaveState

logger = logging.getLogger(__name__)


class TaskList:
    """
    Active tasks plus the archive.

    Indices are 0-based here; the dispatcher converts from the 1-based numbers
    users see. Every index is checked before anything is mutated, and the two
    sequences never share a task.
    """

    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        archive: Iterable[Task] | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._archive: list[Task] = list(archive or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- queries ----

    def size(self) -> int:
        return len(self._tasks)

    def archive_size(self) -> int:
        return len(self._archive)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def archive(self) -> list[Task]:
        return list(self._archive)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfBoundsError()

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def find(self, query: str) -> list[tuple[Task, int]]:
        """Case-insensitive substring search over active task descriptions."""
        needle = (query or "").strip().lower()
        return [
            (task, i)
            for i, task in enumerate(self._tasks)
            if needle in task.description.lower()
        ]

    # ---- mutations ----

    def add(self, task: Task) -> None:
        if task is None:
            raise ValueError("task is required")
        self._tasks.append(task)
        logger.debug("Task added kind=%s size=%d", task.kind.value, len(self._tasks))

    def remove(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task removed index=%d size=%d", index, len(self._tasks))
        return task

    def remove_all(self) -> int:
        n = len(self._tasks)
        self._tasks.clear()
        logger.debug("All tasks removed count=%d", n)
        return n

    def complete(self, index: int) -> Task:
        task = self.get(index)
        if task.is_completed:
            raise AlreadyCompletedError()
        task.complete()
        logger.debug("Task completed index=%d kind=%s", index, task.kind.value)
        return task

    def sort(self) -> None:
        """
        Incomplete tasks first, then by each task's chronological key.

        list.sort is stable, so ties keep their current order.
        """
        if not self._tasks:
            raise EmptySortError()
        self._tasks.sort(key=lambda t: (t.is_completed, t.sort_key()))

    def archive_completed(self) -> int:
        done = [t for t in self._tasks if t.is_completed]
        if not done:
            return 0
        self._tasks = [t for t in self._tasks if not t.is_completed]
        self._archive.extend(done)
        logger.debug("Archived %d task(s) archive_size=%d", len(done), len(self._archive))
        return len(done)

    def snooze(self, index: int, duration: Duration) -> Task:
        task = self.get(index)
        if task.kind not in DEADLINE_KINDS:
            raise WrongTaskTypeError()
        task.snooze(duration)
        logger.debug("Task snoozed index=%d by=%s", index, duration)
        return task

    def restore(self, snapshot: SaveState) -> None:
        """Replace both sequences with the ones captured in an undo snapshot."""
        self._tasks = [t.clone() for t in snapshot.tasks]
        self._archive = [t.clone() for t in snapshot.archive]
