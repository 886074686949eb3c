# src/taskmate/tasks/undo.py

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from ..errors import NothingToUndoError
from .task_list import TaskList
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_UNDO_DEPTH = 20


@dataclass(frozen=True, slots=True)
class SaveState:
    """Copy of both task sequences taken right before `command` ran."""

    command: str
    tasks: tuple[Task, ...]
    archive: tuple[Task, ...]


class UndoStack:
    """
    Bounded history of pre-mutation snapshots.

    The oldest snapshot is dropped once `max_depth` is reached. Undo itself
    is not recorded, so there is no redo.
    """

    def __init__(self, max_depth: int = DEFAULT_UNDO_DEPTH) -> None:
        self._states: deque[SaveState] = deque(maxlen=max(1, int(max_depth)))

    def __len__(self) -> int:
        return len(self._states)

    def save_state(self, command: str, task_list: TaskList) -> SaveState:
        state = SaveState(
            command=command.strip(),
            tasks=tuple(t.clone() for t in task_list.tasks),
            archive=tuple(t.clone() for t in task_list.archive),
        )
        self._states.append(state)
        logger.debug("Undo snapshot saved command=%r depth=%d", state.command, len(self._states))
        return state

    def undo(self) -> SaveState:
        if not self._states:
            raise NothingToUndoError()
        state = self._states.pop()
        logger.debug("Undo snapshot popped command=%r depth=%d", state.command, len(self._states))
        return state

    @contextmanager
    def recording(self, command: str, task_list: TaskList) -> Iterator[SaveState]:
        """
        Snapshot `task_list`, then run the block.

        If the block raises, the snapshot is dropped again so a failed command
        never leaves an undo entry behind.
        """
        state = self.save_state(command, task_list)
        try:
            yield state
        except BaseException:
            if self._states and self._states[-1] is state:
                self._states.pop()
            raise
