# src/taskmate/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The dispatcher depends on Protocols instead of concrete implementations,
so the JSON store and the text presenter can be swapped (tests use fakes).
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..cli.commands import CommandResult
    from ..tasks.task_list import TaskList
    from ..tasks.task_models import Task


class TaskSink(Protocol):
    """Persistence: load(save(x)) must reconstruct x field for field."""

    def save(self, task_list: TaskList) -> None: ...

    def load(self) -> tuple[list[Task], list[Task]]: ...


class Presenter(Protocol):
    def render(self, result: CommandResult) -> str: ...
