# src/taskmate/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ..errors import UnsupportedOperationError

if TYPE_CHECKING:
    from .durations import Duration


class TaskKind(StrEnum):
    """
    Type tag of a task.

    Stored as the "type" field in the tasks file, and used instead of
    isinstance checks wherever behaviour differs per variant.
    """

    TODO = "todo"
    EVENT = "event"
    DEADLINE = "deadline"
    RECURRING_DEADLINE = "recurring_deadline"


DEADLINE_KINDS = frozenset({TaskKind.DEADLINE, TaskKind.RECURRING_DEADLINE})


class Frequency(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    def period(self) -> relativedelta:
        if self is Frequency.DAILY:
            return relativedelta(days=1)
        if self is Frequency.WEEKLY:
            return relativedelta(weeks=1)
        if self is Frequency.MONTHLY:
            return relativedelta(months=1)
        return relativedelta(years=1)


@dataclass(slots=True)
class Task:
    description: str
    is_completed: bool = field(default=False, kw_only=True)
    created_at: datetime = field(default_factory=datetime.now, kw_only=True)
    completed_at: datetime | None = field(default=None, kw_only=True)

    kind: ClassVar[TaskKind] = TaskKind.TODO
    type_tag: ClassVar[str] = "T"

    def complete(self, now: datetime | None = None) -> None:
        """
        Mark the task done.

        Double completion is rejected by TaskList.complete, not here.
        """
        self.is_completed = True
        self.completed_at = now or datetime.now()

    def snooze(self, duration: Duration) -> None:
        raise UnsupportedOperationError(f"A {self.kind.value} task has no deadline to snooze.")

    def clone(self) -> Task:
        # every field is an immutable value, so a field-by-field copy is a deep copy
        return replace(self)

    def sort_key(self) -> datetime:
        return self.created_at


@dataclass(slots=True)
class ToDo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO
    type_tag: ClassVar[str] = "T"


@dataclass(slots=True)
class Event(Task):
    time_frame: str

    kind: ClassVar[TaskKind] = TaskKind.EVENT
    type_tag: ClassVar[str] = "E"

    def sort_key(self) -> datetime:
        """
        Best-effort start time of the event.

        Missing date parts default to the creation date, never to "now", so the
        key only depends on the task's own fields.
        """
        anchor = self.created_at.replace(hour=0, minute=0, second=0, microsecond=0)
        try:
            start = date_parser.parse(self.time_frame, default=anchor, fuzzy=True)
        except (ValueError, OverflowError):
            return self.created_at
        return start.replace(tzinfo=None)


@dataclass(slots=True)
class Deadline(Task):
    due_at: datetime
    completed_on_time: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE
    type_tag: ClassVar[str] = "D"

    def complete(self, now: datetime | None = None) -> None:
        Task.complete(self, now)
        assert self.completed_at is not None
        self.completed_on_time = self.completed_at <= self.due_at

    def snooze(self, duration: Duration) -> None:
        self.due_at = duration.shift(self.due_at)

    def sort_key(self) -> datetime:
        return self.due_at


@dataclass(slots=True)
class RecurringDeadline(Deadline):
    frequency: Frequency
    repeat_until: datetime | None = None

    kind: ClassVar[TaskKind] = TaskKind.RECURRING_DEADLINE
    type_tag: ClassVar[str] = "R"

    def next_due_at(self) -> datetime | None:
        """Due time of the following occurrence, or None once past repeat_until."""
        nxt = self.due_at + self.frequency.period()
        if self.repeat_until is not None and nxt > self.repeat_until:
            return None
        return nxt

