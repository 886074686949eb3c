# src/taskmate/tasks/statistics.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import cast

from .task_list import TaskList
from .task_models import DEADLINE_KINDS, Deadline

RECENT_WINDOW = timedelta(days=7)


@dataclass(frozen=True, slots=True)
class TaskStatistics:
    active: int
    completed: int
    archived: int
    completed_recently: int
    deadlines_completed: int
    deadlines_on_time: int

    @property
    def on_time_rate(self) -> float | None:
        if not self.deadlines_completed:
            return None
        return self.deadlines_on_time / self.deadlines_completed


def compute_statistics(task_list: TaskList, now: datetime | None = None) -> TaskStatistics:
    """
    Summarise active + archived tasks.

    "Recently" means completed within the last 7 days of `now`.
    """
    now = now or datetime.now()
    everything = task_list.tasks + task_list.archive
    done = [t for t in everything if t.is_completed]

    recent = sum(
        1 for t in done if t.completed_at is not None and now - t.completed_at <= RECENT_WINDOW
    )
    deadlines = [cast(Deadline, t) for t in done if t.kind in DEADLINE_KINDS]

    return TaskStatistics(
        active=task_list.size(),
        completed=sum(1 for t in task_list.tasks if t.is_completed),
        archived=task_list.archive_size(),
        completed_recently=recent,
        deadlines_completed=len(deadlines),
        deadlines_on_time=sum(1 for d in deadlines if d.completed_on_time),
    )
