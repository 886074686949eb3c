# src/taskmate/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, cast

from ..errors import LoadAndSaveError, LoadError, PersistenceError
from .task_list import TaskList
from .task_models import (
    DEADLINE_KINDS,
    Deadline,
    Event,
    Frequency,
    RecurringDeadline,
    Task,
    TaskKind,
    ToDo,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file store for a TaskList.

    File layout: {"tasks": [...], "archive": [...]}, one object per task with a
    "type" tag. Older files without the tag are classified by their fields.

    Every save rewrites the whole file (tmp file + os.replace).
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        """Compatibility hook for shutdown (nothing held open between calls)."""
        return

    # ---- encoding ----

    @staticmethod
    def _ts(value: datetime | None) -> str | None:
        return value.isoformat() if value is not None else None

    @staticmethod
    def _parse_ts(value: Any) -> datetime | None:
        if value in (None, ""):
            return None
        return datetime.fromisoformat(str(value))

    def _task_to_dict(self, task: Task) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": task.kind.value,
            "description": task.description,
            "is_completed": task.is_completed,
            "created_at": self._ts(task.created_at),
            "completed_at": self._ts(task.completed_at),
        }
        if task.kind is TaskKind.EVENT:
            data["time_frame"] = cast(Event, task).time_frame
        if task.kind in DEADLINE_KINDS:
            deadline = cast(Deadline, task)
            data["due_at"] = self._ts(deadline.due_at)
            data["completed_on_time"] = deadline.completed_on_time
        if task.kind is TaskKind.RECURRING_DEADLINE:
            recurring = cast(RecurringDeadline, task)
            data["frequency"] = recurring.frequency.value
            data["repeat_until"] = self._ts(recurring.repeat_until)
        return data

    @staticmethod
    def _kind_of(raw: dict[str, Any]) -> TaskKind:
        tag = raw.get("type")
        if tag:
            return TaskKind(tag)
        # legacy files: infer from fields
        if "frequency" in raw and "due_at" in raw:
            return TaskKind.RECURRING_DEADLINE
        if "due_at" in raw:
            return TaskKind.DEADLINE
        if "time_frame" in raw:
            return TaskKind.EVENT
        return TaskKind.TODO

    def _dict_to_task(self, raw: dict[str, Any]) -> Task:
        kind = self._kind_of(raw)
        description = str(raw["description"])
        common: dict[str, Any] = {
            "is_completed": bool(raw.get("is_completed", False)),
            "created_at": self._parse_ts(raw.get("created_at")) or datetime.now(),
            "completed_at": self._parse_ts(raw.get("completed_at")),
        }

        if kind is TaskKind.TODO:
            return ToDo(description, **common)
        if kind is TaskKind.EVENT:
            return Event(description, str(raw.get("time_frame", "")), **common)

        due_at = self._parse_ts(raw["due_at"])
        if due_at is None:
            raise ValueError(f"{kind.value} task without due_at")
        on_time = bool(raw.get("completed_on_time", False))
        if kind is TaskKind.DEADLINE:
            return Deadline(description, due_at, completed_on_time=on_time, **common)
        return RecurringDeadline(
            description,
            due_at,
            Frequency(raw["frequency"]),
            self._parse_ts(raw.get("repeat_until")),
            completed_on_time=on_time,
            **common,
        )

    # ---- public API ----

    def save(self, task_list: TaskList) -> None:
        payload = {
            "tasks": [self._task_to_dict(t) for t in task_list.tasks],
            "archive": [self._task_to_dict(t) for t in task_list.archive],
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.warning("Failed to save tasks to %s: %s", self._path, e)
            raise PersistenceError() from e
        logger.debug(
            "Saved tasks=%d archive=%d to %s",
            task_list.size(),
            task_list.archive_size(),
            self._path,
        )

    def load(self) -> tuple[list[Task], list[Task]]:
        """
        Read (tasks, archive) from disk.

        A missing file is a first run, not an error.
        """
        if not self._path.exists():
            logger.info("No tasks file at %s, starting empty.", self._path)
            return [], []
        try:
            data = json.loads(self._path.read_text("utf-8"))
            if not isinstance(data, dict):
                raise ValueError("tasks file must contain a JSON object")
            tasks = [self._dict_to_task(raw) for raw in data.get("tasks", [])]
            archive = [self._dict_to_task(raw) for raw in data.get("archive", [])]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Failed to load tasks from %s: %s", self._path, e)
            if not self._can_save():
                raise LoadAndSaveError() from e
            raise LoadError() from e
        logger.info("Loaded tasks=%d archive=%d from %s", len(tasks), len(archive), self._path)
        return tasks, archive

    def _can_save(self) -> bool:
        parent = self._path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        return os.access(parent, os.W_OK)
