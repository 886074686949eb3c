# src/taskmate/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the JSON store, task list and undo stack into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskSink
from ..core.state import AppState
from ..errors import LoadError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from ..tasks.undo import UndoStack

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Reported through the store once it tries to load/save.
        logger.warning("Could not create data directory %s", settings.data_dir)


def create_initial_state(*, settings=None, store: TaskSink | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test.
    A tasks file that cannot be read does not stop the session: we start with
    an empty list and keep the message for the connector to show.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if store is None:
        store = TaskStore(settings.tasks_path)

    notice: str | None = None
    try:
        tasks, archive = store.load()
    except LoadError as e:
        logger.warning("Starting with an empty task list: %s", e.message)
        tasks, archive = [], []
        notice = e.message

    return AppState(
        settings=settings,
        tasks=TaskList(tasks, archive),
        undo=UndoStack(getattr(settings, "undo_depth", 20)),
        store=store,
        startup_notice=notice,
    )
