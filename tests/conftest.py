# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.core.state import AppState
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_store import TaskStore
from taskmate.tasks.undo import UndoStack


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskmate",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        log_dir=tmp_path,
        undo_depth=5,
        console_enabled=False,
        show_timestamps=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState with an empty task list.

    NOTE: We keep the real JSON TaskStore here because persisting after every
    mutation is part of what we want to test.
    """
    return AppState(
        settings=settings,
        tasks=TaskList(),
        undo=UndoStack(settings.undo_depth),
        store=TaskStore(settings.tasks_path),
    )
