# src/taskmate/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.undo import UndoStack
from .ports import TaskSink


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    tasks: TaskList
    undo: UndoStack
    store: TaskSink

    # Only needed when the engine is shared between clients; the console runs without it.
    lock: threading.Lock | None = None

    # Message to show once at startup (e.g. the tasks file could not be loaded).
    startup_notice: str | None = None
