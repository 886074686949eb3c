# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import Action, CommandRegistry
from ..cli.handlers import registry as command_registry
from ..cli.ui import TextPresenter
from ..core.ports import Presenter
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "-" * 60


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleSession:
    """
    One interactive session: a line in, a rendered reply out.

    Kept separate from the input() loop so it can be driven from tests.
    """

    def __init__(
        self,
        state: AppState,
        *,
        registry: CommandRegistry | None = None,
        presenter: Presenter | None = None,
    ) -> None:
        self.state = state
        self.registry = registry or command_registry
        self.presenter = presenter or TextPresenter()

    def handle_line(self, line: str) -> tuple[str, bool]:
        """Return (reply text, keep_running)."""
        try:
            result = self.registry.dispatch(self.state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            return "Internal error while handling a command.", True
        return self.presenter.render(result), result.action is not Action.EXIT


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskmate"))
    show_ts = bool(getattr(getattr(state, "settings", None), "show_timestamps", False))
    session = ConsoleSession(state)

    def emit(text: str) -> None:
        prefix = f"[{_ts_local()}] " if show_ts else ""
        print(DIVIDER)
        for out_line in text.splitlines() or [""]:
            print(f"{prefix}{out_line}")
        print(DIVIDER, flush=True)

    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    emit(f"Hello! I'm {app_name}. What can I do for you? Type 'help' for commands.")
    if state.startup_notice:
        emit(state.startup_notice)

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        reply, keep_running = session.handle_line(user_input)
        emit(reply)
        if not keep_running:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")

