# src/taskmate/cli/commands.py

from __future__ import annotations

import contextlib
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from ..core.state import AppState
from ..errors import (
    CommandError,
    ErrorKind,
    InvalidIndexFormatError,
    MissingIndexError,
    TooManyIndicesError,
    UnexpectedArgumentsError,
    UnrecognizedCommandError,
)
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

INDEX_RE = re.compile(r"^[+-]?\d+$")


class Action(StrEnum):
    ADDED = "added"
    LISTED = "listed"
    COMPLETED = "completed"
    FOUND = "found"
    DELETED = "deleted"
    DELETED_ALL = "deleted_all"
    SNOOZED = "snoozed"
    SORTED = "sorted"
    ARCHIVED = "archived"
    ARCHIVE_SHOWN = "archive_shown"
    UNDONE = "undone"
    HELP = "help"
    STATISTICS = "statistics"
    EXIT = "exit"
    ERROR = "error"


@dataclass(slots=True)
class CommandResult:
    """
    What a handler did, for the presenter to render.

    `tasks` holds (task, 0-based index) pairs of the affected or listed tasks.
    """

    action: Action
    tasks: list[tuple[Task, int]] = field(default_factory=list)
    message: str = ""
    error: ErrorKind | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, exc: CommandError) -> CommandResult:
        return cls(action=Action.ERROR, message=exc.message, error=exc.kind)


CommandHandler = Callable[[AppState, str], CommandResult]


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: CommandHandler
    help_text: str
    aliases: tuple[str, ...]
    mutates: bool = False
    usage: str = ""


class CommandRegistry:
    """
    Command registry: each command owns a set of aliases and one handler.

    Aliases are case-insensitive and may not be shared between commands.
    """

    def __init__(self) -> None:
        self._specs: dict[str, CommandSpec] = {}
        self._by_alias: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        mutates: bool = False,
        usage: str = "",
    ) -> CommandSpec:
        key = name.lower()
        names = [key] + [a.lower() for a in (aliases or []) if a.lower() != key]
        for alias in names:
            owner = self._by_alias.get(alias)
            if owner is not None:
                raise ValueError(f"alias {alias!r} already belongs to command {owner.name!r}")

        spec = CommandSpec(
            name=key,
            handler=handler,
            help_text=help_text,
            aliases=tuple(names),
            mutates=mutates,
            usage=usage or key,
        )
        self._specs[key] = spec
        for alias in names:
            self._by_alias[alias] = spec
        return spec

    def specs(self) -> list[CommandSpec]:
        return list(self._specs.values())

    def resolve(self, line: str) -> CommandSpec:
        head, _ = split_command(line)
        spec = self._by_alias.get(head)
        if spec is None:
            raise UnrecognizedCommandError()
        return spec

    def dispatch(self, state: AppState, line: str) -> CommandResult:
        """
        Run one input line to completion.

        Never raises CommandError: failures come back as an ERROR result.
        Only a failed save leaves its change (and undo entry) in place.
        """
        lock = state.lock if state.lock is not None else contextlib.nullcontext()
        with lock:
            try:
                spec = self.resolve(line)
                result = spec.handler(state, line)
            except CommandError as e:
                logger.info("Command failed kind=%s line=%r", e.kind.value, line)
                return CommandResult.failure(e)
        if spec.mutates and result.ok:
            logger.info("Task list changed by %r", line.strip())
        else:
            logger.debug("Command ok name=%s action=%s", spec.name, result.action.value)
        return result


def split_command(line: str) -> tuple[str, str]:
    """Split on the first whitespace: (lowercased command word, rest)."""
    parts = (line or "").strip().split(maxsplit=1)
    if not parts:
        return "", ""
    head = parts[0].lower()
    rest = parts[1].strip() if len(parts) > 1 else ""
    return head, rest


def parse_index(line: str) -> int:
    """
    Read the single task number after the command word.

    Returns the 0-based index; bounds are checked by the TaskList.
    """
    tokens = (line or "").split()
    if len(tokens) < 2:
        raise MissingIndexError()
    if len(tokens) > 2:
        raise TooManyIndicesError()
    token = tokens[1].strip()
    if not INDEX_RE.match(token):
        raise InvalidIndexFormatError(f"'{token}' is not a task number.")
    return int(token) - 1


def ensure_no_args(line: str) -> None:
    head, rest = split_command(line)
    if rest:
        raise UnexpectedArgumentsError(f"'{head}' doesn't take any arguments.")
