# src/taskmate/cli/handlers.py

from __future__ import annotations

import logging
import re

from ..core.state import AppState
from ..errors import (
    InvalidSnoozeDurationError,
    MissingDescriptionError,
    MissingTimeError,
    PersistenceError,
    UnexpectedArgumentsError,
    UnrecognizedCommandError,
    WrongTaskTypeError,
)
from ..tasks.durations import parse_datetime, parse_duration, parse_frequency
from ..tasks.statistics import compute_statistics
from ..tasks.task_models import DEADLINE_KINDS, Deadline, Event, RecurringDeadline, Task, ToDo
from .commands import (
    Action,
    CommandRegistry,
    CommandResult,
    ensure_no_args,
    parse_index,
    split_command,
)

logger = logging.getLogger(__name__)

FLAG_RE = re.compile(r"\s*/(at|by|every|until)\b\s*", re.IGNORECASE)
SNOOZE_FOR_RE = re.compile(r"/for\b", re.IGNORECASE)
ARCHIVE_SHOW_WORDS = frozenset({"show", "view", "list"})


def _persist(state: AppState) -> None:
    """
    Write the full task list after a mutation.

    On failure the in-memory change and its undo snapshot are kept.
    """
    try:
        state.store.save(state.tasks)
    except PersistenceError as e:
        logger.warning("Change kept in memory but not saved: %s", e)
        raise PersistenceError(
            "I couldn't save your tasks to disk. The change is kept for this session; "
            "use 'undo' to revert it."
        ) from e


def _split_flags(text: str) -> tuple[str, dict[str, str]]:
    """'desc /by x /every y' -> ('desc', {'by': 'x', 'every': 'y'})."""
    parts = FLAG_RE.split(text)
    description = parts[0].strip()
    flags: dict[str, str] = {}
    for i in range(1, len(parts) - 1, 2):
        flags[parts[i].lower()] = parts[i + 1].strip()
    return description, flags


def _add_task(state: AppState, line: str, task: Task) -> CommandResult:
    with state.undo.recording(line, state.tasks):
        state.tasks.add(task)
    _persist(state)
    index = state.tasks.size() - 1
    return CommandResult(
        action=Action.ADDED,
        tasks=[(task, index)],
        extra={"total": state.tasks.size()},
    )


# ---- creation ----


def cmd_todo(state: AppState, line: str) -> CommandResult:
    _, description = split_command(line)
    if not description:
        raise MissingDescriptionError()
    return _add_task(state, line, ToDo(description))


def cmd_event(state: AppState, line: str) -> CommandResult:
    """
    event <description> /at <time frame>
    """
    _, rest = split_command(line)
    description, flags = _split_flags(rest)
    if not description:
        raise MissingDescriptionError()
    time_frame = flags.get("at", "")
    if not time_frame:
        raise MissingTimeError("When is it? Use 'event <description> /at <time>'.")
    return _add_task(state, line, Event(description, time_frame))


def cmd_deadline(state: AppState, line: str) -> CommandResult:
    """
    deadline <description> /by <date>
    deadline <description> /by <date> /every <frequency> [/until <date>]
    """
    _, rest = split_command(line)
    description, flags = _split_flags(rest)
    if not description:
        raise MissingDescriptionError()
    by = flags.get("by", "")
    if not by:
        raise MissingTimeError("When is it due? Use 'deadline <description> /by <date>'.")
    due_at = parse_datetime(by)

    task: Task
    if "every" in flags:
        frequency = parse_frequency(flags["every"])
        until_raw = flags.get("until")
        repeat_until = parse_datetime(until_raw) if until_raw else None
        task = RecurringDeadline(description, due_at, frequency, repeat_until)
    elif "until" in flags:
        raise UnexpectedArgumentsError("'/until' only applies together with '/every'.")
    else:
        task = Deadline(description, due_at)
    return _add_task(state, line, task)


# ---- task list ----


def cmd_list(state: AppState, line: str) -> CommandResult:
    ensure_no_args(line)
    return CommandResult(action=Action.LISTED, tasks=[(t, i) for i, t in enumerate(state.tasks)])


def cmd_done(state: AppState, line: str) -> CommandResult:
    index = parse_index(line)
    with state.undo.recording(line, state.tasks):
        task = state.tasks.complete(index)
    _persist(state)
    return CommandResult(action=Action.COMPLETED, tasks=[(task, index)])


def cmd_find(state: AppState, line: str) -> CommandResult:
    _, query = split_command(line)
    matches = state.tasks.find(query)
    return CommandResult(action=Action.FOUND, tasks=matches, extra={"query": query})


def cmd_delete(state: AppState, line: str) -> CommandResult:
    _, rest = split_command(line)
    if rest.lower() == "all":
        with state.undo.recording(line, state.tasks):
            removed = state.tasks.remove_all()
        _persist(state)
        return CommandResult(action=Action.DELETED_ALL, extra={"removed": removed})

    index = parse_index(line)
    with state.undo.recording(line, state.tasks):
        task = state.tasks.remove(index)
    _persist(state)
    return CommandResult(
        action=Action.DELETED,
        tasks=[(task, index)],
        extra={"total": state.tasks.size()},
    )


def cmd_snooze(state: AppState, line: str) -> CommandResult:
    """
    snooze <index> /for <duration>
    """
    parts = SNOOZE_FOR_RE.split(line, maxsplit=1)
    if len(parts) < 2 or not parts[1].strip():
        raise InvalidSnoozeDurationError()
    head, duration_text = parts[0], parts[1]

    index = parse_index(head)
    task = state.tasks.get(index)
    if task.kind not in DEADLINE_KINDS:
        raise WrongTaskTypeError()
    duration = parse_duration(duration_text)

    with state.undo.recording(line, state.tasks):
        state.tasks.snooze(index, duration)
    _persist(state)
    return CommandResult(
        action=Action.SNOOZED,
        tasks=[(task, index)],
        extra={"duration": str(duration)},
    )


def cmd_sort(state: AppState, line: str) -> CommandResult:
    ensure_no_args(line)
    with state.undo.recording(line, state.tasks):
        state.tasks.sort()
    _persist(state)
    return CommandResult(action=Action.SORTED)


def cmd_archive(state: AppState, line: str) -> CommandResult:
    """
    archive              -> move completed tasks to the archive
    archive show|view|list -> show the archive
    """
    _, rest = split_command(line)
    if rest:
        if rest.lower() not in ARCHIVE_SHOW_WORDS:
            raise UnrecognizedCommandError(
                "Use 'archive' to archive, or 'archive show' to view it."
            )
        archived = [(t, i) for i, t in enumerate(state.tasks.archive)]
        return CommandResult(action=Action.ARCHIVE_SHOWN, tasks=archived)

    with state.undo.recording(line, state.tasks):
        moved = state.tasks.archive_completed()
    _persist(state)
    return CommandResult(action=Action.ARCHIVED, extra={"moved": moved})


# ---- admin ----


def cmd_undo(state: AppState, line: str) -> CommandResult:
    ensure_no_args(line)
    snapshot = state.undo.undo()
    state.tasks.restore(snapshot)
    logger.info("Undid command=%r", snapshot.command)
    _persist(state)
    return CommandResult(action=Action.UNDONE, message=snapshot.command)


def cmd_help(state: AppState, line: str) -> CommandResult:
    ensure_no_args(line)
    commands = [(spec.usage, spec.help_text, spec.aliases) for spec in registry.specs()]
    return CommandResult(action=Action.HELP, extra={"commands": commands})


def cmd_statistics(state: AppState, line: str) -> CommandResult:
    ensure_no_args(line)
    stats = compute_statistics(state.tasks)
    return CommandResult(action=Action.STATISTICS, extra={"stats": stats})


def cmd_bye(state: AppState, line: str) -> CommandResult:
    ensure_no_args(line)
    return CommandResult(action=Action.EXIT)


registry = CommandRegistry()

registry.register(
    "todo", cmd_todo, help_text="Add a to-do.", aliases=["t"], mutates=True,
    usage="todo <description>",
)
registry.register(
    "event", cmd_event, help_text="Add an event.", aliases=["e"], mutates=True,
    usage="event <description> /at <time>",
)
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline, optionally recurring.", aliases=["dl"],
    mutates=True, usage="deadline <description> /by <date> [/every <frequency> [/until <date>]]",
)
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["l", "li"])
registry.register(
    "done", cmd_done, help_text="Mark a task as done.", aliases=["d", "complete"], mutates=True,
    usage="done <number>",
)
registry.register(
    "find", cmd_find, help_text="Search task descriptions.", aliases=["f", "search"],
    usage="find <text>",
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task, or all of them.", aliases=["del"],
    mutates=True, usage="delete <number>|all",
)
registry.register(
    "snooze", cmd_snooze, help_text="Push a deadline back.", mutates=True,
    usage="snooze <number> /for <duration>",
)
registry.register(
    "sort", cmd_sort, help_text="Sort: unfinished first, then by date.", aliases=["s"],
    mutates=True,
)
registry.register(
    "archive", cmd_archive, help_text="Archive completed tasks, or show the archive.",
    aliases=["arc", "a"], mutates=True, usage="archive [show]",
)
registry.register("undo", cmd_undo, help_text="Undo the last change.", mutates=True)
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h"])
registry.register(
    "statistics", cmd_statistics, help_text="Show completion statistics.",
    aliases=["statistic", "stat", "stats"],
)
registry.register("bye", cmd_bye, help_text="Save and quit.", aliases=["exit", "quit"])
