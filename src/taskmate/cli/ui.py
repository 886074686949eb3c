# src/taskmate/cli/ui.py

"""
Text rendering of command results.

Handlers never build user-facing strings for task data; they return a
CommandResult and this module decides the wording.
"""

from __future__ import annotations

from datetime import datetime
from typing import cast

from ..tasks.statistics import TaskStatistics
from ..tasks.task_models import DEADLINE_KINDS, Deadline, Event, RecurringDeadline, Task, TaskKind
from .commands import Action, CommandResult

DONE_GLYPH = "✓"
NOT_DONE_GLYPH = "✘"
TIME_FORMAT = "%d %b %Y, %H:%M"


def _fmt_time(value: datetime) -> str:
    return value.strftime(TIME_FORMAT)


def format_task(task: Task) -> str:
    glyph = DONE_GLYPH if task.is_completed else NOT_DONE_GLYPH
    text = f"[{task.type_tag}][{glyph}] {task.description}"

    if task.kind is TaskKind.EVENT:
        text += f" (at: {cast(Event, task).time_frame})"
    elif task.kind in DEADLINE_KINDS:
        deadline = cast(Deadline, task)
        text += f" (by: {_fmt_time(deadline.due_at)}"
        if task.kind is TaskKind.RECURRING_DEADLINE:
            recurring = cast(RecurringDeadline, task)
            text += f", repeats {recurring.frequency.value}"
            if recurring.repeat_until is not None:
                text += f" until {_fmt_time(recurring.repeat_until)}"
            if not task.is_completed:
                nxt = recurring.next_due_at()
                if nxt is not None:
                    text += f", next: {_fmt_time(nxt)}"
        text += ")"
        if task.is_completed:
            text += " (on time)" if deadline.completed_on_time else " (late)"
    return text


def format_numbered(pairs: list[tuple[Task, int]]) -> str:
    return "\n".join(f"{i + 1}. {format_task(t)}" for t, i in pairs)


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def _format_stats(stats: TaskStatistics) -> str:
    lines = [
        "Statistics:",
        f"  Active tasks: {stats.active} ({stats.completed} completed)",
        f"  Archived tasks: {stats.archived}",
        f"  Completed in the last 7 days: {stats.completed_recently}",
    ]
    rate = stats.on_time_rate
    if rate is None:
        lines.append("  Deadlines met on time: no completed deadlines yet")
    else:
        lines.append(
            f"  Deadlines met on time: {stats.deadlines_on_time}/{stats.deadlines_completed}"
            f" ({rate:.0%})"
        )
    return "\n".join(lines)


def _format_help(commands: list[tuple[str, str, tuple[str, ...]]]) -> str:
    lines = ["Available commands:"]
    for usage, help_text, aliases in commands:
        alias_str = f" (aliases: {', '.join(aliases[1:])})" if len(aliases) > 1 else ""
        lines.append(f"  {usage} - {help_text}{alias_str}")
    return "\n".join(lines)


def render(result: CommandResult) -> str:
    action = result.action

    if action is Action.ERROR:
        return result.message

    if action is Action.ADDED:
        task, _ = result.tasks[0]
        total = result.extra.get("total", 0)
        return (
            f"Got it. I've added this task:\n  {format_task(task)}\n"
            f"Now you have {_plural(total, 'task')} in the list."
        )

    if action is Action.LISTED:
        if not result.tasks:
            return "You have no tasks in your list."
        return "Here are the tasks in your list:\n" + format_numbered(result.tasks)

    if action is Action.COMPLETED:
        task, _ = result.tasks[0]
        return f"Nice! I've marked this task as done:\n  {format_task(task)}"

    if action is Action.FOUND:
        if not result.tasks:
            return "No matching tasks found."
        return "Here are the matching tasks in your list:\n" + format_numbered(result.tasks)

    if action is Action.DELETED:
        task, _ = result.tasks[0]
        total = result.extra.get("total", 0)
        return (
            f"Noted. I've removed this task:\n  {format_task(task)}\n"
            f"Now you have {_plural(total, 'task')} in the list."
        )

    if action is Action.DELETED_ALL:
        return f"Noted. I've removed all {_plural(result.extra.get('removed', 0), 'task')}."

    if action is Action.SNOOZED:
        task, _ = result.tasks[0]
        return f"Snoozed for {result.extra.get('duration', '')}:\n  {format_task(task)}"

    if action is Action.SORTED:
        return "Your tasks are sorted: unfinished first, then by date."

    if action is Action.ARCHIVED:
        moved = result.extra.get("moved", 0)
        if not moved:
            return "There were no completed tasks to archive."
        return f"Archived {_plural(moved, 'completed task')}."

    if action is Action.ARCHIVE_SHOWN:
        if not result.tasks:
            return "Your archive is empty."
        return "Here are your archived tasks:\n" + format_numbered(result.tasks)

    if action is Action.UNDONE:
        return f"Undid: {result.message}"

    if action is Action.HELP:
        return _format_help(result.extra.get("commands", []))

    if action is Action.STATISTICS:
        return _format_stats(result.extra["stats"])

    if action is Action.EXIT:
        return "Bye. Hope to see you again soon!"

    return result.message


class TextPresenter:
    """Presenter port implementation for plain-text connectors."""

    def render(self, result: CommandResult) -> str:
        return render(result)
