# tests/test_commands.py

from __future__ import annotations

import pytest

from taskmate.cli.commands import (
    Action,
    CommandRegistry,
    CommandResult,
    parse_index,
    split_command,
)
from taskmate.cli.handlers import registry
from taskmate.errors import (
    ErrorKind,
    InvalidIndexFormatError,
    MissingIndexError,
    TooManyIndicesError,
    UnrecognizedCommandError,
)


def test_command_registry_routes_by_name_and_alias(state) -> None:
    reg = CommandRegistry()
    seen: list[str] = []

    def handler(state, line):
        seen.append(line)
        return CommandResult(action=Action.LISTED)

    reg.register("show", handler, "show things", aliases=["sh"])

    assert reg.dispatch(state, "show").action is Action.LISTED
    assert reg.dispatch(state, "SH extra words").action is Action.LISTED
    assert seen == ["show", "SH extra words"]


def test_command_registry_unknown_command(state) -> None:
    reg = CommandRegistry()
    result = reg.dispatch(state, "nope")
    assert result.action is Action.ERROR
    assert result.error is ErrorKind.UNRECOGNIZED_COMMAND
    assert not result.ok

    assert reg.dispatch(state, "").error is ErrorKind.UNRECOGNIZED_COMMAND
    with pytest.raises(UnrecognizedCommandError):
        reg.resolve("   ")


def test_command_registry_rejects_shared_alias() -> None:
    reg = CommandRegistry()
    reg.register("delete", lambda s, line: CommandResult(Action.DELETED), "d", aliases=["del"])
    with pytest.raises(ValueError):
        reg.register("deliver", lambda s, line: CommandResult(Action.ADDED), "d", aliases=["DEL"])


def test_handler_errors_become_error_results(state) -> None:
    reg = CommandRegistry()

    def boom(state, line):
        raise MissingIndexError()

    reg.register("boom", boom, "fails")
    result = reg.dispatch(state, "boom")
    assert result.error is ErrorKind.MISSING_INDEX
    assert result.message == MissingIndexError.default_message


@pytest.mark.parametrize(
    ("word", "name"),
    [
        ("t", "todo"),
        ("E", "event"),
        ("dl", "deadline"),
        ("li", "list"),
        ("complete", "done"),
        ("search", "find"),
        ("del", "delete"),
        ("snooze", "snooze"),
        ("s", "sort"),
        ("arc", "archive"),
        ("a", "archive"),
        ("undo", "undo"),
        ("h", "help"),
        ("stats", "statistics"),
        ("statistic", "statistics"),
        ("QUIT", "bye"),
        ("exit", "bye"),
    ],
)
def test_builtin_aliases(word: str, name: str) -> None:
    assert registry.resolve(f"{word} something").name == name


def test_builtin_aliases_are_unique() -> None:
    seen: set[str] = set()
    for spec in registry.specs():
        for alias in spec.aliases:
            assert alias not in seen
            seen.add(alias)


def test_split_command() -> None:
    assert split_command("  TODO   buy milk  ") == ("todo", "buy milk")
    assert split_command("list") == ("list", "")
    assert split_command("") == ("", "")


def test_parse_index() -> None:
    assert parse_index("done 1") == 0
    assert parse_index("done   12 ") == 11
    # bounds are checked by the task list
    assert parse_index("done 0") == -1


@pytest.mark.parametrize(
    ("line", "error"),
    [
        ("done", MissingIndexError),
        ("done 1 2", TooManyIndicesError),
        ("done x", InvalidIndexFormatError),
        ("done 1.5", InvalidIndexFormatError),
    ],
)
def test_parse_index_errors(line: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        parse_index(line)
