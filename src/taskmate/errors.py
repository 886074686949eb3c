# src/taskmate/errors.py

"""
Error taxonomy.

Every failure a command can run into is a CommandError subclass carrying an
ErrorKind. The dispatcher catches CommandError at its boundary and turns it
into an error result, so none of these ever ends the session.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    # Input errors
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    MISSING_INDEX = "missing_index"
    TOO_MANY_INDICES = "too_many_indices"
    INVALID_INDEX_FORMAT = "invalid_index_format"
    INVALID_SNOOZE_DURATION = "invalid_snooze_duration"
    INVALID_DURATION_FORMAT = "invalid_duration_format"
    MISSING_DESCRIPTION = "missing_description"
    MISSING_TIME = "missing_time"
    INVALID_DATE_FORMAT = "invalid_date_format"
    INVALID_FREQUENCY = "invalid_frequency"
    UNEXPECTED_ARGUMENTS = "unexpected_arguments"

    # State errors
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    ALREADY_COMPLETED = "already_completed"
    EMPTY_SORT = "empty_sort"
    WRONG_TASK_TYPE = "wrong_task_type"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    NOTHING_TO_UNDO = "nothing_to_undo"

    # I/O errors
    PERSISTENCE = "persistence"
    LOAD = "load"
    LOAD_AND_SAVE = "load_and_save"


class CommandError(Exception):
    """Base class for every recoverable command failure."""

    kind: ErrorKind = ErrorKind.UNRECOGNIZED_COMMAND
    default_message: str = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class UnrecognizedCommandError(CommandError):
    kind = ErrorKind.UNRECOGNIZED_COMMAND
    default_message = "I don't recognise that command. Type 'help' to see what I can do."


class MissingIndexError(CommandError):
    kind = ErrorKind.MISSING_INDEX
    default_message = "Please tell me which task you mean (e.g. 'done 2')."


class TooManyIndicesError(CommandError):
    kind = ErrorKind.TOO_MANY_INDICES
    default_message = "Please give me exactly one task number."


class InvalidIndexFormatError(CommandError):
    kind = ErrorKind.INVALID_INDEX_FORMAT
    default_message = "The task number must be a whole number."


class InvalidSnoozeDurationError(CommandError):
    kind = ErrorKind.INVALID_SNOOZE_DURATION
    default_message = "Tell me how long to snooze for, e.g. 'snooze 2 /for 3 days'."


class InvalidDurationFormatError(CommandError):
    kind = ErrorKind.INVALID_DURATION_FORMAT
    default_message = (
        "I can't read that duration. Use a number and a unit, e.g. '2 days' or '1 week'."
    )


class MissingDescriptionError(CommandError):
    kind = ErrorKind.MISSING_DESCRIPTION
    default_message = "The description of a task cannot be empty."


class MissingTimeError(CommandError):
    kind = ErrorKind.MISSING_TIME
    default_message = "This kind of task needs a time ('/at' for events, '/by' for deadlines)."


class InvalidDateFormatError(CommandError):
    kind = ErrorKind.INVALID_DATE_FORMAT
    default_message = "I can't read that date. Try something like '2026-10-20 18:00'."


class InvalidFrequencyError(CommandError):
    kind = ErrorKind.INVALID_FREQUENCY
    default_message = "Recurring deadlines repeat daily, weekly, monthly or yearly."


class UnexpectedArgumentsError(CommandError):
    kind = ErrorKind.UNEXPECTED_ARGUMENTS
    default_message = "That command doesn't take any arguments."


class IndexOutOfBoundsError(CommandError):
    kind = ErrorKind.INDEX_OUT_OF_BOUNDS
    default_message = "You're referring to a task which does not exist!"


class AlreadyCompletedError(CommandError):
    kind = ErrorKind.ALREADY_COMPLETED
    default_message = "You have already completed this task!"


class EmptySortError(CommandError):
    kind = ErrorKind.EMPTY_SORT
    default_message = "There is nothing to sort."


class WrongTaskTypeError(CommandError):
    kind = ErrorKind.WRONG_TASK_TYPE
    default_message = "Only deadlines can be snoozed."


class UnsupportedOperationError(CommandError):
    kind = ErrorKind.UNSUPPORTED_OPERATION
    default_message = "This task does not support that operation."


class NothingToUndoError(CommandError):
    kind = ErrorKind.NOTHING_TO_UNDO
    default_message = "There is nothing to undo."


class PersistenceError(CommandError):
    kind = ErrorKind.PERSISTENCE
    default_message = "I couldn't save your tasks to disk."


class LoadError(CommandError):
    kind = ErrorKind.LOAD
    default_message = "I couldn't load your saved tasks. Starting with an empty list."


class LoadAndSaveError(LoadError):
    kind = ErrorKind.LOAD_AND_SAVE
    default_message = (
        "I couldn't load your saved tasks, and I won't be able to save new ones either."
    )
