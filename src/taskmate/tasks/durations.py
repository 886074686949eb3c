# src/taskmate/tasks/durations.py

"""
Parsing of the time expressions users type.

- durations ("2 days", "1 week") for snoozing,
- free-form date/times ("2026-10-20 18:00", "friday 5pm") for deadlines,
- recurrence frequencies ("weekly") for recurring deadlines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ..errors import InvalidDateFormatError, InvalidDurationFormatError, InvalidFrequencyError
from .task_models import Frequency

DURATION_RE = re.compile(
    r"^\s*(\d+)\s*(minute|hour|day|week|month|year)s?\s*$",
    re.IGNORECASE,
)

FREQUENCY_ALIASES: dict[str, Frequency] = {
    "daily": Frequency.DAILY,
    "day": Frequency.DAILY,
    "weekly": Frequency.WEEKLY,
    "week": Frequency.WEEKLY,
    "monthly": Frequency.MONTHLY,
    "month": Frequency.MONTHLY,
    "yearly": Frequency.YEARLY,
    "year": Frequency.YEARLY,
    "annually": Frequency.YEARLY,
}


class DurationUnit(StrEnum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True, slots=True)
class Duration:
    count: int
    unit: DurationUnit

    def as_relativedelta(self) -> relativedelta:
        return relativedelta(**{f"{self.unit.value}s": self.count})

    def shift(self, when: datetime) -> datetime:
        """Advance a timestamp; months and years follow the calendar."""
        return when + self.as_relativedelta()

    def __str__(self) -> str:
        suffix = "" if self.count == 1 else "s"
        return f"{self.count} {self.unit.value}{suffix}"


def parse_duration(text: str) -> Duration:
    m = DURATION_RE.match(text or "")
    if not m:
        raise InvalidDurationFormatError(f"I can't read '{(text or '').strip()}' as a duration.")
    count = int(m.group(1))
    if count <= 0:
        raise InvalidDurationFormatError("A duration must be at least 1.")
    return Duration(count=count, unit=DurationUnit(m.group(2).lower()))


def parse_datetime(text: str, now: datetime | None = None) -> datetime:
    """
    Parse a user-supplied date/time.

    A date without a time means the end of that day (23:59).
    """
    raw = (text or "").strip()
    if not raw:
        raise InvalidDateFormatError()
    now = now or datetime.now()
    default = now.replace(hour=23, minute=59, second=0, microsecond=0)
    try:
        parsed = date_parser.parse(raw, default=default)
    except (ValueError, OverflowError) as e:
        raise InvalidDateFormatError(f"I can't read '{raw}' as a date.") from e
    if parsed.tzinfo is not None:
        # all timestamps are naive local time
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_frequency(text: str) -> Frequency:
    key = (text or "").strip().lower()
    freq = FREQUENCY_ALIASES.get(key)
    if freq is None:
        raise InvalidFrequencyError()
    return freq
