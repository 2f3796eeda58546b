"""Typed value parsers — convert a value substring into a validated value.

Each parser either returns a fully valid value or raises a
:class:`~tutorctl.parsing.errors.ParseError` subclass. No parser returns
a partially valid value.

Date shapes, tried most specific first:

1. ``Y/M/D`` — Y has 2-4 digits; years below 1000 get 2000 added.
2. ``M/D`` — year defaults to the current year.
3. ``D`` — month and year default to the current month and year.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, time
from typing import Any

from tutorctl.domain.records import Name, is_valid_name
from tutorctl.domain.task import DONE_MARKER, NOT_DONE_MARKER, Task, is_valid_description
from tutorctl.domain.types import DayOfWeek, Subject
from tutorctl.parsing.errors import (
    BlankValueError,
    InvalidDateError,
    InvalidDayOfWeekError,
    InvalidEncodingError,
    InvalidNameError,
    InvalidNumberError,
    InvalidSubjectError,
    InvalidTimeError,
    OutOfRangeError,
)

_YEAR_MONTH_DAY = re.compile(r"(\d{2,4})/(\d{1,2})/(\d{1,2})", re.ASCII)
_MONTH_DAY = re.compile(r"(\d{1,2})/(\d{1,2})", re.ASCII)
_DAY = re.compile(r"(\d{1,2})", re.ASCII)
_HOUR_MINUTE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

TWO_DIGIT_YEAR_PIVOT = 1000
TWO_DIGIT_YEAR_OFFSET = 2000

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
TASK_CONSTRAINTS = "Tasks can take any values, and it should not be blank"
ENCODING_CONSTRAINTS = (
    'Incorrect task encoding! The encoded task should have a "+" or "-" '
    "at the beginning of the string"
)


def parse_num(text: str, min_value: int | None = None, max_value: int | None = None) -> int:
    """Parse a 32-bit decimal integer, optionally within inclusive bounds.

    Raises:
        InvalidNumberError: If *text* is not a decimal integer or does not
            fit in 32 bits.
        OutOfRangeError: If the number is outside ``[min_value, max_value]``.
    """
    if _INTEGER.fullmatch(text) is None:
        raise InvalidNumberError(f"{text} is not a number", value=text)
    num = int(text)
    if not INT_MIN <= num <= INT_MAX:
        raise InvalidNumberError(f"{text} is not a number", value=text)
    if (min_value is not None and num < min_value) or (max_value is not None and num > max_value):
        raise OutOfRangeError(text, min_value, max_value)
    return num


def _build_date(text: str, year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(f"{text} is not a valid date ({exc})", value=text) from exc


def parse_date(text: str, *, today: date | None = None) -> date:
    """Parse a ``D``, ``M/D`` or ``Y/M/D`` date.

    Args:
        text: The value substring.
        today: Reference date for defaulted components (defaults to today).

    Raises:
        InvalidDateError: If *text* has none of the three shapes, or names a
            day that does not exist in that month.
        OutOfRangeError: If month or day is outside 1-12 or 1-31.
    """
    if match := _YEAR_MONTH_DAY.fullmatch(text):
        year = parse_num(match.group(1), 0, 9999)
        if year < TWO_DIGIT_YEAR_PIVOT:
            year += TWO_DIGIT_YEAR_OFFSET
        month = parse_num(match.group(2), 1, 12)
        day = parse_num(match.group(3), 1, 31)
        return _build_date(text, year, month, day)

    now = today or date.today()
    if match := _MONTH_DAY.fullmatch(text):
        month = parse_num(match.group(1), 1, 12)
        day = parse_num(match.group(2), 1, 31)
        return _build_date(text, now.year, month, day)
    if match := _DAY.fullmatch(text):
        day = parse_num(match.group(1), 1, 31)
        return _build_date(text, now.year, now.month, day)
    raise InvalidDateError(f"{text} is not a valid date", value=text)


def parse_time(text: str) -> time:
    """Parse a 24-hour ``H:MM`` time."""
    match = _HOUR_MINUTE.fullmatch(text)
    if match is None:
        raise InvalidTimeError(f"{text} is not a valid time", value=text)
    hour = int(match.group(1))
    minute = int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeError(f"{text} is not a valid time", value=text)
    return time(hour, minute)


def parse_day_of_week(text: str) -> DayOfWeek:
    try:
        return DayOfWeek[text.upper()]
    except KeyError as exc:
        raise InvalidDayOfWeekError(f"{text} is not a valid day of week", value=text) from exc


def parse_str(text: str) -> str:
    return text


def parse_subject(text: str) -> Subject:
    """Parse a subject code case-insensitively into its canonical form."""
    try:
        return Subject(text.upper())
    except ValueError as exc:
        raise InvalidSubjectError(f"{text} is not a valid subject", value=text) from exc


def parse_task(text: str) -> Task:
    """Decode a ``+description`` (done) or ``-description`` (not done) task.

    Raises:
        InvalidEncodingError: If the leading ``+``/``-`` marker is missing.
        BlankValueError: If the description is empty or starts with whitespace.
    """
    marker, description = text[:1], text[1:]
    if marker not in (DONE_MARKER, NOT_DONE_MARKER):
        raise InvalidEncodingError(ENCODING_CONSTRAINTS, value=text)
    if not is_valid_description(description):
        raise BlankValueError(TASK_CONSTRAINTS, value=text)
    return Task(description, done=marker == DONE_MARKER)


def parse_name(text: str) -> Name:
    """Parse a student or lesson name; surrounding whitespace is ignored."""
    trimmed = text.strip()
    if not is_valid_name(trimmed):
        raise InvalidNameError(NAME_CONSTRAINTS, value=text)
    return Name(trimmed)


VALUE_PARSERS: dict[str, Callable[..., Any]] = {
    "date": parse_date,
    "time": parse_time,
    "num": parse_num,
    "day": parse_day_of_week,
    "str": parse_str,
    "subject": parse_subject,
    "task": parse_task,
    "name": parse_name,
}


def get_parser(kind: str) -> Callable[..., Any]:
    """Look up the value parser registered for *kind*."""
    try:
        return VALUE_PARSERS[kind]
    except KeyError:
        msg = f"Unknown value kind: {kind!r} (expected one of {', '.join(VALUE_PARSERS)})"
        raise ValueError(msg) from None


def parse_value(kind: str, text: str, **options: Any) -> Any:
    """Parse *text* as a value of *kind*.

    *options* are forwarded to the parser, e.g. ``min_value``/``max_value``
    for ``num`` or ``today`` for ``date``.
    """
    return get_parser(kind)(text, **options)
