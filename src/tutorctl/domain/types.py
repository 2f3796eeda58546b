"""Display states, subjects, and days of the week.

These enums define what the interpreter can be looking at and the
controlled vocabularies accepted by the value parsers.
"""

from __future__ import annotations

from enum import StrEnum


class DisplayState(StrEnum):
    """What kind of entity is currently shown to the user."""

    NONE = "none"
    STUDENT = "student"
    SCHEDULE = "schedule"
    STUDENT_LIST = "student_list"
    SCHEDULE_LIST = "schedule_list"


class Subject(StrEnum):
    """Canonical subject codes."""

    BIOLOGY = "BIOLOGY"
    CHEMISTRY = "CHEMISTRY"
    ENGLISH = "ENGLISH"
    MATHEMATICS = "MATHEMATICS"
    PHYSICS = "PHYSICS"


class DayOfWeek(StrEnum):
    """Days of the week, Monday first."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"
