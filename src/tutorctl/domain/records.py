"""Student and lesson records as seen by the interpreter.

Only the identity fields matter here; the record store owns everything else.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from tutorctl.domain.task import Task
from tutorctl.domain.types import Subject

# Alphanumeric words separated by single or repeated spaces.
_NAME_PATTERN = re.compile(r"[^\W_]+(?: +[^\W_]+)*", re.ASCII)


def is_valid_name(text: str) -> bool:
    """Check whether *text* is a valid student or lesson name."""
    return _NAME_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True)
class Name:
    """Identity of a student or lesson."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_name(self.value):
            msg = f"Invalid name: {self.value!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Student:
    name: Name
    subjects: frozenset[Subject] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Lesson:
    name: Name
    subject: Subject | None = None
    tasks: tuple[Task, ...] = ()
