"""Task value — a description paired with a done/not-done toggle.

Tasks are stored and typed in an encoded form: a leading ``+`` marks the
task as done, a leading ``-`` marks it as not done, and the rest of the
string is the description.

INVARIANT: ``Task.encode()`` reproduces the exact string a task was
decoded from.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

DONE_MARKER = "+"
NOT_DONE_MARKER = "-"

# The first character must not be whitespace, otherwise " " is a valid task.
_DESCRIPTION_PATTERN = re.compile(r"[^\s].*")


def is_valid_description(text: str) -> bool:
    """Check whether *text* is a non-blank task description."""
    return _DESCRIPTION_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True)
class Task:
    """A lesson task.

    Two tasks are equal when both description and status match;
    :meth:`is_same_task` is the weaker, description-only comparison.
    """

    description: str
    done: bool = False

    def __post_init__(self) -> None:
        if not is_valid_description(self.description):
            msg = f"Task description must not be blank: {self.description!r}"
            raise ValueError(msg)

    def encode(self) -> str:
        marker = DONE_MARKER if self.done else NOT_DONE_MARKER
        return f"{marker}{self.description}"

    def mark(self) -> Task:
        return replace(self, done=True)

    def unmark(self) -> Task:
        return replace(self, done=False)

    def with_description(self, description: str) -> Task:
        return replace(self, description=description)

    def is_same_task(self, other: Task | None) -> bool:
        return other is not None and other.description == self.description

    def __str__(self) -> str:
        return self.encode()
