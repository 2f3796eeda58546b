"""Display context snapshot and identity resolution.

The interpreter never reads live model state. Callers pass an immutable
:class:`DisplayContext` describing what is on screen, and commands that
pair a student with a lesson take the shown side from it while the
other side is typed as the whole argument.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import assert_never

from tutorctl.domain.records import Lesson, Name, Student
from tutorctl.domain.types import DisplayState
from tutorctl.parsing.errors import NothingDisplayedError, UnsupportedInThisStateError
from tutorctl.parsing.values import parse_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayContext:
    """What the user is looking at when a line is submitted."""

    state: DisplayState = DisplayState.NONE
    student: Student | None = None
    lesson: Lesson | None = None

    def require_student(self) -> Student:
        if self.student is None:
            raise NothingDisplayedError("No student is shown")
        return self.student

    def require_lesson(self) -> Lesson:
        if self.lesson is None:
            raise NothingDisplayedError("No lesson is shown")
        return self.lesson


def resolve_student_lesson(command: str, args: str, context: DisplayContext) -> tuple[Name, Name]:
    """Resolve ``(student, lesson)`` names from *context* and *args*.

    * ``STUDENT``: the student is the one shown, *args* names the lesson.
    * ``SCHEDULE``: the lesson is the one shown, *args* names the student.
    * Any other state has no inference rule.

    Raises:
        NothingDisplayedError: The state expects an entity but none is shown.
        UnsupportedInThisStateError: *command* cannot infer anything in this state.
        InvalidNameError: *args* is not a valid name.
    """
    state = context.state
    match state:
        case DisplayState.STUDENT:
            student = context.require_student().name
            lesson = parse_name(args)
        case DisplayState.SCHEDULE:
            lesson = context.require_lesson().name
            student = parse_name(args)
        case DisplayState.NONE | DisplayState.STUDENT_LIST | DisplayState.SCHEDULE_LIST:
            raise UnsupportedInThisStateError(command, str(state))
        case _:
            assert_never(state)
    logger.debug("Resolved %s in %s: student=%s lesson=%s", command, state, student, lesson)
    return student, lesson
