"""Link command builder — associate a student with a lesson.

Two modes:

* With a display context, one side comes from what is shown and the
  whole argument names the other side (``link Bio101`` while viewing Alex).
* Without one, both sides are required flags
  (``link -student Alex -lesson Bio101``), in any order.
"""

from __future__ import annotations

from dataclasses import dataclass

from tutorctl.domain.records import Name
from tutorctl.parsing.context import DisplayContext, resolve_student_lesson
from tutorctl.parsing.fields import parse_field
from tutorctl.parsing.flags import flag_specs
from tutorctl.parsing.values import parse_name

STUDENT_FLAG, LESSON_FLAG = flag_specs(["student", "lesson"])


@dataclass(frozen=True)
class LinkRequest:
    """A fully built request to link *student* to *lesson*."""

    lesson: Name
    student: Name

    def to_dict(self) -> dict[str, str]:
        return {"student": str(self.student), "lesson": str(self.lesson)}


def parse_link(args: str, context: DisplayContext | None = None) -> LinkRequest:
    """Build a :class:`LinkRequest` from *args*, inferring from *context* when given."""
    if context is None:
        student = parse_field(STUDENT_FLAG, args, parse_name)
        lesson = parse_field(LESSON_FLAG, args, parse_name)
    else:
        student, lesson = resolve_student_lesson("Link", args, context)
    return LinkRequest(lesson=lesson, student=student)
