"""Command: link a student to a lesson."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tutorctl.commands._base import TutorCommand, join_line
from tutorctl.domain.types import DisplayState

if TYPE_CHECKING:
    from tutorctl.commands._context import AppContext


@click.command(
    cls=TutorCommand,
    examples="""\
  tutorctl link -- -student Alex -lesson Bio101
  tutorctl link --viewing-student Alex Bio101
  tutorctl link --viewing-lesson Bio101 Alex
  tutorctl link --state student --viewing-student "Alex Yeoh" Bio101""",
)
@click.argument("line", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--state",
    type=click.Choice([str(s) for s in DisplayState]),
    default=None,
    help="Display state to interpret LINE in.",
)
@click.option("--viewing-student", default=None, help="Name of the student currently shown.")
@click.option("--viewing-lesson", default=None, help="Name of the lesson currently shown.")
@click.pass_obj
def link(
    app: AppContext,
    line: tuple[str, ...],
    state: str | None,
    viewing_student: str | None,
    viewing_lesson: str | None,
) -> None:
    """Link a student to a lesson.

    Without a display context both sides are required flags. While a
    student (or lesson) is shown, LINE names the other side.
    """
    from tutorctl.services.interpret import InterpretService

    context = app.display_context(
        DisplayState(state) if state is not None else None,
        viewing_student,
        viewing_lesson,
    )
    app.emit(InterpretService(context).link(join_line(line)))
