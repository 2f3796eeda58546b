"""Command: decode an encoded task."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tutorctl.commands._base import TutorCommand

if TYPE_CHECKING:
    from tutorctl.commands._context import AppContext


@click.command(
    cls=TutorCommand,
    examples="""\
  tutorctl task "+Read chapter 3"
  tutorctl task --mark -- "-Past paper 2019"
  tutorctl -q task --unmark "+Essay draft" """,
)
@click.argument("encoded", type=click.UNPROCESSED)
@click.option("--mark/--unmark", "done", default=None, help="Mark the task done or not done.")
@click.pass_obj
def task(app: AppContext, encoded: str, done: bool | None) -> None:
    """Decode ENCODED (+done or -not done) and print its encoded form."""
    from tutorctl.services.interpret import InterpretService

    app.emit(InterpretService().decode_task(encoded, done=done))
