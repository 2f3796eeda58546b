"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, display context construction,
and result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tutorctl.domain.records import Lesson, Student
from tutorctl.domain.types import DisplayState
from tutorctl.output.formatters import OutputSettings, format_result
from tutorctl.parsing.context import DisplayContext
from tutorctl.parsing.errors import ParseError
from tutorctl.parsing.values import parse_name

if TYPE_CHECKING:
    from tutorctl.config.settings import TutorSettings
    from tutorctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TutorSettings) -> None:
        self.settings = settings

        from tutorctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def display_context(
        self,
        state: DisplayState | None = None,
        student: str | None = None,
        lesson: str | None = None,
    ) -> DisplayContext | None:
        """Build the display snapshot for a command, or None for flag-only mode.

        Explicit arguments win over the ``[context]`` config section. A shown
        student implies the STUDENT state and a shown lesson implies SCHEDULE
        unless *state* says otherwise.
        """
        if state is None and student is None and lesson is None:
            configured = self.settings.context
            state, student, lesson = configured.state, configured.student, configured.lesson
            if state is DisplayState.NONE and student is None and lesson is None:
                return None

        try:
            shown_student = Student(parse_name(student)) if student is not None else None
            shown_lesson = Lesson(parse_name(lesson)) if lesson is not None else None
        except ParseError as exc:
            raise click.BadParameter(exc.message) from exc

        if state is None:
            if shown_student is not None:
                state = DisplayState.STUDENT
            elif shown_lesson is not None:
                state = DisplayState.SCHEDULE
            else:
                state = DisplayState.NONE
        return DisplayContext(state=state, student=shown_student, lesson=shown_lesson)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr outside JSON mode.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            no_color=self.settings.output.no_color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
