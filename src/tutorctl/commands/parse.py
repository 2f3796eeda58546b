"""Command: parse one flag from an argument line as a typed value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tutorctl.commands._base import TutorCommand, join_line
from tutorctl.parsing.values import VALUE_PARSERS

if TYPE_CHECKING:
    from tutorctl.commands._context import AppContext


@click.command(
    cls=TutorCommand,
    examples="""\
  tutorctl parse date date -- -date 5/10
  tutorctl parse time start -- -start 14:30 -end 16:30
  tutorctl parse num count --min 1 --max 5 -- -count 3
  tutorctl parse subject subject --optional -- -subject bio""",
)
@click.argument("kind", type=click.Choice(sorted(VALUE_PARSERS)))
@click.argument("flag")
@click.argument("line", nargs=-1, type=click.UNPROCESSED)
@click.option("--optional", is_flag=True, help="Treat a missing or invalid flag as not supplied.")
@click.option("--min", "min_value", type=int, default=None, help="Inclusive lower bound.")
@click.option("--max", "max_value", type=int, default=None, help="Inclusive upper bound.")
@click.pass_obj
def parse(
    app: AppContext,
    kind: str,
    flag: str,
    line: tuple[str, ...],
    optional: bool,
    min_value: int | None,
    max_value: int | None,
) -> None:
    """Extract FLAG from LINE and parse its value as KIND."""
    from tutorctl.services.interpret import InterpretService

    if (min_value is not None or max_value is not None) and kind != "num":
        raise click.UsageError("--min/--max only apply to the num kind.")

    app.emit(
        InterpretService().parse_field(
            kind,
            join_line(line),
            flag,
            optional=optional,
            min_value=min_value,
            max_value=max_value,
        )
    )
