"""Custom Click base class with --examples support.

Commands here take a raw argument line that itself contains ``-flag``
tokens, so the command class also passes unknown options through as
arguments instead of rejecting them.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TutorCommand(click.Command):
    """Click Command that supports ``--examples`` and keeps raw ``-flag`` tokens."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = kwargs.setdefault("context_settings", {})
        context_settings.setdefault("ignore_unknown_options", True)
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def join_line(tokens: tuple[str, ...]) -> str:
    """Rejoin shell-split tokens into the raw argument line."""
    return " ".join(tokens)
