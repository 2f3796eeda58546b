"""Subcommand modules for tutorctl.

Provides register_commands() which uses deferred imports to keep
``tutorctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tutorctl.commands.link import link
    from tutorctl.commands.parse import parse
    from tutorctl.commands.task import task

    cli.add_command(parse)
    cli.add_command(link)
    cli.add_command(task)
