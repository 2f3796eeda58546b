"""Rich/JSON output helpers.

Adapts ServiceResult to the requested output mode: JSON for machines,
a single bare line for ``--quiet``, Rich-rendered text otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tutorctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from tutorctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        no_color=settings.no_color,
        width=settings.width,
    )
