"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from tutorctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tutorctl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=no_color, width=width)
    if result.ok:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the bare value when there is one."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "encoded" in result.data:
        return str(result.data["encoded"])
    if result.data.get("value") is not None:
        return str(result.data["value"])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="tutor.ok"), Text(f"  {result.op}", style="tutor.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="tutor.key"), Text(str(value), style=style), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tutor.error")
    console.print(label, Text(f"  {result.op}", style="tutor.op"), "—", msg)
    if err:
        _field(console, "code", err.code)
        if verbose:
            for k, v in err.detail.items():
                _field(console, k, v)


def _render_link(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "student", result.data["student"], "tutor.student")
    _field(console, "lesson", result.data["lesson"], "tutor.lesson")
    _field(console, "mode", result.data.get("mode", ""))


def _render_task(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    done = bool(result.data["done"])
    _field(console, "encoded", result.data["encoded"])
    _field(console, "description", result.data["description"])
    _field(console, "done", "yes" if done else "no", "tutor.done" if done else "tutor.pending")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "parse_field": _render_generic,
    "link": _render_link,
    "decode_task": _render_task,
}
