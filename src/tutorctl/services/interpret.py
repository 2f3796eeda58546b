"""InterpretService — run the argument interpreter and report a ServiceResult.

Each operation parses one submitted line to completion. ParseErrors are
converted to ServiceError payloads carrying the error code, the message
(safe to show verbatim), and the flag, value, or state involved.
"""

from __future__ import annotations

import logging
from datetime import date, time
from enum import Enum
from typing import Any

from tutorctl.domain.records import Name
from tutorctl.domain.task import Task
from tutorctl.parsing.context import DisplayContext
from tutorctl.parsing.errors import InvalidFlagError, ParseError
from tutorctl.parsing.fields import parse_field
from tutorctl.parsing.flags import FlagSpec
from tutorctl.parsing.link import parse_link
from tutorctl.parsing.values import get_parser, parse_task
from tutorctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def serialize_value(value: Any) -> Any:
    """Render a typed value in its canonical input form."""
    if isinstance(value, Task):
        return value.encode()
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (Enum, Name)):
        return str(value)
    return value


def _failure(op: str, exc: ParseError) -> ServiceResult:
    logger.debug("%s failed: %s (%s)", op, exc, exc.code)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail()),
    )


class InterpretService:
    """Interpret argument lines against an optional display context.

    Usage::

        service = InterpretService(DisplayContext(DisplayState.STUDENT, student=alex))
        result = service.link("Bio101")
    """

    def __init__(self, context: DisplayContext | None = None) -> None:
        self._context = context

    def parse_field(
        self,
        kind: str,
        line: str,
        flag: str,
        *,
        optional: bool = False,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> ServiceResult:
        """Parse one flag of value *kind* from *line*."""
        op = "parse_field"
        options: dict[str, Any] = {}
        if min_value is not None:
            options["min_value"] = min_value
        if max_value is not None:
            options["max_value"] = max_value
        try:
            spec = FlagSpec(flag)
        except ValueError:
            return _failure(op, InvalidFlagError(flag))
        try:
            value = parse_field(spec, line, get_parser(kind), optional, **options)
        except ParseError as exc:
            return _failure(op, exc)

        warnings: list[str] = []
        if value is None:
            warnings.append(f"Flag -{flag} absent or invalid; treated as not supplied")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "flag": flag,
                "kind": kind,
                "supplied": value is not None,
                "value": serialize_value(value),
            },
            warnings=warnings,
        )

    def link(self, args: str) -> ServiceResult:
        """Build a link request from *args*, inferring from the context if set."""
        op = "link"
        try:
            request = parse_link(args, self._context)
        except ParseError as exc:
            return _failure(op, exc)
        data: dict[str, Any] = request.to_dict()
        data["mode"] = "flags" if self._context is None else str(self._context.state)
        return ServiceResult(ok=True, op=op, data=data)

    def decode_task(self, encoded: str, *, done: bool | None = None) -> ServiceResult:
        """Decode an encoded task, optionally marking or unmarking it."""
        op = "decode_task"
        try:
            task = parse_task(encoded)
        except ParseError as exc:
            return _failure(op, exc)
        if done is True:
            task = task.mark()
        elif done is False:
            task = task.unmark()
        return ServiceResult(
            ok=True,
            op=op,
            data={"description": task.description, "done": task.done, "encoded": task.encode()},
        )
