"""Field parsing façade — flag extraction plus a typed value parser.

Required fields propagate every failure, tagged with the flag name.
Optional fields are lenient: a missing flag and a flag whose value does
not parse both yield ``None``. A typo in an optional flag's value is
therefore indistinguishable from omitting the flag. This is an accepted
usability trade-off; the swallowed error is logged at DEBUG level.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal, TypeVar, overload

from tutorctl.parsing.errors import ParseError
from tutorctl.parsing.flags import FlagSpec, extract_flag
from tutorctl.parsing.values import get_parser

logger = logging.getLogger(__name__)

T = TypeVar("T")


@overload
def parse_field(
    flag: str | FlagSpec,
    line: str,
    parser: Callable[..., T],
    optional: Literal[False] = ...,
    **options: Any,
) -> T: ...


@overload
def parse_field(
    flag: str | FlagSpec,
    line: str,
    parser: Callable[..., T] | str,
    optional: bool = ...,
    **options: Any,
) -> T | None: ...


def parse_field(
    flag: str | FlagSpec,
    line: str,
    parser: Callable[..., T] | str,
    optional: bool = False,
    **options: Any,
) -> T | None:
    """Extract *flag* from *line* and parse its value.

    Args:
        flag: Flag name or descriptor.
        line: The raw argument line.
        parser: A value parser, or a kind name registered in
            :data:`~tutorctl.parsing.values.VALUE_PARSERS`.
        optional: Return ``None`` instead of raising on any failure.
        **options: Extra keyword arguments for the value parser.

    Raises:
        ParseError: Only when *optional* is False. ``error.flag`` names the flag.
    """
    value_parser = get_parser(parser) if isinstance(parser, str) else parser
    name = flag.name if isinstance(flag, FlagSpec) else flag
    try:
        return value_parser(extract_flag(flag, line), **options)
    except ParseError as exc:
        if optional:
            logger.debug("Optional flag -%s treated as absent: %s", name, exc.message)
            return None
        exc.flag = name
        raise
