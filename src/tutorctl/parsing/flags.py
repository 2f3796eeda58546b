"""Flag extraction — locate ``-name value`` pairs in a raw argument line.

Grammar: a literal ``-``, the flag name, optional whitespace, then the
value as the longest run of ``[A-Za-z0-9_:,/]``. The scan is a
find-first search, not an anchored match, so when a flag appears more
than once the first occurrence wins.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from dataclasses import dataclass

from tutorctl.parsing.errors import FlagNotFoundError

VALUE_CHARS = r"[\w:,/]+"

_FLAG_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@functools.lru_cache(maxsize=128)
def _compile(name: str, value_chars: str) -> re.Pattern[str]:
    return re.compile(rf"-{re.escape(name)}\s*({value_chars})", re.ASCII)


@dataclass(frozen=True)
class FlagSpec:
    """Declarative descriptor for one flag: its name and accepted value characters."""

    name: str
    value_chars: str = VALUE_CHARS

    def __post_init__(self) -> None:
        if _FLAG_NAME_PATTERN.fullmatch(self.name) is None:
            msg = f"Flag name must be an ASCII identifier: {self.name!r}"
            raise ValueError(msg)

    @property
    def pattern(self) -> re.Pattern[str]:
        return _compile(self.name, self.value_chars)

    def extract(self, line: str) -> str:
        """Return the value token of the first occurrence of this flag in *line*.

        Raises:
            FlagNotFoundError: If the flag does not occur anywhere in *line*.
        """
        match = self.pattern.search(line)
        if match is None:
            raise FlagNotFoundError(self.name)
        return match.group(1)


def flag_specs(names: Iterable[str]) -> tuple[FlagSpec, ...]:
    """Build descriptors for *names*, rejecting duplicates.

    Examples:
        >>> [s.name for s in flag_specs(["student", "lesson"])]
        ['student', 'lesson']
    """
    specs: list[FlagSpec] = []
    seen: set[str] = set()
    for name in names:
        if name in seen:
            msg = f"Duplicate flag name: {name}"
            raise ValueError(msg)
        seen.add(name)
        specs.append(FlagSpec(name))
    return tuple(specs)


def extract_flag(flag: str | FlagSpec, line: str) -> str:
    """Extract the value substring for *flag* from *line*.

    *flag* may be a bare name (default value grammar) or a :class:`FlagSpec`.
    """
    spec = flag if isinstance(flag, FlagSpec) else FlagSpec(flag)
    return spec.extract(line)
