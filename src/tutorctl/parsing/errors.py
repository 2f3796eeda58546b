"""ParseError hierarchy.

Every failure raised while interpreting an argument line is a
:class:`ParseError` subclass with a stable ``code``. The service layer
turns these into ``ServiceError`` payloads without inspecting the type.
"""

from __future__ import annotations

from typing import Any


class ParseError(Exception):
    """Base class for all argument interpretation failures.

    Attributes:
        code: Stable machine-readable error code.
        message: Human-readable message, safe to show verbatim.
        value: The offending substring, if any.
        flag: Name of the flag whose value failed, once known.
    """

    code = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        value: str | None = None,
        flag: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
        self.flag = flag

    def __str__(self) -> str:
        if self.flag is not None:
            return f"-{self.flag}: {self.message}"
        return self.message

    def detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {}
        if self.value is not None:
            detail["value"] = self.value
        if self.flag is not None:
            detail["flag"] = self.flag
        return detail


class FlagNotFoundError(ParseError):
    code = "FLAG_NOT_FOUND"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Flag {flag} not found", flag=flag)

    def __str__(self) -> str:
        return self.message


class InvalidFlagError(ParseError):
    """A flag name that the flag grammar cannot express."""

    code = "INVALID_FLAG"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Flag name must be an ASCII identifier: {flag}", flag=flag)

    def __str__(self) -> str:
        return self.message


class InvalidDateError(ParseError):
    code = "INVALID_DATE"


class InvalidTimeError(ParseError):
    code = "INVALID_TIME"


class InvalidNumberError(ParseError):
    code = "INVALID_NUMBER"


class InvalidDayOfWeekError(ParseError):
    code = "INVALID_DAY_OF_WEEK"


class InvalidSubjectError(ParseError):
    code = "INVALID_SUBJECT"


class InvalidEncodingError(ParseError):
    code = "INVALID_ENCODING"


class BlankValueError(ParseError):
    code = "BLANK_VALUE"


class InvalidNameError(ParseError):
    code = "INVALID_NAME"


class OutOfRangeError(ParseError):
    """A number parsed but falls outside its inclusive bounds."""

    code = "OUT_OF_RANGE"

    def __init__(
        self,
        value: str,
        min_value: int | None,
        max_value: int | None,
    ) -> None:
        low = "" if min_value is None else str(min_value)
        high = "" if max_value is None else str(max_value)
        super().__init__(f"Number {value} out of range: {low}-{high}", value=value)
        self.min_value = min_value
        self.max_value = max_value

    def detail(self) -> dict[str, Any]:
        detail = super().detail()
        detail["min"] = self.min_value
        detail["max"] = self.max_value
        return detail


class NothingDisplayedError(ParseError):
    code = "NOTHING_DISPLAYED"


class UnsupportedInThisStateError(ParseError):
    code = "UNSUPPORTED_IN_STATE"

    def __init__(self, command: str, state: str) -> None:
        super().__init__(f"{command} command is not available in state {state}")
        self.command = command
        self.state = state

    def detail(self) -> dict[str, Any]:
        detail = super().detail()
        detail["state"] = self.state
        return detail
