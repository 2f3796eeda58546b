"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tutorctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from tutorctl.domain.types import DisplayState


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    no_color: bool = False


class ContextConfig(BaseModel):
    """[context] section — the display snapshot used when a command asks for one.

    Lets scripted or replayed input run as if a student or lesson were shown.
    """

    model_config = {"frozen": True}

    state: DisplayState = DisplayState.NONE
    student: str | None = None
    lesson: str | None = None
