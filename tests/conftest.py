"""Shared pytest fixtures for tutorctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from tutorctl.domain.records import Lesson, Name, Student
from tutorctl.domain.types import Subject


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer TUTORCTL_* variables out of the tests."""
    for var in list(os.environ):
        if var.startswith("TUTORCTL_"):
            monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tutor = logging.getLogger("tutorctl")
    tutor_level = tutor.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tutor.setLevel(tutor_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no tutorctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def today() -> date:
    """A fixed reference date for defaulted date components."""
    return date(2024, 2, 15)


@pytest.fixture
def alex() -> Student:
    return Student(Name("Alex"), frozenset({Subject.BIOLOGY}))


@pytest.fixture
def bio101() -> Lesson:
    return Lesson(Name("Bio101"), Subject.BIOLOGY)
