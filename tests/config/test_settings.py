"""Tests for TutorSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from tutorctl.config.settings import TutorSettings
from tutorctl.domain.types import DisplayState


class TestTutorSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TutorSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.output.width == 120
        assert settings.context.state is DisplayState.NONE
        assert settings.context.student is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TutorSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = TutorSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "tutorctl.toml"
        toml.write_text('[context]\nstate = "student"\nstudent = "Alex Yeoh"\n')
        settings = TutorSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.context.state is DisplayState.STUDENT
        assert settings.context.student == "Alex Yeoh"
        assert settings.output.width == 120  # default preserved

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "tutorctl.toml").write_text("[output]\nwidth = 80\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = TutorSettings.from_cli(start=nested)
        assert settings.output.width == 80

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[context]\nlesson = "Bio101"\n')
        settings = TutorSettings.from_cli(config_path=str(custom))
        assert settings.context.lesson == "Bio101"
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "tutorctl.toml").write_text("[context\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TutorSettings.from_cli(start=tmp_path)

    def test_invalid_state_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "tutorctl.toml").write_text('[context]\nstate = "calendar"\n')
        with pytest.raises(Exception):
            TutorSettings.from_cli(start=tmp_path)


class TestEnvOverride:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "tutorctl.toml").write_text("[output]\nwidth = 80\n")
        monkeypatch.setenv("TUTORCTL_OUTPUT__WIDTH", "100")
        settings = TutorSettings.from_cli(start=tmp_path)
        assert settings.output.width == 100

    def test_nested_context_state(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TUTORCTL_CONTEXT__STATE", "schedule")
        settings = TutorSettings.from_cli(start=tmp_path)
        assert settings.context.state is DisplayState.SCHEDULE
