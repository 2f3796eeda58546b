"""Tests for Rich Console factory and theme."""

from io import StringIO

from tutorctl.output.console import TUTOR_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[tutor.student]Alex[/tutor.student]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "Alex" in output

    def test_custom_width(self) -> None:
        console = create_console(width=80)
        assert console.width == 80

    def test_default_width(self) -> None:
        console = create_console()
        assert console.width == 120


class TestTheme:
    def test_theme_styles(self) -> None:
        for name in ("ok", "error", "op", "key", "student", "lesson", "done", "pending"):
            assert f"tutor.{name}" in TUTOR_THEME.styles
