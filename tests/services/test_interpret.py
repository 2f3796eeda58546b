"""Tests for InterpretService."""

from __future__ import annotations

from datetime import date, time

from tutorctl.domain.records import Lesson, Name, Student
from tutorctl.domain.task import Task
from tutorctl.domain.types import DayOfWeek, DisplayState, Subject
from tutorctl.parsing.context import DisplayContext
from tutorctl.services.interpret import InterpretService, serialize_value


class TestSerializeValue:
    def test_values(self) -> None:
        assert serialize_value(date(2024, 5, 10)) == "2024-05-10"
        assert serialize_value(time(9, 5)) == "09:05"
        assert serialize_value(DayOfWeek.MONDAY) == "MONDAY"
        assert serialize_value(Subject.PHYSICS) == "PHYSICS"
        assert serialize_value(Task("Essay", done=True)) == "+Essay"
        assert serialize_value(Name("Alex")) == "Alex"
        assert serialize_value(3) == 3
        assert serialize_value(None) is None


class TestParseField:
    def test_success(self) -> None:
        result = InterpretService().parse_field("time", "-start 14:30", "start")
        assert result.ok
        assert result.op == "parse_field"
        assert result.data == {"flag": "start", "kind": "time", "supplied": True, "value": "14:30"}
        assert result.warnings == []

    def test_bounds(self) -> None:
        result = InterpretService().parse_field("num", "-n 7", "n", min_value=1, max_value=5)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "OUT_OF_RANGE"
        assert result.error.detail == {"value": "7", "flag": "n", "min": 1, "max": 5}

    def test_required_missing(self) -> None:
        result = InterpretService().parse_field("date", "", "date")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FLAG_NOT_FOUND"
        assert result.error.message == "Flag date not found"

    def test_optional_invalid_is_success_with_warning(self) -> None:
        result = InterpretService().parse_field("subject", "-subject art", "subject", optional=True)
        assert result.ok
        assert result.data["supplied"] is False
        assert result.data["value"] is None
        assert len(result.warnings) == 1

    def test_required_invalid_message_names_flag(self) -> None:
        result = InterpretService().parse_field("subject", "-subject art", "subject")
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "-subject: art is not a valid subject"

    def test_invalid_flag_name(self) -> None:
        result = InterpretService().parse_field("num", "-start-time 3", "start-time")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FLAG"
        assert result.error.message == "Flag name must be an ASCII identifier: start-time"
        assert result.error.detail == {"flag": "start-time"}


class TestLink:
    def test_flag_mode(self) -> None:
        result = InterpretService().link("-lesson Bio101 -student Alex")
        assert result.ok
        assert result.data == {"student": "Alex", "lesson": "Bio101", "mode": "flags"}

    def test_context_mode(self) -> None:
        context = DisplayContext(DisplayState.STUDENT, student=Student(Name("Alex")))
        result = InterpretService(context).link("Bio101")
        assert result.ok
        assert result.data == {"student": "Alex", "lesson": "Bio101", "mode": "student"}

    def test_schedule_mode(self) -> None:
        context = DisplayContext(DisplayState.SCHEDULE, lesson=Lesson(Name("Bio101")))
        result = InterpretService(context).link("Alex")
        assert result.data["mode"] == "schedule"

    def test_unsupported_state(self) -> None:
        result = InterpretService(DisplayContext(DisplayState.STUDENT_LIST)).link("Bio101")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_IN_STATE"
        assert result.error.detail == {"state": "student_list"}

    def test_nothing_displayed(self) -> None:
        result = InterpretService(DisplayContext(DisplayState.SCHEDULE)).link("Alex")
        assert result.error is not None
        assert result.error.code == "NOTHING_DISPLAYED"


class TestDecodeTask:
    def test_decode(self) -> None:
        result = InterpretService().decode_task("-Read chapter 3")
        assert result.ok
        assert result.data == {
            "description": "Read chapter 3",
            "done": False,
            "encoded": "-Read chapter 3",
        }

    def test_mark(self) -> None:
        result = InterpretService().decode_task("-Essay", done=True)
        assert result.data["encoded"] == "+Essay"

    def test_unmark(self) -> None:
        result = InterpretService().decode_task("+Essay", done=False)
        assert result.data["encoded"] == "-Essay"

    def test_invalid_encoding(self) -> None:
        result = InterpretService().decode_task("Essay")
        assert result.error is not None
        assert result.error.code == "INVALID_ENCODING"

    def test_blank(self) -> None:
        result = InterpretService().decode_task("+ ")
        assert result.error is not None
        assert result.error.code == "BLANK_VALUE"
