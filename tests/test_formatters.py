"""Tests for value, error, event and default formatters"""

from dataclasses import dataclass

import pytest

from scoped_logger.formatters import (
    MISSING,
    EventId,
    format_default,
    format_error,
    format_event,
    format_value,
)
from scoped_logger.formatters.event_formatter import is_no_event
from scoped_logger.formatters.value_formatter import (
    MAX_INSPECT_DEPTH,
    ValueKind,
    classify,
    inspect_value,
)


class Plain:
    def __init__(self, **attributes):
        self.__dict__.update(attributes)


class Slotted:
    __slots__ = ("x", "y")

    def __init__(self, x, y):
        self.x = x
        self.y = y


class Labelled:
    def __str__(self):
        return "labelled!"


@dataclass
class Point:
    x: int
    y: int


def raised(error):
    try:
        raise error
    except BaseException as caught:
        return caught


class TestMissing:
    """Test the absent-value sentinel."""

    def test_singleton(self):
        assert type(MISSING)() is MISSING

    def test_falsy_and_repr(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"

    def test_distinct_from_none(self):
        assert MISSING is not None
        assert classify(MISSING) is not classify(None)


class TestClassify:
    """Test value classification."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            (MISSING, ValueKind.ABSENT),
            (None, ValueKind.NULL),
            ("text", ValueKind.TEXT),
            ("", ValueKind.TEXT),
            (ValueError("x"), ValueKind.ERROR),
            (Plain(a=1), ValueKind.STRUCTURED),
            (Slotted(1, 2), ValueKind.STRUCTURED),
            (Labelled(), ValueKind.CUSTOM),
            (Point(1, 2), ValueKind.CUSTOM),
            (42, ValueKind.CUSTOM),
            ({"a": 1}, ValueKind.CUSTOM),
            ([1, 2], ValueKind.CUSTOM),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify(value) is kind


class TestFormatValue:
    """Test state value rendering."""

    def test_absent_is_empty(self):
        assert format_value(MISSING) == ""
        assert format_value() == ""

    def test_none(self):
        assert format_value(None) == "null"

    def test_text_is_verbatim(self):
        assert format_value("hello\nworld") == "hello\nworld"

    def test_custom_uses_str(self):
        assert format_value(Labelled()) == "labelled!"
        assert format_value(42) == "42"
        assert format_value(Point(1, 2)) == "Point(x=1, y=2)"
        assert format_value([1, "a"]) == "[1, 'a']"

    def test_plain_record_is_inspected(self):
        assert format_value(Plain(a=1, b="x")) == "Plain(a=1, b='x')"

    def test_slots_are_inspected(self):
        assert format_value(Slotted(1, None)) == "Slotted(x=1, y=None)"

    def test_nested_records(self):
        value = Plain(inner=Plain(n=1))
        assert format_value(value) == "Plain(inner=Plain(n=1))"

    def test_depth_is_bounded(self):
        value = Plain(n=0)
        for i in range(MAX_INSPECT_DEPTH + 2):
            value = Plain(child=value)
        text = format_value(value)
        assert "Plain(...)" in text
        assert "n=0" not in text

    def test_self_reference_terminates(self):
        value = Plain()
        value.me = value
        assert inspect_value(value).endswith("Plain(...))))")


class TestFormatError:
    """Test error rendering."""

    def test_absent(self):
        assert format_error() == ""
        assert format_error(MISSING) == ""
        assert format_error(None) == ""

    def test_unraised_exception(self):
        assert format_error(ValueError("bad")) == "[ValueError]: bad"

    def test_unraised_without_message(self):
        assert format_error(KeyboardInterrupt()) == "[KeyboardInterrupt]"

    def test_raised_exception_has_stack(self):
        text = format_error(raised(RuntimeError("boom")))
        assert text.startswith("[RuntimeError]: boom Stack: ")
        assert "raise error" in text

    def test_raised_without_message_has_stack(self):
        text = format_error(raised(RuntimeError()))
        assert text.startswith("[RuntimeError]: Stack: ")

    def test_non_exception_value(self):
        assert format_error("just text") == "just text"
        assert format_error(Plain(code=3)) == "Plain(code=3)"


class TestFormatEvent:
    """Test event id rendering."""

    def test_int(self):
        assert format_event(42) == "42"

    def test_event_id(self):
        assert format_event(EventId(7, "checkout")) == "7/checkout"
        assert format_event(EventId(7)) == "7/"

    def test_other_values(self):
        assert format_event("named") == "named"
        assert format_event(True) == "True"

    @pytest.mark.parametrize("event_id", [0, None, MISSING])
    def test_no_event(self, event_id):
        assert is_no_event(event_id)

    @pytest.mark.parametrize("event_id", [1, -1, EventId(0, "zero"), False, "x"])
    def test_is_event(self, event_id):
        assert not is_no_event(event_id)


class TestFormatDefault:
    """Test the default state/error formatter."""

    def test_nothing(self):
        assert format_default() == ""
        assert format_default(MISSING, None) == ""

    def test_state_only(self):
        assert format_default("hi") == "hi"
        assert format_default("hi", None) == "hi"
        assert format_default(None) == "null"

    def test_error_only(self):
        assert format_default(error=ValueError("x")) == "[ValueError]: x"

    def test_state_and_error(self):
        assert format_default("hi", ValueError("x")) == "hi, [ValueError]: x"

    def test_empty_state_is_dropped(self):
        assert format_default("", ValueError("x")) == "[ValueError]: x"

    def test_state_list(self):
        assert format_default(["a", 1]) == "['a', 1]"
