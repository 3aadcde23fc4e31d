"""Test the exception hierarchy and diagnostic context."""
import pytest

from numscan.errors import (
    ConfigurationError,
    EmptyCollectionError,
    InconsistentStateError,
    InvalidDigitError,
    InvalidMemberError,
    NumScanError,
    RangeError,
    StateError,
    format_context,
)


class TestFormatContext:
    def test_none(self):
        assert format_context(None) == ""

    def test_string(self):
        assert format_context("parse") == "parse"

    def test_sequence_skips_blank_labels(self):
        assert format_context(["invoice", "", "total"]) == "invoice -> total"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("x"),
            EmptyCollectionError("x"),
            InvalidMemberError(0, "x"),
            StateError("x"),
            RangeError("x"),
            InvalidDigitError("x"),
            InconsistentStateError("digits_present", "x"),
        ],
    )
    def test_all_are_numscan_errors(self, error):
        assert isinstance(error, NumScanError)

    def test_builtin_bases(self):
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(InvalidDigitError, ValueError)
        assert issubclass(RangeError, IndexError)
        assert issubclass(EmptyCollectionError, ConfigurationError)
        assert issubclass(InvalidMemberError, ConfigurationError)

    def test_message_without_context(self):
        error = StateError("no buffer")
        assert str(error) == "no buffer"
        assert error.context == ""
        assert error.detail == "no buffer"

    def test_message_with_context(self):
        error = InvalidMemberError(3, "'leading_symbols' is empty", context=("US", "signs"))
        assert str(error) == "US -> signs: member [3] is invalid: 'leading_symbols' is empty"
        assert error.index == 3
