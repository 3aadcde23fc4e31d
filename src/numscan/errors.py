"""numscan exception hierarchy.

Every fallible operation accepts an optional diagnostic ``context``: a label
or a sequence of labels naming the caller's path to the failure. It is only
used to enrich the message and is stored on the raised exception.
"""

from __future__ import annotations

from collections.abc import Sequence

Context = str | Sequence[str] | None


def format_context(context: Context) -> str:
    """Render a diagnostic context as a single ``a -> b -> c`` label."""
    if context is None:
        return ""
    if isinstance(context, str):
        return context
    return " -> ".join(label for label in context if label)


class NumScanError(Exception):
    """Base exception for all numscan errors."""

    def __init__(self, message: str, *, context: Context = None) -> None:
        self.context = format_context(context)
        self.detail = message
        super().__init__(f"{self.context}: {message}" if self.context else message)


class ConfigurationError(NumScanError, ValueError):
    """A symbol or separator specification is malformed."""


class EmptyCollectionError(ConfigurationError):
    """A spec collection holds no members."""


class InvalidMemberError(ConfigurationError):
    """A member of a spec collection failed its own validation."""

    def __init__(self, index: int, message: str, *, context: Context = None) -> None:
        self.index = index
        super().__init__(f"member [{index}] is invalid: {message}", context=context)


class StateError(NumScanError):
    """A required object was not supplied."""


class RangeError(NumScanError, IndexError):
    """A search index lies outside the buffer."""


class InvalidDigitError(NumScanError, ValueError):
    """A non-digit character was pushed into a numeric kernel."""

    def __init__(self, digit: object, *, context: Context = None) -> None:
        self.digit = digit
        super().__init__(f"{digit!r} is not a decimal digit '0'..'9'", context=context)


class InconsistentStateError(NumScanError):
    """Numeric kernel content contradicts its sign or non-zero flag."""

    def __init__(self, invariant: str, message: str, *, context: Context = None) -> None:
        self.invariant = invariant
        super().__init__(f"{invariant}: {message}", context=context)
