"""Negative number sign symbol specifications.

A ``SymbolSpec`` describes one sign convention (a leading ``-``, a trailing
``-``, or a pair such as ``(`` and ``)``) together with the scan state the
engine accumulates while walking one number string:

* the *gate* (``found_first_numeric_digit``) closes once a digit has been
  consumed; from then on a leading symbol can no longer match;
* the *latches* (``found_leading`` / ``found_trailing``) make repeated match
  calls return the cached result without rescanning.

Processing state is scan-local. Use :meth:`SymbolSpec.clone` to hand an
independent copy to each concurrent parse.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from enum import StrEnum

import structlog

from ..errors import ConfigurationError, Context
from ..utils.listing import format_parameter_listing
from ..utils.runes import check_runes, runes_match_at, to_runes

logger = structlog.get_logger(__name__)


class SignPosition(StrEnum):
    NONE = "none"
    BEFORE = "before"
    AFTER = "after"
    BEFORE_AND_AFTER = "before_and_after"


class SymbolSpec:
    """One configured negative sign pattern plus its scan state."""

    def __init__(
        self,
        position: SignPosition = SignPosition.NONE,
        leading_symbols: str | Sequence[str] = (),
        trailing_symbols: str | Sequence[str] = (),
        *,
        context: Context = None,
    ):
        try:
            self._position = SignPosition(position)
        except ValueError:
            raise ConfigurationError(f"unknown sign position {position!r}", context=context) from None
        self._leading = to_runes(leading_symbols)
        self._trailing = to_runes(trailing_symbols)
        self.reset_processing_state()

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def new_leading(cls, chars: str | Sequence[str], *, context: Context = None) -> SymbolSpec:
        """Build a spec for a sign placed before the number, e.g. ``-123``."""
        spec = cls(SignPosition.BEFORE, leading_symbols=chars, context=context)
        spec.validate(context=context)
        return spec

    @classmethod
    def new_trailing(cls, chars: str | Sequence[str], *, context: Context = None) -> SymbolSpec:
        """Build a spec for a sign placed after the number, e.g. ``123-``."""
        spec = cls(SignPosition.AFTER, trailing_symbols=chars, context=context)
        spec.validate(context=context)
        return spec

    @classmethod
    def new_leading_and_trailing(
        cls,
        leading: str | Sequence[str],
        trailing: str | Sequence[str],
        *,
        context: Context = None,
    ) -> SymbolSpec:
        """Build a spec for a paired sign enclosing the number, e.g. ``(123)``."""
        spec = cls(
            SignPosition.BEFORE_AND_AFTER, leading_symbols=leading, trailing_symbols=trailing, context=context
        )
        spec.validate(context=context)
        return spec

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def position(self) -> SignPosition:
        return self._position

    @property
    def leading_symbols(self) -> tuple[str, ...]:
        return self._leading

    @property
    def trailing_symbols(self) -> tuple[str, ...]:
        return self._trailing

    def validate(self, *, context: Context = None) -> None:
        """Raise ``ConfigurationError`` if position and symbols disagree.

        Read-only: the spec is never modified, whether validation passes or not.
        """
        position = self._position
        if position == SignPosition.NONE:
            self._reject("'position' is not configured", context)

        if position == SignPosition.BEFORE:
            if self._trailing:
                self._reject(
                    "'trailing_symbols' must be empty for a leading sign",
                    context,
                )
            check_runes(self._leading, "leading_symbols", context=context)
        elif position == SignPosition.AFTER:
            if self._leading:
                self._reject(
                    "'leading_symbols' must be empty for a trailing sign",
                    context,
                )
            check_runes(self._trailing, "trailing_symbols", context=context)
        else:
            check_runes(self._leading, "leading_symbols", context=context)
            check_runes(self._trailing, "trailing_symbols", context=context)

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ConfigurationError:
            return False
        return True

    def _reject(self, message: str, context: Context) -> None:
        logger.warning("symbol_spec_rejected", position=str(self._position), reason=message)
        raise ConfigurationError(message, context=context)

    # ------------------------------------------------------------------
    # Processing state
    # ------------------------------------------------------------------

    def reset_processing_state(self) -> None:
        """Clear the gate, both latches and their indices for a fresh parse."""
        self.found_first_numeric_digit = False
        self.found_leading = False
        self.found_leading_index: int | None = None
        self.found_trailing = False
        self.found_trailing_index: int | None = None

    def set_found_first_numeric_digit(self, found: bool) -> None:
        """Close the digit gate.

        The gate is one-way: once closed, passing ``False`` leaves it closed
        until :meth:`reset_processing_state` is called.
        """
        if found:
            self.found_first_numeric_digit = True

    @property
    def found_symbols(self) -> bool:
        """``True`` once every symbol required by ``position`` has been found."""
        if self._position == SignPosition.BEFORE:
            return self.found_leading
        if self._position == SignPosition.AFTER:
            return self.found_trailing
        if self._position == SignPosition.BEFORE_AND_AFTER:
            return self.found_leading and self.found_trailing
        return False

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def match_leading_at(self, buffer: Sequence[str], index: int) -> tuple[bool, int]:
        """Try to match the leading symbols at ``buffer[index]``.

        Returns ``(matched, last_index)`` where ``last_index`` is the index of
        the final matched character, or *index* when nothing matched.
        """
        if self.found_first_numeric_digit:
            return False, index
        if self.found_leading:
            return True, self.found_leading_index
        if not self._leading or not runes_match_at(self._leading, buffer, index):
            return False, index
        self.found_leading = True
        self.found_leading_index = index + len(self._leading) - 1
        return True, self.found_leading_index

    def match_trailing_at(self, buffer: Sequence[str], index: int) -> tuple[bool, int]:
        """Try to match the trailing symbols at ``buffer[index]``.

        Unlike :meth:`match_leading_at` there is no digit gate.
        """
        if self.found_trailing:
            return True, self.found_trailing_index
        if not self._trailing or not runes_match_at(self._trailing, buffer, index):
            return False, index
        self.found_trailing = True
        self.found_trailing_index = index + len(self._trailing) - 1
        return True, self.found_trailing_index

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def clone(self) -> SymbolSpec:
        """Return an independent copy, processing state included."""
        return copy.deepcopy(self)

    def _state(self) -> tuple:
        return (
            self._position,
            self._leading,
            self._trailing,
            self.found_first_numeric_digit,
            self.found_leading,
            self.found_leading_index,
            self.found_trailing,
            self.found_trailing_index,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolSpec):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"SymbolSpec(position={self._position.value!r}, "
            f"leading={''.join(self._leading)!r}, trailing={''.join(self._trailing)!r})"
        )

    def parameter_listing(self, description: str = "") -> str:
        return format_parameter_listing(
            "SymbolSpec",
            [
                ("Negative Number Sign Position", self._position.value),
                ("Leading Negative Number Sign", "".join(self._leading)),
                ("Trailing Negative Number Sign", "".join(self._trailing)),
                ("Found First Numeric Digit", self.found_first_numeric_digit),
                ("Found Leading Sign", self.found_leading),
                ("Found Leading Sign Index", self.found_leading_index),
                ("Found Trailing Sign", self.found_trailing),
                ("Found Trailing Sign Index", self.found_trailing_index),
            ],
            description,
        )
