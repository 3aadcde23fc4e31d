"""Scan outcome containers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .kernel import NumericKernel, NumericSign
from .symbols import SignPosition


@dataclass
class ScanResult:
    """Outcome of one symbol or separator search call."""

    matched: bool
    search_index: int
    # Index of the last character belonging to the match
    consumed_index: int | None = None
    hit_end_of_buffer: bool = False
    # Answered from a latch set by an earlier call
    previously_found: bool = False
    # The spec's whole symbol set has been found (both halves of a pair)
    complete: bool = False
    position: SignPosition = SignPosition.NONE
    spec_index: int | None = None

    @property
    def next_index(self) -> int:
        """Where scanning should resume after this result."""
        if self.matched and self.consumed_index is not None:
            # a latched answer may point behind the current search position
            return max(self.search_index, self.consumed_index + 1)
        return self.search_index

    @classmethod
    def no_match(cls, search_index: int, hit_end_of_buffer: bool = False) -> ScanResult:
        return cls(matched=False, search_index=search_index, hit_end_of_buffer=hit_end_of_buffer)


class TerminationReason(StrEnum):
    END_OF_BUFFER = "end_of_buffer"
    SEARCH_LENGTH_LIMIT = "search_length_limit"
    TERMINATION_DELIMITER = "termination_delimiter"
    SIGN_COMPLETED = "sign_completed"


@dataclass
class NumberParseResult:
    """Outcome of extracting one number from a buffer."""

    kernel: NumericKernel
    termination: TerminationReason
    start_index: int
    # Last buffer index examined as part of the number
    last_search_index: int
    # None once the whole buffer has been consumed
    next_search_index: int | None
    remainder: str = ""
    found_numeric_digits: bool = False
    found_decimal_separator: bool = False
    found_integer_separators: int = 0
    # The sign match that made the number negative, if any
    sign_result: ScanResult | None = None

    @property
    def is_negative(self) -> bool:
        return self.kernel.sign == NumericSign.NEGATIVE
