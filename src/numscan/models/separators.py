"""Decimal and integer-grouping separator specifications."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from enum import StrEnum

from ..errors import ConfigurationError, Context
from ..utils.listing import format_parameter_listing
from ..utils.runes import check_runes, runes_match_at, to_runes

# Upper bound for group_size and repetitions
MAX_GROUPING_VALUE = 10_000_000


class SeparatorKind(StrEnum):
    DECIMAL = "decimal"
    INTEGER_GROUPING = "integer_grouping"


class SeparatorSpec:
    """Decimal separator (``.`` in ``1.5``) or integer-grouping separator (``,`` in ``1,000``).

    ``group_size`` is the number of integer digits per group and
    ``repetitions`` how many times the group repeats (0 = unlimited). With
    ``restart_sequence`` set, a list of grouping specs is applied again from
    its first element once exhausted. India, for example, groups the first
    three integer digits and every two digits after that.
    """

    def __init__(
        self,
        kind: SeparatorKind,
        chars: str | Sequence[str],
        group_size: int = 0,
        repetitions: int = 0,
        restart_sequence: bool = False,
        *,
        context: Context = None,
    ):
        try:
            self._kind = SeparatorKind(kind)
        except ValueError:
            raise ConfigurationError(f"unknown separator kind {kind!r}", context=context) from None
        self._chars = to_runes(chars)
        self.group_size = group_size
        self.repetitions = repetitions
        self.restart_sequence = restart_sequence
        self.reset_processing_state()

    @classmethod
    def new_decimal(cls, chars: str | Sequence[str], *, context: Context = None) -> SeparatorSpec:
        spec = cls(SeparatorKind.DECIMAL, chars, context=context)
        spec.validate_decimal(context=context)
        return spec

    @classmethod
    def new_integer_grouping(
        cls,
        chars: str | Sequence[str],
        group_size: int = 3,
        repetitions: int = 0,
        restart_sequence: bool = False,
        *,
        context: Context = None,
    ) -> SeparatorSpec:
        spec = cls(
            SeparatorKind.INTEGER_GROUPING, chars, group_size, repetitions, restart_sequence, context=context
        )
        spec.validate_integer_grouping(context=context)
        return spec

    @property
    def kind(self) -> SeparatorKind:
        return self._kind

    @property
    def chars(self) -> tuple[str, ...]:
        return self._chars

    @property
    def text(self) -> str:
        return "".join(self._chars)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, *, context: Context = None) -> None:
        if self._kind == SeparatorKind.DECIMAL:
            self.validate_decimal(context=context)
        else:
            self.validate_integer_grouping(context=context)

    def validate_decimal(self, *, context: Context = None) -> None:
        check_runes(self._chars, "decimal separator chars", context=context)

    def validate_integer_grouping(self, *, context: Context = None) -> None:
        check_runes(self._chars, "integer separator chars", context=context)
        if self.group_size < 1:
            raise ConfigurationError(
                f"'group_size' must be at least 1, got {self.group_size}",
                context=context,
            )
        if self.group_size > MAX_GROUPING_VALUE:
            raise ConfigurationError(
                f"'group_size' {self.group_size} exceeds {MAX_GROUPING_VALUE:,}",
                context=context,
            )
        if self.repetitions < 0:
            raise ConfigurationError(
                f"'repetitions' must not be negative, got {self.repetitions}",
                context=context,
            )
        if self.repetitions > MAX_GROUPING_VALUE:
            raise ConfigurationError(
                f"'repetitions' {self.repetitions} exceeds {MAX_GROUPING_VALUE:,}",
                context=context,
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ConfigurationError:
            return False
        return True

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def reset_processing_state(self) -> None:
        self.found = False
        self.found_index: int | None = None

    def match_at(self, buffer: Sequence[str], index: int) -> tuple[bool, int]:
        """Match the separator characters at ``buffer[index]``.

        A decimal separator latches: once found, later calls report the cached
        last index and the caller is expected to ignore the repeat. Integer
        separators occur many times per number and never latch.
        """
        if self._kind == SeparatorKind.DECIMAL and self.found:
            return True, self.found_index
        if not runes_match_at(self._chars, buffer, index):
            return False, index
        last_index = index + len(self._chars) - 1
        if self._kind == SeparatorKind.DECIMAL:
            self.found = True
            self.found_index = last_index
        return True, last_index

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def clone(self) -> SeparatorSpec:
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeparatorSpec):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._chars == other._chars
            and self.group_size == other.group_size
            and self.repetitions == other.repetitions
            and self.restart_sequence == other.restart_sequence
            and self.found == other.found
            and self.found_index == other.found_index
        )

    __hash__ = None

    def __repr__(self) -> str:
        if self._kind == SeparatorKind.DECIMAL:
            return f"SeparatorSpec.new_decimal({self.text!r})"
        return (
            f"SeparatorSpec.new_integer_grouping({self.text!r}, group_size={self.group_size}, "
            f"repetitions={self.repetitions}, restart_sequence={self.restart_sequence})"
        )

    def parameter_listing(self, description: str = "") -> str:
        rows: list[tuple[str, object]] = [
            ("Separator Kind", self._kind.value),
            ("Separator Characters", self.text),
        ]
        if self._kind == SeparatorKind.INTEGER_GROUPING:
            rows += [
                ("Group Size", self.group_size),
                ("Repetitions", self.repetitions or "unlimited"),
                ("Restart Grouping Sequence", self.restart_sequence),
            ]
        else:
            rows += [("Found Decimal Separator", self.found), ("Found Index", self.found_index)]
        return format_parameter_listing("SeparatorSpec", rows, description)
