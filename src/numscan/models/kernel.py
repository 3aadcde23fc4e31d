"""Minimal numeric kernel: validated digit sequences plus a supplied sign.

The kernel never infers its sign. The outer parser sets ``sign`` from
whatever sign convention matched; :meth:`NumericKernel.validate` only checks
that digits, sign and the non-zero flag agree.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

from ..errors import Context, InconsistentStateError, InvalidDigitError
from ..utils.listing import format_parameter_listing
from ..utils.runes import is_digit


class NumericSign(IntEnum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


class NumericValueType(StrEnum):
    NONE = "none"
    INTEGER = "integer"
    FLOATING_POINT = "floating_point"


@dataclass
class NumericKernel:
    """Integer and fractional digits of one parsed number."""

    integer_digits: list[str] = field(default_factory=list)
    fractional_digits: list[str] = field(default_factory=list)
    sign: NumericSign = NumericSign.ZERO
    is_non_zero: bool = False
    value_type: NumericValueType = NumericValueType.NONE

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def add_integer_digit(self, digit: str, *, context: Context = None) -> None:
        self._add_digit(self.integer_digits, digit, context)

    def add_fractional_digit(self, digit: str, *, context: Context = None) -> None:
        self._add_digit(self.fractional_digits, digit, context)

    def _add_digit(self, target: list[str], digit: str, context: Context) -> None:
        if not isinstance(digit, str) or not is_digit(digit):
            raise InvalidDigitError(digit, context=context)
        target.append(digit)
        if digit != "0":
            self.is_non_zero = True
        self._refresh_value_type()

    def _refresh_value_type(self) -> None:
        if not self.integer_digits and not self.fractional_digits:
            self.value_type = NumericValueType.NONE
        elif not self.fractional_digits:
            self.value_type = NumericValueType.INTEGER
        else:
            self.value_type = NumericValueType.FLOATING_POINT

    def set_sign(self, sign: NumericSign | int, *, context: Context = None) -> None:
        try:
            self.sign = NumericSign(sign)
        except ValueError:
            raise InconsistentStateError(
                "sign_value", f"{sign!r} is not one of -1, 0, 1", context=context
            ) from None

    def empty(self) -> None:
        """Discard all digits and return the sign to ZERO."""
        self.integer_digits.clear()
        self.fractional_digits.clear()
        self.sign = NumericSign.ZERO
        self.is_non_zero = False
        self.value_type = NumericValueType.NONE

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, *, context: Context = None) -> None:
        """Raise ``InconsistentStateError`` naming the first broken invariant.

        Checks, in order:

        1. at least one digit sequence is populated;
        2. fractional digits require integer digits;
        3. every stored character is ``'0'..'9'``;
        4. ``is_non_zero`` matches the stored digits;
        5. a ZERO sign is not paired with a non-zero value.
        """
        if not self.integer_digits and not self.fractional_digits:
            raise InconsistentStateError(
                "digits_present", "integer and fractional digits are both empty", context=context
            )
        if self.fractional_digits and not self.integer_digits:
            raise InconsistentStateError(
                "integer_before_fraction",
                "fractional digits are present but integer digits are empty",
                context=context,
            )
        for name, digits in (("integer_digits", self.integer_digits), ("fractional_digits", self.fractional_digits)):
            for idx, digit in enumerate(digits):
                if not isinstance(digit, str) or not is_digit(digit):
                    raise InconsistentStateError(
                        "digits_only", f"{name}[{idx}] = {digit!r} is not a decimal digit", context=context
                    )
        actual_non_zero = any(d != "0" for d in self.integer_digits) or any(
            d != "0" for d in self.fractional_digits
        )
        if actual_non_zero != self.is_non_zero:
            raise InconsistentStateError(
                "non_zero_flag",
                f"is_non_zero={self.is_non_zero} but the stored digits say {actual_non_zero}",
                context=context,
            )
        if self.sign == NumericSign.ZERO and self.is_non_zero:
            raise InconsistentStateError(
                "sign_matches_value", "sign is ZERO but the value is non-zero", context=context
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InconsistentStateError:
            return False
        return True

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def integer_string(self) -> str:
        return "".join(self.integer_digits)

    @property
    def fractional_string(self) -> str:
        return "".join(self.fractional_digits)

    @property
    def number_of_integer_digits(self) -> int:
        return len(self.integer_digits)

    @property
    def number_of_fractional_digits(self) -> int:
        return len(self.fractional_digits)

    def clone(self) -> NumericKernel:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        """Pure number string: optional ``-``, integer digits, ``.`` and fraction."""
        text = self.integer_string or "0"
        if self.fractional_digits:
            text = f"{text}.{self.fractional_string}"
        if self.sign == NumericSign.NEGATIVE:
            text = f"-{text}"
        return text

    def parameter_listing(self, description: str = "") -> str:
        return format_parameter_listing(
            "NumericKernel",
            [
                ("Integer Digits", self.integer_string),
                ("Fractional Digits", self.fractional_string),
                ("Number Sign", self.sign.name),
                ("Numeric Value Type", self.value_type.value),
                ("Is Non-Zero", self.is_non_zero),
            ],
            description,
        )
