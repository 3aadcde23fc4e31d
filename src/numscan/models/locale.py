"""Locale number conventions and the presets shipped with numscan.

A ``NumberLocale`` is plain configuration data. The ``build_*`` methods turn
it into fresh, independently owned specs for one parse.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ..config import get_settings
from ..scanning.collection import SpecCollection
from .separators import MAX_GROUPING_VALUE, SeparatorSpec
from .symbols import SignPosition, SymbolSpec


class NegativeSignConvention(BaseModel):
    """One way a locale writes a negative number."""

    position: SignPosition
    leading: str = ""
    trailing: str = ""

    def to_spec(self) -> SymbolSpec:
        if self.position == SignPosition.BEFORE:
            return SymbolSpec.new_leading(self.leading, context="NegativeSignConvention")
        if self.position == SignPosition.AFTER:
            return SymbolSpec.new_trailing(self.trailing, context="NegativeSignConvention")
        return SymbolSpec.new_leading_and_trailing(self.leading, self.trailing, context="NegativeSignConvention")


class IntegerGrouping(BaseModel):
    """One integer separator group, e.g. ``,`` every 3 digits."""

    chars: str = Field(min_length=1)
    group_size: int = Field(default=3, ge=1, le=MAX_GROUPING_VALUE)
    repetitions: int = Field(default=0, ge=0, le=MAX_GROUPING_VALUE)
    restart_sequence: bool = False


class NumberLocale(BaseModel):
    """Number formatting conventions for one country or region."""

    country_code: str
    decimal_separator: str = Field(default=".", min_length=1)
    integer_separators: list[IntegerGrouping] = Field(default_factory=lambda: [IntegerGrouping(chars=",")])
    negative_signs: list[NegativeSignConvention] = Field(min_length=1)

    @model_validator(mode="after")
    def _separators_are_distinct(self) -> NumberLocale:
        for grouping in self.integer_separators:
            if grouping.chars == self.decimal_separator:
                raise ValueError(
                    f"integer separator {grouping.chars!r} equals the decimal separator"
                )
        return self

    def build_sign_collection(self) -> SpecCollection:
        return SpecCollection([sign.to_spec() for sign in self.negative_signs], context=self.country_code)

    def build_decimal_separator(self) -> SeparatorSpec:
        return SeparatorSpec.new_decimal(self.decimal_separator, context=self.country_code)

    def build_integer_separators(self) -> list[SeparatorSpec]:
        return [
            SeparatorSpec.new_integer_grouping(
                g.chars,
                g.group_size,
                g.repetitions,
                g.restart_sequence,
                context=self.country_code,
            )
            for g in self.integer_separators
        ]


_LEADING_MINUS = NegativeSignConvention(position=SignPosition.BEFORE, leading="-")
_TRAILING_MINUS = NegativeSignConvention(position=SignPosition.AFTER, trailing="-")
_PARENTHESES = NegativeSignConvention(position=SignPosition.BEFORE_AND_AFTER, leading="(", trailing=")")

LOCALES: dict[str, NumberLocale] = {
    "US": NumberLocale(
        country_code="US",
        decimal_separator=".",
        integer_separators=[IntegerGrouping(chars=",")],
        negative_signs=[_LEADING_MINUS, _PARENTHESES],
    ),
    "UK": NumberLocale(
        country_code="UK",
        decimal_separator=".",
        integer_separators=[IntegerGrouping(chars=",")],
        negative_signs=[_LEADING_MINUS, _PARENTHESES],
    ),
    "DE": NumberLocale(
        country_code="DE",
        decimal_separator=",",
        integer_separators=[IntegerGrouping(chars=".")],
        negative_signs=[_LEADING_MINUS, _TRAILING_MINUS],
    ),
    "FR": NumberLocale(
        country_code="FR",
        decimal_separator=",",
        integer_separators=[IntegerGrouping(chars=" ")],
        negative_signs=[_LEADING_MINUS],
    ),
    # Indian numbering: 12,34,56,789.00
    "IN": NumberLocale(
        country_code="IN",
        decimal_separator=".",
        integer_separators=[
            IntegerGrouping(chars=",", group_size=3, repetitions=1),
            IntegerGrouping(chars=",", group_size=2, repetitions=0),
        ],
        negative_signs=[_LEADING_MINUS],
    ),
    # Chinese numbering groups by ten thousand: 1,2345,6789
    "CN": NumberLocale(
        country_code="CN",
        decimal_separator=".",
        integer_separators=[IntegerGrouping(chars=",", group_size=4)],
        negative_signs=[_LEADING_MINUS],
    ),
}


def get_locale(code: str | None = None) -> NumberLocale:
    """Return the preset for *code*, or the configured default when omitted."""
    if code is None:
        code = get_settings().default_locale
    try:
        return LOCALES[code.upper()]
    except KeyError:
        raise KeyError(f"unknown locale {code!r}; known: {', '.join(sorted(LOCALES))}") from None
