"""Helpers for character ("rune") sequences used as symbols and buffers."""
from __future__ import annotations

from collections.abc import Sequence

from ..errors import ConfigurationError, Context

ZERO_RUNE = "\x00"


def to_runes(chars: str | Sequence[str] | None) -> tuple[str, ...]:
    """Normalise a string or a sequence of characters into a rune tuple."""
    if chars is None:
        return ()
    if isinstance(chars, str):
        return tuple(chars)
    return tuple(chars)


def check_runes(runes: Sequence[str], field_name: str, *, context: Context = None) -> None:
    """Raise ``ConfigurationError`` if *runes* is empty or holds an invalid character.

    A valid rune is a one-character string other than the zero-value ``"\\x00"``.
    """
    if len(runes) == 0:
        raise ConfigurationError(f"'{field_name}' is empty", context=context)
    for idx, rune in enumerate(runes):
        if not isinstance(rune, str) or len(rune) != 1:
            raise ConfigurationError(
                f"'{field_name}[{idx}]' is not a single character: {rune!r}",
                context=context,
            )
        if rune == ZERO_RUNE:
            raise ConfigurationError(
                f"'{field_name}[{idx}]' is a zero-value character",
                context=context,
            )


def runes_match_at(runes: Sequence[str], buffer: Sequence[str], index: int) -> bool:
    """Return ``True`` when *runes* occur contiguously in *buffer* at *index*.

    A pattern running past the end of the buffer does not match.
    """
    if index < 0 or index + len(runes) > len(buffer):
        return False
    for offset, rune in enumerate(runes):
        if buffer[index + offset] != rune:
            return False
    return True


def is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"
