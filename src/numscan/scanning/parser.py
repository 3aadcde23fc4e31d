"""Extract one number from a character buffer using the scan engine.

This is the reference consumer of the engine: it owns the cursor, pushes
digits into a ``NumericKernel`` and asks the sign collection and separator
specs what sits at each non-digit position. Characters that are neither
digits nor recognised symbols (currency signs, spaces, letters) are skipped.

Scanning stops at the first of:

* a completed trailing or paired negative sign, e.g. the ``)`` in ``(12)``;
* a termination delimiter, once at least one digit has been seen;
* the search-length limit;
* the end of the buffer.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from ..config import get_settings
from ..errors import ConfigurationError, Context, RangeError, StateError
from ..models.kernel import NumericKernel, NumericSign
from ..models.results import NumberParseResult, ScanResult, TerminationReason
from ..models.separators import SeparatorSpec
from ..models.symbols import SignPosition
from ..utils.runes import is_digit, runes_match_at
from .collection import SpecCollection
from .engine import search_collection, search_for_decimal_separator, search_for_integer_separator

logger = structlog.get_logger(__name__)


def extract_number_runes(
    text: str | Sequence[str],
    signs: SpecCollection,
    decimal_separator: SeparatorSpec | None = None,
    integer_separators: Sequence[SeparatorSpec] = (),
    *,
    start_index: int = 0,
    search_length: int | None = None,
    terminators: Sequence[str] = (),
    context: Context = None,
) -> NumberParseResult:
    """Parse the number starting at *start_index* of *text*.

    Parameters
    ----------
    text:
        The buffer, a ``str`` or a sequence of single characters.
    signs:
        Negative sign conventions, tried in priority order. Their processing
        state is reset before scanning starts.
    decimal_separator:
        The decimal separator spec, or ``None`` for integer-only parsing.
    integer_separators:
        Grouping separators consumed inside the integer part.
    search_length:
        Maximum number of characters to examine; defaults to
        ``Settings.max_search_length`` (unlimited when unset).
    terminators:
        Strings that end the number once a digit has been seen.

    Returns
    -------
    NumberParseResult
        The validated kernel plus where and why scanning stopped. When no
        digit was found the kernel is left empty and is not validated.
    """
    if text is None:
        raise StateError("no text was supplied", context=context)
    if signs is None:
        raise StateError("no sign collection was supplied", context=context)
    buffer_len = len(text)
    if buffer_len == 0:
        raise ConfigurationError("the text is empty; there is nothing to parse", context=context)
    if start_index < 0 or start_index >= buffer_len:
        raise RangeError(
            f"start index {start_index} is outside the text (last index {buffer_len - 1})",
            context=context,
        )
    if search_length is None:
        search_length = get_settings().max_search_length
    if search_length is not None and search_length < 1:
        raise RangeError(f"search length {search_length} must be at least 1", context=context)
    for idx, terminator in enumerate(terminators):
        if not terminator:
            raise ConfigurationError(f"terminator [{idx}] is empty", context=context)

    signs.validate(context=context)
    signs.reset_processing_state()
    if decimal_separator is not None:
        decimal_separator.validate_decimal(context=context)
        decimal_separator.reset_processing_state()
    for spec in integer_separators:
        spec.validate_integer_grouping(context=context)

    end = buffer_len if search_length is None else min(buffer_len, start_index + search_length)

    kernel = NumericKernel()
    sign = NumericSign.ZERO
    found_digit = False
    found_decimal = False
    integer_separator_count = 0
    negative_done = False
    sign_result: ScanResult | None = None
    termination: TerminationReason | None = None
    last_index = start_index

    i = start_index
    while i < end:
        char = text[i]

        if is_digit(char):
            found_digit = True
            if char != "0" and sign == NumericSign.ZERO:
                sign = NumericSign.POSITIVE
            if found_decimal:
                kernel.add_fractional_digit(char, context=context)
            else:
                kernel.add_integer_digit(char, context=context)
            last_index = i
            i += 1
            continue

        if found_digit and _terminator_at(terminators, text, i):
            termination = TerminationReason.TERMINATION_DELIMITER
            break

        if not negative_done:
            result = search_collection(signs, text, i, found_digit, context=context)
            if result.matched and not result.previously_found:
                if result.complete:
                    negative_done = True
                    sign = NumericSign.NEGATIVE
                    sign_result = result
                last_index = result.consumed_index
                i = result.consumed_index + 1
                if result.complete and result.position == SignPosition.AFTER:
                    termination = TerminationReason.SIGN_COMPLETED
                    break
                continue

        if decimal_separator is not None and not found_decimal:
            width = len(decimal_separator.chars)
            # Ahead of the integer part a separator only counts when a digit follows, as in ".5"
            if found_digit or (
                runes_match_at(decimal_separator.chars, text, i) and i + width < end and is_digit(text[i + width])
            ):
                result = search_for_decimal_separator(decimal_separator, text, i, context=context)
                if result.matched:
                    found_decimal = True
                    if not found_digit:
                        kernel.add_integer_digit("0", context=context)
                        found_digit = True
                    last_index = result.consumed_index
                    i = result.consumed_index + 1
                    continue

        if integer_separators and found_digit and not found_decimal:
            result = search_for_integer_separator(integer_separators, text, i, context=context)
            if result.matched:
                integer_separator_count += 1
                last_index = result.consumed_index
                i = result.consumed_index + 1
                continue

        last_index = i
        i += 1

    if termination is None:
        termination = TerminationReason.SEARCH_LENGTH_LIMIT if end < buffer_len else TerminationReason.END_OF_BUFFER

    next_index: int | None = last_index + 1
    if termination == TerminationReason.TERMINATION_DELIMITER:
        next_index = i
    if next_index >= buffer_len:
        next_index = None

    if found_digit:
        kernel.set_sign(sign)
        kernel.validate(context=context)

    logger.debug(
        "number_parse_terminated",
        reason=termination.value,
        start_index=start_index,
        last_index=last_index,
        number=str(kernel) if found_digit else None,
    )

    return NumberParseResult(
        kernel=kernel,
        termination=termination,
        start_index=start_index,
        last_search_index=last_index,
        next_search_index=next_index,
        remainder="".join(text[next_index:]) if next_index is not None else "",
        found_numeric_digits=found_digit,
        found_decimal_separator=found_decimal,
        found_integer_separators=integer_separator_count,
        sign_result=sign_result,
    )


def _terminator_at(terminators: Sequence[str], text: Sequence[str], index: int) -> bool:
    return any(runes_match_at(tuple(t), text, index) for t in terminators)
