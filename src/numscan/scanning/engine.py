"""Position-anchored symbol search over a character buffer.

The functions here are stateless: all scan state lives on the specs they are
handed (digit gate and match latches). A buffer is a ``str`` or any sequence
of one-character strings; the caller owns it and it is never modified.

An index equal to the buffer length is the expected end-of-buffer condition
and is reported through ``ScanResult.hit_end_of_buffer``; only a negative
index is an error.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from ..errors import ConfigurationError, Context, RangeError, StateError
from ..models.results import ScanResult
from ..models.separators import SeparatorSpec
from ..models.symbols import SignPosition, SymbolSpec
from .collection import SpecCollection

logger = structlog.get_logger(__name__)


def _check_target(buffer: Sequence[str] | None, start_index: int, context: Context) -> ScanResult | None:
    """Validate buffer and index; return an end-of-buffer result when exhausted."""
    if buffer is None:
        raise StateError("no buffer was supplied", context=context)
    if len(buffer) == 0:
        raise ConfigurationError("the buffer is empty; there is nothing to search", context=context)
    if start_index < 0:
        raise RangeError(f"start index {start_index} is negative", context=context)
    if start_index >= len(buffer):
        return ScanResult.no_match(start_index, hit_end_of_buffer=True)
    return None


def search_for_symbol(
    spec: SymbolSpec,
    buffer: Sequence[str],
    start_index: int,
    found_first_numeric_digit: bool,
    *,
    context: Context = None,
) -> ScanResult:
    """Match one sign spec against ``buffer[start_index:]``.

    Leading symbols are only tried while no digit has been seen. Trailing
    symbols are only tried after a digit; for a paired spec the trailing
    half additionally requires that the leading half was already found.
    """
    if spec is None:
        raise StateError("no SymbolSpec was supplied", context=context)
    spec.set_found_first_numeric_digit(found_first_numeric_digit)

    exhausted = _check_target(buffer, start_index, context)
    if exhausted is not None:
        return exhausted

    spec.validate(context=context)

    position = spec.position
    if position == SignPosition.BEFORE:
        return _leading_half(spec, buffer, start_index)
    if position == SignPosition.AFTER:
        if not spec.found_first_numeric_digit:
            return ScanResult.no_match(start_index)
        return _trailing_half(spec, buffer, start_index)
    if position == SignPosition.BEFORE_AND_AFTER:
        if not spec.found_first_numeric_digit:
            return _leading_half(spec, buffer, start_index)
        if not spec.found_leading:
            return ScanResult.no_match(start_index)
        return _trailing_half(spec, buffer, start_index)

    raise AssertionError(f"unhandled sign position {position!r}")  # pragma: no cover


def _leading_half(spec: SymbolSpec, buffer: Sequence[str], index: int) -> ScanResult:
    latched = spec.found_leading and not spec.found_first_numeric_digit
    matched, last_index = spec.match_leading_at(buffer, index)
    return _half_result(spec, SignPosition.BEFORE, matched, last_index, index, latched)


def _trailing_half(spec: SymbolSpec, buffer: Sequence[str], index: int) -> ScanResult:
    latched = spec.found_trailing
    matched, last_index = spec.match_trailing_at(buffer, index)
    return _half_result(spec, SignPosition.AFTER, matched, last_index, index, latched)


def _half_result(
    spec: SymbolSpec,
    half: SignPosition,
    matched: bool,
    last_index: int,
    index: int,
    latched: bool,
) -> ScanResult:
    if not matched:
        return ScanResult.no_match(index)
    if not latched:
        logger.debug(
            "symbol_matched",
            spec=repr(spec),
            half=half.value,
            start_index=index,
            last_index=last_index,
            complete=spec.found_symbols,
        )
    return ScanResult(
        matched=True,
        search_index=index,
        consumed_index=last_index,
        previously_found=latched,
        complete=spec.found_symbols,
        position=half,
    )


def search_collection(
    collection: SpecCollection,
    buffer: Sequence[str],
    start_index: int,
    found_first_numeric_digit: bool,
    *,
    context: Context = None,
) -> ScanResult:
    """Try each member of *collection* in order; the first new match wins.

    A member that only repeats an earlier latched match does not stop the
    search, so later members still get their turn. The winning result
    carries the member's position in ``spec_index``.
    """
    if collection is None:
        raise StateError("no SpecCollection was supplied", context=context)
    collection.validate(context=context)
    for spec in collection:
        spec.set_found_first_numeric_digit(found_first_numeric_digit)

    for idx, spec in enumerate(collection):
        result = search_for_symbol(spec, buffer, start_index, found_first_numeric_digit, context=context)
        if result.hit_end_of_buffer:
            return result
        if result.matched and not result.previously_found:
            result.spec_index = idx
            return result
    return ScanResult.no_match(start_index)


def search_for_decimal_separator(
    spec: SeparatorSpec,
    buffer: Sequence[str],
    start_index: int,
    *,
    context: Context = None,
) -> ScanResult:
    """Match a decimal separator at *start_index*.

    Only the first decimal separator of a number counts: once the spec has
    latched, later calls report ``previously_found`` without matching.
    """
    if spec is None:
        raise StateError("no decimal SeparatorSpec was supplied", context=context)
    exhausted = _check_target(buffer, start_index, context)
    if exhausted is not None:
        return exhausted
    spec.validate_decimal(context=context)

    if spec.found:
        return ScanResult(matched=False, search_index=start_index, previously_found=True)
    matched, last_index = spec.match_at(buffer, start_index)
    if not matched:
        return ScanResult.no_match(start_index)
    logger.debug("decimal_separator_matched", separator=spec.text, start_index=start_index, last_index=last_index)
    return ScanResult(matched=True, search_index=start_index, consumed_index=last_index, complete=True)


def search_for_integer_separator(
    specs: Sequence[SeparatorSpec],
    buffer: Sequence[str],
    start_index: int,
    *,
    context: Context = None,
) -> ScanResult:
    """Match any of the integer-grouping separators at *start_index*, in order."""
    if specs is None:
        raise StateError("no integer separator specs were supplied", context=context)
    exhausted = _check_target(buffer, start_index, context)
    if exhausted is not None:
        return exhausted

    for idx, spec in enumerate(specs):
        spec.validate_integer_grouping(context=context)
        matched, last_index = spec.match_at(buffer, start_index)
        if matched:
            return ScanResult(
                matched=True,
                search_index=start_index,
                consumed_index=last_index,
                complete=True,
                spec_index=idx,
            )
    return ScanResult.no_match(start_index)
