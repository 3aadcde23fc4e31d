"""Ordered, first-match-wins collection of negative sign specs."""
from __future__ import annotations

import copy
from collections.abc import Iterator, Sequence

import structlog

from ..errors import ConfigurationError, Context, EmptyCollectionError, InvalidMemberError
from ..models.symbols import SymbolSpec

logger = structlog.get_logger(__name__)


class SpecCollection:
    """SymbolSpecs tried in insertion order; the first to match wins.

    Order matters when conventions overlap textually, e.g. a trailing minus
    tried ahead of a parenthesis pair.
    """

    def __init__(self, specs: Sequence[SymbolSpec] | None = None, *, context: Context = None):
        self._specs: list[SymbolSpec] = []
        for spec in specs or ():
            self.add(spec, context=context)

    def add(self, spec: SymbolSpec, *, context: Context = None) -> None:
        """Validate *spec* and append it; nothing is appended on failure."""
        if not isinstance(spec, SymbolSpec):
            raise ConfigurationError(f"expected a SymbolSpec, got {type(spec).__name__}", context=context)
        spec.validate(context=context)
        self._specs.append(spec)
        logger.debug("symbol_spec_added", index=len(self._specs) - 1, spec=repr(spec))

    def add_leading(self, chars: str | Sequence[str], *, context: Context = None) -> SymbolSpec:
        spec = SymbolSpec.new_leading(chars, context=context)
        self.add(spec, context=context)
        return spec

    def add_trailing(self, chars: str | Sequence[str], *, context: Context = None) -> SymbolSpec:
        spec = SymbolSpec.new_trailing(chars, context=context)
        self.add(spec, context=context)
        return spec

    def add_leading_and_trailing(
        self,
        leading: str | Sequence[str],
        trailing: str | Sequence[str],
        *,
        context: Context = None,
    ) -> SymbolSpec:
        spec = SymbolSpec.new_leading_and_trailing(leading, trailing, context=context)
        self.add(spec, context=context)
        return spec

    def validate(self, *, context: Context = None) -> None:
        """Raise if the collection is empty or any member is invalid.

        The first failing member is reported with its position.
        """
        if not self._specs:
            raise EmptyCollectionError("the sign spec collection is empty", context=context)
        for idx, spec in enumerate(self._specs):
            try:
                spec.validate()
            except ConfigurationError as exc:
                raise InvalidMemberError(idx, exc.detail, context=context) from exc

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ConfigurationError:
            return False
        return True

    def reset_processing_state(self) -> None:
        for spec in self._specs:
            spec.reset_processing_state()

    def found_spec(self) -> tuple[int, SymbolSpec] | None:
        """Return ``(index, spec)`` of the first member whose symbols are all found."""
        for idx, spec in enumerate(self._specs):
            if spec.found_symbols:
                return idx, spec
        return None

    def clone(self) -> SpecCollection:
        """Independent copy for use by another parse."""
        return copy.deepcopy(self)

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[SymbolSpec]:
        return iter(self._specs)

    def __getitem__(self, index: int) -> SymbolSpec:
        return self._specs[index]

    def __repr__(self) -> str:
        return f"SpecCollection({self._specs!r})"
