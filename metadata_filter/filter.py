"""
The ``MetadataFilter`` value and its factory.

A ``MetadataFilter`` holds, for every registered field, an ordered chain of
filter functions (``str -> str``).  Filtering a field runs the text through
the chain left to right, feeding each function's output into the next one.

Filters are immutable values:

- The field -> chain mapping is validated and normalized once, in
  ``__post_init__``, and stored behind a read-only ``MappingProxyType``.
- ``append()`` and ``extend()`` never touch either operand.  They build a
  new mapping (existing chain first, incoming chain after it) and wrap it
  in a fresh ``MetadataFilter``.

Example::

    f = create_filter({"artist": [str.strip, str.title]})
    f = f.append({"track": str.strip})
    f.filter_field("artist", "  the artist ")  # "The Artist"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from metadata_filter.exceptions import (
    MissingArgumentError,
    TypeMismatchError,
    UnknownFieldError,
)
from metadata_filter.validation import (
    FilterChain,
    FilterSet,
    normalize_filter_set,
    type_name,
    validate_filter_set,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class MetadataFilter:
    """An immutable set of per-field filter chains.

    Attributes:
        filter_set: Read-only mapping of field name -> filter chain.  Any
            mapping accepted by ``validate_filter_set`` can be passed to the
            constructor; it is normalized so that every value is a
            non-empty tuple of callables.
    """

    filter_set: Mapping[str, FilterChain]

    def __post_init__(self) -> None:
        chains = normalize_filter_set(validate_filter_set(self.filter_set))
        object.__setattr__(self, "filter_set", MappingProxyType(chains))

    def __hash__(self) -> int:
        return hash(tuple(self.filter_set.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={self.get_fields()!r})"

    def __reduce__(self):
        # MappingProxyType cannot be pickled; rebuild from a plain dict
        return (type(self), (dict(self.filter_set),))

    # -----------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------

    def can_filter_field(self, field: str) -> bool:
        """Return ``True`` if *field* has filter functions registered."""
        return isinstance(field, str) and field in self.filter_set

    def get_fields(self) -> list[str]:
        """Return the registered field names in registration order."""
        return list(self.filter_set)

    # -----------------------------------------------------------------
    # Filtering
    # -----------------------------------------------------------------

    def filter_field(self, field: str, text: str | None) -> str | None:
        """Run *text* through the filter chain registered for *field*.

        Empty input (``None`` or ``""``) is returned as-is without calling
        any filter function.

        Raises:
            UnknownFieldError: If *field* is not registered.
        """
        if not self.can_filter_field(field):
            raise UnknownFieldError(field)

        if text is None or text == "":
            return text

        for fn in self.filter_set[field]:
            text = fn(text)
        return text

    # -----------------------------------------------------------------
    # Merging
    # -----------------------------------------------------------------

    def append(self, filter_set: FilterSet) -> MetadataFilter:
        """Return a new filter with *filter_set* merged into this one.

        For fields already present, the new functions run after the
        existing ones.  New fields are added as-is.

        Raises:
            MissingArgumentError: If *filter_set* is ``None``.
            TypeMismatchError: If *filter_set* is malformed.
        """
        chains = normalize_filter_set(validate_filter_set(filter_set))
        logger.debug("Appending filter set with %d field(s)", len(chains))
        return self._merge(chains)

    def extend(self, other: MetadataFilter) -> MetadataFilter:
        """Return a new filter with the chains of *other* merged into this one.

        Same merge rules as ``append()``.

        Raises:
            MissingArgumentError: If *other* is ``None``.
            TypeMismatchError: If *other* is not a ``MetadataFilter``.
        """
        if other is None:
            raise MissingArgumentError("No filter is specified!")
        if not isinstance(other, MetadataFilter):
            raise TypeMismatchError(
                f"Invalid filter: expected 'MetadataFilter', got '{type_name(other)}'"
            )
        logger.debug("Extending filter with %d field(s)", len(other.filter_set))
        return self._merge(other.filter_set)

    def _merge(self, chains: Mapping[str, FilterChain]) -> MetadataFilter:
        # dict() copy keeps the existing key order; new keys go to the end
        merged = dict(self.filter_set)
        for field, chain in chains.items():
            merged[field] = merged.get(field, ()) + tuple(chain)
        return type(self)(merged)


def create_filter(filter_set: Any) -> MetadataFilter:
    """Create a ``MetadataFilter`` from a ``field -> function(s)`` mapping.

    Each value may be a single callable or a list/tuple of callables.

    Args:
        filter_set: Mapping of field name to filter function(s).

    Returns:
        A new ``MetadataFilter``.

    Raises:
        MissingArgumentError: If *filter_set* is ``None``.
        TypeMismatchError: If *filter_set* is not a mapping or contains
            non-callable filter functions.
        EmptyCollectionError: If a field maps to an empty list.
        EmptyStringError: If a field name is an empty string.
    """
    metadata_filter = MetadataFilter(filter_set)
    logger.debug("Created filter for %d field(s)", len(metadata_filter.filter_set))
    return metadata_filter
