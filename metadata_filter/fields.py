"""
Helpers for building filter sets that share filter functions across fields.
"""

from __future__ import annotations

import logging
from typing import Any

from metadata_filter.validation import (
    FilterFunctions,
    validate_fields,
    validate_filter_functions,
)

logger = logging.getLogger(__name__)


def create_filter_set_for_fields(
    fields: Any, fn: Any
) -> dict[str, FilterFunctions]:
    """Build a filter set that maps every field in *fields* to *fn*.

    *fn* is not copied: all fields share the same function or list object.
    The result is typically passed to ``create_filter()`` or
    ``MetadataFilter.append()``.

    Args:
        fields: Non-empty list of non-empty field names.
        fn: A filter function or a list of filter functions.

    Returns:
        Dict of ``field -> fn`` in the order of *fields*.

    Raises:
        TypeMismatchError: If *fields* is not a list of strings, or *fn* is
            not a callable / list of callables.
        EmptyCollectionError: If *fields* (or a list *fn*) is empty.
        EmptyStringError: If a field name is an empty string.

    Example::

        create_filter_set_for_fields(["artist", "album"], [str.strip, fix_case])
        # {"artist": [str.strip, fix_case], "album": [str.strip, fix_case]}
    """
    validate_fields(fields)
    validate_filter_functions(fn)

    logger.debug("Creating filter set for fields %s", list(fields))
    return {field: fn for field in fields}
