"""
Input validation and normalization for metadata-filter.

All checks that guard the public API live here, so that ``MetadataFilter``
and the helper constructors never inspect raw argument types themselves.
Each ``validate_*`` function either returns its (unchanged) argument or
raises one of the typed errors from ``metadata_filter.exceptions``.

Validation is all-or-nothing: a filter set is checked completely before
any chain is built from it.

Normalization turns the two accepted shapes of a field's filter functions,
a single callable or a list/tuple of callables, into one uniform shape:
a non-empty tuple of callables (a *filter chain*).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Union

from metadata_filter.exceptions import (
    EmptyCollectionError,
    EmptyStringError,
    MissingArgumentError,
    TypeMismatchError,
)

FilterFunction = Callable[[str], str]
FilterChain = tuple[FilterFunction, ...]
FilterFunctions = Union[FilterFunction, Sequence[FilterFunction]]
FilterSet = Mapping[str, FilterFunctions]

# Sequence types accepted as a list of filter functions or field names.
# ``str`` is a Sequence too, so a plain isinstance check is not enough.
_SEQUENCE_TYPES = (list, tuple)


def type_name(value: Any) -> str:
    """Return the name used for *value* in error messages."""
    return type(value).__name__


def validate_filter_set(filter_set: Any) -> FilterSet:
    """Check that *filter_set* maps field names to filter functions.

    Args:
        filter_set: Candidate mapping of ``field -> function | [functions]``.

    Returns:
        The same object, once every key and value has been checked.

    Raises:
        MissingArgumentError: If *filter_set* is ``None``.
        TypeMismatchError: If *filter_set* is not a mapping, a key is not a
            string, or a value is not a callable / sequence of callables.
        EmptyStringError: If a key is an empty string.
        EmptyCollectionError: If a value is an empty sequence.
    """
    if filter_set is None:
        raise MissingArgumentError("No filter set is specified!")

    if not isinstance(filter_set, Mapping):
        raise TypeMismatchError(
            f"Invalid filter set: expected 'object', got '{type_name(filter_set)}'"
        )

    for field, fn in filter_set.items():
        validate_field(field)
        validate_filter_functions(fn)

    return filter_set


def validate_filter_functions(fn: Any) -> FilterFunctions:
    """Check a single filter function or a list of filter functions.

    For a list, the type of the first non-callable element is reported.

    Raises:
        TypeMismatchError: If *fn* (or any element of it) is not callable.
        EmptyCollectionError: If *fn* is an empty list.
    """
    if isinstance(fn, _SEQUENCE_TYPES):
        if not fn:
            raise EmptyCollectionError(
                "Invalid filter functions: received an empty array"
            )
        for item in fn:
            _validate_filter_function(item)
    else:
        _validate_filter_function(fn)

    return fn


def _validate_filter_function(fn: Any) -> None:
    if not callable(fn):
        raise TypeMismatchError(
            f"Invalid filter function: expected 'function', got '{type_name(fn)}'"
        )


def validate_field(field: Any) -> str:
    """Check that *field* is a non-empty string.

    Raises:
        TypeMismatchError: If *field* is not a string.
        EmptyStringError: If *field* is an empty string.
    """
    if not isinstance(field, str):
        raise TypeMismatchError(
            f"Invalid field: expected 'string', got '{type_name(field)}'"
        )
    if not field:
        raise EmptyStringError(
            "Invalid field: expected 'string', got an empty string"
        )
    return field


def validate_fields(fields: Any) -> Sequence[str]:
    """Check that *fields* is a non-empty list of non-empty strings.

    Raises:
        TypeMismatchError: If *fields* is not a list/tuple, or one of its
            elements is not a string.
        EmptyCollectionError: If *fields* is empty.
        EmptyStringError: If one of its elements is an empty string.
    """
    if not isinstance(fields, _SEQUENCE_TYPES):
        raise TypeMismatchError(
            "Invalid 'fields' argument: expected 'string[]', "
            f"got '{type_name(fields)}'"
        )
    if not fields:
        raise EmptyCollectionError(
            "Invalid 'fields' argument: received an empty array"
        )
    for field in fields:
        validate_field(field)
    return fields


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def normalize_filter_functions(fn: FilterFunctions) -> FilterChain:
    """Convert an already validated function or list into a filter chain."""
    if isinstance(fn, _SEQUENCE_TYPES):
        return tuple(fn)
    return (fn,)


def normalize_filter_set(filter_set: FilterSet) -> dict[str, FilterChain]:
    """Convert an already validated filter set into ``field -> chain``.

    Key order of *filter_set* is preserved.
    """
    return {
        field: normalize_filter_functions(fn)
        for field, fn in filter_set.items()
    }
