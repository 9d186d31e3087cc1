"""
Apply a ``MetadataFilter`` to whole records and DataFrames.

Two entry points:

- ``filter_record()`` for a single ``field -> text`` mapping, such as the
  artist/track/album of one song.
- ``filter_frame()`` for a table of such records, one column per field.

Neither function mutates its input.  Values the filter has no chain for
are copied as-is, and missing values (``None``, ``NaN``) pass through
untouched, the same way ``filter_field`` treats empty text.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pandas as pd

from metadata_filter.exceptions import UnknownFieldError
from metadata_filter.filter import MetadataFilter

logger = logging.getLogger(__name__)


def filter_record(
    metadata_filter: MetadataFilter, record: Mapping[str, Any]
) -> dict[str, Any]:
    """Filter every field of *record* that *metadata_filter* supports.

    Args:
        metadata_filter: The filter to apply.
        record: Mapping of field name -> text.

    Returns:
        A new dict with the same keys, in the same order.
    """
    return {
        field: (
            metadata_filter.filter_field(field, value)
            if metadata_filter.can_filter_field(field)
            else value
        )
        for field, value in record.items()
    }


def filter_frame(
    metadata_filter: MetadataFilter,
    df: pd.DataFrame,
    columns: list[str] | None = None,
) -> pd.DataFrame:
    """Filter the text columns of *df* that *metadata_filter* supports.

    Args:
        metadata_filter: The filter to apply.
        df: Input DataFrame; one column per metadata field.
        columns: Columns to filter.  If ``None``, every registered field
            that exists in *df* is filtered and the rest are left as-is.

    Returns:
        A filtered copy of *df*.

    Raises:
        UnknownFieldError: If a column in *columns* is not registered.
        KeyError: If a column in *columns* does not exist in *df*.
    """
    if columns is None:
        columns = [c for c in df.columns if metadata_filter.can_filter_field(c)]
    else:
        for col in columns:
            if not metadata_filter.can_filter_field(col):
                raise UnknownFieldError(col)
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise KeyError(f"Columns not found in DataFrame: {missing}")

    df = df.copy()
    for col in columns:
        logger.debug("Filtering column %r (%d rows)", col, len(df))
        # map() runs eagerly, so the lambda always sees the current col
        df[col] = df[col].map(lambda value: _filter_cell(metadata_filter, col, value))

    return df


def _filter_cell(metadata_filter: MetadataFilter, field: str, value: Any) -> Any:
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return value
    return metadata_filter.filter_field(field, value)
