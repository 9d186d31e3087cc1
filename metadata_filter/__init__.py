"""
metadata-filter: clean up artist, album and track names with per-field
chains of text filter functions.

Public API surface:

- ``create_filter(filter_set)`` -- **recommended entry point**.  Builds an
  immutable ``MetadataFilter`` from a ``field -> function(s)`` mapping.

- ``create_filter_set_for_fields(fields, fn)`` -- Builds a filter set that
  shares the same function(s) across several fields.

- ``MetadataFilter`` -- ``filter_field()``, ``can_filter_field()``,
  ``get_fields()``, plus ``append()`` / ``extend()`` to derive new filters.

- ``filter_record(...)`` / ``filter_frame(...)`` -- Apply a filter to a
  whole record or a pandas DataFrame.

- ``load_filter(path)`` -- Build a filter from a YAML config file.

Example::

    import metadata_filter

    f = metadata_filter.create_filter(
        metadata_filter.create_filter_set_for_fields(
            ["artist", "track"], [str.strip, str.title]
        )
    )
    f.filter_field("artist", "  some artist ")  # "Some Artist"
"""

from __future__ import annotations

import logging
from pathlib import Path

from metadata_filter.apply import filter_frame, filter_record
from metadata_filter.config import (
    FieldGroupConfig,
    FilterConfig,
    build_filter,
    load_config,
    save_config,
)
from metadata_filter.exceptions import (
    ConfigValidationError,
    EmptyCollectionError,
    EmptyStringError,
    MetadataFilterError,
    MissingArgumentError,
    TypeMismatchError,
    UnknownFieldError,
)
from metadata_filter.fields import create_filter_set_for_fields
from metadata_filter.filter import MetadataFilter, create_filter

__version__ = "1.2.0"

__all__ = [
    "__version__",
    # Core
    "MetadataFilter",
    "create_filter",
    "create_filter_set_for_fields",
    # Applying filters
    "filter_record",
    "filter_frame",
    # Config
    "FilterConfig",
    "FieldGroupConfig",
    "load_config",
    "save_config",
    "build_filter",
    "load_filter",
    # Exceptions
    "MetadataFilterError",
    "MissingArgumentError",
    "TypeMismatchError",
    "EmptyCollectionError",
    "EmptyStringError",
    "UnknownFieldError",
    "ConfigValidationError",
]

logger = logging.getLogger(__name__)


def load_filter(config_path: str | Path) -> MetadataFilter:
    """Load a YAML filter config and build a ``MetadataFilter`` from it.

    Orchestration:
      1. ``load_config()`` -> ``FilterConfig`` (Pydantic validation on load).
      2. ``build_filter()`` -> ``MetadataFilter`` (imports every function
         reference).

    Raises:
        FileNotFoundError: If *config_path* does not exist.
        pydantic.ValidationError: If the config fails Pydantic validation.
        ConfigValidationError: If a function reference cannot be resolved.
    """
    logger.info("load_filter() -- config_path=%s", config_path)
    config = load_config(config_path)
    return build_filter(config)
