"""
Declarative filter configuration for metadata-filter.

A filter can be described in YAML instead of code.  Filter functions are
referenced by import path (``"package.module:attribute"``), so the config
file stays plain data:

.. code-block:: yaml

    filters:
      artist: ["mypkg.cleanup:remove_feat"]
    groups:
      - fields: [artist, track, album]
        functions: ["mypkg.cleanup:remove_zero_width", "builtins:str.strip"]

Key models:
- FilterConfig: Top-level config (per-field ``filters`` + shared ``groups``).
- FieldGroupConfig: A list of functions applied to several fields at once.

Key functions:
- load_config(path) -> FilterConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- resolve_function(reference) -> callable: Import a function reference.
- build_filter(config) -> MetadataFilter: Turn a config into a filter.

``build_filter`` first creates a filter from ``filters`` and then appends
each group in order, so group functions run after field-specific ones.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from metadata_filter.exceptions import ConfigValidationError
from metadata_filter.fields import create_filter_set_for_fields
from metadata_filter.filter import MetadataFilter, create_filter
from metadata_filter.validation import FilterFunction

logger = logging.getLogger(__name__)


class FieldGroupConfig(BaseModel):
    """The same function chain applied to several fields."""

    fields: list[str] = Field(
        ..., min_length=1, description="Field names sharing the functions"
    )
    functions: list[str] = Field(
        ...,
        min_length=1,
        description="Function references ('module:attribute'), applied in order",
    )


class FilterConfig(BaseModel):
    """Top-level filter configuration.

    Maps 1:1 to the YAML file.
    """

    filters: dict[str, list[str]] = Field(
        default_factory=dict,
        description=(
            "Per-field function chains: key = field name, value = list of "
            "function references ('module:attribute')"
        ),
    )
    groups: list[FieldGroupConfig] = Field(
        default_factory=list,
        description="Function chains shared by several fields",
    )

    @model_validator(mode="after")
    def _check_filters_not_empty(self) -> FilterConfig:
        """Validate field names and that no field has an empty function list."""
        for field, references in self.filters.items():
            if not field:
                raise ValueError("Filter field names must not be empty.")
            if not references:
                raise ValueError(
                    f"Field '{field}' has an empty function list. "
                    "Each field must reference at least one function."
                )
        return self


def load_config(path: str | Path) -> FilterConfig:
    """Load and validate a YAML filter config into a FilterConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the config file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded filter config from %s", path)
    return FilterConfig.model_validate(raw)


def save_config(config: FilterConfig, path: str | Path) -> None:
    """Serialize a FilterConfig to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# metadata-filter configuration\n")
        f.write(
            "# Functions are referenced as 'module:attribute', e.g. 'builtins:str.strip'.\n"
            "# Group functions run after the per-field filters.\n\n"
        )
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved filter config to %s", path)


def resolve_function(reference: str) -> FilterFunction:
    """Import the callable named by *reference*.

    The reference has the form ``"module:attribute"``; the attribute part
    may be dotted (``"builtins:str.strip"``).

    Raises:
        ConfigValidationError: If the reference is malformed, cannot be
            imported, or does not point to a callable.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path or module_name.startswith("."):
        raise ConfigValidationError(
            f"Invalid function reference '{reference}': "
            "expected 'module:attribute'"
        )

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigValidationError(
            f"Cannot import module '{module_name}' "
            f"(function reference '{reference}'): {e}"
        ) from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ConfigValidationError(
                f"Function reference '{reference}' not found: "
                f"no attribute '{attr}'"
            ) from e

    if not callable(obj):
        raise ConfigValidationError(
            f"Function reference '{reference}' is not callable "
            f"(got '{type(obj).__name__}')"
        )
    return obj


def build_filter(config: FilterConfig) -> MetadataFilter:
    """Build a MetadataFilter from a FilterConfig.

    Args:
        config: The validated FilterConfig.

    Returns:
        A filter with every ``filters`` field, followed by every group
        appended in order.

    Raises:
        ConfigValidationError: If a function reference cannot be resolved.
        MetadataFilterError: If a group's field list is invalid (for
            example, an empty field name).
    """
    filter_set = {
        field: [resolve_function(ref) for ref in references]
        for field, references in config.filters.items()
    }
    metadata_filter = create_filter(filter_set)

    for group in config.groups:
        functions = [resolve_function(ref) for ref in group.functions]
        metadata_filter = metadata_filter.append(
            create_filter_set_for_fields(group.fields, functions)
        )

    logger.info(
        "Built filter from config: %d field(s), %d group(s)",
        len(metadata_filter.get_fields()),
        len(config.groups),
    )
    return metadata_filter
