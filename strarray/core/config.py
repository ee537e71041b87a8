"""
Typed configuration for the delimited string converter.

Options can be given in Python directly or loaded from a YAML file. Keys may
use either snake_case names or the camelCase property names used by the
original binding frameworks (``charsToDelete``, ``emptyArrayAsNull``,
``trimValues``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from strarray.core.errors import InvalidInputError
from strarray.utils.split_fields import DEFAULT_SEPARATOR

LOGGER = logging.getLogger(__name__)

CONFIG_SECTION = "converter"


class ConverterConfig(BaseModel):
    """Immutable options for :class:`DelimitedStringArrayConverter`."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    separator: str = Field(default=DEFAULT_SEPARATOR, description="Literal delimiter used to split and join.")
    chars_to_delete: Optional[str] = Field(
        default=None,
        alias="charsToDelete",
        description='Characters removed from every token before trimming, e.g. "\\r\\n".',
    )
    empty_array_as_null: bool = Field(default=False, alias="emptyArrayAsNull")
    trim_values: bool = Field(default=True, alias="trimValues")

    @field_validator("separator")
    @classmethod
    def ensure_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must be a non-empty string")
        return value

    @field_validator("chars_to_delete")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


def build_converter_config(options: Dict[str, Any]) -> ConverterConfig:
    """Validate a mapping of options, surfacing failures as InvalidInputError."""
    try:
        return ConverterConfig.model_validate(options)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid converter options: {exc.errors()[0]['msg']}") from exc


def read_yaml_file(path: Path) -> Dict[str, Any]:
    """Load a YAML file and return a dictionary."""
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at root of {path}, received {type(data)}")
    return data


def load_converter_config(path: Path) -> ConverterConfig:
    """Read converter options from YAML, either top-level or under ``converter:``."""
    path = path.expanduser().resolve()
    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise InvalidInputError(f"Invalid converter config in {path}") from exc
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ValueError(f"Expected mapping under '{CONFIG_SECTION}' in {path}")
    LOGGER.debug("Loaded converter options from %s: %s", path, sorted(section))
    try:
        return ConverterConfig.model_validate(section)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid converter config in {path}") from exc


def merge_converter_config(base: ConverterConfig, overrides: Dict[str, Any]) -> ConverterConfig:
    """
    Return a new ConverterConfig with ``overrides`` applied on top of ``base``.

    ``None`` values are skipped so CLI flags that were not passed leave the
    base value alone.
    """
    payload = base.model_dump()
    payload.update({key: value for key, value in overrides.items() if value is not None})
    return build_converter_config(payload)


__all__ = [
    "CONFIG_SECTION",
    "ConverterConfig",
    "build_converter_config",
    "load_converter_config",
    "merge_converter_config",
    "read_yaml_file",
]
