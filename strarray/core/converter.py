"""Conversion between delimited text and lists of strings."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, List, Optional, Protocol, runtime_checkable

from strarray.core.config import ConverterConfig, build_converter_config
from strarray.core.errors import InvalidInputError
from strarray.utils.split_fields import (
    delimited_list_to_list,
    list_to_delimited_string,
    trim_elements,
)

LOGGER = logging.getLogger(__name__)

StringArray = Optional[List[str]]


@runtime_checkable
class TextConverter(Protocol):
    """Anything that can turn text into a value and back."""

    def parse(self, text: str) -> Any:
        ...

    def format(self, value: Any) -> str:
        ...


def _as_array(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidInputError(f"Expected a sequence of strings, got {type(value).__name__}")
    return list(value)


class DelimitedStringArrayConverter:
    """Split delimited text into a list of strings and join it back.

    The converter is stateless: ``parse`` and ``format`` take and return the
    value explicitly, so one instance can be shared freely.

    Example:
        converter = DelimitedStringArrayConverter(separator=";", chars_to_delete="\\r\\n")
        converter.parse("a\\r\\n; b")   # ["a", "b"]
        converter.format(["a", "b"])    # "a;b"
    """

    def __init__(self, config: ConverterConfig | None = None, **options: Any):
        if config is not None and options:
            raise InvalidInputError("Pass either a ConverterConfig or keyword options, not both")
        self.config = config if config is not None else build_converter_config(options)

    @property
    def separator(self) -> str:
        return self.config.separator

    def parse(self, text: str) -> StringArray:
        """Convert ``text`` into a list of tokens, or ``None`` per ``empty_array_as_null``."""
        if not isinstance(text, str):
            raise InvalidInputError(f"Expected text to parse, got {type(text).__name__}")
        tokens = delimited_list_to_list(text, self.config.separator, self.config.chars_to_delete)
        if self.config.trim_values:
            tokens = trim_elements(tokens)
        LOGGER.debug("Parsed %d token(s) using separator %r", len(tokens), self.config.separator)
        if self.config.empty_array_as_null and not tokens:
            return None
        return tokens

    def format(self, value: Any) -> str:
        """Join ``value`` with the separator; ``None`` renders as an empty string."""
        return list_to_delimited_string(_as_array(value), self.config.separator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"


class StringArrayEditor:
    """Stateful adapter for frameworks that poll an editor for its current value.

    ``parse`` stores the converted value instead of returning it and ``format``
    renders whatever is currently stored. Instances are not thread-safe.
    """

    def __init__(self, converter: DelimitedStringArrayConverter | None = None, **options: Any):
        if converter is not None and options:
            raise InvalidInputError("Pass either a converter or keyword options, not both")
        self.converter = converter or DelimitedStringArrayConverter(**options)
        self._value: StringArray = None

    def parse(self, text: str) -> None:
        self._value = self.converter.parse(text)

    def format(self) -> str:
        return self.converter.format(self._value)

    def get_value(self) -> StringArray:
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = None if value is None else _as_array(value)

    @property
    def value(self) -> StringArray:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self.set_value(value)


__all__ = [
    "DelimitedStringArrayConverter",
    "StringArray",
    "StringArrayEditor",
    "TextConverter",
]
