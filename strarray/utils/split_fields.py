"""Tokenizing helpers shared by the converter and the CLI."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

DEFAULT_SEPARATOR = ","


def delete_any(value: str, chars_to_delete: Optional[str]) -> str:
    """Remove every occurrence of each character in ``chars_to_delete``."""
    if not value or not chars_to_delete:
        return value
    return value.translate({ord(char): None for char in chars_to_delete})


def delimited_list_to_list(
    text: str,
    separator: str = DEFAULT_SEPARATOR,
    chars_to_delete: Optional[str] = None,
) -> List[str]:
    """Split ``text`` on every literal occurrence of ``separator``.

    Empty text yields no tokens at all, while adjacent or trailing separators
    yield empty tokens. Characters in ``chars_to_delete`` are removed from each
    token, not from the text as a whole.
    """

    if not separator:
        raise ValueError("separator must be a non-empty string")
    if not text:
        return []
    return [delete_any(token, chars_to_delete) for token in text.split(separator)]


def trim_elements(values: Iterable[str]) -> List[str]:
    """Strip surrounding whitespace from each element."""
    return [value.strip() for value in values]


def list_to_delimited_string(values: Iterable[Any], separator: str = DEFAULT_SEPARATOR) -> str:
    # str() each element so tuples of ints etc. still render
    return separator.join(str(value) for value in values)


__all__ = [
    "DEFAULT_SEPARATOR",
    "delete_any",
    "delimited_list_to_list",
    "list_to_delimited_string",
    "trim_elements",
]
