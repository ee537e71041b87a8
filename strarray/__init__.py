"""
Delimited text <-> string list conversion for property-binding frameworks.

The public surface is re-exported from :mod:`strarray.core` so callers can
``from strarray import DelimitedStringArrayConverter`` without caring about
the module layout.
"""

from importlib import metadata

from .core import (
    ConverterConfig,
    DelimitedStringArrayConverter,
    InvalidInputError,
    StringArrayEditor,
    TextConverter,
)


def get_version() -> str:
    """Return the installed project version."""
    try:
        return metadata.version("strarray")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "ConverterConfig",
    "DelimitedStringArrayConverter",
    "InvalidInputError",
    "StringArrayEditor",
    "TextConverter",
    "get_version",
]
