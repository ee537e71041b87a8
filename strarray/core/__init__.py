"""
Converter core: configuration, errors and the converters themselves.
"""

from .config import ConverterConfig, load_converter_config, merge_converter_config
from .converter import DelimitedStringArrayConverter, StringArrayEditor, TextConverter
from .errors import InvalidInputError

__all__ = [
    "ConverterConfig",
    "DelimitedStringArrayConverter",
    "InvalidInputError",
    "StringArrayEditor",
    "TextConverter",
    "load_converter_config",
    "merge_converter_config",
]
