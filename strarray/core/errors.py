"""Exceptions raised by the converter API."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised for non-string input, non-array values, or inconsistent options."""


__all__ = ["InvalidInputError"]
