"""Presence rule shared by resolution, classification, and filtering."""

from __future__ import annotations


def presence(value: str | None) -> bool:
    """Return True if *value* is a string that is non-empty after trimming.

    Examples:
        >>> presence("dev.example.com")
        True
        >>> presence("   ")
        False
        >>> presence(None)
        False
    """
    return isinstance(value, str) and value.strip() != ""
