"""Glyph name validation."""

import unicodedata
from collections.abc import Iterable

from lilufo.exceptions import InvalidGlyphNameError


def validate_glyph_name(name: str) -> str:
    """Check that a glyph or group name is usable as a font key.

    A valid name is a non-empty string with no control characters.

    Args:
        name: Candidate name

    Returns:
        The name, unchanged

    Raises:
        InvalidGlyphNameError: If the name is empty or contains control characters
    """
    if not isinstance(name, str):
        raise InvalidGlyphNameError(str(name), "name must be a string")
    if not name:
        raise InvalidGlyphNameError(name, "name must not be empty")
    for char in name:
        if unicodedata.category(char) == "Cc":
            raise InvalidGlyphNameError(
                name, f"name contains control character U+{ord(char):04X}"
            )
    return name


def validate_glyph_names(names: Iterable[str]) -> list[str]:
    """Validate every name, preserving order and duplicates."""
    return [validate_glyph_name(name) for name in names]
