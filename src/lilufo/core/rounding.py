"""Coordinate rounding to an even grid."""

import math
import re

# ASCII decimal literal only: no whitespace, underscores or non-ASCII digits.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_coordinate(value: str) -> float | None:
    """Parse a coordinate attribute value.

    Returns:
        The finite float value, or None if the text is not a finite decimal number
    """
    if not isinstance(value, str) or _DECIMAL_RE.fullmatch(value) is None:
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero.

    Python's built-in round() rounds halves to even, which would map 3.0 / 2
    to 2 rather than 4.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def snap_to_grid(number: float, grid: int = 2) -> int:
    """Snap a number to the nearest multiple of grid."""
    return round_half_away_from_zero(number / grid) * grid


def round_to_even(value: str, grid: int = 2) -> str:
    """Round a coordinate string to the nearest even integer.

    Unparsable values are treated as 0.

    Examples:
        >>> round_to_even("3")
        '4'
        >>> round_to_even("-2.9")
        '-2'
        >>> round_to_even("abc")
        '0'
    """
    number = parse_coordinate(value)
    return str(snap_to_grid(number if number is not None else 0.0, grid))


def is_even(value: str, grid: int = 2) -> bool:
    """Check that a coordinate string is an integer multiple of grid."""
    number = parse_coordinate(value)
    if number is None or not number.is_integer():
        return False
    return int(number) % grid == 0
