"""
Coordinate normalization for name generation.
"""

import re
from decimal import Decimal

from .errors import FormatError, RangeError


MAX_DEGREES = 180
DECIMAL_PLACES = 2

_NOT_NUMERIC = re.compile(r"[^\d.]")
_LEADING_ZEROS = re.compile(r"^0*")
_NUMERIC_PREFIX = re.compile(r"^\d*\.?\d*")
_TWO_DECIMAL = re.compile(r"^(\d{0,3}\.\d{%d})" % DECIMAL_PLACES)


def coordinate_text(coord) -> str:
    """
    Render a coordinate as the string the rest of the codec works on.

    Strings pass through untouched. Numbers use their usual ``str()``
    form, except that exponent notation is expanded to fixed-point.
    """
    if isinstance(coord, str):
        return coord
    text = str(coord)
    if "e" in text.lower():
        text = format(coord, "f")
    return text


def two_decimal(coord) -> str:
    """
    Normalize a coordinate to at most three integer digits and exactly two
    decimals.

    Sign and hemisphere letters are discarded; the caller tracks the sign.
    Extra decimals are truncated, not rounded.

    Raises:
        RangeError: If the absolute value is above 180.
        FormatError: If the digits cannot be read as one decimal number.
    """
    text = _NOT_NUMERIC.sub("", coordinate_text(coord))
    text = _LEADING_ZEROS.sub("", text, count=1) or "0"

    if _magnitude(text) > MAX_DEGREES:
        raise RangeError(f"{text} must be between -{MAX_DEGREES} and +{MAX_DEGREES}")

    if "." not in text:
        text += "."
    # Pad, then cut back to two places.
    text += "0" * DECIMAL_PLACES
    match = _TWO_DECIMAL.match(text)
    if match is None:
        raise FormatError(f"Cannot normalize coordinate {coord!r}")
    return match.group(1)


def digits_of(normalized: str) -> list[int]:
    """Return the digits of a normalized coordinate, decimal point dropped."""
    return [int(c) for c in normalized if c.isdigit()]


def _magnitude(text: str) -> Decimal:
    # Stray extra points are a format problem for the validator; only the
    # leading number counts toward the range check.
    prefix = _NUMERIC_PREFIX.match(text).group(0).rstrip(".")
    if not prefix:
        return Decimal(0)
    return Decimal(prefix)
