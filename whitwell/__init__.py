"""
Whitwell - Rational Geographic Nomenclature

Converts latitude/longitude pairs into Steadman Whitwell's two-part,
pronounceable place names, and converts those names back into
coordinates. Pure numeric transliteration, no place-name lookup.
"""

__version__ = "0.2.0"

from .core import decode, encode, from_whitwell, to_whitwell
from .errors import FormatError, RangeError, ValidationError, WhitwellError

__all__ = [
    "to_whitwell",
    "from_whitwell",
    "encode",
    "decode",
    "WhitwellError",
    "RangeError",
    "FormatError",
    "ValidationError",
]
