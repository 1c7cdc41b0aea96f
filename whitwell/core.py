"""
Whitwell Core

Steadman Whitwell's "rational system of geographic nomenclature": a place
is named by transliterating its latitude and longitude, digit by digit,
into a two-part, vaguely pronounceable name.

Historical names were not always built the same way round. Some start the
latitude from the vowel table and the longitude from the consonant table,
others the reverse, so names are generated in both constructions and the
decoder accepts either.
"""

import logging

from .encoder import consonant_build, vowel_build
from .errors import FormatError
from .parser import parse_word
from .tables import CONSONANTS, VOWELS

logger = logging.getLogger(__name__)


def to_whitwell(latitude, longitude) -> tuple[str, str]:
    """
    Generate both Whitwell names for a latitude/longitude pair.

    Coordinates are truncated to two decimals. North and east are
    positive, south and west negative; either a sign or a trailing
    N/S/E/W may be used, but not both.

    Args:
        latitude: Signed number, or numeral string such as ``"37.37N"``.
        longitude: Signed number, or numeral string such as ``"122.03W"``.

    Returns:
        Tuple of (vowel-first latitude name, consonant-first latitude name).

    Raises:
        RangeError: If either coordinate is outside -180..180.
        FormatError: If either coordinate is not a number.
        ValidationError: On conflicting or repeated sign indicators.
    """
    names = (
        f"{vowel_build(latitude)} {consonant_build(longitude)}",
        f"{consonant_build(latitude)} {vowel_build(longitude)}",
    )
    logger.debug("Named (%r, %r) as %s", latitude, longitude, names)
    return names


def from_whitwell(name: str, signed: bool = False) -> tuple:
    """
    Convert a Whitwell name back into a latitude/longitude pair.

    Letters beyond those needed for two decimals are read as further
    decimal places.

    Args:
        name: Two words, latitude first.
        signed: If True, return signed floats instead of strings with
            trailing hemisphere letters.

    Returns:
        Tuple of (latitude, longitude).

    Raises:
        FormatError: If the name is not two words or a word cannot be parsed.
        ValidationError: If a sign consonant is misplaced.
    """
    words = name.split()
    if len(words) != 2:
        raise FormatError(f"Expected a two-word name, got '{name}'")

    lat = parse_word(words[0])
    lon = parse_word(words[1])

    if signed:
        return lat.signed(), lon.signed()
    return lat.with_hemisphere("S", "N"), lon.with_hemisphere("W", "E")


# Short names for the two operations.
encode = to_whitwell
decode = from_whitwell


def scheme() -> dict:
    """Return the transliteration table, digit by digit."""
    return {
        str(digit): {"vowel": VOWELS[digit], "consonant": CONSONANTS[digit]}
        for digit in (1, 2, 3, 4, 5, 6, 7, 8, 9, 0)
    }
