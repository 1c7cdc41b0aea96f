"""
Builds single Whitwell words from coordinates.
"""

import logging

from .normalizer import digits_of, two_decimal
from .tables import CONSONANT_FIRST_SIGN, VOWEL_FIRST_SIGN, Table
from .validator import CoordinateValidator

logger = logging.getLogger(__name__)

_validator = CoordinateValidator()


def build_word(coord, first: Table, sign: str) -> str:
    """
    Transliterate one coordinate into a capitalized word.

    Digits are looked up alternately in the two tables, starting from
    ``first``. For a negative coordinate the sign consonant is fused to
    the first vowel-table letter, and the next digit is read from the
    vowel table again.

    Args:
        coord: A signed number, or a numeral string with an optional
            trailing hemisphere letter.
        first: The table the word starts from.
        sign: The sign consonant used by this construction.

    Returns:
        The word, first letter capitalized.

    Raises:
        ValidationError: On conflicting or repeated sign indicators.
        FormatError: If the coordinate is not a number.
        RangeError: If the coordinate is outside -180..180.
    """
    signed = _validator.validate(coord)
    normalized = two_decimal(signed.residual)

    letters = []
    table = first
    sign_inserted = False
    for digit in digits_of(normalized):
        letter = table.letter_for(digit)
        if signed.negative and table is Table.VOWEL and not sign_inserted:
            letter += sign
            sign_inserted = True
            # Stay on the vowel table for the next digit.
            table = table.other
        letters.append(letter)
        table = table.other

    word = "".join(letters)
    logger.debug("Encoded %r (%s-first) as %r", signed.original, first.value, word)
    return word[:1].upper() + word[1:]


def vowel_build(coord) -> str:
    """Build a word starting from the vowel table."""
    return build_word(coord, Table.VOWEL, VOWEL_FIRST_SIGN)


def consonant_build(coord) -> str:
    """Build a word starting from the consonant table."""
    return build_word(coord, Table.CONSONANT, CONSONANT_FIRST_SIGN)
