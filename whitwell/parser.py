"""
Parser for turning Whitwell words back into coordinates.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from .errors import FormatError, ValidationError
from .normalizer import DECIMAL_PLACES, MAX_DEGREES
from .tables import MATCH_ORDER, SIGN_MARKERS, Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedCoordinate:
    """A single coordinate recovered from one word of a name."""
    word: str
    digits: str
    value: Decimal  # Always non-negative
    negative: bool = False

    def signed(self) -> float:
        """Return the value as a signed number."""
        return -float(self.value) if self.negative else float(self.value)

    def with_hemisphere(self, negative_letter: str, positive_letter: str) -> str:
        """Return the value followed by a hemisphere letter."""
        letter = negative_letter if self.negative else positive_letter
        return f"{self.value}{letter}"


class WordParser:
    """
    Tokenizes one Whitwell word against the two letter tables.

    The word is consumed left to right with a cursor, alternating
    between tables. Right after the first vowel-table letter the parser
    looks, once, for a sign consonant; if it is there the coordinate is
    negative and parsing resumes in the vowel table.

    A parser is good for a single word; create a new one per call.
    """

    def __init__(self, word: str):
        """
        Initialize the parser.

        Args:
            word: The word to parse, in any case.
        """
        self.original = word
        self.word = word.strip().lower()
        self.pos = 0
        self.current = Table.for_word(self.word)
        self.digits: list[str] = []
        self.negative = False
        self._sign_pending = False
        self._sign_checked = False

    def parse(self) -> DecodedCoordinate:
        """
        Parse the word into a coordinate.

        Returns:
            The DecodedCoordinate for the word.

        Raises:
            FormatError: If the word is empty, or some position matches
                nothing in the expected table.
            ValidationError: If a sign consonant turns up where none can be.
        """
        if not self.word:
            raise FormatError("Cannot decode an empty word")

        while self.pos < len(self.word):
            if self._sign_pending:
                self._sign_pending = False
                self._sign_checked = True
                if self._take_sign():
                    continue
            if not self._take_letter():
                self._fail()

        digits = "".join(self.digits)
        value = recover_decimal(digits)
        logger.debug(
            "Decoded %r as digits %s -> %s%s",
            self.original, digits, "-" if self.negative else "", value,
        )
        return DecodedCoordinate(
            word=self.original,
            digits=digits,
            value=value,
            negative=self.negative,
        )

    def remaining(self) -> str:
        """Return the part of the word not yet consumed."""
        return self.word[self.pos:]

    def _take_sign(self) -> bool:
        """Consume a sign consonant at the cursor, if there is one."""
        if self.word[self.pos] not in SIGN_MARKERS:
            return False
        self.pos += 1
        self.negative = True
        # The encoder goes back to the vowel table after the sign.
        self.current = Table.VOWEL
        return True

    def _take_letter(self) -> bool:
        """Consume the longest table entry at the cursor."""
        table = self.current
        for digit in MATCH_ORDER:
            letters = table.letter_for(digit)
            if self.word.startswith(letters, self.pos):
                self.pos += len(letters)
                self.digits.append(str(digit))
                self.current = table.other
                self._sign_pending = table is Table.VOWEL and not self._sign_checked
                return True
        return False

    def _fail(self):
        if self.word[self.pos] in SIGN_MARKERS:
            raise ValidationError(
                f"Unexpected sign character in '{self.original}' at '{self.remaining()}'"
            )
        raise FormatError(
            f"Bad character or sequencing found in '{self.original}' at '{self.remaining()}'"
        )


def recover_decimal(digits: str) -> Decimal:
    """
    Put the decimal point back into a string of decoded digits.

    Names built by the encoder always carry two decimals, so the point
    goes before the last two digits. Longer, hand-built names carry more
    precision: the point keeps moving left until the value is at most 180.
    Fewer than three digits are read as whole degrees.
    """
    if len(digits) <= DECIMAL_PLACES:
        return Decimal(f"{digits}.{'0' * DECIMAL_PLACES}")

    # Built from the digit tuple so no context precision applies.
    coefficient = tuple(int(d) for d in digits)
    places = DECIMAL_PLACES
    value = Decimal((0, coefficient, -places))
    while value > MAX_DEGREES:
        places += 1
        value = Decimal((0, coefficient, -places))
    return value


def parse_word(word: str) -> DecodedCoordinate:
    """Parse a single Whitwell word."""
    return WordParser(word).parse()
