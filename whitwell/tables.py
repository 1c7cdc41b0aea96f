"""
Digit-to-letter tables for Whitwell's rational geographic nomenclature.

               1 2 3 4 5 6 7  8  9  0
   vowels      a e i o u y ee ei ie ou
   consonants  b d f k l m n  p  r  t
"""

from enum import Enum


# Indexed by digit, 0 through 9.
VOWELS = ("ou", "a", "e", "i", "o", "u", "y", "ee", "ei", "ie")
CONSONANTS = ("t", "b", "d", "f", "k", "l", "m", "n", "p", "r")

# A word that starts with one of these was built vowel-first.
VOWEL_INITIALS = frozenset("aeiouy")

# Sign consonants: 's' for vowel-first words, 'v' for consonant-first words.
VOWEL_FIRST_SIGN = "s"
CONSONANT_FIRST_SIGN = "v"
SIGN_MARKERS = frozenset((VOWEL_FIRST_SIGN, CONSONANT_FIRST_SIGN))

# '0' is a two-letter vowel, and the long vowels sit at the top of the
# table, so those have to be tried before the single letters.
MATCH_ORDER = (0, 9, 8, 7, 6, 5, 4, 3, 2, 1)


class Table(Enum):
    """The two transliteration tables."""
    VOWEL = "vowel"
    CONSONANT = "consonant"

    @property
    def letters(self) -> tuple:
        return VOWELS if self is Table.VOWEL else CONSONANTS

    @property
    def other(self) -> "Table":
        return Table.CONSONANT if self is Table.VOWEL else Table.VOWEL

    def letter_for(self, digit: int) -> str:
        """Return the letter(s) this table uses for a digit."""
        return self.letters[digit]

    @classmethod
    def for_word(cls, word: str) -> "Table":
        """Pick the table a word was started from, by its first letter."""
        if word[:1].lower() in VOWEL_INITIALS:
            return cls.VOWEL
        return cls.CONSONANT
