"""
Sign and hemisphere validation for coordinates handed to the encoder.
"""

import logging
import re
from dataclasses import dataclass

from .errors import FormatError, ValidationError
from .normalizer import coordinate_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignedCoordinate:
    """A coordinate with its hemisphere letters resolved into a sign."""
    original: str
    residual: str  # Sign and number, hemisphere letters removed
    negative: bool


class CoordinateValidator:
    """
    Resolves the sign of an encoder input.

    North latitudes and east longitudes are positive; south and west are
    negative. A coordinate may say so with an arithmetic sign or with one
    hemisphere letter, but not both.
    """

    NEGATIVE_HEMISPHERES = "SW"
    POSITIVE_HEMISPHERES = "NE"

    # Hemisphere letters may only trail the number.
    _COORDINATE = re.compile(r"^\s*([+-])?(\d+\.?\d*|\.\d+)\s*([NSEW]*)\s*$")

    def validate(self, coord) -> SignedCoordinate:
        """
        Validate one coordinate and work out its sign.

        Args:
            coord: A number, or a numeral string with an optional
                trailing hemisphere letter (any case).

        Returns:
            The resolved SignedCoordinate.

        Raises:
            ValidationError: On two hemisphere letters, or a hemisphere
                letter combined with an arithmetic sign.
            FormatError: If the input is not a plain decimal number with
                only trailing hemisphere letters.
        """
        original = coordinate_text(coord)
        text = original.upper()

        match = self._COORDINATE.match(text)
        if match is None:
            raise FormatError(f"Coordinate '{original}' does not look like a proper coordinate")
        arithmetic_sign, number, hemispheres = match.groups()

        negatives = sum(hemispheres.count(c) for c in self.NEGATIVE_HEMISPHERES)
        positives = sum(hemispheres.count(c) for c in self.POSITIVE_HEMISPHERES)
        residual = (arithmetic_sign or "") + number

        if negatives and positives:
            raise ValidationError(f"Multiple conflicting sign indicators detected in '{original}'")
        if negatives > 1 or positives > 1:
            raise ValidationError(f"Multiple sign indicators detected in '{original}'")
        if arithmetic_sign and (negatives or positives):
            raise ValidationError(
                f"Both an arithmetic sign and a hemisphere letter given in '{original}'"
            )

        if negatives:
            negative = True
        else:
            negative = arithmetic_sign == "-" and _nonzero(number)

        logger.debug("Coordinate %r resolved to %s", original, "negative" if negative else "positive")
        return SignedCoordinate(original=original, residual=residual, negative=negative)


def _nonzero(number: str) -> bool:
    # "-0" and "-0.00" carry no real sign.
    return any(c in "123456789" for c in number)
