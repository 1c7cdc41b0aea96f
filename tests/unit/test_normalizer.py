"""
Unit tests for the normalizer module.
"""

import pytest

from whitwell.errors import FormatError, RangeError
from whitwell.normalizer import coordinate_text, digits_of, two_decimal


class TestTwoDecimal:
    """Tests for two_decimal()."""

    def test_pads_integer(self):
        """Test that whole degrees get two zero decimals."""
        assert two_decimal(5) == "5.00"
        assert two_decimal("122") == "122.00"

    def test_pads_single_decimal(self):
        """Test that one decimal is padded to two."""
        assert two_decimal(51.5) == "51.50"

    def test_truncates_not_rounds(self):
        """Test that extra decimals are cut off, never rounded."""
        assert two_decimal(37.379) == "37.37"
        assert two_decimal("123.456") == "123.45"
        assert two_decimal("10.999") == "10.99"

    def test_discards_sign_and_hemisphere(self):
        """Test that signs and hemisphere letters do not reach the output."""
        assert two_decimal(-122.03) == "122.03"
        assert two_decimal("37.37N") == "37.37"
        assert two_decimal("33.55s") == "33.55"

    def test_strips_leading_zeros(self):
        """Test that leading zeros are dropped."""
        assert two_decimal("007.5") == "7.50"
        assert two_decimal("0.5") == ".50"

    def test_zero(self):
        """Test the degenerate zero coordinate."""
        assert two_decimal(0) == "0.00"
        assert two_decimal("000") == "0.00"

    def test_boundary_accepted(self):
        """Test that exactly 180 is in range."""
        assert two_decimal(180) == "180.00"
        assert two_decimal("-180.00") == "180.00"

    def test_over_range_raises(self):
        """Test that values beyond 180 raise RangeError."""
        with pytest.raises(RangeError, match="must be between"):
            two_decimal(181)
        with pytest.raises(RangeError):
            two_decimal("-200")
        with pytest.raises(RangeError):
            two_decimal(180.01)

    def test_extra_points_raise_format_error(self):
        """Test that a number with two decimal points is a FormatError."""
        with pytest.raises(FormatError):
            two_decimal("1.2.3")

    def test_exponent_floats_expanded(self):
        """Test that tiny floats are not read through their exponent."""
        assert two_decimal(1e-05) == ".00"


class TestHelpers:
    """Tests for coordinate_text() and digits_of()."""

    def test_coordinate_text_passes_strings(self):
        """Test that strings are used as given."""
        assert coordinate_text("37.37N") == "37.37N"

    def test_coordinate_text_numbers(self):
        """Test number rendering."""
        assert coordinate_text(37.37) == "37.37"
        assert coordinate_text(-122) == "-122"
        assert "e" not in coordinate_text(1e-05)

    def test_digits_of(self):
        """Test digit extraction from a normalized coordinate."""
        assert digits_of("122.03") == [1, 2, 2, 0, 3]
        assert digits_of(".50") == [5, 0]
