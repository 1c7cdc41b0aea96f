"""
Exceptions raised by the Whitwell codec.
"""


class WhitwellError(ValueError):
    """Base class for every error the codec raises."""
    pass


class RangeError(WhitwellError):
    """Raised when a coordinate lies outside -180..180."""
    pass


class FormatError(WhitwellError):
    """Raised when a coordinate is not a number, or a name cannot be parsed."""
    pass


class ValidationError(WhitwellError):
    """Raised when sign indicators conflict, repeat, or turn up out of place."""
    pass
