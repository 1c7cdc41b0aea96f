# Test fixtures
from .sample_places import (
    PLACES,
    ROUND_TRIP_COORDINATES,
    HAND_BUILT_NAMES,
)

__all__ = [
    "PLACES",
    "ROUND_TRIP_COORDINATES",
    "HAND_BUILT_NAMES",
]
