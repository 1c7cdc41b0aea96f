"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from whitwell.validator import CoordinateValidator
from tests.fixtures import PLACES, ROUND_TRIP_COORDINATES


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def validator():
    """Create a coordinate validator."""
    return CoordinateValidator()


# ============================================================================
# Place Fixtures
# ============================================================================


@pytest.fixture
def places():
    """Known places with their Whitwell names."""
    return PLACES


@pytest.fixture
def sydney():
    """Sydney, AU: 'Isilu Buban'."""
    return next(p for p in PLACES if p["place"] == "Sydney, AU")


@pytest.fixture
def mcmurdo():
    """McMurdo Station, which reads well in neither construction."""
    return next(p for p in PLACES if p["place"] == "McMurdo Station, AQ")


@pytest.fixture
def round_trip_coordinates():
    """Two-decimal coordinate pairs that survive an encode/decode trip."""
    return ROUND_TRIP_COORDINATES
