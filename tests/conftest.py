"""
Pytest fixtures for the Casa Luna pricing tests.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep quote logs out of the working tree; must be set before quote_service is imported
os.environ.setdefault("QUOTE_LOG_PATH", os.path.join(tempfile.gettempdir(), "casaluna-test-quotes.log"))

from casaluna.models.pricing import RateCard  # noqa: E402
from casaluna.services.seasons import get_high_season_periods  # noqa: E402


@pytest.fixture(autouse=True)
def reset_season_cache():
    """High season periods are cached per process; start every test clean."""
    get_high_season_periods.cache_clear()
    yield
    get_high_season_periods.cache_clear()


@pytest.fixture
def rate_card():
    return RateCard(weekday=80, weekend=85, high_season=95, cleaning=35, pets=10)
