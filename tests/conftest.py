"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.fieldclimate_et0.models import AggregatedParameters, StationInfo  # noqa: E402


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_data(fixtures_dir):
    """Load a FieldClimate readings payload spanning three days."""
    data_file = fixtures_dir / "sample_data.json"
    with open(data_file, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def station():
    """Default western Bahia station."""
    return StationInfo(station_id="031133E8")


@pytest.fixture
def full_params():
    """Parameters rich enough for Penman-Monteith."""
    return AggregatedParameters(
        temperatura_media=26.0,
        temperatura_maxima=32.0,
        temperatura_minima=20.0,
        umidade_relativa_med=60.0,
        radiacao_solar=20.0,
        velocidade_vento_2m=2.0,
    )


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
