"""Pytest configuration and fixtures."""

import json
import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from cityweather.models.weather import ForecastSample

# 2024-01-15 00:00:00 UTC, a Monday
START_TS = 1705276800
THREE_HOURS = 3 * 3600
BASE_URL = "https://api.test/data/2.5"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "provider": {
            "api_key": "test-key",
            "base_url": BASE_URL,
            "units": "metric",
            "timeout_seconds": 5,
        },
        "settings": {
            "recent_searches_limit": 5,
            "storage_path": "storage.json",
            "share_base_url": "cityweather://search",
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path


@pytest.fixture
def current_payload():
    """Current weather response for Paris."""
    return {
        "name": "Paris",
        "sys": {"country": "FR"},
        "dt": START_TS + 10 * 3600,
        "main": {"temp": 7.6, "feels_like": 5.2, "humidity": 81, "pressure": 1012},
        "wind": {"speed": 4.1},
        "weather": [{"id": 500, "icon": "10d", "description": "light rain"}],
    }


def forecast_entry(ts: int, temp: float = 10.0, icon: str = "01d", description: str = "clear sky"):
    return {
        "dt": ts,
        "main": {"temp": temp},
        "weather": [{"icon": icon, "description": description}],
    }


@pytest.fixture
def forecast_payload():
    """Five days of 3-hour forecast entries starting at midnight UTC."""
    return {
        "cod": "200",
        "list": [
            forecast_entry(START_TS + i * THREE_HOURS, temp=5.0 + i * 0.5) for i in range(40)
        ],
    }


@pytest.fixture
def make_samples():
    """Build forecast samples from (day offset, hour) pairs, UTC."""

    def _make(slots: list[tuple[int, int]]) -> list[ForecastSample]:
        start = datetime(2024, 1, 15, tzinfo=UTC)
        return [
            ForecastSample(
                timestamp=start + timedelta(days=day, hours=hour),
                temperature=float(day * 100 + hour),
                condition_code="01d",
                description="clear sky",
            )
            for day, hour in slots
        ]

    return _make
