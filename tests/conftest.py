"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from forecast_board.services.feed_service import parse_feed

SAMPLE_TIMES = [
    "2024-01-15T06:00:00+09:00",
    "2024-01-15T12:00:00+09:00",
    "2024-01-15T15:00:00+09:00",
    "2024-01-15T21:00:00+09:00",
    "2024-01-16T03:00:00+09:00",
    "2024-01-16T09:00:00+09:00",
    "2024-01-16T14:00:00+09:00",
    "2024-01-16T21:00:00+09:00",
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "feed": {
            "location_name": "Osaka",
            "area_code": "270000",
            "timeout_seconds": 10,
            "max_retries": 1,
        },
        "display": {
            "glyphs": {"晴れ": "☀️", "雪": "❄️"},
            "placeholder": "-",
        },
        "settings": {
            "refresh_interval_minutes": 30,
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(sample_config_data, f, ensure_ascii=False)
    return config_path


@pytest.fixture
def sample_feed_data():
    """A VPFD-shaped response: two days, hour 21 at index 3, one extra trailing temperature."""
    return {
        "areaTimeSeries": {
            "timeDefines": [{"dateTime": t, "duration": "PT3H"} for t in SAMPLE_TIMES],
            "weather": ["晴れ", "晴れ", "くもり", "くもり", "雨", "雨", "雪", "晴れ"],
            "wind": [
                {"direction": "北", "range": r}
                for r in ["2 4", "3 5", "1 3", "0 2", "2 4", "4 6", "3 5", "1 3"]
            ],
        },
        "pointTimeSeries": {
            "pointName": "東京",
            "temperature": ["5", "10", "12", "8", "2", "4", "9", "7", "6"],
            "minTemperature": ["3", "", "", "", "1", "", "", ""],
            "maxTemperature": ["", "13", "", "", "", "", "10", ""],
        },
    }


@pytest.fixture
def sample_feed(sample_feed_data):
    """The sample response parsed into a ForecastFeed."""
    return parse_feed(sample_feed_data, "Tokyo")
