"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

import weatherapp.api_logging as api_logging

BASE_URL = "http://api.openweathermap.org/data/2.5"


SAMPLE_WEATHER_RESPONSE = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"},
    ],
    "base": "stations",
    "main": {
        "temp": 15.04,
        "feels_like": 14.52,
        "temp_min": 13.9,
        "temp_max": 16.1,
        "pressure": 1012.96,
        "humidity": 72,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 250},
    "clouds": {"all": 75},
    "dt": 1697712000,
    "sys": {"country": "GB", "sunrise": 1697697000, "sunset": 1697735000},
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

SAMPLE_ERROR_RESPONSE = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}

SAMPLE_NOT_FOUND_RESPONSE = {"cod": "404", "message": "city not found"}


@pytest.fixture(autouse=True)
def api_log_dir(tmp_path):
    """Send the API call log to tmp_path and rebuild the logger for each test."""
    old_dir = api_logging._LOG_DIR
    log_dir = tmp_path / "logs"
    api_logging.reset_logger()
    api_logging.set_log_dir(str(log_dir))

    yield log_dir

    api_logging.reset_logger()
    api_logging.set_log_dir(old_dir)


@pytest.fixture
def base_url() -> str:
    return BASE_URL
