"""weatherapp — Interactive current-weather lookup for the terminal."""

from weatherapp.client import WeatherClient
from weatherapp.exceptions import (
    WeatherAPIError,
    WeatherConnectionError,
    WeatherError,
    WeatherNetworkError,
    WeatherTimeoutError,
    WeatherValidationError,
)
from weatherapp.loop import InteractionLoop
from weatherapp.models import Query, WeatherRecord

__all__ = [
    "InteractionLoop",
    "Query",
    "WeatherAPIError",
    "WeatherClient",
    "WeatherConnectionError",
    "WeatherError",
    "WeatherNetworkError",
    "WeatherRecord",
    "WeatherTimeoutError",
    "WeatherValidationError",
]

__version__ = "0.1.0"
