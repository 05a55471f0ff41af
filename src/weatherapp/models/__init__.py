"""Weather data models."""

from weatherapp.models.query import Query
from weatherapp.models.record import WeatherRecord
from weatherapp.models.response import MainMetrics, WeatherCondition, WeatherResponse, Wind

__all__ = [
    "MainMetrics",
    "Query",
    "WeatherCondition",
    "WeatherRecord",
    "WeatherResponse",
    "Wind",
]
