"""Custom exceptions for the weather client."""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all weather client errors."""


class WeatherNetworkError(WeatherError):
    """Raised when the request never produced an HTTP response."""


class WeatherConnectionError(WeatherNetworkError):
    """Raised when the client cannot connect to the API."""


class WeatherTimeoutError(WeatherNetworkError):
    """Raised when a request to the API times out."""


class WeatherAPIError(WeatherError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class WeatherValidationError(WeatherError):
    """Raised when API response data fails model validation."""
