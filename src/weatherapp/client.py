"""Public client class for the OpenWeatherMap current weather API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from weatherapp._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SyncTransport
from weatherapp._params import build_query_params
from weatherapp.api_logging import log_api_call
from weatherapp.exceptions import WeatherValidationError
from weatherapp.models.query import Query
from weatherapp.models.record import WeatherRecord
from weatherapp.models.response import WeatherResponse


def _summarize(exc: ValidationError) -> str:
    """One-line summary of a validation failure: first error plus a count."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "body"
    summary = f"{location}: {first['msg']}"
    extra = exc.error_count() - 1
    if extra:
        summary += f" (and {extra} more)"
    return summary


def _validate_record(data: Any) -> WeatherRecord:
    """Validate a response body and flatten it into a WeatherRecord."""
    try:
        response = WeatherResponse.model_validate(data)
    except ValidationError as exc:
        raise WeatherValidationError(
            f"Failed to validate weather response: {_summarize(exc)}"
        ) from exc
    return response.to_record()


class WeatherClient:
    """Synchronous client for the current weather endpoint.

    Usage:
        with WeatherClient(api_key="...") as client:
            record = client.fetch("London", "GB")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def fetch(self, city: str, country_code: str) -> WeatherRecord:
        """Get current conditions for a city and country code."""
        return self.fetch_query(Query(city=city, country_code=country_code))

    def fetch_query(self, query: Query) -> WeatherRecord:
        """Get current conditions for a prepared Query."""
        params = build_query_params(query, self._api_key)
        data = self._transport.get("/weather", params)
        return _validate_record(data)
