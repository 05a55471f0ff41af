"""Query parameter builder for the current weather endpoint."""

from __future__ import annotations

from weatherapp.models.query import Query

UNITS = "metric"


def build_query_params(query: Query, api_key: str) -> list[tuple[str, str]]:
    """Build the ``q``, ``units`` and ``appid`` parameters for one query.

    Args:
        query: Location to look up. City and country are sent as entered.
        api_key: Provider API key. May be empty, in which case the provider
                 rejects the request.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    return [
        ("q", query.location),
        ("units", UNITS),
        ("appid", api_key),
    ]
