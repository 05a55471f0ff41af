"""Formatting helpers for weather records."""

from __future__ import annotations

from rich.text import Text

from weatherapp.constants import (
    DESCRIPTION_STYLES,
    HOT_SYMBOL,
    TEMPERATURE_SYMBOLS,
    UNSTYLED,
)
from weatherapp.models.record import WeatherRecord


def temperature_symbol(temperature: float) -> str:
    """Return the emoji for a temperature in degrees Celsius."""
    for upper_bound, symbol in TEMPERATURE_SYMBOLS:
        if temperature < upper_bound:
            return symbol
    return HOT_SYMBOL


def description_style(description: str) -> str:
    """Return the rich style for a provider description, or '' if unknown."""
    for phrases, style in DESCRIPTION_STYLES:
        if description in phrases:
            return style
    return UNSTYLED


def format_weather(record: WeatherRecord) -> str:
    """Format a record as the plain multi-line weather block."""
    return "\n".join([
        f"Weather Update for {record.location_name}: "
        f"{record.description} {temperature_symbol(record.temperature_celsius)}",
        f"> Temperature: {record.temperature_celsius:.1f}°C",
        f"> Humidity: {record.humidity_percent:.1f}%",
        f"> Pressure: {record.pressure_hpa:.1f} hPa",
        f"> Wind Speed: {record.wind_speed_meters_per_second:.1f} m/s",
    ])


def render_weather(record: WeatherRecord) -> Text:
    return Text(format_weather(record), style=description_style(record.description))
