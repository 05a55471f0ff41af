"""Normalized weather record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WeatherRecord(BaseModel):
    """Current conditions for one location, in metric units."""

    model_config = ConfigDict(frozen=True)

    description: str
    temperature_celsius: float
    humidity_percent: float
    pressure_hpa: float
    wind_speed_meters_per_second: float
    location_name: str
