"""Provider response models for the current weather endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from weatherapp.models.record import WeatherRecord


class WeatherCondition(BaseModel):
    """One entry of the ``weather`` list."""

    model_config = ConfigDict(frozen=True)

    description: str


class MainMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    temp: float
    humidity: float
    pressure: float


class Wind(BaseModel):
    model_config = ConfigDict(frozen=True)

    speed: float


class WeatherResponse(BaseModel):
    """Body of ``GET /weather``. Fields the client does not use are ignored."""

    model_config = ConfigDict(frozen=True)

    weather: list[WeatherCondition] = Field(min_length=1)
    main: MainMetrics
    wind: Wind
    name: str

    def to_record(self) -> WeatherRecord:
        """Flatten into a WeatherRecord using the first condition entry."""
        return WeatherRecord(
            description=self.weather[0].description,
            temperature_celsius=self.main.temp,
            humidity_percent=self.main.humidity,
            pressure_hpa=self.main.pressure,
            wind_speed_meters_per_second=self.wind.speed,
            location_name=self.name,
        )
