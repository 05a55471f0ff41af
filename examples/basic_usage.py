"""Basic usage example for the weather client."""

from weatherapp import WeatherClient, WeatherError
from weatherapp.config import load_settings
from weatherapp.render import format_weather


def main() -> None:
    settings = load_settings()
    with WeatherClient(api_key=settings.api_key, timeout=settings.timeout) as client:
        for city, country in [("London", "GB"), ("Tokyo", "JP"), ("Nowhere", "XX")]:
            print(f"=== {city}, {country} ===")
            try:
                record = client.fetch(city, country)
            except WeatherError as exc:
                print(f"  failed: {exc}")
                continue
            print(format_weather(record))


if __name__ == "__main__":
    main()
