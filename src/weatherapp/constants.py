"""Shared constants for weather rendering."""

from __future__ import annotations

FREEZING_SYMBOL = "\u2744\ufe0f"  # snowflake
COLD_SYMBOL = "\u2601\ufe0f"  # cloud
MILD_SYMBOL = "\u26c5"  # sun behind cloud
WARM_SYMBOL = "\U0001f324\ufe0f"  # sun behind small cloud
HOT_SYMBOL = "\U0001f525"  # fire

# Upper bounds are exclusive; anything at or above the last bound is hot
TEMPERATURE_SYMBOLS: list[tuple[float, str]] = [
    (0.0, FREEZING_SYMBOL),
    (10.0, COLD_SYMBOL),
    (20.0, MILD_SYMBOL),
    (30.0, WARM_SYMBOL),
]

UNSTYLED = ""

# Provider phrases are matched exactly and case-sensitively, first rule wins
DESCRIPTION_STYLES: list[tuple[frozenset[str], str]] = [
    (frozenset({"clear sky"}), "bright_yellow"),
    (frozenset({"few clouds", "scattered clouds", "broken clouds"}), "bright_blue"),
    (frozenset({"overcast clouds", "mist", "haze", "smoke", "dust", "fog"}), "dim"),
    (frozenset({"rain", "thunderstorm", "snow"}), "bright_cyan"),
]

PROMPT_STYLE = "bright_green"
BANNER_STYLE = "bright_yellow"

WELCOME_MESSAGE = "Welcome to Weather App!"
CITY_PROMPT = "Enter the name of the city:"
COUNTRY_PROMPT = "Enter the country code (e.g., US for United States):"
CONTINUE_PROMPT = "Would you like to check the weather for another location? (yes/no):"
FAREWELL_MESSAGE = "Thank you for using Weather App!"
ERROR_PREFIX = "Error retrieving weather information:"
