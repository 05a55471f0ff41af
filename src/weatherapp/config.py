"""Runtime configuration, loaded once from the environment and ``.env``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from dotenv import find_dotenv, load_dotenv

from weatherapp._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from weatherapp.api_logging import DEFAULT_LOG_DIR

API_KEY_ENV = "OPENWEATHER_API_KEY"
BASE_URL_ENV = "OPENWEATHER_BASE_URL"
TIMEOUT_ENV = "OPENWEATHER_TIMEOUT"
LOG_DIR_ENV = "WEATHERAPP_LOG_DIR"


@dataclass(frozen=True)
class Settings:
    """Immutable settings for one run of the app."""

    api_key: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_dir: str = DEFAULT_LOG_DIR

    def with_overrides(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
    ) -> Settings:
        """Return a copy with command-line values applied over these."""
        changes: dict[str, object] = {}
        if api_key is not None:
            changes["api_key"] = api_key
        if timeout is not None:
            changes["timeout"] = timeout
        return replace(self, **changes)


def _parse_timeout(raw: str | None) -> float:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from environment variables.

    Args:
        dotenv: Read a ``.env`` file from the working directory first. Values
                already present in the environment win.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        api_key=os.getenv(API_KEY_ENV, ""),
        base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
        timeout=_parse_timeout(os.getenv(TIMEOUT_ENV)),
        log_dir=os.getenv(LOG_DIR_ENV) or DEFAULT_LOG_DIR,
    )
