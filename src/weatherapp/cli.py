"""Command-line entry point."""

from __future__ import annotations

import typer
from rich.console import Console

from weatherapp.api_logging import set_log_dir
from weatherapp.client import WeatherClient
from weatherapp.config import load_settings
from weatherapp.loop import InteractionLoop

app = typer.Typer(add_completion=False, help="Look up current weather by city and country code.")


@app.command()
def main(
    api_key: str | None = typer.Option(
        None, "--api-key", help="OpenWeatherMap API key (default: $OPENWEATHER_API_KEY)."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.1, help="HTTP timeout in seconds."
    ),
) -> None:
    """Prompt for locations and print their current weather."""
    try:
        settings = load_settings().with_overrides(api_key=api_key, timeout=timeout)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    set_log_dir(settings.log_dir)
    console = Console(highlight=False)
    error_console = Console(stderr=True, highlight=False)

    with WeatherClient(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout=settings.timeout,
    ) as client:
        loop = InteractionLoop(client, console=console, error_console=error_console)
        try:
            loop.run()
        except EOFError:
            error_console.print("Input stream closed; exiting.", markup=False)
            raise typer.Exit(code=1)
