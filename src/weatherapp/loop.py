"""Interactive read-fetch-render loop."""

from __future__ import annotations

from typing import Callable

from rich.console import Console

from weatherapp.client import WeatherClient
from weatherapp.constants import (
    BANNER_STYLE,
    CITY_PROMPT,
    CONTINUE_PROMPT,
    COUNTRY_PROMPT,
    ERROR_PREFIX,
    FAREWELL_MESSAGE,
    PROMPT_STYLE,
    WELCOME_MESSAGE,
)
from weatherapp.exceptions import WeatherError
from weatherapp.models.query import Query
from weatherapp.render import render_weather


def one_line(message: str) -> str:
    """Collapse all runs of whitespace, newlines included, to single spaces."""
    return " ".join(message.split())


def should_continue(answer: str) -> bool:
    """Return True only for 'yes' in any letter case."""
    return answer.strip().lower() == "yes"


class InteractionLoop:
    """Prompts for locations and prints their weather until the user stops.

    Client errors are reported and the loop carries on to the continuation
    prompt. ``EOFError`` from ``read_line`` is not caught: with no input left
    there is nothing more to do.
    """

    def __init__(
        self,
        client: WeatherClient,
        console: Console | None = None,
        error_console: Console | None = None,
        read_line: Callable[[], str] = input,
    ) -> None:
        self._client = client
        self._console = console or Console(highlight=False)
        self._error_console = error_console or Console(stderr=True, highlight=False)
        self._read_line = read_line

    def _ask(self, prompt: str) -> str:
        self._console.print(prompt, style=PROMPT_STYLE, markup=False)
        return self._read_line().strip()

    def read_query(self) -> Query:
        city = self._ask(CITY_PROMPT)
        country_code = self._ask(COUNTRY_PROMPT)
        return Query(city=city, country_code=country_code)

    def step(self) -> bool:
        """Run one iteration. Returns False once the user declines to continue."""
        query = self.read_query()
        try:
            record = self._client.fetch(query.city, query.country_code)
        except WeatherError as exc:
            self._error_console.print(
                f"{ERROR_PREFIX} {one_line(str(exc))}",
                markup=False,
                emoji=False,
                soft_wrap=True,
            )
        else:
            self._console.print(render_weather(record), soft_wrap=True)

        return should_continue(self._ask(CONTINUE_PROMPT))

    def run(self) -> None:
        self._console.print(WELCOME_MESSAGE, style=BANNER_STYLE, markup=False)
        while self.step():
            pass
        self._console.print(FAREWELL_MESSAGE, markup=False)
