"""End-to-end tests for the command-line entry point."""

from __future__ import annotations

import httpx
import pytest
import respx
from typer.testing import CliRunner

from weatherapp.cli import app
from tests.conftest import SAMPLE_WEATHER_RESPONSE

BASE_URL = "http://api.openweathermap.org/data/2.5"

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, tmp_path, api_log_dir):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
    monkeypatch.delenv("OPENWEATHER_BASE_URL", raising=False)
    monkeypatch.delenv("OPENWEATHER_TIMEOUT", raising=False)
    monkeypatch.setenv("WEATHERAPP_LOG_DIR", str(api_log_dir))
    return monkeypatch


class TestCli:
    @respx.mock
    def test_single_lookup(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_WEATHER_RESPONSE)
        )
        result = runner.invoke(app, [], input="London\nGB\nno\n")

        assert result.exit_code == 0, result.output
        assert "Welcome to Weather App!" in result.output
        assert "Weather Update for London: broken clouds" in result.output
        assert "> Pressure: 1013.0 hPa" in result.output
        assert "Thank you for using Weather App!" in result.output
        assert route.calls.last.request.url.params["appid"] == "env-key"

    @respx.mock
    def test_api_key_option_overrides_environment(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_WEATHER_RESPONSE)
        )
        result = runner.invoke(app, ["--api-key", "cli-key"], input="London\nGB\nno\n")

        assert result.exit_code == 0, result.output
        assert route.calls.last.request.url.params["appid"] == "cli-key"

    @respx.mock
    def test_network_failure_keeps_prompting(self) -> None:
        respx.get(f"{BASE_URL}/weather").mock(
            side_effect=[
                httpx.ConnectError("name resolution failed"),
                httpx.Response(200, json=SAMPLE_WEATHER_RESPONSE),
            ]
        )
        result = runner.invoke(app, [], input="London\nGB\nyes\nLondon\nGB\nno\n")

        assert result.exit_code == 0, result.output
        assert "Error retrieving weather information:" in result.output
        assert "Weather Update for London" in result.output
        assert "Thank you for using Weather App!" in result.output

    def test_closed_input_aborts(self) -> None:
        result = runner.invoke(app, [], input="London\n")

        assert result.exit_code == 1
        assert "Input stream closed" in result.output
        assert "Thank you for using Weather App!" not in result.output

    def test_invalid_timeout_environment(self, cli_env) -> None:
        cli_env.setenv("OPENWEATHER_TIMEOUT", "later")
        result = runner.invoke(app, [], input="")

        assert result.exit_code == 2
