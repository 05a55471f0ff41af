"""Run the interactive weather prompt: ``python -m weatherapp``."""

from weatherapp.cli import app

app(prog_name="weatherapp")
