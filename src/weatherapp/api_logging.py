"""API call logging for the weather client."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_LOG_DIR = os.path.join(os.path.expanduser("~"), ".weatherapp", "logs")
LOGGER_NAME = "weatherapp.api"

_LOG_DIR = DEFAULT_LOG_DIR
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()
_OWNED_ATTR = "_weatherapp_api_log"


def set_log_dir(path: str) -> None:
    """Point the API log at ``path``. Takes effect if the logger is not yet built."""
    global _LOG_DIR, _LOG_FILE
    with _logger_lock:
        _LOG_DIR = path
        _LOG_FILE = os.path.join(path, "api_calls.log")


def _owned_handler(logger: logging.Logger) -> logging.Handler | None:
    """Return the handler this module attached to ``logger``, if any."""
    for handler in logger.handlers:
        if getattr(handler, _OWNED_ATTR, False):
            return handler
    return None


def _build_handler() -> logging.Handler:
    """Open the log file, or discard records if it cannot be created."""
    try:
        os.makedirs(_LOG_DIR, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
    )
    setattr(handler, _OWNED_ATTR, True)
    return handler


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use.

    An unwritable log location never fails a lookup; records are dropped instead.
    """
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        # Other handlers (e.g. test log capture) may already be attached
        if _owned_handler(_logger) is None:
            _logger.addHandler(_build_handler())

    return _logger


def reset_logger() -> None:
    """Detach and close the handler this module added; the next call rebuilds it."""
    global _logger
    with _logger_lock:
        logger = logging.getLogger(LOGGER_NAME)
        handler = _owned_handler(logger)
        while handler is not None:
            logger.removeHandler(handler)
            handler.close()
            handler = _owned_handler(logger)
        _logger = None


def log_api_call(fn: F) -> F:
    """Decorator that logs client method calls to the API log file."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        # Skip 'self'; it holds the API key
        arg_parts = [repr(a) for a in args[1:]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info(
                "OK: %s(%s) -> %s (%.3fs)",
                fn.__qualname__, arg_str, type(result).__name__, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
