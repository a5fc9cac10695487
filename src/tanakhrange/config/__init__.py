"""tanakh-range configuration module."""

from __future__ import annotations

from typing import Any

from tanakhrange.config.logging import configure_logging
from tanakhrange.config.logging import get_logger as _get_logger
from tanakhrange.config.settings import (
    TanakhRangeSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)

__all__ = [
    "TanakhRangeSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]

_logger_cache: dict[str, Any] = {}


def get_logger(name: str) -> Any:
    """Get a logger instance, cached per name.

    This never configures logging or reads settings, so library modules can
    create loggers at import time. Applications call ``configure_logging``
    themselves; the CLI does so in its callback.

    Args:
        name: Logger name (usually __name__).

    Returns:
        structlog logger backed by the stdlib logger of the same name.
    """
    if name not in _logger_cache:
        _logger_cache[name] = _get_logger(name)
    return _logger_cache[name]


def reset_settings() -> None:
    """Reset settings and clear the logger cache."""
    clear_settings_cache()
    _logger_cache.clear()
