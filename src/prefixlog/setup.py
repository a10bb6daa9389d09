"""Backend factory: build a configured StructuredLogger from LOG_* env vars."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from prefixlog.config import LogSettings
from prefixlog.errors import BackendError
from prefixlog.formatters import ConsoleFormatter, JsonFormatter
from prefixlog.structured_logger import StructuredLogger

ROOT_NAME = "prefixlog"


def build_formatter(settings: LogSettings, name: str = "") -> logging.Formatter:
    cls = JsonFormatter if settings.encoding == "json" else ConsoleFormatter
    return cls(
        timestamp=settings.timestamp,
        name=name,
        separator=settings.log_separator,
        color=settings.color,
    )


def new_backend(name: str = "", settings: LogSettings | None = None) -> StructuredLogger:
    """Configure the stdlib logger for ``name`` and wrap it.

    Loggers sharing a name share one stdlib logger; building again replaces
    its level and handler.
    """
    try:
        settings = settings or LogSettings()
    except ValidationError as e:
        raise BackendError(f"error build logger / {e}") from e

    logger = logging.getLogger(f"{ROOT_NAME}.{name}" if name else ROOT_NAME)
    logger.setLevel(settings.level_for(name))
    logger.propagate = False

    # Remove existing handlers to avoid duplicates on re-init
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(settings, name))
    logger.addHandler(handler)

    return StructuredLogger(logger, name=name)
