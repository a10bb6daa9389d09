"""Logging constants: levels, level tokens, colors."""

from __future__ import annotations

import logging

# ---------------------------------------------------------------------------
# Levels (stdlib numeric scale)
# ---------------------------------------------------------------------------

DEBUG = logging.DEBUG
INFO = logging.INFO
WARN = logging.WARNING
ERROR = logging.ERROR
PANIC = 45
FATAL = logging.CRITICAL

logging.addLevelName(PANIC, "PANIC")

LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info":  INFO,
    "warn":  WARN,
    "error": ERROR,
    "panic": PANIC,
    "fatal": FATAL,
}

LEVEL_NAMES: dict[int, str] = {v: k for k, v in LEVELS.items()}

# ---------------------------------------------------------------------------
# ANSI colors
# ---------------------------------------------------------------------------

RESET = "\033[0m"

LEVEL_COLORS: dict[int, str] = {
    DEBUG: "\033[35m",
    INFO:  "\033[34m",
    WARN:  "\033[33m",
    ERROR: "\033[31m",
    PANIC: "\033[31m",
    FATAL: "\033[31m",
}

# ---------------------------------------------------------------------------
# Encodings
# ---------------------------------------------------------------------------

ENCODINGS = ("console", "json")

TIMESTAMPS = ("rfc3339", "rfc3339nano", "iso8601", "s", "ms", "ns", "disabled")


def level_name(level: int) -> str:
    """Lowercase token for a level: 30 -> 'warn'. Unknown levels use stdlib names."""
    name = LEVEL_NAMES.get(level)
    if name is None:
        name = logging.getLevelName(level).lower()
    return name
