"""Backend configuration read from LOG_* environment variables.

Unrecognized values fall back to the defaults; empty variables count as unset.
"""

from __future__ import annotations

import os

from pydantic_settings import BaseSettings

from prefixlog.constants import DEBUG, ENCODINGS, LEVELS, TIMESTAMPS


class LogSettings(BaseSettings):
    log_level: str = "debug"          # debug, info, warn, error, panic, fatal
    log_color: str = ""               # "true" to enable
    log_encoding: str = "console"     # console, json
    log_timestamp: str = "rfc3339"    # rfc3339, rfc3339nano, iso8601, s, ms, ns, disabled
    log_separator: str = "\t"

    model_config = {"env_ignore_empty": True, "extra": "ignore"}

    def level_for(self, name: str = "") -> int:
        """Level for a named backend: LOG_LEVEL_<NAME> overrides LOG_LEVEL."""
        raw = self.log_level
        if name:
            # Dynamic key, so it cannot be a settings field; empty counts as unset.
            raw = os.environ.get(f"LOG_LEVEL_{name.upper()}") or raw
        return parse_level(raw)

    @property
    def color(self) -> bool:
        return self.log_color == "true"

    @property
    def encoding(self) -> str:
        return parse_encoding(self.log_encoding)

    @property
    def timestamp(self) -> str:
        return parse_timestamp(self.log_timestamp)


def parse_level(value: str) -> int:
    return LEVELS.get(value.strip().lower(), DEBUG)


def parse_encoding(value: str) -> str:
    return value if value in ENCODINGS else "console"


def parse_timestamp(value: str) -> str:
    return value if value in TIMESTAMPS else "rfc3339"
