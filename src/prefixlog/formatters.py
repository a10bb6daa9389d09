"""Log formatters: console line and JSON object."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

from prefixlog.constants import LEVEL_COLORS, RESET, level_name


def _zone(dt: datetime, colon: bool) -> str:
    offset = dt.strftime("%z")
    if offset in ("", "+0000"):
        return "Z"
    return f"{offset[:3]}:{offset[3:]}" if colon else offset


def encode_time(created: float, timestamp: str) -> str | int | None:
    """Render a record timestamp. None means the field is dropped."""
    if timestamp == "disabled":
        return None
    if timestamp == "s":
        return int(created)
    if timestamp == "ms":
        return int(created * 1000)
    if timestamp == "ns":
        return round(created * 1_000_000) * 1000

    dt = datetime.fromtimestamp(created, tz=timezone.utc).astimezone()
    if timestamp == "iso8601":
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}" + _zone(dt, colon=False)
    base = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if timestamp == "rfc3339nano":
        frac = f"{dt.microsecond:06d}".rstrip("0")
        if frac:
            base += "." + frac
    return base + _zone(dt, colon=True)


def _caller(record: logging.LogRecord) -> str:
    """Short call-site: 'pkg/module.py:42'."""
    parent = os.path.basename(os.path.dirname(record.pathname))
    path = f"{parent}/{record.filename}" if parent else record.filename
    return f"{path}:{record.lineno}"


class _BaseFormatter(logging.Formatter):
    def __init__(
        self,
        timestamp: str = "rfc3339",
        name: str = "",
        separator: str = "\t",
        color: bool = False,
    ) -> None:
        super().__init__()
        self.timestamp = timestamp
        self.name = name
        self.separator = separator
        self.color = color

    def _exc_text(self, record: logging.LogRecord) -> str:
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        return record.exc_text or ""


class ConsoleFormatter(_BaseFormatter):
    """``ts<SEP>level<SEP>name<SEP>caller<SEP>msg<SEP>{fields}``"""

    def format(self, record: logging.LogRecord) -> str:
        parts: list[str] = []

        ts = encode_time(record.created, self.timestamp)
        if ts is not None:
            parts.append(str(ts))

        token = level_name(record.levelno)
        if self.color:
            token = f"{LEVEL_COLORS.get(record.levelno, '')}{token}{RESET}"
        parts.append(token)

        if self.name:
            parts.append(self.name)
        parts.append(_caller(record))
        parts.append(record.getMessage())

        fields: dict = getattr(record, "extra_data", {})
        if fields:
            parts.append(json.dumps(fields, ensure_ascii=False, default=str))

        line = self.separator.join(parts)
        exc_text = self._exc_text(record)
        if exc_text:
            line += "\n" + exc_text
        return line


class JsonFormatter(_BaseFormatter):
    """One JSON object per record; context fields follow the fixed keys."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {"level": level_name(record.levelno)}

        ts = encode_time(record.created, self.timestamp)
        if ts is not None:
            data["ts"] = ts
        if self.name:
            data["name"] = self.name
        data["caller"] = _caller(record)
        data["msg"] = record.getMessage()

        data.update(getattr(record, "extra_data", {}))

        exc_text = self._exc_text(record)
        if exc_text:
            data["exception"] = exc_text
        return json.dumps(data, ensure_ascii=False, default=str)
