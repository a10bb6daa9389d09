"""Logger: prefix-carrying wrapper around a StructuredLogger backend.

Every message a Logger emits starts with its prefix. ``with_``/``withf``
derive a new Logger whose prefix extends the parent's::

    log = must_named("api").withf("[user:%d]", 123)
    log.warn("hello")            # "[user:123] hello"

The enabled check always runs before the message is composed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from prefixlog.constants import DEBUG, ERROR, FATAL, INFO, PANIC, WARN
from prefixlog.duration import NOOP, DurationLog, format_duration, to_ns
from prefixlog.errors import BackendError
from prefixlog.setup import new_backend
from prefixlog.structured_logger import StructuredLogger


def get_message(template: str, args: tuple) -> str:
    """Format with ``%``, by concatenation, or neither.

    A malformed template/args pair is rendered, not raised.
    """
    if not args:
        return template

    if template:
        fmt_args: Any = args
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            fmt_args = args[0]
        try:
            return template % fmt_args
        except (TypeError, ValueError, KeyError) as e:
            return f"{template} %!(BADFMT {e}: {args!r})"

    if len(args) == 1 and isinstance(args[0], str):
        return args[0]

    return "".join(str(a) for a in args)


class Logger:
    """Immutable logger: a prefix plus a shared backend."""

    __slots__ = ("_prefix", "_backend")

    def __init__(self, backend: StructuredLogger, prefix: str = "") -> None:
        prefix = prefix.strip()
        self._prefix = prefix + " " if prefix else ""
        self._backend = backend

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r}, prefix={self._prefix!r})"

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def name(self) -> str:
        return self._backend.name

    def unwrap(self) -> StructuredLogger:
        """Backend instance; re-wrap it with ``wrap()``."""
        return self._backend

    def core(self) -> logging.Logger:
        """The stdlib logger doing the actual writing."""
        return self._backend.logger

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def skip(self, skip: int) -> Logger:
        """New Logger reporting the call-site ``skip`` frames further up."""
        return Logger(self._backend.with_caller_skip(skip), self._prefix)

    def with_(self, *args: Any) -> Logger:
        """New Logger whose prefix appends the concatenated args."""
        return Logger(self._backend, self._make_msg("", args))

    def withf(self, template: str, *args: Any) -> Logger:
        """New Logger whose prefix appends ``template % args``."""
        return Logger(self._backend, self._make_msg(template, args))

    def withw(self, /, **kv: Any) -> Logger:
        """New Logger attaching context fields to later records (prefer for json logs)."""
        return Logger(self._backend.with_fields(**kv), self._prefix)

    def sync(self) -> None:
        """Flush any buffered log entries."""
        self._backend.sync()

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _make_msg(self, template: str, args: tuple) -> str:
        return self._prefix + get_message(template, args)

    def _log(
        self,
        level: int,
        template: str,
        args: tuple,
        fields: dict[str, Any] | None = None,
    ) -> None:
        if not self._backend.enabled(level):
            return
        exc_info = fields.pop("exc_info", None) if fields else None
        self._backend.log(level, self._make_msg(template, args), fields, stacklevel=3, exc_info=exc_info)

    def _emit_duration(self, level: int, template: str, args: tuple, elapsed: int, stacklevel: int = 1) -> None:
        if not self._backend.enabled(level):
            return
        msg = f"{self._make_msg(template, args)}: {format_duration(elapsed)}"
        self._backend.log(level, msg, stacklevel=stacklevel + 1)

    def debug(self, *args: Any) -> None:
        self._log(DEBUG, "", args)

    def debugf(self, template: str, *args: Any) -> None:
        self._log(DEBUG, template, args)

    def debugw(self, msg: str, /, **kv: Any) -> None:
        self._log(DEBUG, msg, (), kv)

    def info(self, *args: Any) -> None:
        self._log(INFO, "", args)

    def infof(self, template: str, *args: Any) -> None:
        self._log(INFO, template, args)

    def infow(self, msg: str, /, **kv: Any) -> None:
        self._log(INFO, msg, (), kv)

    def warn(self, *args: Any) -> None:
        self._log(WARN, "", args)

    def warnf(self, template: str, *args: Any) -> None:
        self._log(WARN, template, args)

    def warnw(self, msg: str, /, **kv: Any) -> None:
        self._log(WARN, msg, (), kv)

    def error(self, *args: Any) -> None:
        self._log(ERROR, "", args)

    def errorf(self, template: str, *args: Any) -> None:
        self._log(ERROR, template, args)

    def errorw(self, msg: str, /, **kv: Any) -> None:
        self._log(ERROR, msg, (), kv)

    def panic(self, *args: Any) -> None:
        """Log at PANIC, then raise PanicError."""
        self._log(PANIC, "", args)

    def panicf(self, template: str, *args: Any) -> None:
        self._log(PANIC, template, args)

    def panicw(self, msg: str, /, **kv: Any) -> None:
        self._log(PANIC, msg, (), kv)

    def fatal(self, *args: Any) -> None:
        """Log at FATAL, flush, then exit with status 1."""
        self._log(FATAL, "", args)

    def fatalf(self, template: str, *args: Any) -> None:
        self._log(FATAL, template, args)

    def fatalw(self, msg: str, /, **kv: Any) -> None:
        self._log(FATAL, msg, (), kv)

    # ------------------------------------------------------------------
    # Duration helpers
    # ------------------------------------------------------------------

    def info_dur(self, template: str = "", *args: Any) -> DurationLog:
        """Like infof, but logs on release with the elapsed time appended."""
        if not self._backend.enabled(INFO):
            return NOOP
        return DurationLog(self, INFO, template=template, args=args)

    def debug_dur(self, template: str = "", *args: Any) -> DurationLog:
        if not self._backend.enabled(DEBUG):
            return NOOP
        return DurationLog(self, DEBUG, template=template, args=args)

    def warn_dur(self, threshold: float | timedelta, template: str = "", *args: Any) -> DurationLog:
        """Logs at WARN on release, only if more than ``threshold`` has elapsed."""
        if not self._backend.enabled(WARN):
            return NOOP
        return DurationLog(self, WARN, to_ns(threshold), None, template, args)

    def auto_dur(self, threshold: float | timedelta, template: str = "", *args: Any) -> DurationLog:
        """Logs on release at WARN past ``threshold``, at DEBUG otherwise."""
        if not self._backend.enabled(WARN):
            return NOOP
        return DurationLog(self, WARN, to_ns(threshold), DEBUG, template, args)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def named(name: str) -> Logger:
    """Build a Logger over a backend configured from LOG_* env vars.

    Raises BackendError when the backend cannot be built.
    """
    return Logger(new_backend(name))


def new() -> Logger:
    return named("")


def must_named(name: str) -> Logger:
    """Like named(), but exits the process if the backend cannot be built."""
    try:
        return named(name)
    except BackendError as e:
        raise SystemExit(str(e)) from e


def must_new() -> Logger:
    return must_named("")


def wrap(backend: StructuredLogger | logging.Logger) -> Logger:
    """Adopt an existing backend (or plain stdlib logger) with an empty prefix."""
    if isinstance(backend, logging.Logger):
        backend = StructuredLogger(backend)
    return Logger(backend)
