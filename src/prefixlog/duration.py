"""Duration helpers: time a scope and log the elapsed time on release.

A helper is acquired from a Logger (``info_dur``, ``debug_dur``, ``warn_dur``,
``auto_dur``) and released once, either by calling it with the final message
or by leaving a ``with`` block::

    done = log.auto_dur(0.5)
    try:
        work()
    finally:
        done("work for %s", user)

    with log.info_dur("phase %d", 2):
        work()
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from prefixlog.logger import Logger

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000

_now = time.monotonic_ns


def to_ns(duration: float | timedelta) -> int:
    """Seconds (or a timedelta) as integer nanoseconds."""
    if isinstance(duration, timedelta):
        return (duration.days * 86_400 + duration.seconds) * _NS_PER_S + duration.microseconds * _NS_PER_US
    return round(duration * _NS_PER_S)


def _fixed(value: int, digits: int) -> str:
    whole, frac = divmod(value, 10 ** digits)
    frac_str = f"{frac:0{digits}d}".rstrip("0")
    return f"{whole}.{frac_str}" if frac_str else str(whole)


def format_duration(ns: int) -> str:
    """Render nanoseconds in the smallest unit giving a value >= 1.

    ``312ms``, ``200.123ms``, ``2.015s``, ``1m2.5s``, ``1h0m0s``.
    """
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)

    if u < _NS_PER_US:
        return f"{sign}{u}ns"
    if u < _NS_PER_MS:
        return f"{sign}{_fixed(u, 3)}µs"
    if u < _NS_PER_S:
        return f"{sign}{_fixed(u, 6)}ms"

    total_s, frac = divmod(u, _NS_PER_S)
    out = _fixed((total_s % 60) * _NS_PER_S + frac, 9) + "s"
    minutes = total_s // 60
    if minutes:
        out = f"{minutes % 60}m{out}"
        hours = minutes // 60
        if hours:
            out = f"{hours}h{out}"
    return sign + out


class DurationLog:
    """Live helper: remembers when it was acquired and how to pick a level.

    ``level`` is used when no threshold is set or the elapsed time exceeds it;
    ``under_level`` (or silence, when None) otherwise.
    """

    __slots__ = ("_logger", "_start", "_level", "_threshold", "_under_level", "_template", "_args")

    def __init__(
        self,
        logger: Logger,
        level: int,
        threshold: int | None = None,
        under_level: int | None = None,
        template: str = "",
        args: tuple = (),
    ) -> None:
        self._logger = logger
        self._level = level
        self._threshold = threshold
        self._under_level = under_level
        self._template = template
        self._args = args
        self._start = _now()

    def __call__(self, template: str = "", *args: Any) -> None:
        self._release(template, args, stacklevel=2)

    def __enter__(self) -> DurationLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._release(self._template, self._args, stacklevel=2)

    def _release(self, template: str, args: tuple, stacklevel: int) -> None:
        elapsed = _now() - self._start
        level = self._level
        if self._threshold is not None and elapsed <= self._threshold:
            level = self._under_level
            if level is None:
                return
        self._logger._emit_duration(level, template, args, elapsed, stacklevel=stacklevel + 1)


class _NoopDurationLog(DurationLog):
    """Returned when the gating level is disabled; release does nothing."""

    __slots__ = ()

    def __init__(self) -> None:
        pass

    def __call__(self, template: str = "", *args: Any) -> None:
        return None

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def __repr__(self) -> str:
        return "NOOP"


NOOP = _NoopDurationLog()
