"""@timed decorator: log how long each call of a function took."""

from __future__ import annotations

import functools
import inspect
from datetime import timedelta
from typing import Any

from prefixlog.constants import DEBUG, INFO
from prefixlog.duration import DurationLog
from prefixlog.logger import Logger


def _acquire(logger: Logger, level: int, threshold: float | timedelta | None) -> DurationLog:
    if threshold is not None:
        return logger.auto_dur(threshold)
    if level == DEBUG:
        return logger.debug_dur()
    return logger.info_dur()


def timed(
    logger: Logger,
    template: str | None = None,
    *,
    threshold: float | timedelta | None = None,
    level: int = INFO,
):
    """Decorator that logs each call's elapsed time when it returns or raises.

    Args:
        logger: Logger to emit through; its prefix applies.
        template: Message; defaults to the function's qualified name.
        threshold: When set, log at WARN past it and DEBUG below (auto_dur).
        level: INFO or DEBUG, used when no threshold is given.

    Raises:
        ValueError: ``level`` is neither INFO nor DEBUG.
    """
    if level not in (DEBUG, INFO):
        raise ValueError(f"timed() level must be DEBUG or INFO, got {level}")
    # Report the decorated function's caller, not the wrapper.
    log = logger.skip(1)

    def decorator(fn):
        msg = template if template is not None else fn.__qualname__

        if inspect.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                done = _acquire(log, level, threshold)
                try:
                    return await fn(*args, **kwargs)
                finally:
                    done(msg)
            return async_wrapper

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            done = _acquire(log, level, threshold)
            try:
                return fn(*args, **kwargs)
            finally:
                done(msg)
        return sync_wrapper
    return decorator
