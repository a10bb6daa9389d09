"""StructuredLogger: the leveled backend behind every prefixlog Logger."""

from __future__ import annotations

import logging
import sys
from typing import Any

from prefixlog.constants import FATAL, PANIC
from prefixlog.errors import PanicError


class StructuredLogger:
    """Thin wrapper over a stdlib logger adding bound k=v context and caller skip.

    Instances are immutable: ``with_fields`` and ``with_caller_skip`` return
    new backends sharing the same stdlib logger.
    """

    __slots__ = ("_logger", "_context", "_skip", "_name")

    def __init__(
        self,
        logger: logging.Logger,
        context: dict[str, Any] | None = None,
        skip: int = 0,
        name: str = "",
    ) -> None:
        self._logger = logger
        self._context = context or {}
        self._skip = skip
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    @property
    def caller_skip(self) -> int:
        return self._skip

    def enabled(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def log(
        self,
        level: int,
        msg: str,
        fields: dict[str, Any] | None = None,
        *,
        stacklevel: int = 1,
        exc_info: Any = None,
    ) -> None:
        """Write one record. ``stacklevel`` 1 is the frame calling this method.

        PANIC raises PanicError once written; FATAL flushes and exits with
        status 1.
        """
        extra_data = {**self._context, **fields} if fields else dict(self._context)
        self._logger.log(
            level, msg,
            exc_info=exc_info,
            extra={"extra_data": extra_data},
            stacklevel=stacklevel + 1 + self._skip,
        )
        if level >= FATAL:
            self.sync()
            sys.exit(1)
        if level >= PANIC:
            raise PanicError(msg)

    def with_fields(self, /, **kv: Any) -> StructuredLogger:
        return StructuredLogger(self._logger, {**self._context, **kv}, self._skip, self._name)

    def with_caller_skip(self, skip: int) -> StructuredLogger:
        return StructuredLogger(self._logger, self._context, self._skip + skip, self._name)

    def sync(self) -> None:
        """Flush every handler reachable from the stdlib logger."""
        logger: logging.Logger | None = self._logger
        while logger is not None:
            for handler in logger.handlers:
                handler.flush()
            logger = logger.parent if logger.propagate else None
