"""Exceptions raised by prefixlog."""

from __future__ import annotations


class PrefixLogError(Exception):
    pass


class BackendError(PrefixLogError):
    """The logging backend could not be built."""


class PanicError(PrefixLogError):
    """Raised after a PANIC record has been written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
