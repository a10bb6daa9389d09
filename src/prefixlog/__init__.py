"""prefixlog: prefixed, duration-aware logging over stdlib logging.

Public API:
    new, named           : Build a Logger configured from LOG_* env vars
    must_new, must_named : Same, exiting the process on failure
    wrap                 : Adopt an existing StructuredLogger or logging.Logger
    get_message          : The %-format / concatenate helper used for messages
    format_duration      : Render nanoseconds as "312ms", "2.015s", ...
    timed                : Decorator logging each call's duration
    Logger, StructuredLogger, DurationLog, NOOP
"""

from prefixlog.constants import DEBUG, INFO, WARN, ERROR, PANIC, FATAL
from prefixlog.duration import DurationLog, NOOP, format_duration
from prefixlog.errors import PrefixLogError, BackendError, PanicError
from prefixlog.logger import Logger, get_message, new, named, must_new, must_named, wrap
from prefixlog.structured_logger import StructuredLogger
from prefixlog.decorator import timed

__all__ = [
    "new",
    "named",
    "must_new",
    "must_named",
    "wrap",
    "get_message",
    "format_duration",
    "timed",
    "Logger",
    "StructuredLogger",
    "DurationLog",
    "NOOP",
    "PrefixLogError",
    "BackendError",
    "PanicError",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "PANIC",
    "FATAL",
]
