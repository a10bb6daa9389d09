import logging

import pytest

from prefixlog.structured_logger import StructuredLogger

_LOG_ENV = (
    "LOG_LEVEL",
    "LOG_COLOR",
    "LOG_ENCODING",
    "LOG_TIMESTAMP",
    "LOG_SEPARATOR",
    "LOG_LEVEL_TEST",
    "LOG_LEVEL_API",
)


@pytest.fixture(autouse=True)
def clean_log_env(monkeypatch):
    """Keep LOG_* variables from the outer environment out of tests."""
    for key in _LOG_ENV:
        monkeypatch.delenv(key, raising=False)


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(logging.NOTSET)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    @property
    def messages(self) -> list[tuple[int, str]]:
        return [(r.levelno, r.getMessage()) for r in self.records]


@pytest.fixture
def handler(request):
    """Capturing handler on a private stdlib logger (level DEBUG)."""
    inner = logging.getLogger(f"test.capture.{request.node.name}")
    inner.setLevel(logging.DEBUG)
    inner.propagate = False
    h = ListHandler()
    inner.addHandler(h)
    h.logger = inner
    yield h
    inner.removeHandler(h)


@pytest.fixture
def backend(handler):
    return StructuredLogger(handler.logger)
