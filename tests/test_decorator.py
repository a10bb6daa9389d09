"""Tests for the @timed decorator."""

import pytest

import prefixlog.duration as duration
from prefixlog import timed, wrap
from prefixlog.constants import DEBUG, ERROR, INFO, WARN


@pytest.fixture
def frozen(monkeypatch):
    monkeypatch.setattr(duration, "_now", lambda: 0)


class TestTimed:
    def test_sync_function_logs_qualname(self, handler, backend, frozen):
        log = wrap(backend)

        @timed(log)
        def add(a, b):
            return a + b

        assert add(1, 2) == 3
        level, msg = handler.messages[0]
        assert level == INFO
        assert msg == "TestTimed.test_sync_function_logs_qualname.<locals>.add: 0s"

    @pytest.mark.asyncio
    async def test_async_function(self, handler, backend, frozen):
        @timed(wrap(backend).with_("[job]"), "fetch")
        async def fetch(url):
            return "data"

        assert await fetch("http://example.com") == "data"
        assert handler.messages == [(INFO, "[job] fetch: 0s")]

    def test_logs_when_function_raises(self, handler, backend, frozen):
        @timed(wrap(backend), "fail", level=DEBUG)
        def fail():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            fail()
        assert handler.messages == [(DEBUG, "fail: 0s")]

    def test_threshold_picks_level(self, handler, backend, monkeypatch):
        ticks = iter([0, 5_000_000, 0, 50_000_000])
        monkeypatch.setattr(duration, "_now", lambda: next(ticks))

        @timed(wrap(backend), "op", threshold=0.01)
        def op():
            return None

        op()
        op()
        assert handler.messages == [(DEBUG, "op: 5ms"), (WARN, "op: 50ms")]

    def test_disabled_level_still_runs_function(self, handler, backend):
        handler.logger.setLevel(WARN)

        @timed(wrap(backend))
        def work():
            return 42

        assert work() == 42
        assert handler.records == []

    def test_unsupported_level_rejected(self, backend):
        with pytest.raises(ValueError, match="DEBUG or INFO"):
            timed(wrap(backend), "op", level=ERROR)

    def test_reports_callers_line(self, handler, backend):
        @timed(wrap(backend), "op")
        def op():
            return None

        op()
        assert handler.records[0].funcName == "test_reports_callers_line"
