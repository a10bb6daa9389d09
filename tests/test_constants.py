"""Tests for level constants."""

import logging

from prefixlog.constants import (
    DEBUG, ERROR, FATAL, INFO, LEVEL_COLORS, LEVELS, PANIC, RESET, WARN, level_name,
)


class TestLevels:
    def test_levels_are_ordered(self):
        assert DEBUG < INFO < WARN < ERROR < PANIC < FATAL

    def test_stdlib_alignment(self):
        assert WARN == logging.WARNING
        assert FATAL == logging.CRITICAL
        assert logging.getLevelName(PANIC) == "PANIC"

    def test_level_names(self):
        assert [level_name(LEVELS[k]) for k in LEVELS] == list(LEVELS)
        assert level_name(5) == "level 5"


class TestColors:
    def test_every_level_colored(self):
        for level in LEVELS.values():
            assert LEVEL_COLORS[level].startswith("\033[")

    def test_reset_code(self):
        assert RESET == "\033[0m"
