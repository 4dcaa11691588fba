# topmark:header:start
#
#   project      : BBContent
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers."""

from __future__ import annotations

import logging as pylogging

import pytest

from bbcontent.config import logging
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("trace", logging.TRACE_LEVEL),
        ("DEBUG", pylogging.DEBUG),
        (" warn ", pylogging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    """Level names, aliases and numbers are accepted; unknown values are ignored."""
    monkeypatch.setenv("BBCONTENT_LOG_LEVEL", raw)
    assert logging.resolve_env_log_level() == expected


def test_env_unset_gives_none() -> None:
    """The autouse fixture clears the variable."""
    assert logging.resolve_env_log_level() is None


def test_get_logger_supports_trace() -> None:
    """Project loggers expose `trace()`."""
    logger = logging.get_logger("bbcontent.tests.trace")
    assert isinstance(logger, logging.BBContentLogger)
    logger.trace("tracing %s", "works")


def test_chalk_formatter_keeps_message() -> None:
    """Colorized output still contains the formatted message."""
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = pylogging.LogRecord("x", pylogging.WARNING, __file__, 1, "hello %s", ("you",), None)
    assert "[WARNING] hello you" in formatter.format(record)


def test_chalk_formatter_colors_trace_records() -> None:
    """TRACE records get their own color and keep the level name."""
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = pylogging.LogRecord("x", logging.TRACE_LEVEL, __file__, 1, "rule %s", ("ok",), None)
    assert "[TRACE] rule ok" in formatter.format(record)


def test_setup_logging_installs_one_handler() -> None:
    """Repeated setup replaces the handler, with the detailed format below INFO."""
    logging.setup_logging(pylogging.INFO)
    logging.setup_logging(logging.TRACE_LEVEL)
    root = pylogging.getLogger()
    ours = [h for h in root.handlers if isinstance(h.formatter, logging.ChalkFormatter)]
    assert len(ours) == 1
    formatter = ours[0].formatter
    assert formatter is not None
    assert formatter._fmt == logging.DEBUG_LOG_FORMAT  # pyright: ignore[reportPrivateUsage]
    assert root.level == logging.TRACE_LEVEL
