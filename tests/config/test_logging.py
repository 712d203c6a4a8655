# topmark:header:start
#
#   project      : RubyLit
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging helpers: level parsing, the TRACE level and the colored formatter."""

from __future__ import annotations

import logging

import pytest

from rubylit.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    RubylitLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("nonsense", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_log_level(value: str | None, expected: int | None) -> None:
    assert parse_log_level(value) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv("RUBYLIT_LOG_LEVEL", "info")
    assert resolve_env_log_level() == logging.INFO


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger: RubylitLogger = get_logger("rubylit.tests.trace")
    assert isinstance(logger, RubylitLogger)

    with caplog.at_level(TRACE_LEVEL, logger="rubylit.tests.trace"):
        logger.trace("value %d", 42)

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "value 42")]


def test_chalk_formatter_keeps_message_text() -> None:
    formatter = ChalkFormatter("[%(levelname)s] %(message)s")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "[WARNING] careful" in formatter.format(record)
