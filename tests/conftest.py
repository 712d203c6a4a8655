# topmark:header:start
#
#   project      : RubyLit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared pytest configuration for the RubyLit test suite."""

from __future__ import annotations

import pytest
from pytest import hookimpl

from rubylit.config import logging


@pytest.fixture(autouse=True)
def _clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:  # pyright: ignore[reportUnusedFunction]
    """Keep ``RUBYLIT_LOG_LEVEL`` from leaking into test runs.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("RUBYLIT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable DEBUG logging for the test session (TRACE logs every encoded value)."""
    logging.setup_logging(level=logging.logging.DEBUG)

