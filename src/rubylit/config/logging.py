# topmark:header:start
#
#   project      : RubyLit
#   file         : logging.py
#   file_relpath : src/rubylit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit logging with a TRACE level and colored output.

The encoder logs per-value dispatch at TRACE and ordering fallbacks at DEBUG. Logging
is silent (CRITICAL) unless ``RUBYLIT_LOG_LEVEL`` asks for more. Log records go to
stderr so they never mix with encoded output on stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from rubylit.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class RubylitLogger(logging.Logger):
    """Logger class with support for a TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra information for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(RubylitLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


# Highest threshold first; the first threshold at or below the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then color it by level."""
        message: str = super().format(record)
        for threshold, paint in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


def parse_log_level(value: str | None) -> int | None:
    """Return the logging level named by ``value`` (name or number), or None."""
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the logging level from ``RUBYLIT_LOG_LEVEL``, or None if unset or invalid."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with colored output on stderr.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> RubylitLogger:
    """Retrieve a RubylitLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        RubylitLogger: A RubylitLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("RubylitLogger", logger)
