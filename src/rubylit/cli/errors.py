# topmark:header:start
#
#   project      : RubyLit
#   file         : errors.py
#   file_relpath : src/rubylit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the RubyLit CLI.

Raise these from commands to exit with a standardized message and exit code. When a
project console is present in the Click context, `show()` routes the message through
it; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from rubylit.cli.exit_codes import ExitCode


class RubylitError(click.ClickException):
    """Base class for all RubyLit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class RubylitUsageError(RubylitError):
    """Error for invalid combinations of flags/args."""

    exit_code = ExitCode.USAGE_ERROR


class RubylitConfigError(RubylitError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class RubylitFileNotFoundError(RubylitError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class RubylitPermissionDeniedError(RubylitError):
    """Error for insufficient permissions."""

    exit_code = ExitCode.PERMISSION_DENIED


class RubylitIOError(RubylitError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class RubylitDataError(RubylitError):
    """Error for input that cannot be decoded or parsed (JSON/TOML syntax, bad UTF-8)."""

    exit_code = ExitCode.DATA_ERROR


class RubylitEncodeError(RubylitError):
    """Error for values that cannot be encoded as a Ruby literal."""

    exit_code = ExitCode.ENCODE_ERROR


class RubylitUnexpectedError(RubylitError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
