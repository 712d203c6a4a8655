# topmark:header:start
#
#   project      : RubyLit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running RubyLit in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path` before
invoking the Click CLI, so relative input paths and config discovery
(``rubylit.toml`` / ``[tool.rubylit]``) resolve against the temporary directory
instead of the repository checkout.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from rubylit.cli.exit_codes import ExitCode
from rubylit.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["encode", "a.json"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text, obj={})
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files or config discovery
    (e.g. ``--help`` / ``version``). Otherwise prefer `run_cli_in`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_exit_code(result: Result, expected: ExitCode) -> None:
    """Assert that the command exited with ``expected``.

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
        expected (ExitCode): The expected exit code.
    """
    assert result.exit_code == expected, result.output
