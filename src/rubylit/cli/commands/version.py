# topmark:header:start
#
#   project      : RubyLit
#   file         : version.py
#   file_relpath : src/rubylit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit `version` command.

Prints the RubyLit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from rubylit.cli.cli_types import EnumChoiceParam, OutputFormat
from rubylit.constants import RUBYLIT_VERSION
from rubylit.utils.version import pep440_to_semver

if TYPE_CHECKING:
    from rubylit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of RubyLit.",
)
@click.option(
    "--semver",
    is_flag=True,
    default=False,
    help="Render the version as SemVer instead of PEP 440 (maps rc→-rc.N, dev→-dev.N).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(
    ctx: click.Context,
    *,
    output_format: OutputFormat | None = None,
    semver: bool = False,
) -> None:
    """Show the current version of RubyLit.

    Args:
        ctx (click.Context): Current Click context (holds the console).
        output_format (OutputFormat | None): Optional output format.
        semver (bool): Render as SemVer if True, PEP 440 (default) if False.
    """
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = int(ctx.obj.get("verbosity_level", 0))

    version_text: str = RUBYLIT_VERSION
    if semver:
        try:
            version_text = pep440_to_semver(RUBYLIT_VERSION)
        except ValueError as exc:
            # Fall back to the raw version; if verbose, surface the reason.
            if verbosity > 0:
                console.info(console.styled(f"[warn] {exc}", bold=True))

    scheme: str = "semver" if semver else "pep440"
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": version_text, "format": scheme}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# RubyLit Version\n")
        console.print(f"**RubyLit version ({scheme}): {version_text}**")
    elif verbosity > 0:
        console.print(console.styled(f"RubyLit version ({scheme}):\n", bold=True, underline=True))
        console.print(f"    {console.styled(version_text, bold=True)}")
    else:
        console.print(console.styled(version_text, bold=True))
