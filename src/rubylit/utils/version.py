# topmark:header:start
#
#   project      : RubyLit
#   file         : version.py
#   file_relpath : src/rubylit/utils/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version utilities for RubyLit."""

import re

# The subset of PEP 440 this project publishes: X.Y.Z with optional aN/bN/rcN,
# .devN and +local. Post releases have no SemVer equivalent and are rejected.
_PEP440_RE: re.Pattern[str] = re.compile(
    r"""
    ^
    (?P<major>0|[1-9]\d*)\.
    (?P<minor>0|[1-9]\d*)\.
    (?P<patch>0|[1-9]\d*)
    (?:(?P<pre_label>a|b|rc)(?P<pre_num>\d+))?
    (?:\.post(?P<post>\d+))?
    (?:\.dev(?P<dev>\d+))?
    (?:\+(?P<local>[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*))?
    $
    """,
    re.VERBOSE,
)

_PRE_LABELS: dict[str, str] = {"a": "alpha", "b": "beta", "rc": "rc"}


def pep440_to_semver(pep440_version: str) -> str:
    """Convert a PEP 440 version to SemVer.

    Maps ``rcN`` to ``-rc.N``, ``aN`` to ``-alpha.N``, ``bN`` to ``-beta.N``, ``.devN`` to
    ``-dev.N`` (or ``.dev.N`` after a pre-release) and keeps ``+local``.

    Args:
        pep440_version (str): The version in PEP 440 format.

    Returns:
        str: The version in SemVer format.

    Raises:
        ValueError: On unrecognized versions and post releases.
    """
    m: re.Match[str] | None = _PEP440_RE.match(pep440_version)
    if not m:
        raise ValueError(f"Not a recognized PEP 440 version: {pep440_version!r}")
    if m.group("post") is not None:
        raise ValueError(f"Post-releases are not valid SemVer: {pep440_version!r}")
    version: str = f"{m.group('major')}.{m.group('minor')}.{m.group('patch')}"
    pre: str = ""
    if m.group("pre_label"):
        pre = f"-{_PRE_LABELS[m.group('pre_label')]}.{m.group('pre_num')}"
    version += pre
    if m.group("dev"):
        version += f"{'.' if pre else '-'}dev.{m.group('dev')}"
    if m.group("local"):
        version += f"+{m.group('local')}"
    return version
