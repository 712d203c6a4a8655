# topmark:header:start
#
#   project      : RubyLit
#   file         : exit_codes.py
#   file_relpath : src/rubylit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the RubyLit CLI.

RubyLit aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. Click's own usage errors (unknown
options, bad parameter values) keep Click's default exit code 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the RubyLit CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid combination of flags/args. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: The input document could not be parsed, or its value could not be
            encoded. Mirrors BSD ``EX_DATAERR (65)``.
        ENCODE_ERROR: A value has no Ruby literal form (same code as DATA_ERROR).
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading the input. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    ENCODE_ERROR = 65  # alias of DATA_ERROR for values that cannot be encoded
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
