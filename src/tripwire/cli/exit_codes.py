# topmark:header:start
#
#   project      : Tripwire
#   file         : exit_codes.py
#   file_relpath : src/tripwire/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end

"""Exit codes for the Tripwire CLI.

Tripwire follows the BSD `sysexits` convention for the errors it raises itself
(see `tripwire.cli.errors`). Errors detected by Click's own option parsing, such
as an invalid ``--color`` choice, keep Click's status 2.

A panic issued through ``tripwire emit panic`` exits with none of these: the
process is aborted and the platform decides the status.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Tripwire CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Command-line invocation error (invalid arguments). Mirrors
            BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
