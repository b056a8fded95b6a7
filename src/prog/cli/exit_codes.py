# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/prog/cli/exit_codes.py
#   project      : prog
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the prog CLI application.

prog keeps to the three codes most command-line tools use, so that scripts
can tell a usage mistake from a runtime failure.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for prog CLI.

    Attributes:
        SUCCESS (int): The run completed, or an immediate-exit flag (``--help``,
            ``--version``, ``--generate-cfg``) succeeded, or the run was interrupted
            by SIGINT/SIGTERM.
        FAILURE (int): Runtime failure: I/O error, ``stat`` failure, invalid color
            value, configuration syntax error.
        USAGE_ERROR (int): Invalid invocation: unknown flag, malformed option value,
            or a file argument that does not name a regular file. Matches Click's
            own usage-error code.

    Usage:
        ```python
        import subprocess
        from prog.cli.exit_codes import ExitCode

        result = subprocess.run(["prog", "notes.txt"])
        if result.returncode == ExitCode.USAGE_ERROR:
            print("Check the command line.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
