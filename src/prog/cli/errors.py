# topmark:header:start
#
#   project      : prog
#   file         : errors.py
#   file_relpath : src/prog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for prog CLI.

Usage:
    Raise these exceptions in the CLI or in pipeline steps to signal errors
    with standardized messages and exit codes. Click catches them at the
    command boundary, calls `show()` and exits with ``exit_code``.

Styling:
    Messages are printed to stderr as ``prog: <message>``, without color, so
    they read the same whether or not color output is enabled.
"""

from __future__ import annotations

from typing import IO, Any

import click

from prog.cli.exit_codes import ExitCode
from prog.constants import PROG_NAME


class ProgError(click.ClickException):
    """Base class for all prog CLI errors.

    Args:
        message (str): One-line message, printed after the program name.
        detail (str | None): Optional text printed verbatim before the message,
            such as a parser error or the captured stderr of a subprocess.
    """

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Print ``prog: <message>`` to ``file`` (stderr by default)."""
        if file is None:
            file = click.get_text_stream("stderr")
        if self.detail:
            click.echo(self.detail, file=file, nl=not self.detail.endswith("\n"))
        click.echo(f"{PROG_NAME}: {self.format_message()}", file=file)


class ProgUsageError(ProgError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ProgFileNotFoundError(ProgError):
    """Error when the file argument does not name a regular file."""

    exit_code = ExitCode.USAGE_ERROR


class ProgIOError(ProgError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.FAILURE


class ConfigSyntaxError(ProgError):
    """Error for a configuration file that cannot be read or parsed as TOML."""

    exit_code = ExitCode.FAILURE


class ConfigExistsError(ProgError):
    """Error when ``--generate-cfg`` would overwrite an existing file."""

    exit_code = ExitCode.FAILURE


class ConfigWriteError(ProgError):
    """Error when the default configuration file cannot be created."""

    exit_code = ExitCode.FAILURE


class InvalidColorError(ProgError):
    """Error for a ``color`` preference outside never/always/auto."""

    exit_code = ExitCode.FAILURE


class StatError(ProgError):
    """Error when the external ``stat`` command cannot run or fails."""

    exit_code = ExitCode.FAILURE


class Interrupted(BaseException):
    """Raised from a signal handler to unwind the run.

    Derives from `BaseException`, like `KeyboardInterrupt`, so that
    `except Exception` clauses do not swallow it.

    Attributes:
        signame (str): Short signal name (``"INT"``, ``"TERM"``).
    """

    def __init__(self, signame: str) -> None:
        super().__init__(signame)
        self.signame = signame
