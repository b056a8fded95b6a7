# topmark:header:start
#
#   project      : prog
#   file         : console.py
#   file_relpath : src/prog/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates program output
from internal logging. Use it for text intended for end users, while reserving
`logging` for diagnostics.

Quiet mode is implemented here: a quiet console drops everything written to
stdout but still writes to stderr. The process's file descriptors are never
touched.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Text passed to the console is written as-is: coloring (or stripping) is
    decided upstream by `prog.rendering.painter.Painter`.

    Args:
        quiet (bool): If True, standard-output writes are discarded.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.

    Attributes:
        quiet (bool): Whether standard-output writes are discarded.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for error output.
    """

    quiet: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        quiet: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.quiet = quiet
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout (unless quiet).

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        if self.quiet:
            return
        # color=True: ANSI codes have already been kept or stripped by the painter.
        click.echo(text, nl=nl, file=self.out, color=True)

    def write(self, text: str) -> None:
        """Write ``text`` to stdout without adding a newline (unless quiet)."""
        self.print(text, nl=False)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a message to stderr; never silenced by quiet mode.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=True)
