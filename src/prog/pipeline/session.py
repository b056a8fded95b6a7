# topmark:header:start
#
#   project      : prog
#   file         : session.py
#   file_relpath : src/prog/pipeline/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime session threaded through the prog pipeline.

A `Session` is created once per run, after preferences are resolved, and
passed explicitly to every pipeline step. It carries the resolved
`Preferences`, the positional arguments, the input file (name, path and
content once read), the output console, the color painter, and the
cancellation token.

It also provides the stderr diagnostics channel:

- `Session.verbose`: progress messages, only with ``--verbose``;
- `Session.debug` / `Session.dump`: only when ``PROG_DEBUG`` is set;
- `Session.dry`: messages about actions skipped in dry-run mode.

None of these are affected by ``--quiet``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from prog.cli.console import ClickConsole
from prog.cli.signals import CancelToken
from prog.config.keys import OutputCategory
from prog.constants import ENV_DEBUG
from prog.rendering.painter import Painter

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from prog.config.model import Preferences


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Return True if ``PROG_DEBUG`` is set to a truthy value (not empty, not ``0``)."""
    env: Mapping[str, str] = os.environ if environ is None else environ
    return env.get(ENV_DEBUG, "") not in ("", "0")


@dataclass
class Session:
    """Per-run state for the read → print → stat pipeline.

    Attributes:
        prefs (Preferences): Resolved runtime preferences.
        argv (list[str]): Positional arguments (zero or one file name).
        debug_mode (bool): Whether ``PROG_DEBUG`` diagnostics are enabled.
        config_path (Path | None): Configuration file that was loaded, if any.
        console (ClickConsole): Output console (stdout gated by ``quiet``).
        painter (Painter): Color-or-strip renderer for the resolved palette.
        token (CancelToken): Cancellation token checked between steps.
        file (str | None): Display name of the input, set by the reader.
        path (Path | None): Filesystem path of the input (None for stdin).
        data (str | None): Input content, set once by the reader.
    """

    prefs: Preferences
    argv: list[str] = field(default_factory=lambda: [])
    debug_mode: bool = False
    config_path: Path | None = None
    console: ClickConsole = field(default_factory=ClickConsole)
    painter: Painter = field(init=False)
    token: CancelToken = field(default_factory=CancelToken)

    file: str | None = None
    path: Path | None = None
    data: str | None = None

    def __post_init__(self) -> None:
        self.painter = Painter(self.prefs.palette, enabled=self.prefs.color)
        self.console.quiet = self.prefs.quiet

    # --- stderr diagnostics ---

    def verbose(self, msg: str) -> None:
        """Print a progress message when ``--verbose`` is on."""
        if self.prefs.verbose:
            self.console.error(self.painter.paint(msg, OutputCategory.VERBOSE), nl=False)

    def debug(self, msg: str) -> None:
        """Print a debug message when ``PROG_DEBUG`` is set."""
        if self.debug_mode:
            self.console.error(self.painter.paint(msg, OutputCategory.DEBUG), nl=False)

    def dump(self, name: str, value: object) -> None:
        """Print ``name = repr(value)`` when ``PROG_DEBUG`` is set."""
        if self.debug_mode:
            prefix: str = self.painter.paint(f"{name} = ", OutputCategory.DUMP)
            self.console.error(self.painter.finish(f"{prefix}{value!r}"))

    def dry(self, msg: str) -> None:
        """Print a dry-run message (only in dry-run mode)."""
        if self.prefs.dry_run:
            self.console.error(self.painter.paint(msg, OutputCategory.DRY_RUN), nl=False)
