# topmark:header:start
#
#   project      : prog
#   file         : signals.py
#   file_relpath : src/prog/cli/signals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SIGINT/SIGTERM handling.

On SIGINT (Ctrl+C) or SIGTERM (e.g. ``pkill prog``) the handler writes a
single line to stderr, marks the run's `CancelToken` and raises
`prog.cli.errors.Interrupted`. The exception unwinds whatever stage is
running, including a blocking read or a running ``stat`` child (which
`subprocess.run` kills on the way out). The CLI turns it into exit status 0.

The pipeline also calls `CancelToken.raise_if_cancelled` between stages.
"""

from __future__ import annotations

import os
import signal
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from prog.cli.errors import Interrupted
from prog.config.logging import get_logger
from prog.constants import PROG_NAME

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from types import FrameType

    from prog.config.logging import ProgLogger

logger: ProgLogger = get_logger(__name__)

HANDLED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class CancelToken:
    """Records whether (and by which signal) the run was cancelled.

    Attributes:
        signame (str | None): Short name of the signal that cancelled the run.
    """

    signame: str | None

    def __init__(self) -> None:
        self.signame = None

    @property
    def cancelled(self) -> bool:
        """True once a handled signal has been received."""
        return self.signame is not None

    def cancel(self, signame: str) -> None:
        """Mark the token as cancelled by ``signame``."""
        self.signame = signame

    def raise_if_cancelled(self) -> None:
        """Raise `Interrupted` if the token has been cancelled."""
        if self.signame is not None:
            raise Interrupted(self.signame)


def signal_message(signame: str) -> str:
    """Return the line written to stderr when ``signame`` is caught.

    SIGINT gets a leading newline so the message does not share a line with
    the ``^C`` echoed by the terminal.
    """
    msg: str = f"{PROG_NAME}: signal '{signame}' caught; exiting\n"
    return f"\n{msg}" if signame == "INT" else msg


def _short_name(signum: int) -> str:
    return signal.Signals(signum).name.removeprefix("SIG")


def make_handler(token: CancelToken) -> Callable[[int, FrameType | None], None]:
    """Return a signal handler bound to ``token``."""

    def _handler(signum: int, _frame: FrameType | None) -> None:
        signame: str = _short_name(signum)
        # Single unbuffered write to the stderr descriptor.
        try:
            os.write(sys.stderr.fileno(), signal_message(signame).encode())
        except (AttributeError, OSError, ValueError):
            sys.stderr.write(signal_message(signame))
        token.cancel(signame)
        raise Interrupted(signame)

    return _handler


@contextmanager
def handle_signals(token: CancelToken) -> Iterator[CancelToken]:
    """Install SIGINT/SIGTERM handlers for the duration of the block.

    Previous handlers are restored on exit.

    Args:
        token (CancelToken): Token marked when a signal arrives.

    Yields:
        CancelToken: The same token.
    """
    previous: dict[signal.Signals, object] = {}
    handler = make_handler(token)
    for sig in HANDLED_SIGNALS:
        previous[sig] = signal.signal(sig, handler)
    logger.trace("Installed handlers for %s", ", ".join(s.name for s in HANDLED_SIGNALS))
    try:
        yield token
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)  # type: ignore[arg-type]
