# topmark:header:start
#
#   project      : prog
#   file         : reader.py
#   file_relpath : src/prog/pipeline/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input reader step for the prog pipeline.

Resolves the input from the positional arguments and slurps it into the
session:

- no argument, or ``-``: the whole of standard input; the display name is
  ``/dev/fd/<n>`` for the stdin descriptor (``/dev/stdin`` when the stream
  has none);
- otherwise: a regular file, read as UTF-8 text. Anything else (missing
  path, directory, device) is a usage error.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from prog.cli.errors import ProgFileNotFoundError, ProgIOError
from prog.cli.exit_codes import ExitCode
from prog.config.logging import get_logger
from prog.constants import STDIN_SENTINEL

if TYPE_CHECKING:
    from prog.config.logging import ProgLogger
    from prog.pipeline.session import Session

logger: ProgLogger = get_logger(__name__)


def stdin_display_name(stream: TextIO) -> str:
    """Return the ``/dev/fd/<n>`` name of ``stream``, or ``/dev/stdin``."""
    try:
        return f"/dev/fd/{stream.fileno()}"
    except (AttributeError, OSError, ValueError):
        return "/dev/stdin"


def read_input(session: Session, stdin: TextIO | None = None) -> ExitCode:
    """Read the input named by ``session.argv`` into the session.

    Args:
        session (Session): Current session; ``file``, ``path`` and ``data`` are set.
        stdin (TextIO | None): Stream used for ``-`` or no argument; defaults to
            Click's stdin text stream.

    Returns:
        ExitCode: ``SUCCESS`` once the content is loaded.

    Raises:
        ProgFileNotFoundError: If the argument does not name a regular file.
        ProgIOError: If the file cannot be read or decoded.
    """
    session.verbose("Processing file\n")

    arg: str | None = session.argv[0] if session.argv else None
    path: Path | None = None

    if arg is None or arg == STDIN_SENTINEL:
        stream: TextIO = stdin or click.get_text_stream("stdin")
        file: str = stdin_display_name(stream)
        try:
            data: str = stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ProgIOError(f"failed to read standard input: {exc}") from exc
    else:
        path = Path(arg)
        if not path.is_file():
            raise ProgFileNotFoundError(f"'{arg}' is not a file")
        try:
            data = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ProgIOError(f"failed to read '{arg}': {exc}") from exc
        file = arg

    session.file = file
    session.path = path
    session.data = data
    logger.debug("Read %d characters from %s", len(data), file)

    session.debug(f"$file = '{file}'\n$path = '{path or ''}'\n")
    session.dump("$data", data)
    session.debug("\n")

    return ExitCode.SUCCESS
