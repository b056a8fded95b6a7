# topmark:header:start
#
#   project      : prog
#   file         : printer.py
#   file_relpath : src/prog/pipeline/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Print the input's contents under a ``File '<name>' contents`` heading."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prog.cli.exit_codes import ExitCode
from prog.config.keys import OutputCategory
from prog.rendering.painter import indent

if TYPE_CHECKING:
    from prog.pipeline.session import Session


def print_file(session: Session) -> ExitCode:
    """Write the heading, the indented contents and a trailing blank line.

    Nothing is printed when no input has been read.

    Args:
        session (Session): Session populated by the reader step.

    Returns:
        ExitCode: Always ``SUCCESS``.
    """
    session.verbose("Printing file\n")

    if session.file is None:
        return ExitCode.SUCCESS

    data: str = session.data or ""
    msg: str = session.painter.heading(session.file, "contents")
    if data != "":
        data = session.painter.paint(data, OutputCategory.DATA)

    session.debug(f"$file = '{session.file}'\n")
    session.dump("$msg", msg)
    session.dump("$data", data)
    session.debug("\n")

    session.console.write(msg)
    session.console.write(indent(data))
    session.console.write("\n")

    return ExitCode.SUCCESS
