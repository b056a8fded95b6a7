# topmark:header:start
#
#   project      : prog
#   file         : stat.py
#   file_relpath : src/prog/pipeline/stat.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run ``stat(1)`` on the input and print its output.

The command is built as an argument list (no shell) and run once, with
stdout and stderr captured. In dry-run mode the command line is written to
stderr instead and nothing is spawned. There are no retries and no timeout.
"""

from __future__ import annotations

import shlex
import subprocess
from typing import TYPE_CHECKING, Any, Callable

from prog.cli.errors import StatError
from prog.cli.exit_codes import ExitCode
from prog.config.keys import OutputCategory
from prog.config.logging import get_logger
from prog.constants import INDENT, SPACE, STAT_COMMAND
from prog.rendering.painter import indent

if TYPE_CHECKING:
    from prog.config.logging import ProgLogger
    from prog.pipeline.session import Session

logger: ProgLogger = get_logger(__name__)

#: Callable compatible with `subprocess.run`.
Runner = Callable[..., "subprocess.CompletedProcess[Any]"]


def build_command(file: str) -> list[str]:
    """Return the argument vector for ``stat <file>``."""
    return [STAT_COMMAND, file]


def run_stat(session: Session, runner: Runner | None = None) -> ExitCode:
    """Print a status heading and the output of ``stat`` for the input.

    Args:
        session (Session): Session populated by the reader step.
        runner (Runner | None): Process runner; `subprocess.run` when None.

    Returns:
        ExitCode: ``SUCCESS`` when ``stat`` succeeded or dry-run is on.

    Raises:
        StatError: If ``stat`` cannot be started or exits non-zero.
    """
    file: str | None = session.file
    if file is None:
        return ExitCode.SUCCESS

    session.verbose("Running stat(1) command\n")

    command: list[str] = build_command(file)
    cmd: str = SPACE.join(command)

    session.console.write(session.painter.heading(file, "status info"))
    session.debug(f"$command: '{cmd}'\n")

    if session.prefs.dry_run:
        session.dry(f"{INDENT}Executing '{cmd}'\n")
        return ExitCode.SUCCESS

    run: Runner = runner or subprocess.run
    logger.debug("Running %s", shlex.join(command))
    try:
        completed: subprocess.CompletedProcess[Any] = run(
            command,
            capture_output=True,
            text=True,
            # stat echoes the raw file name, which need not be valid in the locale encoding.
            errors="surrogateescape",
            check=False,
        )
    except OSError as exc:
        raise StatError(f"failed to run '{cmd}'", detail=str(exc)) from exc

    stdout: str = completed.stdout or ""
    stderr: str = completed.stderr or ""

    session.debug(f"$? = {completed.returncode}\n")
    session.dump("$stdout", stdout)
    session.debug(f"$stderr = '{stderr}'\n")

    if completed.returncode != 0:
        raise StatError(f"failed to run '{cmd}'", detail=stderr or None)

    if stdout != "":
        session.console.write(indent(session.painter.paint(stdout, OutputCategory.DATA)))

    return ExitCode.SUCCESS
