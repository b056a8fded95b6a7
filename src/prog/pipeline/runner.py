# topmark:header:start
#
#   project      : prog
#   file         : runner.py
#   file_relpath : src/prog/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequential pipeline runner: read → print → stat.

Each step runs exactly once, in order. A step either returns an `ExitCode`
or raises a `prog.cli.errors.ProgError`; the first non-success status stops
the run. The session's cancellation token is checked before every step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from prog.cli.exit_codes import ExitCode
from prog.config.logging import get_logger
from prog.pipeline.printer import print_file
from prog.pipeline.reader import read_input
from prog.pipeline.stat import run_stat

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prog.config.logging import ProgLogger
    from prog.pipeline.session import Session

logger: ProgLogger = get_logger(__name__)

Step = Callable[["Session"], ExitCode]

#: Default step sequence.
STEPS: tuple[Step, ...] = (read_input, print_file, run_stat)


def run_pipeline(session: Session, steps: Sequence[Step] = STEPS) -> ExitCode:
    """Run ``steps`` in order against ``session``.

    Args:
        session (Session): The run's session.
        steps (Sequence[Step]): Steps to run (defaults to `STEPS`).

    Returns:
        ExitCode: ``SUCCESS``, or the first non-success status returned by a step.

    Raises:
        Interrupted: If the session's token was cancelled by a signal.
    """
    for step in steps:
        session.token.raise_if_cancelled()
        logger.trace("Running step %s", step.__name__)
        code: ExitCode = step(session)
        if code != ExitCode.SUCCESS:
            logger.debug("Step %s returned %s", step.__name__, code)
            return code
    return ExitCode.SUCCESS
