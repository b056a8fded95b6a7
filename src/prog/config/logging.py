# topmark:header:start
#
#   project      : prog
#   file         : logging.py
#   file_relpath : src/prog/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom prog logging with TRACE logging.

This module extends the standard logging module with prog-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.

Internal logging is separate from the user-facing diagnostics printed by
``--verbose`` and ``PROG_DEBUG``; it is silent (CRITICAL) unless
``PROG_LOG_LEVEL`` asks for more.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

import click

from prog.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class ProgLogger(logging.Logger):
    """Custom logger class for prog with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ProgLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


#: Record style for each level floor, highest first; TRACE is the lowest emitted level.
LEVEL_STYLES: Final[tuple[tuple[int, dict[str, object]], ...]] = (
    (logging.CRITICAL, {"fg": "bright_red"}),
    (logging.ERROR, {"fg": "red"}),
    (logging.WARNING, {"fg": "yellow"}),
    (logging.INFO, {"fg": "green"}),
    (logging.DEBUG, {"fg": "bright_black"}),
    (TRACE_LEVEL, {"fg": "blue"}),
)

#: Names accepted by ``PROG_LOG_LEVEL``, besides plain numbers.
LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class StyledFormatter(logging.Formatter):
    """Formatter that colors each record by its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for floor, style in LEVEL_STYLES:
            if record.levelno >= floor:
                return click.style(message, **style)  # type: ignore[arg-type]
        return message


def resolve_env_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Return the level named by ``PROG_LOG_LEVEL``, or None if unset or unknown.

    Args:
        environ (Mapping[str, str] | None): Environment to read; `os.environ` when None.

    Returns:
        int | None: The level, given by name (any case, e.g. ``trace``) or number.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    value: str = env.get(ENV_LOG_LEVEL, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    return LEVEL_NAMES.get(value)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, environment variables are consulted via
    `resolve_env_log_level`. Default is CRITICAL when unspecified.

    Log records go to stderr: stdout carries the program's actual output.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    # Source locations only at DEBUG and below.
    handler.setFormatter(StyledFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> ProgLogger:
    """Retrieve a ProgLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        ProgLogger: A ProgLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("ProgLogger", logger)
