# topmark:header:start
#
#   project      : prog
#   file         : discovery.py
#   file_relpath : src/prog/config/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration file discovery.

Lookup order (first existing regular file wins):
    1. ``$PROG_CFG`` (explicit override; ignored if it does not name a file)
    2. ``./prog.toml`` in the current working directory
    3. ``$XDG_CONFIG_HOME/prog/prog.toml`` (only when ``XDG_CONFIG_HOME`` is set)
    4. ``~/.config/prog/prog.toml`` (XDG default location)
    5. ``~/prog.toml``

Not finding a file is not an error. The helpers take an optional ``environ``
mapping and ``cwd`` so that tests can run them without touching the real
environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from prog.config.logging import get_logger
from prog.constants import (
    CONFIG_FILE_NAME,
    ENV_CONFIG_PATH,
    ENV_HOME,
    ENV_XDG_CONFIG_HOME,
    PROG_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from prog.config.logging import ProgLogger

logger: ProgLogger = get_logger(__name__)


def home_dir(environ: Mapping[str, str] | None = None) -> Path | None:
    """Return the user's home directory, or None if it cannot be determined.

    ``$HOME`` wins; otherwise the password database is consulted through
    `Path.home`.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    home: str | None = env.get(ENV_HOME)
    if home:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError:
        return None


def xdg_config_home(environ: Mapping[str, str] | None = None) -> Path | None:
    """Return the XDG config base directory (``$XDG_CONFIG_HOME`` or ``~/.config``)."""
    env: Mapping[str, str] = os.environ if environ is None else environ
    xdg: str | None = env.get(ENV_XDG_CONFIG_HOME)
    if xdg:
        return Path(xdg)
    home: Path | None = home_dir(env)
    return home / ".config" if home is not None else None


def candidate_config_paths(
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> list[Path]:
    """Return every location searched for a configuration file, in precedence order.

    Args:
        environ (Mapping[str, str] | None): Environment to consult (defaults to ``os.environ``).
        cwd (Path | None): Working directory (defaults to the process CWD).

    Returns:
        list[Path]: Candidate paths; they may or may not exist.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    candidates: list[Path] = []

    override: str | None = env.get(ENV_CONFIG_PATH)
    if override:
        candidates.append(Path(override))

    candidates.append((cwd or Path.cwd()) / CONFIG_FILE_NAME)

    xdg: str | None = env.get(ENV_XDG_CONFIG_HOME)
    if xdg:
        candidates.append(Path(xdg) / PROG_NAME / CONFIG_FILE_NAME)

    home: Path | None = home_dir(env)
    if home is not None:
        fallback: Path = home / ".config" / PROG_NAME / CONFIG_FILE_NAME
        if fallback not in candidates:
            candidates.append(fallback)
        candidates.append(home / CONFIG_FILE_NAME)

    return candidates


def find_config_file(
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> Path | None:
    """Return the first existing configuration file, or None.

    Args:
        environ (Mapping[str, str] | None): Environment to consult (defaults to ``os.environ``).
        cwd (Path | None): Working directory (defaults to the process CWD).

    Returns:
        Path | None: Path of the configuration file to load, if any.
    """
    for path in candidate_config_paths(environ, cwd):
        logger.trace("Looking for configuration file at %s", path)
        if path.is_file():
            logger.debug("Using configuration file %s", path)
            return path
    logger.debug("No configuration file found")
    return None
