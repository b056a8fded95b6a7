# topmark:header:start
#
#   project      : prog
#   file         : constants.py
#   file_relpath : src/prog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""prog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PROG_NAME: Final[str] = "prog"

PROG_VERSION: str = get_version("prog")

# Configuration file name, looked up in every discovery location
CONFIG_FILE_NAME: Final[str] = f"{PROG_NAME}.toml"

# Environment variables
ENV_CONFIG_PATH: Final[str] = "PROG_CFG"
ENV_DEBUG: Final[str] = "PROG_DEBUG"
ENV_LOG_LEVEL: Final[str] = "PROG_LOG_LEVEL"
ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
ENV_HOME: Final[str] = "HOME"

# Sentinel positional argument meaning "read standard input"
STDIN_SENTINEL: Final[str] = "-"

SPACE: Final[str] = " "
INDENT: Final[str] = SPACE * 2

# The external command run against the input file
STAT_COMMAND: Final[str] = "stat"
