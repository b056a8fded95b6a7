# topmark:header:start
#
#   project      : prog
#   file         : keys.py
#   file_relpath : src/prog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names and output categories for prog configuration.

Keys defined here represent the *external configuration API*: they appear
verbatim in ``prog.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Toml:
    """TOML keys used by prog configuration.

    The ordering of constants mirrors the generated default configuration.
    """

    KEY_COLOR: Final[str] = "color"
    KEY_DRY_RUN: Final[str] = "dry_run"
    KEY_QUIET: Final[str] = "quiet"
    KEY_VERBOSE: Final[str] = "verbose"

    # [palette]
    SECTION_PALETTE: Final[str] = "palette"


#: Boolean top-level preference keys.
BOOL_KEYS: Final[tuple[str, ...]] = (Toml.KEY_DRY_RUN, Toml.KEY_QUIET, Toml.KEY_VERBOSE)


class OutputCategory(str, Enum):
    """Kinds of output that can be given their own color in the palette.

    Attributes:
        DATA: File contents and captured ``stat`` output.
        DEBUG: ``PROG_DEBUG`` diagnostics.
        DUMP: Variable dumps printed in debug mode.
        DRY_RUN: Commands shown instead of executed.
        FILENAME: The quoted file name in section headers.
        HEADER: Section header text.
        VERBOSE: ``--verbose`` progress messages.
    """

    DATA = "data"
    DEBUG = "debug"
    DUMP = "dump"
    DRY_RUN = "dry_run"
    FILENAME = "filename"
    HEADER = "header"
    VERBOSE = "verbose"

    @classmethod
    def from_key(cls, key: object) -> OutputCategory | None:
        """Return the category named ``key``, or None if it is not a known category."""
        if not isinstance(key, str):
            return None
        try:
            return cls(key)
        except ValueError:
            return None
