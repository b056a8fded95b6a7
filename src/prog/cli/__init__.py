# topmark:header:start
#
#   project      : prog
#   file         : __init__.py
#   file_relpath : src/prog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""prog CLI package.

Click command, options, console, errors and signal handling for the ``prog``
command-line interface.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    prog = "prog.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
