# topmark:header:start
#
#   project      : prog
#   file         : __main__.py
#   file_relpath : src/prog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running prog via ``python -m prog``.

Delegates to :func:`prog.cli.main.cli`, the same command the ``prog``
console script runs.

Examples:
    Print a file and its status information::

        python -m prog --color=always README.md
"""

from __future__ import annotations

from prog.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="prog")
