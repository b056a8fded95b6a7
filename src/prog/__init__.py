# topmark:header:start
#
#   project      : prog
#   file         : __init__.py
#   file_relpath : src/prog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""prog package.

prog prints a file (or standard input) and then shows its filesystem
metadata by running ``stat(1)`` on it. Output colors, dry-run and verbosity
are driven by command-line options layered over a TOML configuration file.
"""

from __future__ import annotations
