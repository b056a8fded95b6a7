# topmark:header:start
#
#   project      : prog
#   file         : __init__.py
#   file_relpath : src/prog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for prog: preference model, TOML I/O, discovery and logging."""

from __future__ import annotations

__all__: list[str] = []
