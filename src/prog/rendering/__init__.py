# topmark:header:start
#
#   project      : prog
#   file         : __init__.py
#   file_relpath : src/prog/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color specifications and color-or-strip rendering."""

from __future__ import annotations

__all__: list[str] = []
