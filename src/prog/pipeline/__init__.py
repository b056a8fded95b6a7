# topmark:header:start
#
#   project      : prog
#   file         : __init__.py
#   file_relpath : src/prog/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The read → print → stat pipeline and the per-run `Session` it operates on."""

from __future__ import annotations

__all__: list[str] = []
