# topmark:header:start
#
#   project      : prog
#   file         : painter.py
#   file_relpath : src/prog/rendering/painter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-or-strip text rendering driven by the resolved palette.

`Painter` is the single place that decides whether output carries ANSI
styles. Text is styled with the palette entry for its `OutputCategory` and,
when color is disabled, every escape sequence is stripped afterwards. Stripping
also removes escapes that were already present in the input (for example a
file that contains colored text), so a colorless run never emits any.

Styling is applied line by line: each non-empty line is wrapped separately and
newlines stay outside the escape codes. This keeps `indent` output aligned
and prevents a color from bleeding into the next line of a terminal.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from prog.config.keys import OutputCategory
from prog.constants import INDENT, SPACE
from prog.rendering.colors import parse_color_spec, strip_colors

if TYPE_CHECKING:
    from collections.abc import Mapping

    from prog.rendering.colors import ColorSpec

_LINE_SPLIT_RE: re.Pattern[str] = re.compile(r"(\n)")
_INDENT_RE: re.Pattern[str] = re.compile(r"^(?=[^\n])", re.MULTILINE)


def indent(text: str) -> str:
    """Prefix every non-empty line of ``text`` with the indent unit."""
    return _INDENT_RE.sub(INDENT, text)


def style_each_line(text: str, spec: ColorSpec | None) -> str:
    """Style every non-empty line of ``text`` separately.

    Args:
        text (str): Text to style; may span several lines.
        spec (ColorSpec | None): Style to apply; None leaves the text unchanged.

    Returns:
        str: The styled text with newlines kept outside the escape sequences.
    """
    if spec is None or spec.is_plain:
        return text
    return "".join(
        part if part in ("", "\n") else spec.apply(part) for part in _LINE_SPLIT_RE.split(text)
    )


class Painter:
    """Apply palette colors, or strip them when color output is disabled.

    Args:
        palette (Mapping[OutputCategory, str]): Resolved palette (category -> color spec).
        enabled (bool): Whether ANSI styles may reach the output.

    Attributes:
        enabled (bool): Whether ANSI styles may reach the output.
    """

    enabled: bool

    def __init__(self, palette: Mapping[OutputCategory, str], *, enabled: bool) -> None:
        self.enabled = enabled
        self._specs: dict[OutputCategory, ColorSpec | None] = {
            category: parse_color_spec(value) for category, value in palette.items()
        }

    def spec_for(self, category: OutputCategory) -> ColorSpec | None:
        """Return the parsed color spec for ``category`` (None if unset)."""
        return self._specs.get(category)

    def finish(self, text: str) -> str:
        """Return ``text`` unchanged when color is enabled, stripped otherwise."""
        return text if self.enabled else strip_colors(text)

    def paint(self, text: str, category: OutputCategory | None = None) -> str:
        """Color ``text`` with the palette entry for ``category``, then apply `finish`.

        Args:
            text (str): Text to render.
            category (OutputCategory | None): Palette entry to use; None only
                applies the strip rule.

        Returns:
            str: The rendered text.
        """
        if category is not None:
            text = style_each_line(text, self.spec_for(category))
        return self.finish(text)

    def heading(self, name: str, what: str) -> str:
        """Render a section heading such as ``File 'x.txt' contents``.

        Args:
            name (str): File display name (quoted in the output).
            what (str): Trailing words, e.g. ``"contents"`` or ``"status info"``.

        Returns:
            str: The rendered heading, terminated by a newline.
        """
        header: ColorSpec | None = self.spec_for(OutputCategory.HEADER)
        filename: ColorSpec | None = self.spec_for(OutputCategory.FILENAME)
        return self.finish(
            SPACE.join(
                (
                    style_each_line("File", header),
                    style_each_line(f"'{name}'", filename),
                    style_each_line(f"{what}\n", header),
                )
            )
        )
