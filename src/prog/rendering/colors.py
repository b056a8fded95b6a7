# topmark:header:start
#
#   project      : prog
#   file         : colors.py
#   file_relpath : src/prog/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed color model for palette entries.

Palette values are short, human-written color specifications such as
``"bold cyan"``, ``"black on_grey18"`` or ``"r102g217b239"``. This module
parses them into an immutable `ColorSpec` and renders text with it through
`click.style`.

Grammar (whitespace-separated, case-insensitive tokens):

- attributes: ``bold``, ``dark``/``faint``, ``italic``,
  ``underline``/``underscore``, ``blink``, ``reverse``, ``concealed``,
  ``overline``, ``strikethrough``;
- a color: a named color (``red``, ``bright_blue``, ...), a grayscale entry
  ``grey0``..``grey23``, an indexed color ``ansi0``..``ansi255``, a 6x6x6 cube
  entry ``rgbRGB`` (each digit 0..5), or a truecolor triple ``rNNNgNNNbNNN``;
- the background form of any color is the same token prefixed with ``on_``.

At most one foreground and one background are accepted. `parse_color_spec`
is total: malformed input yields ``None`` instead of raising.

Example:
    ```python
    spec = parse_color_spec("bold cyan on_grey18")
    assert spec is not None
    print(spec.apply("File"))
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final, Union

import click

from prog.config.logging import get_logger

#: A color as accepted by `click.style`: a name, a 256-color index, or an RGB triple.
ColorValue = Union[str, int, tuple[int, int, int]]

logger = get_logger(__name__)

NAMED_COLORS: Final[frozenset[str]] = frozenset(
    {
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "white",
        "bright_black",
        "bright_red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "bright_white",
    }
)

# Attribute name for SGR 8, emitted by `ColorSpec.apply` itself.
CONCEAL: Final[str] = "conceal"

# Attribute token -> click.style keyword
ATTRIBUTES: Final[dict[str, str]] = {
    "bold": "bold",
    "dark": "dim",
    "faint": "dim",
    "italic": "italic",
    "underline": "underline",
    "underscore": "underline",
    "blink": "blink",
    "reverse": "reverse",
    "concealed": CONCEAL,
    "overline": "overline",
    "strikethrough": "strikethrough",
}

BACKGROUND_PREFIX: Final[str] = "on_"

# SGR 8; click.style has no keyword for it.
_CONCEAL_SGR: Final[str] = "\x1b[8m"

# First xterm-256 index of the 24-step grayscale ramp.
_GREY_BASE: Final[int] = 232
_GREY_STEPS: Final[int] = 24
# First xterm-256 index of the 6x6x6 color cube.
_CUBE_BASE: Final[int] = 16

_GREY_RE: re.Pattern[str] = re.compile(r"^gr[ae]y(?P<n>\d{1,2})$")
_ANSI_RE: re.Pattern[str] = re.compile(r"^ansi(?P<n>\d{1,3})$")
_CUBE_RE: re.Pattern[str] = re.compile(r"^rgb(?P<r>[0-5])(?P<g>[0-5])(?P<b>[0-5])$")
_TRUECOLOR_RE: re.Pattern[str] = re.compile(r"^r(?P<r>\d{1,3})g(?P<g>\d{1,3})b(?P<b>\d{1,3})$")


@dataclass(frozen=True)
class ColorSpec:
    """An immutable, validated color specification.

    Attributes:
        fg (ColorValue | None): Foreground color, or None to keep the terminal default.
        bg (ColorValue | None): Background color, or None to keep the terminal default.
        attributes (frozenset[str]): `click.style` keyword names to enable
            (``bold``, ``dim``, ...). ``conceal`` stands for SGR 8.
    """

    fg: ColorValue | None = None
    bg: ColorValue | None = None
    attributes: frozenset[str] = field(default_factory=lambda: frozenset[str]())

    @property
    def is_plain(self) -> bool:
        """True when the spec changes nothing about the text."""
        return self.fg is None and self.bg is None and not self.attributes

    def apply(self, text: str) -> str:
        """Return ``text`` wrapped in the SGR sequences for this spec.

        Args:
            text (str): Text to style.

        Returns:
            str: The styled text; unchanged for a plain spec or empty text.
        """
        if self.is_plain or text == "":
            return text
        flags: dict[str, bool] = {name: True for name in self.attributes if name != CONCEAL}
        styled: str = click.style(text, fg=self.fg, bg=self.bg, **flags)
        return _CONCEAL_SGR + styled if CONCEAL in self.attributes else styled


def parse_color(token: str) -> ColorValue | None:
    """Parse a single (foreground-form) color token.

    Args:
        token (str): Lower-cased color token without any ``on_`` prefix.

    Returns:
        ColorValue | None: The color value, or None if the token is not a color.
    """
    if token in NAMED_COLORS:
        return token

    m: re.Match[str] | None = _GREY_RE.match(token)
    if m:
        n = int(m.group("n"))
        return _GREY_BASE + n if n < _GREY_STEPS else None

    m = _ANSI_RE.match(token)
    if m:
        n = int(m.group("n"))
        return n if n <= 255 else None

    m = _CUBE_RE.match(token)
    if m:
        r, g, b = (int(m.group(k)) for k in ("r", "g", "b"))
        return _CUBE_BASE + 36 * r + 6 * g + b

    m = _TRUECOLOR_RE.match(token)
    if m:
        rgb = tuple(int(m.group(k)) for k in ("r", "g", "b"))
        if all(c <= 255 for c in rgb):
            return (rgb[0], rgb[1], rgb[2])
        return None

    return None


def parse_color_spec(text: object) -> ColorSpec | None:
    """Parse a color specification string into a `ColorSpec`.

    Args:
        text (object): Candidate specification; anything but a non-blank
            string is rejected.

    Returns:
        ColorSpec | None: The parsed spec, or None when ``text`` is not valid.
    """
    if not isinstance(text, str):
        return None
    tokens: list[str] = text.lower().split()
    if not tokens:
        return None

    fg: ColorValue | None = None
    bg: ColorValue | None = None
    attributes: set[str] = set()

    for token in tokens:
        if token in ATTRIBUTES:
            attributes.add(ATTRIBUTES[token])
            continue

        if token.startswith(BACKGROUND_PREFIX):
            color: ColorValue | None = parse_color(token[len(BACKGROUND_PREFIX) :])
            if color is None or bg is not None:
                logger.trace("Rejecting color spec %r at token %r", text, token)
                return None
            bg = color
            continue

        color = parse_color(token)
        if color is None or fg is not None:
            logger.trace("Rejecting color spec %r at token %r", text, token)
            return None
        fg = color

    return ColorSpec(fg=fg, bg=bg, attributes=frozenset(attributes))


def is_valid_color_spec(text: object) -> bool:
    """Return True if ``text`` parses as a color specification."""
    return parse_color_spec(text) is not None


def strip_colors(text: str) -> str:
    """Remove every ANSI escape sequence from ``text``."""
    return click.unstyle(text)
