# topmark:header:start
#
#   project      : prog
#   file         : model.py
#   file_relpath : src/prog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Preference model and merge policy.

This module defines:
    - `Preferences`: an immutable runtime snapshot used by the pipeline.
    - `MutablePreferences`: a mutable, partially-filled layer (defaults, config
      file or command line). Layers merge field by field and are frozen into a
      `Preferences` once, after color normalization.

Scope:
    - *In scope*: data shapes, the lenient update rule, merge policy and color
      normalization.
    - *Out of scope*: filesystem discovery and TOML I/O (see
      `prog.config.discovery` and `prog.config.io`).

Lenient update rule:
    Unknown keys, unknown palette categories, invalid color specifications and
    non-boolean values for boolean fields are ignored without error, leaving the
    lower-precedence value in place. This keeps older and newer configuration
    files usable.

Precedence:
    ``opts > config > defaults``: `resolve_preferences` computes
    ``defaults.merge_with(config).merge_with(opts)``.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from prog.cli.errors import InvalidColorError
from prog.config.keys import BOOL_KEYS, OutputCategory, Toml
from prog.config.logging import get_logger
from prog.rendering.colors import is_valid_color_spec

if TYPE_CHECKING:
    from prog.config.logging import ProgLogger

logger: ProgLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


#: Built-in palette, in the order it is rendered in the default config file.
DEFAULT_PALETTE: Mapping[OutputCategory, str] = MappingProxyType(
    {
        OutputCategory.DATA: "black on_grey18",
        OutputCategory.DEBUG: "green",
        OutputCategory.DUMP: "r102g217b239",  # Cyan
        OutputCategory.DRY_RUN: "magenta",
        OutputCategory.FILENAME: "grey12",
        OutputCategory.HEADER: "bold cyan",
        OutputCategory.VERBOSE: "blue",
    }
)


# ------------------ Immutable runtime preferences ------------------


@dataclass(frozen=True)
class Preferences:
    """Immutable, fully-resolved runtime preferences.

    Attributes:
        color (bool): Whether colored output is enabled (normalized from the
            ``never``/``always``/``auto`` setting).
        dry_run (bool): Show the external command instead of running it.
        quiet (bool): Suppress standard output.
        verbose (bool): Print progress messages to standard error.
        palette (Mapping[OutputCategory, str]): Color specification for every
            output category.
    """

    color: bool
    dry_run: bool
    quiet: bool
    verbose: bool
    palette: Mapping[OutputCategory, str]


# -------------------------- Mutable layer --------------------------


@dataclass
class MutablePreferences:
    """One preference layer: defaults, config file or command line.

    ``None`` means "not set by this layer". The palette holds only the entries
    this layer sets.

    Attributes:
        color (str | bool | None): Raw color setting (``never``/``always``/``auto``
            or boolean-like); validated by `freeze`.
        dry_run (bool | None): Dry-run flag.
        quiet (bool | None): Quiet flag.
        verbose (bool | None): Verbose flag.
        palette (dict[OutputCategory, str]): Partial palette.
    """

    color: str | bool | None = None
    dry_run: bool | None = None
    quiet: bool | None = None
    verbose: bool | None = None
    palette: dict[OutputCategory, str] = field(default_factory=lambda: {})

    @classmethod
    def from_defaults(cls) -> MutablePreferences:
        """Return the built-in default layer (every field set)."""
        return cls(
            color=ColorMode.NEVER.value,
            dry_run=False,
            quiet=False,
            verbose=False,
            palette=dict(DEFAULT_PALETTE),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MutablePreferences:
        """Build a layer from a TOML-like mapping, using the lenient update rule.

        Args:
            data (Mapping[str, Any]): Parsed configuration (top-level keys plus a
                ``palette`` table).

        Returns:
            MutablePreferences: The layer holding every recognized, valid value.
        """
        layer = cls()
        layer.update(data)
        return layer

    def set_palette_entry(self, key: object, value: object) -> bool:
        """Set one palette entry if both the category and the color are valid.

        Args:
            key (object): Output category name.
            value (object): Color specification.

        Returns:
            bool: True if the entry was stored, False if it was silently dropped.
        """
        category: OutputCategory | None = OutputCategory.from_key(key)
        if category is None:
            logger.debug("Ignoring unknown palette key %r", key)
            return False
        if not is_valid_color_spec(value):
            logger.debug("Ignoring invalid color %r for palette key %r", value, key)
            return False
        self.palette[category] = str(value)
        return True

    def update(self, data: Mapping[str, Any]) -> None:
        """Apply recognized keys from ``data`` in place (lenient update rule).

        Args:
            data (Mapping[str, Any]): Keys to apply; ``None`` values are skipped.
        """
        for key, value in data.items():
            if value is None:
                continue
            if key == Toml.KEY_COLOR:
                if isinstance(value, (str, bool, int)):
                    self.color = value if isinstance(value, (str, bool)) else str(value)
                else:
                    logger.debug("Ignoring non-scalar color value %r", value)
            elif key in BOOL_KEYS:
                if isinstance(value, bool):
                    setattr(self, key, value)
                else:
                    logger.debug("Ignoring non-boolean value %r for %r", value, key)
            elif key == Toml.SECTION_PALETTE:
                if isinstance(value, Mapping):
                    for output, spec in value.items():
                        self.set_palette_entry(output, spec)
                else:
                    logger.debug("Ignoring non-table palette value %r", value)
            else:
                logger.debug("Ignoring unknown preference key %r", key)

    def merge_with(self, other: MutablePreferences) -> MutablePreferences:
        """Return a new layer where values set in ``other`` override this layer.

        Scalar fields follow last-wins on ``None``; the palette is merged key by key.

        Args:
            other (MutablePreferences): The higher-precedence layer.

        Returns:
            MutablePreferences: The merged layer.
        """
        return MutablePreferences(
            color=other.color if other.color is not None else self.color,
            dry_run=other.dry_run if other.dry_run is not None else self.dry_run,
            quiet=other.quiet if other.quiet is not None else self.quiet,
            verbose=other.verbose if other.verbose is not None else self.verbose,
            palette={**self.palette, **other.palette},
        )

    def freeze(self, *, stdout_isatty: bool | None = None) -> Preferences:
        """Normalize ``color`` and freeze this layer into `Preferences`.

        Unset fields fall back to the built-in defaults.

        Args:
            stdout_isatty (bool | None): TTY override used for ``auto``; when None,
                ``sys.stdout.isatty()`` is consulted at this moment.

        Returns:
            Preferences: The immutable runtime snapshot.

        Raises:
            InvalidColorError: If ``color`` is not one of the accepted values.
        """
        full: MutablePreferences = MutablePreferences.from_defaults().merge_with(self)
        return Preferences(
            color=resolve_color(full.color, stdout_isatty=stdout_isatty),
            dry_run=bool(full.dry_run),
            quiet=bool(full.quiet),
            verbose=bool(full.verbose),
            palette=MappingProxyType(
                {category: full.palette[category] for category in OutputCategory}
            ),
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Return the set fields as a TOML-serializable dict."""
        out: dict[str, Any] = {}
        if self.color is not None:
            out[Toml.KEY_COLOR] = self.color
        for key in BOOL_KEYS:
            value: bool | None = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.palette:
            out[Toml.SECTION_PALETTE] = {
                category.value: spec
                for category in OutputCategory
                if (spec := self.palette.get(category)) is not None
            }
        return out


def resolve_color(value: str | bool | None, *, stdout_isatty: bool | None = None) -> bool:
    """Translate a color setting into a boolean.

    Args:
        value (str | bool | None): ``never``/``always``/``auto``, or a boolean-like
            value. ``auto`` and boolean true (``True``, ``"1"``) follow TTY
            detection; boolean false (``False``, ``"0"``) means ``never``.
        stdout_isatty (bool | None): TTY override; when None, ``sys.stdout.isatty()``
            is consulted.

    Returns:
        bool: True if color output is enabled.

    Raises:
        InvalidColorError: For any other value.
    """
    if value is True or value in (ColorMode.AUTO.value, "1"):
        if stdout_isatty is None:
            try:
                stdout_isatty = sys.stdout.isatty()
            except (AttributeError, ValueError, OSError):
                stdout_isatty = False
        return bool(stdout_isatty)
    if value == ColorMode.ALWAYS.value:
        return True
    if value is False or value in (ColorMode.NEVER.value, "0"):
        return False
    raise InvalidColorError(f"invalid color value '{value}'")


def resolve_preferences(
    opts: MutablePreferences,
    config: MutablePreferences | None = None,
    defaults: MutablePreferences | None = None,
    *,
    stdout_isatty: bool | None = None,
) -> Preferences:
    """Merge the three preference layers and freeze the result.

    Args:
        opts (MutablePreferences): Command-line layer (highest precedence).
        config (MutablePreferences | None): Config-file layer; None when no file was found.
        defaults (MutablePreferences | None): Base layer; built-in defaults when None.
        stdout_isatty (bool | None): TTY override for ``color = auto``.

    Returns:
        Preferences: The resolved runtime preferences.

    Raises:
        InvalidColorError: If the winning ``color`` value is invalid.
    """
    base: MutablePreferences = defaults or MutablePreferences.from_defaults()
    merged: MutablePreferences = base.merge_with(config or MutablePreferences()).merge_with(opts)
    logger.debug("Merged preferences: %s", merged)
    return merged.freeze(stdout_isatty=stdout_isatty)
