# topmark:header:start
#
#   project      : prog
#   file         : options.py
#   file_relpath : src/prog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line options for the prog CLI.

This module centralizes the option decorators and their callbacks so that
`prog.cli.main` stays thin:

- `output_options`: ``-q/--quiet``, ``-v/--verbose`` and ``--dry-run``;
- `color_options`: ``-c``, ``--color WHEN`` and the repeatable ``--palette K=V``;
- `generate_config_option`: the eager ``--generate-cfg`` action.

Options only collect values; validation of colors and palette entries happens
when the preference layers are merged (see `prog.config.model`). The helpers
here are Click-aware.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click
from click.shell_completion import CompletionItem

from prog.config.io import generate_default_config
from prog.config.keys import OutputCategory, Toml
from prog.config.logging import get_logger
from prog.config.model import ColorMode, MutablePreferences

if TYPE_CHECKING:
    from pathlib import Path

    from prog.config.logging import ProgLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: ProgLogger = get_logger(__name__)

#: Click context settings for the prog command.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}

PALETTE_SEPARATOR: str = "="


# --- Palette pairs ---


def parse_palette_pairs(
    ctx: click.Context | None,
    param: click.Parameter | None,
    value: tuple[str, ...],
) -> dict[str, str]:
    """Turn repeated ``--palette K=V`` values into a mapping.

    Keys and values are kept as given; unknown categories and invalid colors
    are dropped later by the lenient update rule. A later pair for the same key
    wins.

    Args:
        ctx (click.Context | None): Current Click context.
        param (click.Parameter | None): The ``--palette`` parameter.
        value (tuple[str, ...]): Raw option values.

    Returns:
        dict[str, str]: Category name -> color specification.

    Raises:
        click.BadParameter: If a value has no ``=`` or an empty key.
    """
    pairs: dict[str, str] = {}
    for item in value:
        key, sep, spec = item.partition(PALETTE_SEPARATOR)
        key = key.strip()
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'", ctx=ctx, param=param)
        pairs[key] = spec.strip()
    return pairs


def complete_palette(
    _ctx: click.Context, _param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete ``--palette`` with ``<category>=`` prefixes."""
    return [
        CompletionItem(f"{category.value}{PALETTE_SEPARATOR}", help="palette entry")
        for category in OutputCategory
        if category.value.startswith(incomplete)
    ]


def complete_color(
    _ctx: click.Context, _param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete ``--color`` with the accepted modes."""
    return [CompletionItem(mode.value) for mode in ColorMode if mode.value.startswith(incomplete)]


# --- Immediate-exit actions ---


def generate_config_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Write the default configuration file and exit.

    Runs eagerly during option parsing, before any configuration is loaded.
    Failures propagate as `prog.cli.errors.ProgError` (exit status 1).
    """
    if not value or ctx.resilient_parsing:
        return
    target: Path = generate_default_config()
    logger.debug("Default configuration written to %s", target)
    ctx.exit(0)


# --- Decorators ---


def output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dry-run``, ``-q/--quiet`` and ``-v/--verbose`` to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        help="Show the stat(1) command instead of running it.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        help="Suppress standard output.",
    )(f)
    f = click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Print progress messages to standard error.",
    )(f)
    return f


def color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-c``, ``--color WHEN`` and ``--palette K=V`` to a command.

    ``--color`` takes any string: it is validated when preferences are
    resolved, so an invalid value is a runtime failure rather than a usage
    error.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "-c",
        "color_auto",
        is_flag=True,
        help="Colorize output when standard output is a terminal (--color=auto).",
    )(f)
    f = click.option(
        "--color",
        "color",
        metavar="WHEN",
        type=str,
        default=None,
        shell_complete=complete_color,
        help="Colorize output: never, always or auto.",
    )(f)
    f = click.option(
        "--palette",
        "palette",
        metavar="KEY=VALUE",
        multiple=True,
        callback=parse_palette_pairs,
        shell_complete=complete_palette,
        help=(
            "Set the color of one kind of output (repeatable). KEY is one of "
            + ", ".join(c.value for c in OutputCategory)
            + "."
        ),
    )(f)
    return f


def generate_config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the eager ``--generate-cfg`` flag to a command."""
    return click.option(
        "--generate-cfg",
        "generate_cfg",
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=generate_config_callback,
        help="Create the default configuration file and exit.",
    )(f)


# --- Option values -> preference layer ---


def build_opts_layer(
    *,
    color_auto: bool,
    color: str | None,
    palette: dict[str, str],
    dry_run: bool,
    quiet: bool,
    verbose: bool,
) -> MutablePreferences:
    """Build the command-line preference layer from parsed option values.

    Flags that were not given leave their field unset so that the config file
    and the defaults can supply it. ``--color`` wins over ``-c``.

    Returns:
        MutablePreferences: The ``opts`` layer.
    """
    if color is None and color_auto:
        color = ColorMode.AUTO.value

    layer = MutablePreferences(
        color=color,
        dry_run=True if dry_run else None,
        quiet=True if quiet else None,
        verbose=True if verbose else None,
    )
    layer.update({Toml.SECTION_PALETTE: palette})
    logger.trace("Command-line layer: %s", layer)
    return layer
