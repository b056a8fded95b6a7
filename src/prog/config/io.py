# topmark:header:start
#
#   project      : prog
#   file         : io.py
#   file_relpath : src/prog/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, render and generate prog TOML configuration.

This module provides I/O helpers for:
- reading a discovered ``prog.toml`` into a config preference layer,
- rendering the built-in defaults as a TOML document, and
- writing that document to the user's configuration directory
  (``--generate-cfg``).

Parsing and rendering are done with `tomlkit`; parsed documents are unwrapped
into plain `dict` structures before they reach the preference model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from prog.cli.errors import ConfigExistsError, ConfigSyntaxError, ConfigWriteError
from prog.config.discovery import home_dir, xdg_config_home
from prog.config.keys import Toml
from prog.config.logging import get_logger
from prog.config.model import MutablePreferences
from prog.constants import CONFIG_FILE_NAME, PROG_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from prog.config.logging import ProgLogger

logger: ProgLogger = get_logger(__name__)

# Mode for a newly created per-application config directory
CONFIG_DIR_MODE: int = 0o700


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content as plain Python values.

    Raises:
        ConfigSyntaxError: If the file cannot be read, decoded or parsed.
    """
    failure: str = f"failed to read '{path}' configuration file"
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigSyntaxError(failure, detail=str(exc)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigSyntaxError(failure, detail=str(exc)) from exc

    data_any: Any = doc.unwrap()
    return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}


def load_config_file(path: Path | None) -> MutablePreferences:
    """Read a configuration file into a config preference layer.

    Args:
        path (Path | None): File located by discovery; None yields an empty layer.

    Returns:
        MutablePreferences: The recognized, valid settings from the file.

    Raises:
        ConfigSyntaxError: If the file cannot be read or is not valid TOML.
    """
    if path is None:
        return MutablePreferences()

    logger.debug("Loading configuration from %s", path)
    layer: MutablePreferences = MutablePreferences.from_mapping(load_toml_dict(path))
    logger.trace("Config layer from %s: %s", path, layer)
    return layer


# --- Rendering ---


def render_config_toml(prefs: MutablePreferences) -> str:
    """Render a preference layer as a commented TOML document.

    Args:
        prefs (MutablePreferences): Layer to render; unset fields are omitted.

    Returns:
        str: TOML document text.
    """
    data: dict[str, Any] = prefs.to_toml_dict()
    palette: Mapping[str, str] = data.pop(Toml.SECTION_PALETTE, {})

    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment(f"{PROG_NAME} configuration file"))
    doc.add(tomlkit.nl())
    for key, value in data.items():
        doc.add(key, value)

    if palette:
        doc.add(tomlkit.nl())
        table = tomlkit.table()
        for key, value in palette.items():
            table.add(key, value)
        doc.add(Toml.SECTION_PALETTE, table)

    return tomlkit.dumps(doc)


def render_default_config_toml() -> str:
    """Render the built-in defaults as the default configuration file."""
    return render_config_toml(MutablePreferences.from_defaults())


# --- Generation ---


def default_config_target(environ: Mapping[str, str] | None = None) -> Path:
    """Return where ``--generate-cfg`` writes the default configuration.

    ``<xdg>/prog/prog.toml`` when the XDG config base directory exists, else
    ``~/prog.toml``.

    Raises:
        ConfigWriteError: If neither location can be determined.
    """
    xdg: Path | None = xdg_config_home(environ)
    if xdg is not None and xdg.exists():
        return xdg / PROG_NAME / CONFIG_FILE_NAME

    home: Path | None = home_dir(environ)
    if home is None:
        raise ConfigWriteError("failed to find home directory")
    return home / CONFIG_FILE_NAME


def generate_default_config(environ: Mapping[str, str] | None = None) -> Path:
    """Create the default configuration file.

    Args:
        environ (Mapping[str, str] | None): Environment to consult (defaults to ``os.environ``).

    Returns:
        Path: The created file.

    Raises:
        ConfigExistsError: If the target file already exists.
        ConfigWriteError: If the directory or the file cannot be created.
    """
    target: Path = default_config_target(environ)
    if target.exists():
        raise ConfigExistsError(f"file '{target}' exists")

    parent: Path = target.parent
    if not parent.is_dir():
        try:
            parent.mkdir(mode=CONFIG_DIR_MODE, parents=True)
        except OSError as exc:
            raise ConfigWriteError(f"failed to create '{parent}'", detail=str(exc)) from exc

    try:
        # Exclusive creation: never clobber a file created since the check above.
        with target.open("x", encoding="utf-8") as fh:
            fh.write(render_default_config_toml())
    except FileExistsError as exc:
        raise ConfigExistsError(f"file '{target}' exists") from exc
    except OSError as exc:
        raise ConfigWriteError(
            "failed to create default configuration file", detail=str(exc)
        ) from exc

    logger.info("Created default configuration file %s", target)
    return target
