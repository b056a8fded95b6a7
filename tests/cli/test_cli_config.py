# topmark:header:start
#
#   project      : prog
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: configuration files and ``--generate-cfg``.

Checks the ``opts > config > defaults`` precedence end to end, the lenient
handling of unknown or invalid values, and the error statuses for broken
configuration files.
"""

from __future__ import annotations

import stat
from typing import TYPE_CHECKING

from prog.config.io import load_config_file
from prog.config.model import MutablePreferences
from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _project(tmp_path: Path, config: str | None) -> Path:
    proj: Path = tmp_path / "proj"
    proj.mkdir()
    (proj / "x.txt").write_text("hello\n", "utf-8")
    if config is not None:
        (proj / "prog.toml").write_text(config, "utf-8")
    return proj


def test_config_in_cwd_is_applied(tmp_path: Path, fake_stat: list[list[str]]) -> None:
    """``./prog.toml`` turns on verbose mode."""
    proj: Path = _project(tmp_path, "verbose = true\n")

    result: Result = run_cli_in(proj, ["x.txt"])

    assert_SUCCESS(result)
    assert "Processing file" in result.stderr


def test_config_palette_is_applied(tmp_path: Path, fake_stat: list[list[str]]) -> None:
    """A ``[palette]`` table recolors output."""
    proj: Path = _project(tmp_path, 'color = "always"\n\n[palette]\nheader = "red"\n')

    result: Result = run_cli_in(proj, ["x.txt"])

    assert_SUCCESS(result)
    assert "\x1b[31mFile\x1b[0m" in result.stdout


def test_options_override_config(tmp_path: Path, fake_stat: list[list[str]]) -> None:
    """``--color never`` wins over ``color = "always"`` from the file."""
    proj: Path = _project(tmp_path, 'color = "always"\n')

    result: Result = run_cli_in(proj, ["--color", "never", "x.txt"])

    assert_SUCCESS(result)
    assert "\x1b" not in result.stdout


def test_config_dry_run_skips_stat(tmp_path: Path, fake_stat: list[list[str]]) -> None:
    """``dry_run = true`` in the file is honored."""
    proj: Path = _project(tmp_path, "dry_run = true\n")

    result: Result = run_cli_in(proj, ["x.txt"])

    assert_SUCCESS(result)
    assert fake_stat == []
    assert "Executing 'stat x.txt'" in result.stderr


def test_unknown_and_invalid_values_are_ignored(
    tmp_path: Path, fake_stat: list[list[str]]
) -> None:
    """Unknown keys, non-boolean flags and bad palette entries are dropped."""
    proj: Path = _project(
        tmp_path,
        'future_key = 1\ndry_run = "yes"\n\n[palette]\nheader = "no such color"\nnope = "red"\n',
    )

    result: Result = run_cli_in(proj, ["x.txt"])

    assert_SUCCESS(result)
    assert fake_stat == [["stat", "x.txt"]]
    assert result.stdout.startswith("File 'x.txt' contents\n  hello\n")


def test_invalid_color_in_config_fails(tmp_path: Path, fake_stat: list[list[str]]) -> None:
    """A bad ``color`` value from the file exits 1."""
    proj: Path = _project(tmp_path, 'color = "sometimes"\n')

    result: Result = run_cli_in(proj, ["x.txt"])

    assert_FAILURE(result)
    assert "invalid color value 'sometimes'" in result.stderr
    assert fake_stat == []


def test_toml_syntax_error_fails_naming_the_file(
    tmp_path: Path, fake_stat: list[list[str]]
) -> None:
    """A file that is not valid TOML exits 1 and names the file."""
    proj: Path = _project(tmp_path, "color = \n")

    result: Result = run_cli_in(proj, ["x.txt"])

    assert_FAILURE(result)
    assert "prog: failed to read '" in result.stderr
    assert "prog.toml' configuration file" in result.stderr
    assert result.stdout == ""


def test_prog_cfg_wins_over_cwd(tmp_path: Path, fake_stat: list[list[str]]) -> None:
    """``$PROG_CFG`` is searched before ``./prog.toml``."""
    proj: Path = _project(tmp_path, "verbose = true\n")
    other: Path = tmp_path / "other.toml"
    other.write_text("dry_run = true\n", "utf-8")

    result: Result = run_cli_in(proj, ["x.txt"], env={"PROG_CFG": str(other)})

    assert_SUCCESS(result)
    assert fake_stat == []
    assert "Processing file" not in result.stderr


def test_home_config_is_found(
    tmp_path: Path, clean_environment: Path, fake_stat: list[list[str]]
) -> None:
    """``~/prog.toml`` is the last fallback."""
    proj: Path = _project(tmp_path, None)
    (clean_environment / "prog.toml").write_text("quiet = true\n", "utf-8")

    result: Result = run_cli_in(proj, ["x.txt"])

    assert_SUCCESS(result)
    assert result.stdout == ""


def test_generate_cfg_writes_home_file_then_refuses(clean_environment: Path) -> None:
    """Without an XDG config directory the file goes to ``~/prog.toml``; never overwritten."""
    target: Path = clean_environment / "prog.toml"

    first: Result = run_cli(["--generate-cfg"])

    assert_SUCCESS(first)
    assert target.is_file()
    assert target.read_text("utf-8").startswith("# prog configuration file\n")

    second: Result = run_cli(["--generate-cfg"])

    assert_FAILURE(second)
    assert f"prog: file '{target}' exists" in second.stderr


def test_generate_cfg_uses_xdg_directory(tmp_path: Path, clean_environment: Path) -> None:
    """With ``$XDG_CONFIG_HOME`` present the file goes under ``prog/`` there (mode 0700)."""
    xdg: Path = tmp_path / "xdg"
    xdg.mkdir()

    result: Result = run_cli(["--generate-cfg"], env={"XDG_CONFIG_HOME": str(xdg)})

    assert_SUCCESS(result)
    target: Path = xdg / "prog" / "prog.toml"
    assert target.is_file()
    assert stat.S_IMODE(target.parent.stat().st_mode) == 0o700
    assert not (clean_environment / "prog.toml").exists()


def test_generated_config_reproduces_defaults(clean_environment: Path) -> None:
    """Loading the generated file yields exactly the built-in defaults."""
    result: Result = run_cli(["--generate-cfg"])

    assert_SUCCESS(result)
    assert load_config_file(clean_environment / "prog.toml") == MutablePreferences.from_defaults()
