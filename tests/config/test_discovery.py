# topmark:header:start
#
#   project      : prog
#   file         : test_discovery.py
#   file_relpath : tests/config/test_discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration file discovery order.

`find_config_file` takes the environment and working directory explicitly,
so these tests pass plain dicts instead of touching ``os.environ``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prog.config.discovery import candidate_config_paths, find_config_file, xdg_config_home

if TYPE_CHECKING:
    from pathlib import Path


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", "utf-8")
    return path


def test_candidate_order(tmp_path: Path) -> None:
    """PROG_CFG, cwd, $XDG_CONFIG_HOME, ~/.config, then ~."""
    home: Path = tmp_path / "home"
    cwd: Path = tmp_path / "cwd"
    env: dict[str, str] = {
        "PROG_CFG": str(tmp_path / "explicit.toml"),
        "XDG_CONFIG_HOME": str(tmp_path / "xdg"),
        "HOME": str(home),
    }

    assert candidate_config_paths(env, cwd) == [
        tmp_path / "explicit.toml",
        cwd / "prog.toml",
        tmp_path / "xdg" / "prog" / "prog.toml",
        home / ".config" / "prog" / "prog.toml",
        home / "prog.toml",
    ]


def test_xdg_fallback_is_not_listed_twice(tmp_path: Path) -> None:
    """``XDG_CONFIG_HOME=~/.config`` does not duplicate the fallback entry."""
    home: Path = tmp_path / "home"
    env: dict[str, str] = {"XDG_CONFIG_HOME": str(home / ".config"), "HOME": str(home)}

    paths: list[Path] = candidate_config_paths(env, tmp_path)

    assert paths.count(home / ".config" / "prog" / "prog.toml") == 1


def test_nothing_found(tmp_path: Path) -> None:
    """Absence of any file is not an error."""
    assert find_config_file({"HOME": str(tmp_path)}, tmp_path) is None


def test_first_existing_file_wins(tmp_path: Path) -> None:
    """The cwd file shadows the home file; PROG_CFG shadows both."""
    home: Path = tmp_path / "home"
    cwd: Path = tmp_path / "cwd"
    home_file: Path = _touch(home / "prog.toml")
    cwd_file: Path = _touch(cwd / "prog.toml")
    explicit: Path = _touch(tmp_path / "explicit.toml")

    assert find_config_file({"HOME": str(home)}, home) == home_file
    assert find_config_file({"HOME": str(home)}, cwd) == cwd_file
    assert find_config_file({"HOME": str(home), "PROG_CFG": str(explicit)}, cwd) == explicit


def test_missing_prog_cfg_falls_through(tmp_path: Path) -> None:
    """A PROG_CFG naming a missing file is skipped."""
    home: Path = tmp_path / "home"
    home_file: Path = _touch(home / ".config" / "prog" / "prog.toml")
    env: dict[str, str] = {"HOME": str(home), "PROG_CFG": str(tmp_path / "missing.toml")}

    assert find_config_file(env, tmp_path) == home_file


def test_directory_is_not_a_config_file(tmp_path: Path) -> None:
    """Only regular files are accepted."""
    (tmp_path / "prog.toml").mkdir()

    assert find_config_file({"HOME": str(tmp_path / "home")}, tmp_path) is None


def test_xdg_config_home(tmp_path: Path) -> None:
    """``$XDG_CONFIG_HOME`` wins over ``~/.config``; empty means unset."""
    assert xdg_config_home({"XDG_CONFIG_HOME": str(tmp_path)}) == tmp_path
    assert xdg_config_home({"XDG_CONFIG_HOME": "", "HOME": str(tmp_path)}) == tmp_path / ".config"
