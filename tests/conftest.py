# topmark:header:start
#
#   project      : prog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the prog test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable preference split:

    - Build layers using `prog.config.model.MutablePreferences` (mutable), then
      `freeze()` into a `prog.config.model.Preferences` for pipeline calls.
    - Do **not** mutate a frozen `Preferences`; build a new layer instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from prog.cli.console import ClickConsole
from prog.config import logging
from prog.config.model import MutablePreferences
from prog.pipeline.session import Session

if TYPE_CHECKING:
    from io import StringIO
    from pathlib import Path

    from prog.config.model import Preferences

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.parametrize(...)`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the developer's environment out of every test.

    Unsets the prog environment variables and points ``HOME`` at an empty
    directory so that no real configuration file is ever discovered.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.

    Returns:
        Path: The temporary home directory.
    """
    for name in ("PROG_CFG", "PROG_DEBUG", "PROG_LOG_LEVEL", "XDG_CONFIG_HOME"):
        monkeypatch.delenv(name, raising=False)
    home: Path = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The working directory (it holds no ``prog.toml``).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_prefs(**overrides: Any) -> Preferences:
    """Return frozen preferences built from the defaults and ``overrides``.

    Args:
        **overrides (Any): Values applied with the lenient update rule (TOML key names).

    Returns:
        Preferences: The resolved preferences; ``color = auto`` resolves as a non-TTY.
    """
    layer: MutablePreferences = MutablePreferences.from_mapping(overrides)
    return layer.freeze(stdout_isatty=False)


def make_session(
    out: StringIO,
    err: StringIO,
    *,
    argv: list[str] | None = None,
    debug_mode: bool = False,
    **overrides: Any,
) -> Session:
    """Return a `Session` writing to in-memory streams.

    Args:
        out (StringIO): Standard-output replacement.
        err (StringIO): Standard-error replacement.
        argv (list[str] | None): Positional arguments.
        debug_mode (bool): Whether ``PROG_DEBUG`` diagnostics are on.
        **overrides (Any): Preference overrides, see `make_prefs`.

    Returns:
        Session: A fresh session.
    """
    return Session(
        prefs=make_prefs(**overrides),
        argv=argv or [],
        debug_mode=debug_mode,
        console=ClickConsole(out=out, err=err),
    )
