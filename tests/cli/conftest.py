# topmark:header:start
#
#   project      : prog
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running prog in a controlled working directory.

`run_cli_in()` changes the process working directory to the given path before
invoking the Click CLI, so that a ``prog.toml`` placed there is discovered and
relative file arguments resolve against it.

Results keep standard output and standard error apart (``result.stdout`` and
``result.stderr``).
"""

from __future__ import annotations

import os
import subprocess
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from prog.cli.exit_codes import ExitCode
from prog.cli.main import cli
from prog.pipeline import stat as stat_module

if TYPE_CHECKING:
    from pathlib import Path

#: Output of the canned `stat` run installed by `fake_stat`.
FAKE_STAT_OUTPUT: str = "Size: 12\nAccess: (0644/-rw-r--r--)\n"


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["-v", "x.txt"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        env (dict[str, str | None] | None): Environment overrides (None unsets).

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    old: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, input_text=input_text, env=env)
    finally:
        os.chdir(old)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        env (dict[str, str | None] | None): Environment overrides (None unsets).

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env, prog_name="prog")


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


@pytest.fixture
def fake_stat(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    """Replace the ``stat`` subprocess with a canned successful run.

    Returns:
        list[list[str]]: The commands that would have been spawned, in order.
    """
    calls: list[list[str]] = []

    def _run(command: list[str], **_kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append(list(command))
        return subprocess.CompletedProcess(command, 0, stdout=FAKE_STAT_OUTPUT, stderr="")

    monkeypatch.setattr(stat_module.subprocess, "run", _run)
    return calls
