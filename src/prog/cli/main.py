# topmark:header:start
#
#   project      : prog
#   file         : main.py
#   file_relpath : src/prog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for prog.

Flow of a run:

1. options are parsed (``--help``, ``--version`` and ``--generate-cfg`` exit
   immediately);
2. internal logging is configured from ``PROG_LOG_LEVEL``;
3. the configuration file is located and loaded;
4. the ``opts > config > defaults`` layers are merged and frozen;
5. the read → print → stat pipeline runs with SIGINT/SIGTERM handlers in
   place.

Errors surface as `prog.cli.errors.ProgError`, which Click reports and turns
into the exception's exit status. A caught signal ends the run with status 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prog.cli.errors import Interrupted, ProgUsageError
from prog.cli.exit_codes import ExitCode
from prog.cli.options import (
    CONTEXT_SETTINGS,
    build_opts_layer,
    color_options,
    generate_config_option,
    output_options,
)
from prog.cli.signals import CancelToken, handle_signals
from prog.config.discovery import find_config_file
from prog.config.io import load_config_file
from prog.config.logging import get_logger, resolve_env_log_level, setup_logging
from prog.config.model import resolve_preferences
from prog.constants import PROG_NAME, PROG_VERSION
from prog.pipeline.runner import run_pipeline
from prog.pipeline.session import Session, debug_enabled

if TYPE_CHECKING:
    from pathlib import Path

    from prog.config.logging import ProgLogger
    from prog.config.model import MutablePreferences, Preferences

logger: ProgLogger = get_logger(__name__)


@click.command(
    name=PROG_NAME,
    context_settings=CONTEXT_SETTINGS,
    help="Print FILE (or standard input) with a heading, then run stat(1) on it.",
)
@click.version_option(
    PROG_VERSION,
    "-V",
    "--version",
    prog_name=PROG_NAME,
    message="%(prog)s %(version)s",
)
@generate_config_option
@color_options
@output_options
@click.argument("files", metavar="[FILE]", nargs=-1, type=str)
@click.pass_context
def cli(
    ctx: click.Context,
    color_auto: bool,
    color: str | None,
    palette: dict[str, str],
    dry_run: bool,
    quiet: bool,
    verbose: bool,
    files: tuple[str, ...],
) -> None:
    """Entry point for the prog CLI."""
    if len(files) > 1:
        raise ProgUsageError(f"expected at most one FILE, got {len(files)}")

    setup_logging(level=resolve_env_log_level())

    opts: MutablePreferences = build_opts_layer(
        color_auto=color_auto,
        color=color,
        palette=palette,
        dry_run=dry_run,
        quiet=quiet,
        verbose=verbose,
    )

    token = CancelToken()
    try:
        with handle_signals(token):
            config_path: Path | None = find_config_file()
            prefs: Preferences = resolve_preferences(opts, load_config_file(config_path))
            session = Session(
                prefs=prefs,
                argv=list(files),
                debug_mode=debug_enabled(),
                config_path=config_path,
                token=token,
            )
            session.dump("$config_path", str(config_path) if config_path else None)
            session.dump("$prefs", prefs)
            code: ExitCode = run_pipeline(session)
    except Interrupted as exc:
        logger.debug("Interrupted by SIG%s", exc.signame)
        ctx.exit(ExitCode.SUCCESS)

    ctx.exit(code)


if __name__ == "__main__":
    cli()
