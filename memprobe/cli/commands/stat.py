from pathlib import Path
from typing import List, Optional

import typer

from memprobe.internal import paths
from memprobe.internal.logging import get_logger, setup_logging
from memprobe.kernel.dispatch import StatDispatcher
from memprobe.kernel.errors import InvalidArgument
from memprobe.kernel.platforms import USAGE
from memprobe.cli.commands.version import version_callback


def stat(
    platform: Optional[List[str]] = typer.Argument(
        None, metavar="PLATFORM", help="Platform to query: win, osx or linux.", show_default=False
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level (overridden by MEMPROBE_LOG_LEVEL)."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file (JSON if it ends in .json)."),
    log_json: bool = typer.Option(False, "--log-json", help="Also write JSON logs to the default log file."),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show the memprobe version and exit."
    ),
):
    """
    Report available system memory for PLATFORM.
    """
    if log_file is None and log_json:
        log_file = paths.get_default_log_file()
    setup_logging(log_level_name=log_level, log_file_path=log_file, console_output=True)
    logger = get_logger("memprobe")

    dispatcher = StatDispatcher(logger=logger)
    try:
        dispatcher.dispatch(platform or [])
    except InvalidArgument as e:
        logger.error("Major error:", error=str(e))
        typer.echo(USAGE, err=True)
        raise typer.Exit(2)
    except Exception as e:
        logger.exception("Major error:", exc_info=e)
        raise typer.Exit(1)
