from __future__ import annotations

import logging
import os
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from result import Err

from dirnav.config.defaults import default_config
from dirnav.config.loader import config_path, load_config, sample_config_json
from dirnav.services.listing import load_snapshot
from dirnav.services.logs import setup_logging
from dirnav.services.navigation import AppState
from dirnav.ui.app import FileBrowserApp

console = Console()
logger = logging.getLogger(__name__)


def run(
    path: Annotated[
        str | None,
        typer.Argument(help="Directory to open. Defaults to the configured start path or cwd."),
    ] = None,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
) -> None:
    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)

    config_warning: str | None = None
    config_result = load_config()
    if isinstance(config_result, Err):
        config_warning = config_result.unwrap_err()
        console.print(f"[yellow]{escape(config_warning)} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    log_result = setup_logging(config.log_file, config.log_level)
    if isinstance(log_result, Err):
        console.print(f"[red]{escape(log_result.unwrap_err())}[/]")
        raise typer.Exit(1)
    if config_warning is not None:
        logger.warning("%s Using defaults.", config_warning)
    else:
        logger.info("Using config %s", config_path())

    start = path or config.start_path or os.getcwd()
    snapshot_result = load_snapshot(start)
    if isinstance(snapshot_result, Err):
        error = snapshot_result.unwrap_err()
        console.print(f"[red]Cannot open {escape(error.path)}: {escape(error.message)}[/]")
        raise typer.Exit(1)

    FileBrowserApp(state=AppState(snapshot=snapshot_result.unwrap()), config=config).run()
    raise typer.Exit(0)


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
