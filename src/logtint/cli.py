"""CLI entry point for logtint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from logtint.config import configure_logging, load_config
from logtint.reader import read_file

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


@app.command()
def run(
    file: Annotated[Path, typer.Argument(help="Log file to view")],
) -> None:
    """View an ANSI-colored log file and filter it by regex."""
    config = load_config()
    configure_logging(config.log_level)

    if not file.is_file():
        typer.echo(f"Error: {file} is not a file")
        raise typer.Exit(1)

    try:
        lines = read_file(file)
    except OSError as e:
        logger.exception("Failed to read %s", file)
        typer.echo(f"Error: cannot read {file}: {e}")
        raise typer.Exit(1) from e

    from logtint.app import LogTintApp

    log_app = LogTintApp(lines=lines, source=str(file), config=config)
    log_app.run(mouse=False)


def main() -> None:
    """Entry point for the CLI."""
    app()
