#!/usr/bin/env python3
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .commands.convert_command import ConvertOptions, OutputFormat, handle_convert
from .errors import Wrike2ClickupError
from .utils.config import EXCLUDE_TAGS_ENV, LIST_NAMES_ENV, LOG_LEVEL_ENV, get_config, load_env_vars
from .utils.logger import configure_logging, get_logger, parse_level

log = get_logger(__name__)
console = Console()

# Create app instance
app = typer.Typer(
    name="wrike2clickup",
    help="Wrike to ClickUp converter - Convert all tasks in a Wrike account to ClickUp's import format.",
    no_args_is_help=True,
)


def _version_callback(value: bool):
    if value:
        console.print(f"wrike2clickup {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log every resolution miss."),
):
    """Wrike to ClickUp converter."""
    load_env_vars()
    level = parse_level(get_config(LOG_LEVEL_ENV))
    configure_logging(logging.DEBUG if verbose else level)


def _print_summary(output: Path, output_format: OutputFormat, result) -> None:
    table = Table(title="Conversion summary", show_header=False)
    table.add_row("Tasks", str(len(result.tasks)))
    table.add_row("Folders", str(len(result.folders)))
    table.add_row("Users", str(len(result.users)))
    table.add_row("Format", output_format.value)
    table.add_row("Output", str(output))
    console.print(table)


@app.command("convert")
def convert(
    users: Path = typer.Option(..., "--users", "-u", help="Path to your users.json file."),
    tasks: Path = typer.Option(..., "--tasks", "-t", help="Path to your tasks.json file."),
    folders: Path = typer.Option(..., "--folders", "-f", help="Path to your folders.json file."),
    output: Path = typer.Option(..., "--output", "-o", help="Where to save the output file."),
    exclude_tags: str = typer.Option(
        "", "--excludeTags", "-e", envvar=EXCLUDE_TAGS_ENV, help="Don't convert these folder names to tags (comma-separated)."
    ),
    list_names: str = typer.Option(
        "", "--listNames", "-l", envvar=LIST_NAMES_ENV, help="Save these folders as lists and try to keep their tasks (comma-separated)."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.csv, "--format", help="csv for ClickUp's import, json for a dump of the resolved collections."
    ),
):
    """Convert a Wrike export (users, tasks, folders) to ClickUp's csv import format."""
    options = ConvertOptions(
        users=users,
        tasks=tasks,
        folders=folders,
        output=output,
        exclude_tags=exclude_tags,
        list_names=list_names,
        output_format=output_format,
    )
    try:
        result = handle_convert(options)
    except Wrike2ClickupError as e:
        log.error("%s", e)
        raise typer.Exit(code=1)
    _print_summary(output, output_format, result)


if __name__ == "__main__":
    app()
