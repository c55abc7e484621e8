# Command-line interface definition for treewalk.
# This file is responsible only for argument parsing, validation,
# and dispatch into core.
#
# No traversal logic should live here.

from __future__ import annotations

from pathlib import Path as FSPath
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from treewalk import __version__
from treewalk.core import run_listing
from treewalk.models import Options

# Distinct exit statuses so scripts can tell the failure modes apart.
EXIT_NO_ARGUMENT = 1
EXIT_NOT_A_DIRECTORY = 2
EXIT_WALK_FAILED = 3

app = typer.Typer(
    add_completion=False,
    help="List files under a directory, filtered by name.",
)
console = Console()
_err = Console(stderr=True)


@app.command(help="Walk DIRECTORY and print the absolute path of every accepted file.")
def main(
    directory: Optional[FSPath] = typer.Argument(
        None,
        help="Directory to walk.",
        show_default=False,
    ),

    # Filtering.
    include: List[str] = typer.Option(
        [], "--include",
        help="Only list files matching these patterns.",
        rich_help_panel="Filtering",
    ),
    exclude: List[str] = typer.Option(
        [], "--exclude",
        help="Skip files and directories matching these patterns.",
        rich_help_panel="Filtering",
    ),
    all_names: bool = typer.Option(
        False, "--all-names",
        help="Disable the even-name-length filter.",
        rich_help_panel="Filtering",
    ),

    # Traversal.
    limit: Optional[int] = typer.Option(
        None, "--limit",
        min=1,
        help="Stop after listing this many files.",
        rich_help_panel="Traversal",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth",
        min=1,
        help="Do not descend more than this many levels below DIRECTORY.",
        rich_help_panel="Traversal",
    ),

    summary: bool = typer.Option(
        False, "--summary",
        help="Print walk counters after the listing.",
    ),
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit.",
    ),
):
    # Handle version early and exit cleanly.
    if version:
        console.print(__version__)
        raise typer.Exit(code=0)

    if directory is None:
        _err.print("Usage: treewalk [OPTIONS] DIRECTORY", markup=False)
        raise typer.Exit(code=EXIT_NO_ARGUMENT)

    if not directory.is_dir():
        _err.print(f"Error: {directory} isn't a directory", markup=False, soft_wrap=True)
        raise typer.Exit(code=EXIT_NOT_A_DIRECTORY)

    opts = Options(
        directory=directory,

        include=include,
        exclude=exclude,
        even_names=not all_names,

        limit=limit,
        max_depth=max_depth,

        summary=summary,
    )

    try:
        run_listing(opts)
    except OSError as exc:
        _err.print(f"[red]FAILED:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=EXIT_WALK_FAILED)


if __name__ == "__main__":
    app()
