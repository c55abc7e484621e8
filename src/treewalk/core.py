# Orchestration for the treewalk command.
# This file wires filters and a printing processor into a TreeWalker
# and reports results. It is a sample consumer of the walker API.
#
# It intentionally contains no CLI parsing and no traversal logic.

from __future__ import annotations

from pathlib import Path
from typing import List

from rich.console import Console

from treewalk.filters import all_of, even_name_length, glob_filter
from treewalk.models import Filter, Options, Processor, WalkStats
from treewalk.traverse import TreeWalker

console = Console()


def build_filter(opts: Options) -> Filter:
    filters: List[Filter] = []
    if opts.even_names:
        filters.append(even_name_length)
    if opts.include or opts.exclude:
        filters.append(glob_filter(opts.include, opts.exclude))
    return all_of(*filters)


def build_processor(opts: Options) -> Processor:
    # Print each accepted file; ask the walker to stop once the limit is hit.
    seen = 0

    def _process(path: Path) -> bool:
        nonlocal seen
        seen += 1
        console.print(f"File: {path.absolute()}", markup=False, highlight=False, soft_wrap=True)
        return opts.limit is None or seen < opts.limit

    return _process


def run_listing(opts: Options) -> WalkStats:
    # Entry point for the listing command.
    # Walk errors propagate; the CLI decides how to report them.
    walker = (
        TreeWalker(max_depth=opts.max_depth)
        .set_filter(build_filter(opts))
        .set_processor(build_processor(opts))
    )
    stats = walker.walk(opts.directory)

    if opts.summary:
        _print_summary(stats)
    return stats


def _print_summary(stats: WalkStats) -> None:
    console.print()
    console.print("[bold]Summary[/bold]")
    console.print(f"Directories: {stats.directories}")
    console.print(f"Files:       {stats.files}")
    console.print(f"Processed:   {stats.processed}")
    console.print(f"Pruned:      {stats.pruned}")
    console.print(f"Failed:      {stats.failed}")
    if stats.terminated:
        console.print("Stopped early by limit.")
