# Ready-made filters for TreeWalker.
# Every filter here is a plain callable taking a Path and returning bool,
# so they compose with user-written lambdas and functions.
#
# Filters must not mutate the filesystem.

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import List

from treewalk.models import Filter


def matches_any(path: Path, patterns: List[str]) -> bool:
    # Check whether a path matches any of the provided glob patterns.
    # Both the basename and the full path string are tested so users can
    # write either "*.txt" or "build/*".
    if not patterns:
        return True

    name = path.name
    full = str(path)

    for pat in patterns:
        if fnmatch.fnmatch(name, pat) or fnmatch.fnmatch(full, pat):
            return True

    return False


def _is_real_dir(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()


def glob_filter(include: List[str], exclude: List[str]) -> Filter:
    # Exclude applies to every entry, so an excluded directory is pruned.
    # Include only narrows regular files; directories must stay open for
    # their matching children to be reached. A symlink to a directory is
    # not descended by the walker, so include narrows it like a file.
    def _filter(path: Path) -> bool:
        if exclude and matches_any(path, exclude):
            return False
        if include and not _is_real_dir(path) and not matches_any(path, include):
            return False
        return True

    return _filter


def even_name_length(path: Path) -> bool:
    # Accept entries whose final component has an even number of characters.
    # Directories are filtered too, so "abc/" and everything under it is skipped.
    return len(path.name) % 2 == 0


def all_of(*filters: Filter) -> Filter:
    # Accept only when every filter accepts; stops at the first rejection.
    def _filter(path: Path) -> bool:
        return all(f(path) for f in filters)

    return _filter
