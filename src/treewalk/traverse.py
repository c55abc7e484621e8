# Filesystem traversal for treewalk.
# TreeWalker drives a pre-order, depth-first walk and delegates two
# decisions to the caller: which entries to visit (Filter) and what to
# do with accepted regular files (Processor).
#
# Nothing here prints or logs; errors go to the caller.

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from treewalk.models import Filter, Processor, VisitResult, WalkStats


class RootInvalidError(OSError):
    # The traversal root is missing, not a directory, or cannot be listed.
    pass


def accept_all(path: Path) -> bool:
    return True


def continue_always(path: Path) -> bool:
    return True


def _scan(directory: Path) -> List[os.DirEntry]:
    # List a directory with its handle closed before we descend.
    # Siblings are visited in name order so walks are reproducible.
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _classify(entry: os.DirEntry) -> str:
    # Symlinks are never followed: a link to a directory is "other".
    if entry.is_dir(follow_symlinks=False):
        return "dir"
    if entry.is_file(follow_symlinks=False):
        return "file"
    return "other"


class TreeWalker:
    """Walk a directory tree, filtering entries and processing files.

    The filter sees every entry, directories included; rejecting a
    directory prunes its whole subtree. The processor only sees regular
    files that passed the filter, and returning False from it ends the
    walk. Both default to no-ops, so ``TreeWalker().walk(path)`` is
    always valid.

    Configuration is chainable::

        stats = (
            TreeWalker()
            .set_filter(lambda p: p.name != ".git")
            .set_processor(handle)
            .walk("src")
        )
    """

    def __init__(
        self,
        filter: Optional[Filter] = None,
        processor: Optional[Processor] = None,
        max_depth: Optional[int] = None,
    ):
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be at least 1")

        self._filter: Filter = accept_all
        self._processor: Processor = continue_always
        self.max_depth = max_depth

        self.set_filter(filter)
        self.set_processor(processor)

    @property
    def filter(self) -> Filter:
        return self._filter

    @property
    def processor(self) -> Processor:
        return self._processor

    def set_filter(self, filter: Optional[Filter]) -> "TreeWalker":
        # None keeps whatever filter is already active.
        if filter is not None:
            self._filter = filter
        return self

    def set_processor(self, processor: Optional[Processor]) -> "TreeWalker":
        if processor is not None:
            self._processor = processor
        return self

    def walk(self, root: Union[str, os.PathLike]) -> WalkStats:
        """Traverse the tree under ``root`` and return its counters.

        Raises RootInvalidError if ``root`` cannot be walked at all.
        Entries that fail to stat, and subdirectories that fail to list,
        are counted in ``failed`` and skipped. Exceptions raised by the
        filter or processor propagate unchanged.
        """
        start = Path(root)
        entries = _open_root(start)

        stats = WalkStats(directories=1)

        # The root is always entered; its filter result does not matter.
        self._filter(start)

        # One frame per open directory: its path, the entries not yet
        # visited, and its depth below the root. Depth is bounded by the
        # filesystem, not by the interpreter's recursion limit.
        stack: List[Tuple[Path, Iterator[os.DirEntry], int]] = [(start, iter(entries), 0)]

        while stack:
            directory, remaining, depth = stack[-1]
            entry = next(remaining, None)
            if entry is None:
                stack.pop()
                continue

            path = directory / entry.name

            try:
                kind = _classify(entry)
            except OSError:
                # Vanished or unreadable entry: skip it, keep walking.
                stats.failed += 1
                continue

            if kind == "dir":
                result, children = self._enter_directory(path, depth + 1, stats)
                if result is VisitResult.cont:
                    stack.append((path, iter(children), depth + 1))
            elif kind == "file":
                if self._visit_file(path, stats) is VisitResult.terminate:
                    stats.terminated = True
                    break
            else:
                self._filter(path)

        return stats

    def _enter_directory(
        self, path: Path, depth: int, stats: WalkStats
    ) -> Tuple[VisitResult, List[os.DirEntry]]:
        # List before filtering: a directory that cannot be read is a
        # failed visit and never reaches the filter.
        descend = self.max_depth is None or depth < self.max_depth
        entries: List[os.DirEntry] = []
        if descend:
            try:
                entries = _scan(path)
            except OSError:
                stats.failed += 1
                return VisitResult.skip_subtree, []

        if not self._filter(path):
            stats.pruned += 1
            return VisitResult.skip_subtree, []

        if not descend:
            return VisitResult.skip_subtree, []

        stats.directories += 1
        return VisitResult.cont, entries

    def _visit_file(self, path: Path, stats: WalkStats) -> VisitResult:
        stats.files += 1
        if not self._filter(path):
            return VisitResult.cont

        keep_going = self._processor(path)
        stats.processed += 1
        if not keep_going:
            return VisitResult.terminate
        return VisitResult.cont


def _open_root(start: Path) -> List[os.DirEntry]:
    # Validate and list the root before any callback runs.
    try:
        st = start.stat()
    except OSError as exc:
        raise RootInvalidError(
            exc.errno, f"Cannot walk: {exc.strerror or exc}", str(start)
        ) from exc

    if not stat.S_ISDIR(st.st_mode):
        raise RootInvalidError(errno.ENOTDIR, "Cannot walk: not a directory", str(start))

    try:
        return _scan(start)
    except OSError as exc:
        raise RootInvalidError(
            exc.errno, f"Cannot walk: {exc.strerror or exc}", str(start)
        ) from exc
