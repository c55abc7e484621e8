# Shared data models for treewalk.
# Lives in its own module so traverse, core and cli can share types
# without importing each other.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path as FSPath
from typing import Callable, List, Optional

# Decides whether a path is visited. For directories, False prunes the subtree.
Filter = Callable[[FSPath], bool]

# Acts on an accepted regular file. False stops the whole walk.
Processor = Callable[[FSPath], bool]


class VisitResult(str, Enum):
    # Outcome of visiting one entry; terminate is a normal exit, not an error.
    cont = "continue"
    skip_subtree = "skip-subtree"
    terminate = "terminate"


# Counters for a single walk. A fresh instance is created per call.
@dataclass
class WalkStats:
    directories: int = 0
    files: int = 0
    processed: int = 0
    pruned: int = 0
    failed: int = 0
    terminated: bool = False


@dataclass(frozen=True)
class Options:
    directory: FSPath

    include: List[str]
    exclude: List[str]
    even_names: bool

    limit: Optional[int]
    max_depth: Optional[int]

    summary: bool
