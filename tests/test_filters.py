# Unit tests for treewalk.filters.
# These tests validate glob matching, the even-name-length demo filter,
# and how filters behave when plugged into a TreeWalker.

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from treewalk.filters import all_of, even_name_length, glob_filter, matches_any
from treewalk.traverse import TreeWalker


def _walk(root: Path, filter) -> List[str]:
    seen: List[Path] = []

    def _collect(path: Path) -> bool:
        seen.append(path)
        return True

    TreeWalker(filter=filter, processor=_collect).walk(root)
    return sorted(p.relative_to(root).as_posix() for p in seen)


def test_matches_any_empty_patterns_match_everything() -> None:
    assert matches_any(Path("x/y.txt"), [])


def test_matches_any_basename_and_full_path() -> None:
    assert matches_any(Path("docs/readme.md"), ["*.md"])
    assert matches_any(Path("docs/readme.md"), ["docs/*"])
    assert not matches_any(Path("docs/readme.md"), ["*.txt", "src/*"])


def test_even_name_length() -> None:
    assert even_name_length(Path("bb.txt"))
    assert not even_name_length(Path("a.txt"))
    assert even_name_length(Path("/tmp/some/dir/ab"))


def test_even_name_length_prunes_odd_directories(tmp_path: Path) -> None:
    (tmp_path / "bb.txt").write_text("b", encoding="utf-8")
    odd = tmp_path / "odd"
    odd.mkdir()
    (odd / "dd.txt").write_text("d", encoding="utf-8")
    even = tmp_path / "even"
    even.mkdir()
    (even / "ff.txt").write_text("f", encoding="utf-8")
    (even / "g.txt").write_text("g", encoding="utf-8")

    assert _walk(tmp_path, even_name_length) == ["bb.txt", "even/ff.txt"]


def test_glob_filter_include_keeps_directories_open(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "b.pdf").write_text("b", encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.pdf").write_text("c", encoding="utf-8")

    assert _walk(tmp_path, glob_filter(include=["*.pdf"], exclude=[])) == ["b.pdf", "sub/c.pdf"]


def test_glob_filter_exclude_prunes_directories(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    build = tmp_path / "build"
    build.mkdir()
    (build / "out.txt").write_text("o", encoding="utf-8")

    assert _walk(tmp_path, glob_filter(include=[], exclude=["build"])) == ["a.txt"]


def test_all_of_requires_every_filter(tmp_path: Path) -> None:
    (tmp_path / "bb.txt").write_text("b", encoding="utf-8")
    (tmp_path / "cc.pdf").write_text("c", encoding="utf-8")
    (tmp_path / "d.txt").write_text("d", encoding="utf-8")

    combined = all_of(even_name_length, glob_filter(include=["*.txt"], exclude=[]))

    assert _walk(tmp_path, combined) == ["bb.txt"]


def test_all_of_with_no_filters_accepts() -> None:
    assert all_of()(Path("anything"))


def test_all_of_short_circuits() -> None:
    calls: List[Path] = []

    def _track(path: Path) -> bool:
        calls.append(path)
        return True

    assert not all_of(lambda p: False, _track)(Path("x"))
    assert calls == []


def test_glob_filter_include_narrows_symlinked_directories(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "linked"
    try:
        link.symlink_to(real, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")

    f = glob_filter(include=["*.pdf"], exclude=[])

    assert f(real)
    assert not f(link)
