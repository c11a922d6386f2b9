"""Tests for markup discovery and file reading."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from class2css.exceptions import MarkupParseError
from class2css.io import read_markup, write_text_atomic
from class2css.scanner import discover_markup_files, is_markup_file


def _touch(path: Path, text: str = "<div></div>") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_discovers_recursively_sorted_and_deduplicated(tmp_path: Path) -> None:
    _touch(tmp_path / "b.html")
    _touch(tmp_path / "a" / "z.wxml")
    _touch(tmp_path / "a" / "notes.txt")
    single = _touch(tmp_path / "a" / "y.vue")

    files, missing = discover_markup_files((tmp_path, single), ("html", "wxml", "vue"), root=tmp_path)

    assert [path.relative_to(tmp_path.resolve()).as_posix() for path in files] == ["a/y.vue", "a/z.wxml", "b.html"]
    assert missing == []


def test_missing_entries_are_returned(tmp_path: Path) -> None:
    files, missing = discover_markup_files((tmp_path / "gone",), ("html",))

    assert files == []
    assert missing == [tmp_path / "gone"]


@pytest.mark.parametrize(
    ("name", "expected"),
    [("page.html", True), ("PAGE.HTML", True), ("page.wxml", False), ("page", False)],
)
def test_is_markup_file(name: str, expected: bool) -> None:
    assert is_markup_file(Path(name), ("html",)) is expected


def test_read_markup_returns_text(tmp_path: Path) -> None:
    path = _touch(tmp_path / "a.html", '<i class="mt-1"></i>')

    assert asyncio.run(read_markup(path)) == '<i class="mt-1"></i>'


def test_read_markup_retries_empty_file_then_returns_empty(tmp_path: Path) -> None:
    path = _touch(tmp_path / "a.html", "")

    assert asyncio.run(read_markup(path, attempts=2, base_delay=0)) == ""


def test_read_markup_missing_file_raises_after_retries(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        asyncio.run(read_markup(tmp_path / "gone.html", attempts=2, base_delay=0))


def test_read_markup_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "bad.html"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(MarkupParseError, match="UTF-8"):
        asyncio.run(read_markup(path))


def test_write_text_atomic_leaves_no_temp_files(tmp_path: Path) -> None:
    target = tmp_path / "out" / "index.css"

    write_text_atomic(path=target, content=".a{width:1px}\n")
    write_text_atomic(path=target, content=".b{width:2px}\n")

    assert target.read_text(encoding="utf-8") == ".b{width:2px}\n"
    assert sorted(path.name for path in target.parent.iterdir()) == ["index.css"]
