from __future__ import annotations

from pathlib import Path

from llmseo.io.fs import read_text, write_text_atomic


def test_missing_file_reads_as_none(tmp_path: Path) -> None:
    assert read_text(tmp_path / "absent.txt") is None


def test_atomic_write_creates_parents_and_keeps_crlf(tmp_path: Path) -> None:
    target = tmp_path / "public" / "nested" / "llms.txt"
    written = write_text_atomic(target, "a\r\nb\r\n")
    assert written == target
    assert target.read_bytes() == b"a\r\nb\r\n"
    assert read_text(target) == "a\r\nb\r\n"
    assert sorted(p.name for p in target.parent.iterdir()) == ["llms.txt"]


def test_atomic_write_replaces_existing(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("old", encoding="utf-8")
    write_text_atomic(target, "new")
    assert read_text(target) == "new"
