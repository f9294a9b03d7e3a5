from __future__ import annotations

import os
from pathlib import Path


def read_text(path: str | Path) -> str | None:
    """Return the file content, or ``None`` when the file does not exist."""
    target = Path(path)
    try:
        with target.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return None


def write_text_atomic(path: str | Path, content: str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_name(f".{target.name}.tmp.{os.getpid()}")
    try:
        # newline="" keeps the line endings chosen by the generator.
        with tmp.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            tmp.unlink()
    return target


__all__ = ["read_text", "write_text_atomic"]
