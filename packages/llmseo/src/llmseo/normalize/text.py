from __future__ import annotations

import re
from typing import Literal

LineEndings = Literal["lf", "crlf"]

_SPACE_RUN = re.compile(r"[ \t]{2,}")
_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def normalize_line_endings(text: str, line_endings: LineEndings) -> str:
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.replace("\n", "\r\n") if line_endings == "crlf" else normalized


def normalize_line_whitespace(text: str) -> str:
    """Trim trailing whitespace, collapse space runs and blank-line runs."""
    out: list[str] = []
    for raw in re.split(r"\r?\n", text):
        line = _SPACE_RUN.sub(" ", raw.rstrip())
        if not line and out and not out[-1]:
            continue
        out.append(line)
    return "\n".join(out)


def finalize_document(lines: list[str], line_endings: LineEndings) -> str:
    return normalize_line_endings(normalize_line_whitespace("\n".join(lines)), line_endings)


def count_lines(content: str, line_endings: LineEndings) -> int:
    return len(content.split("\r\n" if line_endings == "crlf" else "\n"))


def normalize_seo_text(text: str, max_length: int) -> str:
    normalized = normalize_whitespace(text)
    if len(normalized) <= max_length:
        return normalized
    truncated = normalized[:max_length]
    last_space = truncated.rfind(" ")
    return f"{truncated[:last_space]}…" if last_space > 0 else f"{truncated[:-1]}…"
