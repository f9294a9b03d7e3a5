from __future__ import annotations

from dataclasses import dataclass

from ..normalize.text import LineEndings, count_lines, finalize_document


@dataclass(frozen=True)
class GeneratedArtifact:
    content: str
    byte_size: int
    line_count: int

    @classmethod
    def from_content(cls, content: str, line_endings: LineEndings = "lf") -> "GeneratedArtifact":
        return cls(content=content, byte_size=len(content.encode("utf-8")), line_count=count_lines(content, line_endings))

    @classmethod
    def from_lines(cls, lines: list[str], line_endings: LineEndings = "lf") -> "GeneratedArtifact":
        return cls.from_content(finalize_document(lines, line_endings), line_endings)


__all__ = ["GeneratedArtifact"]
