from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedFile:
    path: str
    byte_size: int
    written: bool


def build_generate_report(run_id: str, files: list[GeneratedFile], dry_run: bool) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "llmseo",
        "kind": "generate-report",
        "status": "ok",
        "run_id": run_id,
        "dry_run": dry_run,
        "files": [{"path": f.path, "bytes": f.byte_size, "written": f.written} for f in files],
    }


def render_generate_text(files: list[GeneratedFile], dry_run: bool) -> str:
    verb = "would write" if dry_run else "wrote"
    lines = [f"{verb} {f.path} ({f.byte_size} bytes)" for f in files]
    if dry_run:
        lines.append("dry run complete: no files written")
    return "\n".join(lines)


__all__ = ["GeneratedFile", "build_generate_report", "render_generate_text"]
