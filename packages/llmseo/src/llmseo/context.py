from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .run_id import make_run_id

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    cwd: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool

    @property
    def log_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        cwd: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
    ) -> "RunContext":
        root = Path(cwd).resolve() if cwd else Path.cwd()
        resolved_run_id = run_id or os.environ.get("RUN_ID") or make_run_id("llmseo", root)
        return cls(
            run_id=resolved_run_id,
            cwd=root,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
        )

    def resolve(self, path: str | Path) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.cwd / candidate
