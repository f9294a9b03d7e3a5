from __future__ import annotations

import subprocess
from datetime import datetime, timezone
from pathlib import Path


def git_short_sha(cwd: Path) -> str:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], cwd=cwd, text=True, stderr=subprocess.DEVNULL
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out or "unknown"


def make_run_id(prefix: str = "llmseo", cwd: Path | None = None) -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{ts}-{git_short_sha(cwd or Path.cwd())}"
