from __future__ import annotations

from ..check.checker import CheckResult
from ..check.issues import format_check_issues

TOOL = "llmseo"


def build_check_report(run_id: str, result: CheckResult) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": TOOL,
        "kind": "check-report",
        "status": result.disposition.value,
        "run_id": run_id,
        "summary": result.summary.to_json(),
        "issues": [issue.to_json() for issue in result.issues],
    }


def render_check_text(result: CheckResult, verbose: bool = False) -> str:
    summary = result.summary
    parts: list[str] = []
    shown = [issue for issue in result.issues if verbose or issue.severity.value != "info"]
    if shown:
        parts.append(format_check_issues(shown))
        parts.append("")
    parts.append(
        f"files checked={summary.files_checked} missing={summary.files_missing} mismatch={summary.files_mismatch} "
        f"errors={summary.errors} warnings={summary.warnings} info={summary.info}"
    )
    parts.append(f"status: {result.disposition.value.upper()}")
    return "\n".join(parts)


__all__ = ["build_check_report", "render_check_text"]
