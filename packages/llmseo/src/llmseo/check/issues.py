from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueCode(str, Enum):
    FILE_MISSING = "file_missing"
    FILE_EMPTY = "file_empty"
    FILE_MISMATCH = "file_mismatch"
    FORBIDDEN_TERM = "forbidden_term"
    EMPTY_SECTION = "empty_section"
    DUPLICATE_URL = "duplicate_url"
    INVALID_URL = "invalid_url"
    FILE_UNREADABLE = "file_unreadable"


@dataclass(frozen=True)
class CheckIssue:
    severity: Severity
    code: IssueCode
    message: str
    path: str = ""
    line: int | None = None
    context: str | None = None

    def with_path(self, path: str) -> "CheckIssue":
        return replace(self, path=path)

    def to_json(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "severity": self.severity.value,
            "code": self.code.value,
            "message": self.message,
            "path": self.path,
        }
        if self.line is not None:
            payload["line"] = self.line
        if self.context is not None:
            payload["context"] = self.context
        return payload


def count_severities(issues: Iterable[CheckIssue]) -> dict[Severity, int]:
    counts = {severity: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity] += 1
    return counts


def format_check_issue(issue: CheckIssue) -> str:
    lines = [f"{issue.severity.value.capitalize()}: {issue.code.value}", f"  File: {issue.path}"]
    if issue.line is not None:
        lines.append(f"  Line: {issue.line}")
    lines.append(f"  Message: {issue.message}")
    if issue.context:
        lines.append(f'  Context: "{issue.context}"')
    return "\n".join(lines)


def format_check_issues(issues: Iterable[CheckIssue]) -> str:
    return "\n\n".join(format_check_issue(issue) for issue in issues)


__all__ = [
    "CheckIssue",
    "IssueCode",
    "Severity",
    "count_severities",
    "format_check_issue",
    "format_check_issues",
]
