from __future__ import annotations

from .checker import CheckResult, CheckSummary, Disposition, check_generated_files, compare_content
from .issues import CheckIssue, IssueCode, Severity, format_check_issue, format_check_issues
from .linter import check_duplicate_urls, check_empty_sections, check_forbidden_terms, check_link_format, lint_content

__all__ = [
    "CheckIssue",
    "CheckResult",
    "CheckSummary",
    "Disposition",
    "IssueCode",
    "Severity",
    "check_duplicate_urls",
    "check_empty_sections",
    "check_forbidden_terms",
    "check_generated_files",
    "check_link_format",
    "compare_content",
    "format_check_issue",
    "format_check_issues",
    "lint_content",
]
