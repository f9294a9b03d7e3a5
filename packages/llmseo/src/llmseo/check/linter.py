"""Content-policy scans over rendered documents.

Each scan is independent and returns issues without a path; ``lint_content`` runs
the applicable scans and stamps the file path on every result.
"""

from __future__ import annotations

import re
from typing import Iterable

from ..config.model import RestrictedClaimsConfig
from .issues import CheckIssue, IssueCode, Severity

CONTEXT_WIDTH = 100

_HEADING = re.compile(r"^(#{1,6})\s+(.+)$")
_LINK = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")
_POLICY_LIST_PREFIXES = ("forbidden terms:", "exceptions:")


def _lines(content: str) -> list[str]:
    return re.split(r"\r?\n", content)


def check_forbidden_terms(content: str, forbidden: Iterable[str], whitelist: Iterable[str] = ()) -> list[CheckIssue]:
    terms = [term for term in forbidden if term]
    allowed = [phrase.lower() for phrase in whitelist]
    issues: list[CheckIssue] = []
    for number, line in enumerate(_lines(content), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.lower().startswith(_POLICY_LIST_PREFIXES):
            continue
        lowered = line.lower()
        for term in terms:
            needle = term.lower()
            if needle not in lowered:
                continue
            if any(needle in phrase and phrase in lowered for phrase in allowed):
                continue
            issues.append(
                CheckIssue(
                    severity=Severity.WARNING,
                    code=IssueCode.FORBIDDEN_TERM,
                    message=f'Term "{term}" is forbidden by policy',
                    line=number,
                    context=trimmed[:CONTEXT_WIDTH],
                )
            )
    return issues


def check_empty_sections(content: str) -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    current: str | None = None
    start_line = 0
    level = 0
    has_content = False
    is_first = False
    seen_heading = False

    def close() -> None:
        if current is not None and not has_content and not is_first:
            issues.append(
                CheckIssue(
                    severity=Severity.INFO,
                    code=IssueCode.EMPTY_SECTION,
                    message=f'Section "{current}" has no content',
                    line=start_line,
                )
            )

    for number, line in enumerate(_lines(content), start=1):
        match = _HEADING.match(line)
        if match:
            next_level = len(match.group(1))
            if current is not None and next_level > level:
                has_content = True
            close()
            current = match.group(2).strip()
            start_line = number
            level = next_level
            has_content = False
            is_first = not seen_heading
            seen_heading = True
        elif current is not None and line.strip():
            has_content = True
    close()
    return issues


def check_duplicate_urls(content: str) -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    seen: dict[str, int] = {}
    for number, line in enumerate(_lines(content), start=1):
        for match in _LINK.finditer(line):
            url = match.group(2)
            first = seen.get(url)
            if first is None:
                seen[url] = number
                continue
            issues.append(
                CheckIssue(
                    severity=Severity.WARNING,
                    code=IssueCode.DUPLICATE_URL,
                    message=f'URL "{url}" appears multiple times (first at line {first})',
                    line=number,
                    context=url,
                )
            )
    return issues


def check_link_format(content: str) -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    for number, line in enumerate(_lines(content), start=1):
        for match in _LINK.finditer(line):
            url = match.group(2)
            if url.startswith(("/", "http", "#")):
                continue
            issues.append(
                CheckIssue(
                    severity=Severity.WARNING,
                    code=IssueCode.INVALID_URL,
                    message=f"Invalid URL format: {url}",
                    line=number,
                    context=url,
                )
            )
    return issues


def lint_content(content: str, policy: RestrictedClaimsConfig | None, path: str = "") -> list[CheckIssue]:
    issues: list[CheckIssue] = []
    if policy is not None and policy.enable:
        issues.extend(check_forbidden_terms(content, policy.forbidden, policy.whitelist))
    issues.extend(check_empty_sections(content))
    issues.extend(check_duplicate_urls(content))
    issues.extend(check_link_format(content))
    return [issue.with_path(path) for issue in issues]


__all__ = [
    "check_duplicate_urls",
    "check_empty_sections",
    "check_forbidden_terms",
    "check_link_format",
    "lint_content",
]
