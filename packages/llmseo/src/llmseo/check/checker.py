"""Verification of on-disk artifacts against freshly derived expectations."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Literal

from ..canonical.sections import CanonicalBundle, create_canonical_bundle
from ..config.model import LlmSeoConfig
from ..exit_codes import ERROR, OK, WARN
from ..generate.citations import create_citations_json_string
from ..generate.llms_full_txt import create_llms_full_txt
from ..generate.llms_txt import create_llms_txt
from ..io.fs import read_text as default_read_text
from .issues import CheckIssue, IssueCode, Severity, count_severities
from .linter import lint_content

FailOn = Literal["warn", "error"]
ReadText = Callable[[str], "str | None"]

DEFAULT_MAX_CONTEXT_LINES = 5


class Disposition(str, Enum):
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"

    @property
    def exit_code(self) -> int:
        return {Disposition.PASS: OK, Disposition.WARN: WARN, Disposition.FAIL: ERROR}[self]


@dataclass(frozen=True)
class CompareResult:
    match: bool
    context: str = ""


@dataclass(frozen=True)
class CheckSummary:
    errors: int = 0
    warnings: int = 0
    info: int = 0
    files_checked: int = 0
    files_missing: int = 0
    files_mismatch: int = 0

    def to_json(self) -> dict[str, int]:
        return {
            "errors": self.errors,
            "warnings": self.warnings,
            "info": self.info,
            "files_checked": self.files_checked,
            "files_missing": self.files_missing,
            "files_mismatch": self.files_mismatch,
        }


@dataclass(frozen=True)
class CheckResult:
    issues: tuple[CheckIssue, ...]
    summary: CheckSummary
    disposition: Disposition

    @property
    def exit_code(self) -> int:
        return self.disposition.exit_code


@dataclass
class _Tally:
    issues: list[CheckIssue] = field(default_factory=list)
    checked: int = 0
    missing: int = 0
    mismatch: int = 0


def compare_content(expected: str, actual: str, max_context_lines: int = DEFAULT_MAX_CONTEXT_LINES) -> CompareResult:
    if expected == actual:
        return CompareResult(match=True)
    expected_lines = expected.split("\n")
    actual_lines = actual.split("\n")
    context: list[str] = []
    diffs = 0
    for index in range(max(len(expected_lines), len(actual_lines))):
        if diffs >= max_context_lines:
            break
        want = expected_lines[index] if index < len(expected_lines) else None
        got = actual_lines[index] if index < len(actual_lines) else None
        if want == got:
            continue
        diffs += 1
        if want is not None:
            context.append(f'Expected line {index + 1}: "{want}"')
        if got is not None:
            context.append(f'Actual line {index + 1}: "{got}"')
    return CompareResult(match=False, context="\n".join(context))


def decide_disposition(issues: list[CheckIssue], fail_on: FailOn) -> Disposition:
    counts = count_severities(issues)
    if counts[Severity.ERROR]:
        return Disposition.FAIL
    if fail_on == "warn" and counts[Severity.WARNING]:
        return Disposition.WARN
    return Disposition.PASS


def _read(tally: _Tally, read_text: ReadText, path: str) -> tuple[bool, str | None]:
    try:
        return True, read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        tally.issues.append(
            CheckIssue(
                severity=Severity.ERROR,
                code=IssueCode.FILE_UNREADABLE,
                message=f"File cannot be read: {path}",
                path=path,
                context=str(exc),
            )
        )
        return False, None


def _inspect(tally: _Tally, read_text: ReadText, path: str, config: LlmSeoConfig, *, required: bool) -> str | None:
    """Read one artifact and record presence and policy issues.

    Returns ``None`` for a missing or unreadable file so the diff step skips it.
    """
    readable, content = _read(tally, read_text, path)
    if not readable:
        return None
    if content is None:
        if required:
            message = f"Required file does not exist: {path}"
            severity = Severity.ERROR
        else:
            message = f"Optional citations file does not exist: {path}"
            severity = Severity.WARNING
        tally.issues.append(CheckIssue(severity=severity, code=IssueCode.FILE_MISSING, message=message, path=path))
        tally.missing += 1
        return None
    tally.checked += 1
    if content == "":
        tally.issues.append(
            CheckIssue(severity=Severity.WARNING, code=IssueCode.FILE_EMPTY, message=f"File is empty: {path}", path=path)
        )
    elif required:
        tally.issues.extend(lint_content(content, config.restricted_claims, path))
    return content


def _record_diff(tally: _Tally, path: str, expected: str, actual: str, max_context_lines: int) -> None:
    result = compare_content(expected, actual, max_context_lines)
    if result.match:
        return
    tally.mismatch += 1
    tally.issues.append(
        CheckIssue(
            severity=Severity.ERROR,
            code=IssueCode.FILE_MISMATCH,
            message=f"File content does not match expected output: {path}",
            path=path,
            context=result.context or None,
        )
    )


def _expected_citations(config: LlmSeoConfig, bundle: CanonicalBundle, actual: str) -> str | None:
    try:
        payload = json.loads(actual)
    except json.JSONDecodeError:
        return None
    generated = payload.get("generated") if isinstance(payload, dict) else None
    if not isinstance(generated, str):
        return None
    return create_citations_json_string(config, bundle.manifest_items, bundle.entries, fixed_timestamp=generated)


def check_generated_files(
    config: LlmSeoConfig,
    *,
    fail_on: FailOn = "error",
    read_text: ReadText = default_read_text,
    max_context_lines: int = DEFAULT_MAX_CONTEXT_LINES,
    llms_txt_path: str | None = None,
    llms_full_txt_path: str | None = None,
    citations_path: str | None = None,
) -> CheckResult:
    """Check presence, policy and drift of the generated artifacts.

    Problems with the files, including unreadable ones, become issues; only a fatal
    configuration error (an unusable base URL) propagates as an exception.
    """
    tally = _Tally()
    brief_path = llms_txt_path or config.output.llms_txt
    full_path = llms_full_txt_path or config.output.llms_full_txt
    cite_path = citations_path or config.output.citations

    brief = _inspect(tally, read_text, brief_path, config, required=True)
    full = _inspect(tally, read_text, full_path, config, required=True)
    citations = _inspect(tally, read_text, cite_path, config, required=False) if cite_path else None

    if brief is not None and full is not None:
        bundle = create_canonical_bundle(config)
        if brief:
            expected = create_llms_txt(config, bundle.canonical_urls).content
            _record_diff(tally, brief_path, expected, brief, max_context_lines)
        if full:
            expected = create_llms_full_txt(config, bundle.canonical_urls, bundle.manifest_items, bundle.entries).content
            _record_diff(tally, full_path, expected, full, max_context_lines)
        if cite_path and citations:
            expected_citations = _expected_citations(config, bundle, citations)
            if expected_citations is None:
                tally.mismatch += 1
                tally.issues.append(
                    CheckIssue(
                        severity=Severity.ERROR,
                        code=IssueCode.FILE_MISMATCH,
                        message=f"Citations file is not a valid citations document: {cite_path}",
                        path=cite_path,
                    )
                )
            else:
                _record_diff(tally, cite_path, expected_citations, citations, max_context_lines)

    counts = count_severities(tally.issues)
    summary = CheckSummary(
        errors=counts[Severity.ERROR],
        warnings=counts[Severity.WARNING],
        info=counts[Severity.INFO],
        files_checked=tally.checked,
        files_missing=tally.missing,
        files_mismatch=tally.mismatch,
    )
    return CheckResult(issues=tuple(tally.issues), summary=summary, disposition=decide_disposition(tally.issues, fail_on))


__all__ = [
    "CheckResult",
    "CheckSummary",
    "CompareResult",
    "DEFAULT_MAX_CONTEXT_LINES",
    "Disposition",
    "check_generated_files",
    "compare_content",
    "decide_disposition",
]
