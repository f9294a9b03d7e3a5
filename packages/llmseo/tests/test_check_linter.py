from __future__ import annotations

from llmseo.check.issues import IssueCode, Severity
from llmseo.check.linter import (
    check_duplicate_urls,
    check_empty_sections,
    check_forbidden_terms,
    check_link_format,
    lint_content,
)
from llmseo.config.model import RestrictedClaimsConfig


def test_forbidden_term_reported_with_line_and_context() -> None:
    issues = check_forbidden_terms("# Title\nWe are the best agency.\n", ["best"])
    assert len(issues) == 1
    issue = issues[0]
    assert issue.code is IssueCode.FORBIDDEN_TERM
    assert issue.severity is Severity.WARNING
    assert issue.line == 2
    assert issue.context == "We are the best agency."


def test_forbidden_term_is_case_insensitive() -> None:
    assert len(check_forbidden_terms("GUARANTEED results", ["guaranteed"])) == 1


def test_whitelisted_phrase_suppresses_term() -> None:
    assert check_forbidden_terms("We offer best practices.", ["best"], ["best practices"]) == []


def test_policy_listing_lines_are_skipped() -> None:
    content = "Forbidden terms: best, #1\nExceptions: best practices\n"
    assert check_forbidden_terms(content, ["best", "#1"]) == []


def test_context_truncated_to_one_hundred_characters() -> None:
    line = "best " + "x" * 200
    assert len(check_forbidden_terms(line, ["best"])[0].context or "") == 100


def test_empty_section_detection() -> None:
    content = "# Title\n\n## Empty\n\n## Full\ntext\n## Parent\n### Child\nbody\n"
    issues = check_empty_sections(content)
    assert [(issue.line, issue.message) for issue in issues] == [(3, 'Section "Empty" has no content')]
    assert issues[0].severity is Severity.INFO


def test_first_heading_is_exempt_and_trailing_empty_section_reported() -> None:
    assert check_empty_sections("# Only\n") == []
    issues = check_empty_sections("# Title\ntext\n## Tail\n\n")
    assert [issue.message for issue in issues] == ['Section "Tail" has no content']


def test_duplicate_urls_cite_first_line() -> None:
    content = "- [a](/x)\n- [b](/y)\n- [c](/x)\n"
    issues = check_duplicate_urls(content)
    assert len(issues) == 1
    assert issues[0].line == 3
    assert issues[0].message == 'URL "/x" appears multiple times (first at line 1)'
    assert issues[0].context == "/x"


def test_link_format() -> None:
    issues = check_link_format("[ok](/a) [ok](https://x) [ok](#top) [bad](mailto:me)\n")
    assert [issue.context for issue in issues] == ["mailto:me"]
    assert issues[0].code is IssueCode.INVALID_URL


def test_lint_content_stamps_path_and_respects_policy_switch() -> None:
    content = "# T\nbest\n"
    enabled = RestrictedClaimsConfig(enable=True, forbidden=("best",))
    disabled = RestrictedClaimsConfig(enable=False, forbidden=("best",))
    issues = lint_content(content, enabled, "public/llms.txt")
    assert [issue.path for issue in issues] == ["public/llms.txt"]
    assert lint_content(content, disabled, "public/llms.txt") == []
    assert lint_content(content, None) == []
