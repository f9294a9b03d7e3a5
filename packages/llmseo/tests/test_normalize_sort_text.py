from __future__ import annotations

from llmseo.normalize.sort import compare_strings, count_path_segments, sort_by, sort_strings, sort_urls_by_path
from llmseo.normalize.text import count_lines, normalize_line_endings, normalize_line_whitespace, normalize_seo_text


def test_numeric_aware_ordering() -> None:
    assert sort_strings(["item10", "item2", "item1"]) == ["item1", "item2", "item10"]


def test_case_insensitive_with_lowercase_first() -> None:
    assert sort_strings(["b", "B", "a", "A"]) == ["a", "A", "b", "B"]


def test_punctuation_before_digits_before_letters() -> None:
    assert sort_strings(["a", "1", "-"]) == ["-", "1", "a"]


def test_compare_strings_is_a_three_way_comparison() -> None:
    assert compare_strings("a", "b") == -1
    assert compare_strings("b", "a") == 1
    assert compare_strings("same", "same") == 0


def test_sort_by_is_stable_for_equal_keys() -> None:
    rows = [("x", 1), ("x", 2), ("a", 3)]
    assert sort_by(rows, lambda row: row[0]) == [("a", 3), ("x", 1), ("x", 2)]


def test_count_path_segments() -> None:
    assert count_path_segments("https://example.com") == 0
    assert count_path_segments("https://example.com/") == 0
    assert count_path_segments("https://example.com/a/b") == 2
    assert count_path_segments("/a/b/c/") == 3


def test_sort_urls_by_path_orders_by_depth_then_locale() -> None:
    urls = ["https://x.com/a/b", "https://x.com/z", "https://x.com/a"]
    assert sort_urls_by_path(urls) == ["https://x.com/a", "https://x.com/z", "https://x.com/a/b"]


def test_normalize_line_whitespace() -> None:
    text = "a  b \t\n\n\n\nc\t\td   \n"
    assert normalize_line_whitespace(text) == "a b\n\nc d\n"


def test_normalize_line_endings_round_trip() -> None:
    assert normalize_line_endings("a\r\nb\rc\n", "lf") == "a\nb\nc\n"
    assert normalize_line_endings("a\nb\n", "crlf") == "a\r\nb\r\n"


def test_count_lines_follows_line_endings() -> None:
    assert count_lines("a\nb\n", "lf") == 3
    assert count_lines("a\r\nb", "crlf") == 2


def test_normalize_seo_text_truncates_on_word_boundary() -> None:
    assert normalize_seo_text("  hello   world  ", 50) == "hello world"
    assert normalize_seo_text("hello wonderful world", 12) == "hello…"
