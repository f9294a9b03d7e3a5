from __future__ import annotations

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from llmseo.canonical.locale import select_canonical_locale
from llmseo.normalize.sort import compare_strings, count_path_segments, sort_strings, sort_urls_by_path
from llmseo.normalize.text import normalize_line_endings, normalize_line_whitespace
from llmseo.normalize.url import normalize_path

_ASCII_WORDS = st.from_regex(r"[A-Za-z0-9/._-]{0,12}", fullmatch=True)
_LOCALES = st.from_regex(r"[a-z]{2}(-[A-Z]{2})?", fullmatch=True)


@pytest.mark.unit
@given(st.from_regex(r"[a-z./]{0,24}", fullmatch=True))
def test_normalize_path_is_idempotent(raw: str) -> None:
    once = normalize_path(raw)
    assert normalize_path(once) == once
    assert once.startswith("/")
    assert "//" not in once


@pytest.mark.unit
@given(st.lists(_ASCII_WORDS, max_size=8), st.randoms(use_true_random=False))
def test_sort_strings_ignores_input_order(values: list[str], rnd: random.Random) -> None:
    shuffled = list(values)
    rnd.shuffle(shuffled)
    assert sort_strings(shuffled) == sort_strings(values)


@pytest.mark.unit
@given(_ASCII_WORDS, _ASCII_WORDS)
def test_compare_strings_is_antisymmetric(a: str, b: str) -> None:
    assert compare_strings(a, b) == -compare_strings(b, a)
    assert (compare_strings(a, b) == 0) == (a == b)


@pytest.mark.unit
@given(st.lists(st.from_regex(r"https://example\.com(/[a-z0-9]{1,4}){0,4}", fullmatch=True), max_size=8))
def test_url_sort_is_shallow_first(urls: list[str]) -> None:
    depths = [count_path_segments(url) for url in sort_urls_by_path(urls)]
    assert depths == sorted(depths)


@pytest.mark.unit
@given(_LOCALES, st.lists(_LOCALES, max_size=5))
def test_selected_locale_is_available_or_none(default: str, available: list[str]) -> None:
    selected = select_canonical_locale(default, available)
    if not available:
        assert selected is None
    elif default in available:
        assert selected == default
    else:
        assert selected in available


@pytest.mark.unit
@given(st.text(alphabet="ab \t\r\n", max_size=40))
def test_line_whitespace_normalization_is_idempotent(text: str) -> None:
    once = normalize_line_whitespace(text)
    assert normalize_line_whitespace(once) == once
    assert "\n\n\n" not in once


@pytest.mark.unit
@given(st.text(alphabet="ab\r\n", max_size=40))
def test_crlf_output_has_no_bare_line_feeds(text: str) -> None:
    crlf = normalize_line_endings(text, "crlf")
    assert "\n" not in crlf.replace("\r\n", "")
    assert normalize_line_endings(crlf, "lf") == normalize_line_endings(text, "lf")
