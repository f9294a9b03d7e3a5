"""Deterministic ordering helpers.

Ordering approximates English collation with numeric awareness: comparison is
case-insensitive first (lowercase sorts before uppercase on ties), digit runs compare
by value so ``item2`` sorts before ``item10``, and punctuation sorts before digits,
which sort before letters.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, TypeVar
from urllib.parse import urlsplit

T = TypeVar("T")

_TOKEN = re.compile(r"(\d+)|([^\W\d_]+)|(.)", re.DOTALL)

LocaleKey = tuple[tuple[tuple[int, int, str], ...], str]


def locale_key(value: str) -> LocaleKey:
    tokens: list[tuple[int, int, str]] = []
    for digits, word, other in _TOKEN.findall(value):
        if digits:
            tokens.append((1, int(digits), ""))
        elif word:
            tokens.append((2, 0, word.casefold()))
        else:
            tokens.append((0, 0, other))
    return tuple(tokens), value.swapcase()


def compare_strings(a: str, b: str) -> int:
    ka, kb = locale_key(a), locale_key(b)
    if ka == kb:
        return 0
    return -1 if ka < kb else 1


def sort_strings(items: Iterable[str]) -> list[str]:
    return sorted(items, key=locale_key)


def sort_by(items: Iterable[T], key_fn: Callable[[T], str]) -> list[T]:
    return sorted(items, key=lambda item: locale_key(key_fn(item)))


def count_path_segments(url: str) -> int:
    parts = urlsplit(url)
    path = parts.path if parts.scheme and parts.netloc else url
    cleaned = path.strip("/")
    if not cleaned:
        return 0
    return len(cleaned.split("/"))


def sort_urls_by_path(urls: Iterable[str]) -> list[str]:
    """Shallower paths first, then locale order."""
    return sorted(urls, key=lambda url: (count_path_segments(url), locale_key(url)))


__all__ = [
    "compare_strings",
    "count_path_segments",
    "locale_key",
    "sort_by",
    "sort_strings",
    "sort_urls_by_path",
]
