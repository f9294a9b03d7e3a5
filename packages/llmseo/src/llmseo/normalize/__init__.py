from __future__ import annotations

from .sort import compare_strings, count_path_segments, locale_key, sort_by, sort_strings, sort_urls_by_path
from .text import normalize_line_endings, normalize_line_whitespace, normalize_whitespace
from .url import is_valid_absolute_url, join_url_parts, normalize_path, normalize_url, sort_urls

__all__ = [
    "compare_strings",
    "count_path_segments",
    "is_valid_absolute_url",
    "join_url_parts",
    "locale_key",
    "normalize_line_endings",
    "normalize_line_whitespace",
    "normalize_path",
    "normalize_url",
    "normalize_whitespace",
    "sort_by",
    "sort_strings",
    "sort_urls",
    "sort_urls_by_path",
]
