"""URL normalization for canonical output."""

from __future__ import annotations

import re
from typing import Iterable, Literal
from urllib.parse import SplitResult, urlsplit

from ..errors import invalid_base_url
from .sort import sort_strings

TrailingSlashPolicy = Literal["always", "never", "preserve"]

_SLASH_RUN = re.compile(r"/{2,}")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_path(path: str, preserve_trailing_slash: bool = False) -> str:
    if not path or path == "/":
        return "/"
    had_trailing_slash = path.endswith("/")
    normalized = path if path.startswith("/") else f"/{path}"
    normalized = _SLASH_RUN.sub("/", normalized)
    segments: list[str] = []
    for part in normalized.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    result = "/" + "/".join(segments)
    if preserve_trailing_slash and had_trailing_slash and result != "/":
        result += "/"
    return result


def join_url_parts(*parts: str) -> str:
    cleaned = [part.strip("/") for part in parts if part]
    joined = "/".join(part for part in cleaned if part)
    return f"/{joined}" if joined else "/"


def is_valid_absolute_url(url: object) -> bool:
    if not isinstance(url, str) or not url:
        return False
    try:
        parsed = urlsplit(url)
        parsed.port  # raises on a malformed port
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


def _parse_base(base_url: str) -> tuple[SplitResult, int | None]:
    try:
        parsed = urlsplit(base_url.strip())
        port = parsed.port
    except (AttributeError, ValueError) as exc:
        raise invalid_base_url(base_url) from exc
    if not parsed.scheme or not parsed.hostname:
        raise invalid_base_url(base_url)
    return parsed, port


def _authority(scheme: str, hostname: str, port: int | None) -> str:
    host = hostname.lower()
    if ":" in host:
        host = f"[{host}]"
    if port is not None and _DEFAULT_PORTS.get(scheme) != port:
        host = f"{host}:{port}"
    return host


def normalize_url(
    base_url: str,
    path: str,
    trailing_slash: TrailingSlashPolicy,
    strip_query: bool = True,
    strip_hash: bool = True,
) -> str:
    base, port = _parse_base(base_url)
    scheme = base.scheme.lower()

    raw_path, _, path_fragment = path.partition("#")
    raw_path, _, path_query = raw_path.partition("?")

    final_path = normalize_path(raw_path, preserve_trailing_slash=trailing_slash == "preserve")
    if trailing_slash == "always" and not final_path.endswith("/"):
        final_path = f"{final_path}/"
    elif trailing_slash == "never" and final_path != "/" and final_path.endswith("/"):
        final_path = final_path[:-1]

    url = f"{scheme}://{_authority(scheme, base.hostname or '', port)}{final_path}"
    if not strip_query:
        query = path_query or base.query
        if query:
            url += f"?{query}"
    if not strip_hash:
        fragment = path_fragment or base.fragment
        if fragment:
            url += f"#{fragment}"
    return url


def with_locale_subdomain(base_url: str, locale: str) -> str:
    base, port = _parse_base(base_url)
    scheme = base.scheme.lower()
    return f"{scheme}://{locale}.{_authority(scheme, base.hostname or '', port)}"


def sort_urls(urls: Iterable[str]) -> list[str]:
    return sort_strings(urls)


__all__ = [
    "TrailingSlashPolicy",
    "is_valid_absolute_url",
    "join_url_parts",
    "normalize_path",
    "normalize_url",
    "sort_urls",
    "with_locale_subdomain",
]
