from __future__ import annotations

import pytest

from llmseo.errors import InvalidBaseUrl, ScriptError
from llmseo.exit_codes import ERR_INVALID_CONFIG
from llmseo.normalize.url import (
    is_valid_absolute_url,
    join_url_parts,
    normalize_path,
    normalize_url,
    with_locale_subdomain,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", "/"),
        ("/", "/"),
        ("blog", "/blog"),
        ("//blog///post", "/blog/post"),
        ("/blog/./post", "/blog/post"),
        ("/blog/../about", "/about"),
        ("/../../x", "/x"),
        ("/blog/", "/blog"),
    ],
)
def test_normalize_path(raw: str, expected: str) -> None:
    assert normalize_path(raw) == expected


def test_normalize_path_preserves_trailing_slash_on_request() -> None:
    assert normalize_path("/blog/", preserve_trailing_slash=True) == "/blog/"
    assert normalize_path("/blog", preserve_trailing_slash=True) == "/blog"


def test_join_url_parts() -> None:
    assert join_url_parts("/de/", "/blog/", "post") == "/de/blog/post"
    assert join_url_parts("", "/", "") == "/"


def test_normalize_url_lowercases_host_and_drops_default_port() -> None:
    assert normalize_url("HTTPS://Example.COM:443", "/a//b/", "never") == "https://example.com/a/b"
    assert normalize_url("http://example.com:80", "/a", "never") == "http://example.com/a"
    assert normalize_url("https://example.com:8443", "/a", "never") == "https://example.com:8443/a"


@pytest.mark.parametrize(
    ("policy", "path", "expected"),
    [
        ("always", "/a", "https://example.com/a/"),
        ("always", "/", "https://example.com/"),
        ("never", "/a/", "https://example.com/a"),
        ("never", "/", "https://example.com/"),
        ("preserve", "/a/", "https://example.com/a/"),
        ("preserve", "/a", "https://example.com/a"),
    ],
)
def test_trailing_slash_policy(policy: str, path: str, expected: str) -> None:
    assert normalize_url("https://example.com", path, policy) == expected  # type: ignore[arg-type]


def test_query_and_fragment_are_stripped_by_default() -> None:
    assert normalize_url("https://example.com", "/a?x=1#top", "never") == "https://example.com/a"


def test_query_and_fragment_kept_when_requested() -> None:
    url = normalize_url("https://example.com?ref=base", "/a?x=1#top", "never", strip_query=False, strip_hash=False)
    assert url == "https://example.com/a?x=1#top"


def test_base_url_path_is_not_carried_over() -> None:
    assert normalize_url("https://example.com/root", "/a", "never") == "https://example.com/a"


@pytest.mark.parametrize("base", ["not a url", "/relative/path", "https://", "https://example.com:notaport"])
def test_invalid_base_url_raises(base: str) -> None:
    with pytest.raises(InvalidBaseUrl) as excinfo:
        normalize_url(base, "/a", "never")
    assert isinstance(excinfo.value, ScriptError)
    assert excinfo.value.code == ERR_INVALID_CONFIG
    assert excinfo.value.kind == "invalid_base_url"


def test_is_valid_absolute_url() -> None:
    assert is_valid_absolute_url("https://example.com")
    assert is_valid_absolute_url("http://localhost:3000/x")
    assert not is_valid_absolute_url("ftp://example.com")
    assert not is_valid_absolute_url("example.com")
    assert not is_valid_absolute_url("")
    assert not is_valid_absolute_url(None)


def test_with_locale_subdomain() -> None:
    assert with_locale_subdomain("https://Example.com:443/path", "de") == "https://de.example.com"
