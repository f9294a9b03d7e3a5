"""Canonical URL construction for a single manifest item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from ..config.model import LocaleStrategy, ManifestItem, PathnameArgs, PathnameFor, RouteStyle, TrailingSlash
from ..normalize.sort import sort_urls_by_path
from ..normalize.url import join_url_parts, normalize_url, with_locale_subdomain
from .locale import select_canonical_locale


@dataclass(frozen=True)
class CanonicalOptions:
    base_url: str
    default_locale: str
    trailing_slash: TrailingSlash = "never"
    locale_strategy: LocaleStrategy = "prefix"
    route_style: RouteStyle | None = None
    section_name: str = ""
    section_path: str | None = None
    pathname_for: PathnameFor | None = None


@dataclass(frozen=True)
class RouteParts:
    section_path: str
    slug: str
    locale: str
    default_locale: str

    @property
    def localized(self) -> bool:
        return self.locale != self.default_locale


def _prefix(parts: RouteParts) -> str:
    if parts.localized:
        return join_url_parts(parts.locale, parts.section_path, parts.slug)
    return join_url_parts(parts.section_path, parts.slug)


def _suffix(parts: RouteParts) -> str:
    if parts.localized:
        return join_url_parts(parts.section_path, parts.slug, parts.locale)
    return join_url_parts(parts.section_path, parts.slug)


def _locale_segment(parts: RouteParts) -> str:
    return join_url_parts(parts.section_path, parts.locale, parts.slug)


def _unlocalized(parts: RouteParts) -> str:
    return join_url_parts(parts.section_path, parts.slug)


ROUTE_BUILDERS: Mapping[RouteStyle, Callable[[RouteParts], str]] = {
    RouteStyle.PREFIX: _prefix,
    RouteStyle.SUFFIX: _suffix,
    RouteStyle.LOCALE_SEGMENT: _locale_segment,
    RouteStyle.CUSTOM: _unlocalized,
}


def normalize_section_path(section_path: str | None) -> str:
    if not section_path or section_path == "/":
        return ""
    return section_path if section_path.startswith("/") else f"/{section_path}"


def normalize_item_slug(slug: str, section_path: str) -> str:
    normalized = slug if slug.startswith("/") else f"/{slug}"
    if not section_path:
        return normalized
    if normalized == section_path:
        return "/"
    with_slash = f"{section_path}/"
    if normalized.startswith(with_slash):
        relative = normalized[len(with_slash) :]
        return f"/{relative}" if relative else "/"
    return normalized


def infer_route_style(locale_strategy: LocaleStrategy) -> RouteStyle:
    return RouteStyle.PREFIX if locale_strategy == "prefix" else RouteStyle.CUSTOM


def create_canonical_url_for_item(item: ManifestItem, options: CanonicalOptions) -> str:
    if item.canonical_override:
        return item.canonical_override

    default_locale = options.default_locale
    available = item.locales if item.locales is not None else (default_locale,)
    locale = select_canonical_locale(default_locale, available) or default_locale

    section_path = normalize_section_path(options.section_path)
    slug = normalize_item_slug(item.slug, section_path)
    route_style = options.route_style or infer_route_style(options.locale_strategy)
    on_subdomain = options.locale_strategy == "subdomain" and locale != default_locale

    path: str | None = None
    if route_style is RouteStyle.CUSTOM and options.pathname_for is not None:
        path = options.pathname_for(
            PathnameArgs(
                item=item,
                section_name=options.section_name,
                slug=slug,
                locale=locale,
                default_locale=default_locale,
                section_path=section_path,
            )
        )
    if path is None:
        # The subdomain carries the locale, so the path stays unlocalized.
        path_locale = default_locale if on_subdomain else locale
        path = ROUTE_BUILDERS[route_style](RouteParts(section_path, slug, path_locale, default_locale))

    base_url = with_locale_subdomain(options.base_url, locale) if on_subdomain else options.base_url
    return normalize_url(base_url, path, options.trailing_slash, strip_query=True, strip_hash=True)


def dedupe_urls(urls: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(urls))


def create_canonical_urls_from_manifest(items: Iterable[ManifestItem], options: CanonicalOptions) -> list[str]:
    urls = [create_canonical_url_for_item(item, options) for item in items]
    return sort_urls_by_path(dedupe_urls(urls))


__all__ = [
    "CanonicalOptions",
    "ROUTE_BUILDERS",
    "RouteParts",
    "create_canonical_url_for_item",
    "create_canonical_urls_from_manifest",
    "dedupe_urls",
    "infer_route_style",
    "normalize_item_slug",
    "normalize_section_path",
]
