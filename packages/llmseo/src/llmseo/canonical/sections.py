"""Manifest section resolution and canonical bundle assembly."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..config.model import LlmSeoConfig, ManifestItem, ManifestSectionConfig, ManifestValue, PathnameFor, RouteStyle
from ..normalize.sort import locale_key, sort_by, sort_urls_by_path
from .builder import CanonicalOptions, create_canonical_url_for_item, dedupe_urls


@dataclass(frozen=True)
class ResolvedSection:
    key: str
    section_name: str
    items: tuple[ManifestItem, ...]
    section_path: str | None = None
    route_style: RouteStyle | None = None
    default_locale_override: str | None = None
    pathname_for: PathnameFor | None = None


@dataclass(frozen=True)
class CanonicalEntry:
    section_key: str
    section_name: str
    item: ManifestItem
    canonical_url: str


@dataclass(frozen=True)
class CanonicalBundle:
    canonical_urls: tuple[str, ...]
    manifest_items: tuple[ManifestItem, ...]
    entries: tuple[CanonicalEntry, ...]


def _with_leading_slash(items: tuple[ManifestItem, ...]) -> tuple[ManifestItem, ...]:
    return tuple(item if item.slug.startswith("/") else replace(item, slug=f"/{item.slug}") for item in items)


def resolve_section(key: str, value: ManifestValue) -> ResolvedSection:
    if not isinstance(value, ManifestSectionConfig):
        return ResolvedSection(key=key, section_name=key, items=_with_leading_slash(tuple(value)))
    return ResolvedSection(
        key=key,
        section_name=value.section_name or key,
        items=_with_leading_slash(value.items),
        section_path=value.section_path or None,
        route_style=value.route_style,
        default_locale_override=value.default_locale_override or None,
        pathname_for=value.pathname_for,
    )


def resolve_manifest_sections(config: LlmSeoConfig) -> list[ResolvedSection]:
    keys = sorted(config.manifests, key=locale_key)
    return [resolve_section(key, config.manifests[key]) for key in keys]


def section_default_locale(config: LlmSeoConfig, section_key: str | None) -> str:
    """Default locale for one manifest section, honouring ``defaultLocaleOverride``."""
    section = config.manifests.get(section_key) if section_key else None
    override = section.default_locale_override if isinstance(section, ManifestSectionConfig) else None
    return config.default_locale(override)


def create_canonical_bundle(config: LlmSeoConfig) -> CanonicalBundle:
    """Resolve every manifest section into one deduplicated, ordered bundle.

    Items are ordered per section by ``slug|locales`` before resolution and entries are
    re-ordered globally by ``url|section|slug``, so the result does not depend on the
    order sections or items were declared in.
    """
    entries: list[CanonicalEntry] = []
    for section in resolve_manifest_sections(config):
        options = CanonicalOptions(
            base_url=config.site.base_url,
            default_locale=section_default_locale(config, section.key),
            trailing_slash=config.format.trailing_slash,
            locale_strategy=config.format.locale_strategy,
            route_style=section.route_style,
            section_name=section.section_name,
            section_path=section.section_path,
            pathname_for=section.pathname_for,
        )
        for item in sort_by(section.items, lambda item: f"{item.slug}|{item.locales_key}"):
            entries.append(
                CanonicalEntry(
                    section_key=section.key,
                    section_name=section.section_name,
                    item=item,
                    canonical_url=create_canonical_url_for_item(item, options),
                )
            )

    ordered = sort_by(entries, lambda entry: f"{entry.canonical_url}|{entry.section_key}|{entry.item.slug}")
    urls = sort_urls_by_path(dedupe_urls(entry.canonical_url for entry in ordered))
    return CanonicalBundle(
        canonical_urls=tuple(urls),
        manifest_items=tuple(entry.item for entry in ordered),
        entries=tuple(ordered),
    )


__all__ = [
    "CanonicalBundle",
    "CanonicalEntry",
    "ResolvedSection",
    "create_canonical_bundle",
    "resolve_manifest_sections",
    "resolve_section",
    "section_default_locale",
]
