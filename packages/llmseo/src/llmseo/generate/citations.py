"""``citations.json`` source index."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Sequence

from ..canonical.locale import select_canonical_locale
from ..canonical.sections import CanonicalEntry, section_default_locale
from ..config.model import LlmSeoConfig, ManifestItem
from ..normalize.sort import locale_key
from ..normalize.text import normalize_line_endings

CITATIONS_VERSION = "1.0"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _source(config: LlmSeoConfig, item: ManifestItem, url: str, section: str, default_locale: str) -> dict[str, Any]:
    source: dict[str, Any] = {
        "url": url,
        "priority": item.priority,
        "section": section,
        "locale": select_canonical_locale(default_locale, item.locales) or default_locale,
    }
    if item.published_at:
        source["publishedAt"] = item.published_at
    if item.updated_at:
        source["updatedAt"] = item.updated_at
    if item.title:
        source["title"] = item.title
    return source


def create_citations_json(
    config: LlmSeoConfig,
    manifest_items: Sequence[ManifestItem],
    entries: Sequence[CanonicalEntry] | None = None,
    section_name: str = "all",
    fixed_timestamp: str | None = None,
) -> dict[str, Any]:
    if entries:
        sources = [
            _source(
                config,
                entry.item,
                entry.canonical_url,
                entry.section_name,
                section_default_locale(config, entry.section_key),
            )
            for entry in entries
        ]
    else:
        default_locale = config.default_locale()
        sources = [
            _source(config, item, item.canonical_override or f"{config.site.base_url}{item.slug}", section_name, default_locale)
            for item in manifest_items
        ]
    sources.sort(key=lambda source: (-source["priority"], locale_key(source["url"])))

    policy: dict[str, Any] = {"restrictedClaimsEnabled": bool(config.restricted_claims and config.restricted_claims.enable)}
    if config.policy and config.policy.geo_policy:
        policy["geoPolicy"] = config.policy.geo_policy
    if config.policy and config.policy.citation_rules:
        policy["citationRules"] = config.policy.citation_rules

    return {
        "version": CITATIONS_VERSION,
        "generated": fixed_timestamp or utc_timestamp(),
        "site": {"baseUrl": config.site.base_url, "name": config.brand.name},
        "sources": sources,
        "policy": policy,
    }


def render_citations(payload: dict[str, Any], line_endings: str = "lf") -> str:
    return normalize_line_endings(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", line_endings)  # type: ignore[arg-type]


def create_citations_json_string(
    config: LlmSeoConfig,
    manifest_items: Sequence[ManifestItem],
    entries: Sequence[CanonicalEntry] | None = None,
    section_name: str = "all",
    fixed_timestamp: str | None = None,
) -> str:
    payload = create_citations_json(config, manifest_items, entries, section_name, fixed_timestamp)
    return render_citations(payload, config.format.line_endings)


__all__ = [
    "CITATIONS_VERSION",
    "create_citations_json",
    "create_citations_json_string",
    "render_citations",
    "utc_timestamp",
]
