"""Extended ``llms-full.txt`` rendering."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence

from ..canonical.sections import CanonicalEntry, section_default_locale
from ..config.model import LlmSeoConfig, ManifestItem
from ..normalize.sort import sort_by
from ..normalize.url import sort_urls
from .artifact import GeneratedArtifact
from .sections import block, brand_header, contact_lines, hub_lines, machine_hint_lines


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 date or datetime; naive values are read as UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def last_updated_date(items: Iterable[ManifestItem]) -> str | None:
    latest: datetime | None = None
    for item in items:
        raw = item.updated_at or item.published_at
        if not raw:
            continue
        parsed = parse_timestamp(raw)
        if parsed is not None and (latest is None or parsed > latest):
            latest = parsed
    return latest.astimezone(timezone.utc).date().isoformat() if latest else None


def _policy_lines(config: LlmSeoConfig) -> list[str]:
    policy = config.policy
    if policy is None:
        return []
    lines: list[str] = []
    if policy.geo_policy:
        lines += ["### GEO Policy", policy.geo_policy, ""]
    if policy.citation_rules:
        lines += ["### Citation Rules", policy.citation_rules, ""]
    claims = policy.restricted_claims
    if claims is not None:
        lines += ["### Restricted Claims", f"Status: {'Enabled' if claims.enable else 'Disabled'}"]
        if claims.forbidden:
            lines.append(f"Forbidden terms: {', '.join(claims.forbidden)}")
        if claims.whitelist:
            lines.append(f"Exceptions: {', '.join(claims.whitelist)}")
        lines.append("")
    return lines


def _locales_label(config: LlmSeoConfig, item: ManifestItem, section_key: str | None = None) -> str:
    if item.locales is not None:
        return ", ".join(item.locales)
    return section_default_locale(config, section_key)


def _sitemap_lines(
    config: LlmSeoConfig,
    manifest_items: Sequence[ManifestItem],
    entries: Sequence[CanonicalEntry] | None,
) -> list[str]:
    lines = hub_lines(config.hubs)
    if entries:
        for entry in sort_by(entries, lambda e: f"{e.item.slug}|{e.canonical_url}"):
            title = entry.item.title or entry.item.slug
            lines.append(f"- [{title}]({entry.canonical_url}) ({_locales_label(config, entry.item, entry.section_key)})")
    else:
        for item in sort_by(manifest_items, lambda i: i.slug):
            url = item.canonical_override or f"{config.site.base_url}{item.slug}"
            lines.append(f"- [{item.title or item.slug}]({url}) ({_locales_label(config, item)})")
    return lines


def create_llms_full_txt(
    config: LlmSeoConfig,
    canonical_urls: Iterable[str],
    manifest_items: Sequence[ManifestItem],
    entries: Sequence[CanonicalEntry] | None = None,
) -> GeneratedArtifact:
    """Render the full context document.

    ``entries`` carries resolved canonical URLs for the sitemap block; without it the
    sitemap falls back to each item's override or ``baseUrl + slug``.
    """
    urls = list(canonical_urls)
    lines = brand_header(config, f"{config.brand.name} - Full LLM Context")
    if config.brand.org:
        lines.append(f"Organization: {config.brand.org}")
    lines.append(f"Locales: {', '.join(config.brand.locales)}")
    updated = last_updated_date(manifest_items)
    if updated:
        lines.append(f"Last Updated: {updated}")
    lines.append("")

    if urls:
        lines += block("## All Canonical URLs", [f"- {url}" for url in sort_urls(urls)])
    policy_lines = _policy_lines(config)
    if policy_lines:
        lines += ["## Policies", "", *policy_lines]
    contact = contact_lines(config)
    if contact:
        lines += block("## Contact", contact)
    hint_lines = machine_hint_lines(config)
    if hint_lines:
        lines += block("## Machine Hints", hint_lines)
    if config.hubs or manifest_items:
        lines += block("## Sitemap", _sitemap_lines(config, manifest_items, entries))
    return GeneratedArtifact.from_lines(lines, config.format.line_endings)


__all__ = ["create_llms_full_txt", "last_updated_date", "parse_timestamp"]
