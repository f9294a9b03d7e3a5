from __future__ import annotations

from typing import Any

from llmseo.canonical.sections import create_canonical_bundle
from llmseo.config.model import LlmSeoConfig, ManifestItem
from llmseo.generate.citations import create_citations_json
from llmseo.generate.llms_full_txt import create_llms_full_txt, last_updated_date

EXPECTED = """\
# Example Co - Full LLM Context

> Build things

We build things.

Organization: Example Org
Locales: en, de
Last Updated: 2024-03-01

## All Canonical URLs

- https://example.com/de/blog/post
- https://example.com/services/web

## Policies

### GEO Policy
EU only

### Citation Rules
Cite the canonical URL

### Restricted Claims
Status: Enabled
Forbidden terms: guaranteed

## Contact

- Email: hi@example.com
- GitHub: https://github.com/example
- Booking: https://cal.com/example (Book a call)

## Machine Hints

- robots.txt: https://example.com/robots.txt
- sitemap.xml: https://example.com/sitemap.xml

## Sitemap

- [/blog](/blog) - Blog posts
- [/case-studies](/case-studies) - Case Studies
- [/services](/services) - Services overview
- [Post](https://example.com/de/blog/post) (de)
- [Web](https://example.com/services/web) (en, de)
"""


def test_full_context_document(sample_config: LlmSeoConfig) -> None:
    bundle = create_canonical_bundle(sample_config)
    artifact = create_llms_full_txt(sample_config, bundle.canonical_urls, bundle.manifest_items, bundle.entries)
    assert artifact.content == EXPECTED


def test_sitemap_without_entries_uses_override_or_base_plus_slug(sample_raw: dict[str, Any]) -> None:
    sample_raw["sections"] = {"hubs": []}
    config = LlmSeoConfig.from_mapping(sample_raw)
    items = [
        ManifestItem(slug="/b", title="Bee"),
        ManifestItem(slug="/a", canonical_override="https://cdn.example.com/a", locales=("de",)),
    ]
    content = create_llms_full_txt(config, [], items).content
    sitemap = content.split("## Sitemap\n\n", 1)[1].splitlines()
    assert sitemap[0] == "- [/a](https://cdn.example.com/a) (de)"
    assert sitemap[1] == "- [Bee](https://example.com/b) (en)"


def test_last_updated_prefers_updated_then_published_and_skips_garbage() -> None:
    items = [
        ManifestItem(slug="/a", published_at="2024-01-01T00:00:00Z"),
        ManifestItem(slug="/b", updated_at="not a date", published_at="2025-01-01"),
        ManifestItem(slug="/c", updated_at="2024-06-30T23:30:00-02:00"),
    ]
    assert last_updated_date(items) == "2024-07-01"
    assert last_updated_date([ManifestItem(slug="/x")]) is None


def test_sitemap_locale_follows_section_override(sample_raw: dict[str, Any]) -> None:
    sample_raw["manifests"]["blog"]["defaultLocaleOverride"] = "de"
    del sample_raw["manifests"]["blog"]["items"][0]["locales"]
    config = LlmSeoConfig.from_mapping(sample_raw)
    bundle = create_canonical_bundle(config)
    content = create_llms_full_txt(config, bundle.canonical_urls, bundle.manifest_items, bundle.entries).content
    assert "- [Post](https://example.com/blog/post) (de)\n" in content
    sources = create_citations_json(config, bundle.manifest_items, bundle.entries, fixed_timestamp="x")["sources"]
    assert [source["locale"] for source in sources if source["section"] == "blog"] == ["de"]
