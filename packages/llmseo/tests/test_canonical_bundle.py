from __future__ import annotations

from typing import Any

from llmseo.canonical.sections import create_canonical_bundle, resolve_manifest_sections
from llmseo.config.model import LlmSeoConfig, RouteStyle


def test_sections_resolved_in_key_order_with_slash_prefixed_slugs(sample_raw: dict[str, Any]) -> None:
    sample_raw["manifests"]["about"] = [{"slug": "about"}]
    sections = resolve_manifest_sections(LlmSeoConfig.from_mapping(sample_raw))
    assert [section.key for section in sections] == ["about", "blog", "services"]
    about, blog, services = sections
    assert about.items[0].slug == "/about"
    assert about.route_style is None
    assert blog.section_path == "/blog"
    assert blog.route_style is RouteStyle.PREFIX
    assert services.section_name == "services"


def test_bundle_urls_entries_and_items(sample_config: LlmSeoConfig) -> None:
    bundle = create_canonical_bundle(sample_config)
    assert bundle.canonical_urls == ("https://example.com/services/web", "https://example.com/de/blog/post")
    assert [entry.section_key for entry in bundle.entries] == ["blog", "services"]
    assert [item.slug for item in bundle.manifest_items] == ["/post", "/services/web"]
    assert bundle.entries[0].canonical_url == "https://example.com/de/blog/post"


def test_bundle_is_independent_of_declaration_order(sample_raw: dict[str, Any]) -> None:
    forward = create_canonical_bundle(LlmSeoConfig.from_mapping(sample_raw))
    sample_raw["manifests"] = dict(reversed(list(sample_raw["manifests"].items())))
    backward = create_canonical_bundle(LlmSeoConfig.from_mapping(sample_raw))
    assert forward == backward


def test_duplicate_urls_collapse_in_url_list(sample_raw: dict[str, Any]) -> None:
    sample_raw["manifests"]["mirror"] = [{"slug": "/services/web", "locales": ["en"]}]
    bundle = create_canonical_bundle(LlmSeoConfig.from_mapping(sample_raw))
    assert bundle.canonical_urls.count("https://example.com/services/web") == 1
    assert len(bundle.entries) == 3


def test_section_default_locale_override(sample_raw: dict[str, Any]) -> None:
    sample_raw["manifests"]["blog"]["defaultLocaleOverride"] = "de"
    bundle = create_canonical_bundle(LlmSeoConfig.from_mapping(sample_raw))
    assert "https://example.com/blog/post" in bundle.canonical_urls


def test_calling_twice_gives_identical_bundles(sample_config: LlmSeoConfig) -> None:
    assert create_canonical_bundle(sample_config) == create_canonical_bundle(sample_config)
