from __future__ import annotations

from .builder import (
    CanonicalOptions,
    ROUTE_BUILDERS,
    create_canonical_url_for_item,
    create_canonical_urls_from_manifest,
    dedupe_urls,
)
from .locale import extract_all_locales, is_locale_available, select_canonical_locale
from .sections import (
    CanonicalBundle,
    CanonicalEntry,
    ResolvedSection,
    create_canonical_bundle,
    resolve_manifest_sections,
    section_default_locale,
)

__all__ = [
    "CanonicalBundle",
    "CanonicalEntry",
    "CanonicalOptions",
    "ROUTE_BUILDERS",
    "ResolvedSection",
    "create_canonical_bundle",
    "create_canonical_url_for_item",
    "create_canonical_urls_from_manifest",
    "dedupe_urls",
    "extract_all_locales",
    "is_locale_available",
    "resolve_manifest_sections",
    "section_default_locale",
    "select_canonical_locale",
]
