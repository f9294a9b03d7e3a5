"""Canonical locale selection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..normalize.sort import sort_strings

if TYPE_CHECKING:
    from ..config.model import ManifestItem


def _valid_locales(locales: Iterable[object] | None) -> list[str]:
    if not locales:
        return []
    return [locale for locale in locales if isinstance(locale, str) and locale]


def select_canonical_locale(default_locale: str, available_locales: Iterable[object] | None) -> str | None:
    """Pick one locale for an item.

    The default locale wins when available; otherwise the first locale in sorted
    order. Returns ``None`` when nothing usable is available so the caller can fall
    back to the default without recording an explicit selection.
    """
    valid = _valid_locales(available_locales)
    if not valid:
        return None
    if default_locale and default_locale in valid:
        return default_locale
    return sort_strings(valid)[0]


def is_locale_available(locale: str, available_locales: Iterable[object] | None) -> bool:
    if not locale:
        return False
    return locale in _valid_locales(available_locales)


def extract_all_locales(items: Iterable[ManifestItem]) -> list[str]:
    seen: set[str] = set()
    for item in items:
        seen.update(_valid_locales(item.locales))
    return sort_strings(seen)


__all__ = ["extract_all_locales", "is_locale_available", "select_canonical_locale"]
