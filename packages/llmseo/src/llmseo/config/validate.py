"""Semantic rules that a schema-valid configuration must also satisfy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from ..normalize.url import is_valid_absolute_url
from .model import ContactConfig, LlmSeoConfig, ManifestItem, ManifestSectionConfig, RestrictedClaimsConfig, RouteStyle

IssueSeverity = Literal["error", "warning"]


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    code: str
    message: str
    severity: IssueSeverity = "error"

    def render(self) -> str:
        return f"{self.path or '(root)'}: {self.message}"


def _section_items(value: object) -> tuple[ManifestItem, ...]:
    return value.items if isinstance(value, ManifestSectionConfig) else tuple(value)  # type: ignore[arg-type]


def validate_base_url(base_url: str) -> list[ValidationIssue]:
    if not is_valid_absolute_url(base_url):
        return [ValidationIssue("site.baseUrl", "invalid_base_url", "Must be a valid URL with http or https protocol")]
    if base_url.endswith("/"):
        return [ValidationIssue("site.baseUrl", "invalid_base_url", "Base URL must not have a trailing slash")]
    return []


def validate_default_locale(default_locale: str | None, locales: tuple[str, ...]) -> list[ValidationIssue]:
    if default_locale and default_locale not in locales:
        return [
            ValidationIssue(
                "site.defaultLocale",
                "invalid_default_locale",
                f'Default locale "{default_locale}" must exist in brand.locales [{", ".join(locales)}]',
            )
        ]
    return []


def validate_hub_paths(hubs: Iterable[str]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for index, hub in enumerate(hubs):
        if not hub:
            continue
        path = f"sections.hubs.{index}"
        if not hub.startswith("/"):
            issues.append(ValidationIssue(path, "invalid_hub_path", f'Hub path "{hub}" must start with a leading slash (/)'))
        if "//" in hub:
            issues.append(ValidationIssue(path, "invalid_hub_path", f'Hub path "{hub}" contains double slashes (//)'))
        if "?" in hub:
            issues.append(ValidationIssue(path, "invalid_hub_path", f'Hub path "{hub}" must not contain query strings (?)'))
        if "#" in hub:
            issues.append(ValidationIssue(path, "invalid_hub_path", f'Hub path "{hub}" must not contain hashes (#)'))
    return issues


def validate_duplicate_hubs(hubs: Iterable[str]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    seen: dict[str, int] = {}
    for index, hub in enumerate(hubs):
        if hub in seen:
            issues.append(
                ValidationIssue(
                    f"sections.hubs.{index}",
                    "duplicate_hub",
                    f'Hub path "{hub}" is listed more than once (first at index {seen[hub]})',
                    severity="warning",
                )
            )
        else:
            seen[hub] = index
    return issues


def validate_restricted_claims(claims: RestrictedClaimsConfig | None) -> list[ValidationIssue]:
    if claims is None or not claims.enable or any(claims.forbidden):
        return []
    return [
        ValidationIssue(
            "policy.restrictedClaims.forbidden",
            "empty_forbidden_terms",
            "Restricted claims are enabled but no forbidden terms are listed",
            severity="warning",
        )
    ]


def validate_manifest_items(config: LlmSeoConfig) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for name, value in config.manifests.items():
        seen: dict[str, int] = {}
        for index, item in enumerate(_section_items(value)):
            path = f"manifests.{name}.{index}"
            if not item.slug:
                issues.append(ValidationIssue(path, "empty_slug", "Manifest item slug cannot be empty"))
                continue
            for locale in item.locales if item.locales is not None else ("",):
                key = f"{item.slug}:{locale}"
                if key in seen:
                    issues.append(
                        ValidationIssue(
                            path,
                            "duplicate_manifest_item",
                            f'Duplicate manifest item with slug "{item.slug}" and locale "{locale or "default"}" '
                            f"(first occurrence at index {seen[key]})",
                        )
                    )
                else:
                    seen[key] = index
    return issues


def _slug_issues(name: str, index: int, item: ManifestItem, section: ManifestSectionConfig, locales: set[str], default_locale: str) -> list[ValidationIssue]:
    slug = item.slug
    path = f"manifests.{name}.items.{index}.slug"
    segments = [segment for segment in slug.split("/") if segment]
    first = segments[0] if segments else ""
    last = segments[-1] if segments else ""
    issues: list[ValidationIssue] = []
    section_path = section.section_path
    if section_path and (slug == section_path or slug.startswith(f"{section_path}/")):
        issues.append(
            ValidationIssue(
                path,
                "incompatible_slug",
                f'Slug "{slug}" already includes sectionPath "{section_path}". Use section-relative slug like "/post".',
            )
        )
    style = section.route_style
    if style is RouteStyle.PREFIX and first in locales and first != default_locale:
        issues.append(
            ValidationIssue(
                path,
                "incompatible_slug",
                f'Slug "{slug}" appears locale-prefixed for routeStyle "prefix". Provide section-relative slug without locale segment.',
            )
        )
    if style is RouteStyle.LOCALE_SEGMENT and first in locales:
        issues.append(
            ValidationIssue(
                path,
                "incompatible_slug",
                f'Slug "{slug}" includes locale segment but routeStyle "locale-segment" generates locale automatically.',
            )
        )
    if style is RouteStyle.SUFFIX and last in locales and last != default_locale:
        issues.append(
            ValidationIssue(
                path,
                "incompatible_slug",
                f'Slug "{slug}" includes locale suffix but routeStyle "suffix" generates locale suffix automatically.',
            )
        )
    return issues


def validate_section_options(config: LlmSeoConfig) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    brand_locales = config.brand.locales
    locale_set = set(brand_locales)
    for name, value in config.manifests.items():
        if not isinstance(value, ManifestSectionConfig):
            continue
        override = value.default_locale_override
        if override and override not in locale_set:
            issues.append(
                ValidationIssue(
                    f"manifests.{name}.defaultLocaleOverride",
                    "invalid_default_locale_override",
                    f'defaultLocaleOverride "{override}" must exist in brand.locales [{", ".join(brand_locales)}]',
                )
            )
        section_path = value.section_path
        if section_path:
            if not section_path.startswith("/"):
                issues.append(
                    ValidationIssue(f"manifests.{name}.sectionPath", "invalid_section_path", f'sectionPath "{section_path}" must start with "/"')
                )
            if any(token in section_path for token in ("?", "#", "//")):
                issues.append(
                    ValidationIssue(
                        f"manifests.{name}.sectionPath",
                        "invalid_section_path",
                        f'sectionPath "{section_path}" must not contain query/hash/double-slash',
                    )
                )
        if value.route_style is RouteStyle.CUSTOM and value.pathname_for is None and not value.pathname_for_ref:
            issues.append(
                ValidationIssue(f"manifests.{name}.pathnameFor", "missing_custom_pathname", 'pathnameFor is required when routeStyle is "custom"')
            )
        if value.route_style is RouteStyle.LOCALE_SEGMENT and not section_path:
            issues.append(
                ValidationIssue(
                    f"manifests.{name}.sectionPath",
                    "missing_section_path",
                    'sectionPath is required when routeStyle is "locale-segment"',
                )
            )
        default_locale = config.default_locale(override)
        for index, item in enumerate(value.items):
            if item.slug:
                issues.extend(_slug_issues(name, index, item, value, locale_set, default_locale))
    return issues


def validate_contact(contact: ContactConfig | None) -> list[ValidationIssue]:
    if contact is None:
        return []
    if contact.email or (contact.social is not None and contact.social.any):
        return []
    return [ValidationIssue("contact", "missing_contact", "At least email or one social field (twitter, linkedin, github) is required")]


def validate_config(config: LlmSeoConfig) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    issues.extend(validate_base_url(config.site.base_url))
    issues.extend(validate_default_locale(config.site.default_locale, config.brand.locales))
    issues.extend(validate_hub_paths(config.hubs))
    issues.extend(validate_duplicate_hubs(config.hubs))
    issues.extend(validate_manifest_items(config))
    issues.extend(validate_section_options(config))
    issues.extend(validate_contact(config.contact))
    issues.extend(validate_restricted_claims(config.restricted_claims))
    return issues


def format_validation_issues(issues: Iterable[ValidationIssue]) -> str:
    lines = ["Validation failed:", ""]
    lines.extend(f"  - {issue.render()}" for issue in issues)
    return "\n".join(lines)


__all__ = [
    "ValidationIssue",
    "format_validation_issues",
    "validate_base_url",
    "validate_config",
    "validate_contact",
    "validate_default_locale",
    "validate_duplicate_hubs",
    "validate_hub_paths",
    "validate_manifest_items",
    "validate_restricted_claims",
    "validate_section_options",
]
