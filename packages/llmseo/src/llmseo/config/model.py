"""Typed view over a site description.

Raw configuration arrives as camelCase mappings (YAML/JSON or a Python dict);
``LlmSeoConfig.from_mapping`` turns it into frozen dataclasses. The model assumes the
mapping already passed schema validation and only normalizes shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Literal, Mapping, Union

TrailingSlash = Literal["always", "never", "preserve"]
LineEndings = Literal["lf", "crlf"]
LocaleStrategy = Literal["prefix", "subdomain", "none"]

DEFAULT_PRIORITY = 50
FALLBACK_LOCALE = "en"


class RouteStyle(str, Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"
    LOCALE_SEGMENT = "locale-segment"
    CUSTOM = "custom"


def _opt_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _str_tuple(values: object) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(v) for v in values)  # type: ignore[union-attr]


@dataclass(frozen=True)
class ManifestItem:
    slug: str
    locales: tuple[str, ...] | None = None
    published_at: str | None = None
    updated_at: str | None = None
    priority: int = DEFAULT_PRIORITY
    title: str | None = None
    description: str | None = None
    canonical_override: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ManifestItem":
        locales = raw.get("locales")
        priority = raw.get("priority")
        return cls(
            slug=str(raw.get("slug", "")),
            locales=None if locales is None else tuple(str(x) for x in locales),
            published_at=_opt_str(raw.get("publishedAt")),
            updated_at=_opt_str(raw.get("updatedAt")),
            priority=DEFAULT_PRIORITY if priority is None else int(priority),
            title=_opt_str(raw.get("title")),
            description=_opt_str(raw.get("description")),
            canonical_override=_opt_str(raw.get("canonicalOverride")),
        )

    @property
    def locales_key(self) -> str:
        return ",".join(self.locales or ())


@dataclass(frozen=True)
class PathnameArgs:
    item: ManifestItem
    section_name: str
    slug: str
    locale: str
    default_locale: str
    section_path: str


PathnameFor = Callable[[PathnameArgs], Union[str, None]]


@dataclass(frozen=True)
class ManifestSectionConfig:
    items: tuple[ManifestItem, ...]
    section_name: str | None = None
    section_path: str | None = None
    route_style: RouteStyle | None = None
    default_locale_override: str | None = None
    pathname_for: PathnameFor | None = None
    pathname_for_ref: str | None = None


ManifestValue = Union[tuple[ManifestItem, ...], ManifestSectionConfig]


@dataclass(frozen=True)
class SiteConfig:
    base_url: str
    default_locale: str | None = None


@dataclass(frozen=True)
class BrandConfig:
    name: str
    locales: tuple[str, ...]
    tagline: str | None = None
    description: str | None = None
    org: str | None = None


@dataclass(frozen=True)
class SocialConfig:
    twitter: str | None = None
    linkedin: str | None = None
    github: str | None = None

    @property
    def any(self) -> bool:
        return bool(self.twitter or self.linkedin or self.github)


@dataclass(frozen=True)
class ContactConfig:
    email: str | None = None
    phone: str | None = None
    social: SocialConfig | None = None


@dataclass(frozen=True)
class RestrictedClaimsConfig:
    enable: bool
    forbidden: tuple[str, ...] = ()
    whitelist: tuple[str, ...] = ()


@dataclass(frozen=True)
class PolicyConfig:
    geo_policy: str | None = None
    citation_rules: str | None = None
    restricted_claims: RestrictedClaimsConfig | None = None


@dataclass(frozen=True)
class BookingConfig:
    url: str | None = None
    label: str | None = None


@dataclass(frozen=True)
class MachineHintsConfig:
    robots: str | None = None
    sitemap: str | None = None
    llms_txt: str | None = None
    llms_full_txt: str | None = None

    @property
    def any(self) -> bool:
        return bool(self.robots or self.sitemap or self.llms_txt or self.llms_full_txt)


@dataclass(frozen=True)
class OutputPaths:
    llms_txt: str
    llms_full_txt: str
    citations: str | None = None


@dataclass(frozen=True)
class FormatConfig:
    trailing_slash: TrailingSlash = "never"
    line_endings: LineEndings = "lf"
    locale_strategy: LocaleStrategy = "prefix"


def _section_value(raw: object, resolve_ref: Callable[[str], PathnameFor] | None) -> ManifestValue:
    if isinstance(raw, (list, tuple)):
        return tuple(item if isinstance(item, ManifestItem) else ManifestItem.from_mapping(item) for item in raw)
    if isinstance(raw, ManifestSectionConfig):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError(f"manifest section must be a list or a mapping, got {type(raw).__name__}")
    pathname_for = raw.get("pathnameFor")
    ref: str | None = None
    if isinstance(pathname_for, str):
        ref = pathname_for
        pathname_for = resolve_ref(pathname_for) if resolve_ref else None
    route_style = raw.get("routeStyle")
    return ManifestSectionConfig(
        items=tuple(
            item if isinstance(item, ManifestItem) else ManifestItem.from_mapping(item) for item in raw.get("items") or ()
        ),
        section_name=_opt_str(raw.get("sectionName")),
        section_path=_opt_str(raw.get("sectionPath")),
        route_style=RouteStyle(route_style) if route_style else None,
        default_locale_override=_opt_str(raw.get("defaultLocaleOverride")),
        pathname_for=pathname_for,
        pathname_for_ref=ref,
    )


@dataclass(frozen=True)
class LlmSeoConfig:
    site: SiteConfig
    brand: BrandConfig
    output: OutputPaths
    hubs: tuple[str, ...] = ()
    manifests: Mapping[str, ManifestValue] = field(default_factory=dict)
    contact: ContactConfig | None = None
    policy: PolicyConfig | None = None
    booking: BookingConfig | None = None
    machine_hints: MachineHintsConfig | None = None
    format: FormatConfig = field(default_factory=FormatConfig)

    def default_locale(self, override: str | None = None) -> str:
        """Resolve the default locale: override, site, first brand locale, then ``en``."""
        if override:
            return override
        if self.site.default_locale:
            return self.site.default_locale
        if self.brand.locales:
            return self.brand.locales[0]
        return FALLBACK_LOCALE

    @property
    def restricted_claims(self) -> RestrictedClaimsConfig | None:
        return self.policy.restricted_claims if self.policy else None

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any],
        resolve_ref: Callable[[str], PathnameFor] | None = None,
    ) -> "LlmSeoConfig":
        site = raw.get("site") or {}
        brand = raw.get("brand") or {}
        paths = (raw.get("output") or {}).get("paths") or {}
        contact = raw.get("contact")
        social = (contact or {}).get("social")
        policy = raw.get("policy")
        claims = (policy or {}).get("restrictedClaims")
        booking = raw.get("booking")
        hints = raw.get("machineHints")
        fmt = raw.get("format") or {}
        return cls(
            site=SiteConfig(
                base_url=str(site.get("baseUrl", "")),
                default_locale=_opt_str(site.get("defaultLocale")),
            ),
            brand=BrandConfig(
                name=str(brand.get("name", "")),
                locales=_str_tuple(brand.get("locales")),
                tagline=_opt_str(brand.get("tagline")),
                description=_opt_str(brand.get("description")),
                org=_opt_str(brand.get("org")),
            ),
            output=OutputPaths(
                llms_txt=str(paths.get("llmsTxt", "")),
                llms_full_txt=str(paths.get("llmsFullTxt", "")),
                citations=_opt_str(paths.get("citations")),
            ),
            hubs=_str_tuple((raw.get("sections") or {}).get("hubs")),
            manifests={
                str(key): _section_value(value, resolve_ref) for key, value in (raw.get("manifests") or {}).items()
            },
            contact=None
            if contact is None
            else ContactConfig(
                email=_opt_str(contact.get("email")),
                phone=_opt_str(contact.get("phone")),
                social=None
                if social is None
                else SocialConfig(
                    twitter=_opt_str(social.get("twitter")),
                    linkedin=_opt_str(social.get("linkedin")),
                    github=_opt_str(social.get("github")),
                ),
            ),
            policy=None
            if policy is None
            else PolicyConfig(
                geo_policy=_opt_str(policy.get("geoPolicy")),
                citation_rules=_opt_str(policy.get("citationRules")),
                restricted_claims=None
                if claims is None
                else RestrictedClaimsConfig(
                    enable=bool(claims.get("enable", False)),
                    forbidden=_str_tuple(claims.get("forbidden")),
                    whitelist=_str_tuple(claims.get("whitelist")),
                ),
            ),
            booking=None if booking is None else BookingConfig(url=_opt_str(booking.get("url")), label=_opt_str(booking.get("label"))),
            machine_hints=None
            if hints is None
            else MachineHintsConfig(
                robots=_opt_str(hints.get("robots")),
                sitemap=_opt_str(hints.get("sitemap")),
                llms_txt=_opt_str(hints.get("llmsTxt")),
                llms_full_txt=_opt_str(hints.get("llmsFullTxt")),
            ),
            format=FormatConfig(
                trailing_slash=fmt.get("trailingSlash") or "never",
                line_endings=fmt.get("lineEndings") or "lf",
                locale_strategy=fmt.get("localeStrategy") or "prefix",
            ),
        )


__all__ = [
    "BookingConfig",
    "BrandConfig",
    "ContactConfig",
    "DEFAULT_PRIORITY",
    "FormatConfig",
    "LlmSeoConfig",
    "MachineHintsConfig",
    "ManifestItem",
    "ManifestSectionConfig",
    "ManifestValue",
    "OutputPaths",
    "PathnameArgs",
    "PathnameFor",
    "PolicyConfig",
    "RestrictedClaimsConfig",
    "RouteStyle",
    "SiteConfig",
    "SocialConfig",
]
