"""Document blocks shared by the llms.txt and llms-full.txt renderers."""

from __future__ import annotations

import re

from ..config.model import LlmSeoConfig
from ..normalize.sort import sort_strings

HUB_LABELS = {
    "/services": "Services overview",
    "/blog": "Blog posts",
    "/projects": "Our projects",
    "/cases": "Case studies",
    "/contact": "Contact us",
    "/about": "About us",
    "/products": "Products",
    "/docs": "Documentation",
    "/faq": "Frequently asked questions",
    "/pricing": "Pricing information",
    "/team": "Our team",
    "/careers": "Career opportunities",
    "/news": "News and updates",
    "/resources": "Resources",
    "/support": "Support center",
}
DEFAULT_BOOKING_LABEL = "Book consultation"

_WORD_START = re.compile(r"\b\w")


def format_hub_label(hub: str) -> str:
    clean = re.sub(r"[-_]", " ", hub[1:] if hub.startswith("/") else hub)
    return _WORD_START.sub(lambda match: match.group(0).upper(), clean)


def hub_label(hub: str) -> str:
    return HUB_LABELS.get(hub) or format_hub_label(hub)


def hub_lines(hubs: tuple[str, ...]) -> list[str]:
    return [f"- [{hub}]({hub}) - {hub_label(hub)}" for hub in sort_strings(hubs)]


def brand_header(config: LlmSeoConfig, title: str) -> list[str]:
    lines = [f"# {title}", ""]
    if config.brand.tagline:
        lines += [f"> {config.brand.tagline}", ""]
    if config.brand.description:
        lines += [config.brand.description, ""]
    return lines


def contact_lines(config: LlmSeoConfig) -> list[str]:
    contact = config.contact
    social = contact.social if contact else None
    lines: list[str] = []
    if contact and contact.email:
        lines.append(f"- Email: {contact.email}")
    if contact and contact.phone:
        lines.append(f"- Phone: {contact.phone}")
    if social and social.twitter:
        lines.append(f"- Twitter: {social.twitter}")
    if social and social.linkedin:
        lines.append(f"- LinkedIn: {social.linkedin}")
    if social and social.github:
        lines.append(f"- GitHub: {social.github}")
    if config.booking and config.booking.url:
        lines.append(f"- Booking: {config.booking.url} ({config.booking.label or DEFAULT_BOOKING_LABEL})")
    return lines


def machine_hint_lines(config: LlmSeoConfig) -> list[str]:
    hints = config.machine_hints
    if hints is None or not hints.any:
        return []
    pairs = (
        ("robots.txt", hints.robots),
        ("sitemap.xml", hints.sitemap),
        ("llms.txt", hints.llms_txt),
        ("llms-full.txt", hints.llms_full_txt),
    )
    return [f"- {label}: {value}" for label, value in pairs if value]


def block(heading: str, body: list[str]) -> list[str]:
    return [heading, "", *body, ""]


__all__ = [
    "DEFAULT_BOOKING_LABEL",
    "HUB_LABELS",
    "block",
    "brand_header",
    "contact_lines",
    "format_hub_label",
    "hub_label",
    "hub_lines",
    "machine_hint_lines",
]
