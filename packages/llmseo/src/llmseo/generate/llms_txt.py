"""Brief ``llms.txt`` rendering."""

from __future__ import annotations

from typing import Iterable

from ..config.model import LlmSeoConfig
from ..normalize.url import sort_urls
from .artifact import GeneratedArtifact
from .sections import block, brand_header, contact_lines, hub_lines, machine_hint_lines


def _policy_lines(config: LlmSeoConfig) -> list[str]:
    policy = config.policy
    if policy is None:
        return []
    lines: list[str] = []
    if policy.geo_policy:
        lines.append(f"- GEO: {policy.geo_policy}")
    if policy.citation_rules:
        lines.append(f"- Citations: {policy.citation_rules}")
    if policy.restricted_claims is not None:
        lines.append(f"- Restricted Claims: {'Enabled' if policy.restricted_claims.enable else 'Disabled'}")
    return lines


def create_llms_txt(config: LlmSeoConfig, canonical_urls: Iterable[str]) -> GeneratedArtifact:
    urls = list(canonical_urls)
    lines = brand_header(config, config.brand.name)
    if config.hubs:
        lines += block("## Sections", hub_lines(config.hubs))
    if urls:
        lines += block("## URLs", [f"- {url}" for url in sort_urls(urls)])
    policy_lines = _policy_lines(config)
    if policy_lines:
        lines += block("## Policies", policy_lines)
    contact = contact_lines(config)
    if contact:
        lines += block("## Contact", contact)
    hint_lines = machine_hint_lines(config)
    if hint_lines:
        lines += block("## Machine Hints", hint_lines)
    return GeneratedArtifact.from_lines(lines, config.format.line_endings)


__all__ = ["create_llms_txt"]
