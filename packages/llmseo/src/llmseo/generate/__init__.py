from __future__ import annotations

from .artifact import GeneratedArtifact
from .citations import create_citations_json, create_citations_json_string
from .llms_full_txt import create_llms_full_txt
from .llms_txt import create_llms_txt
from .sections import hub_label

__all__ = [
    "GeneratedArtifact",
    "create_citations_json",
    "create_citations_json_string",
    "create_llms_full_txt",
    "create_llms_txt",
    "hub_label",
]
