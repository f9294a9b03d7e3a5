from __future__ import annotations

import copy
import socket
from pathlib import Path
from typing import Any

import pytest
import yaml
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from llmseo.config.model import LlmSeoConfig

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[3]
_HYPOTHESIS_DB = _ROOT / "artifacts/llmseo/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("llmseo", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("llmseo")

SAMPLE_CONFIG: dict[str, Any] = {
    "site": {"baseUrl": "https://example.com", "defaultLocale": "en"},
    "brand": {
        "name": "Example Co",
        "tagline": "Build  things",
        "description": "We build things.",
        "org": "Example Org",
        "locales": ["en", "de"],
    },
    "sections": {"hubs": ["/services", "/blog", "/case-studies"]},
    "manifests": {
        "services": [
            {
                "slug": "/services/web",
                "locales": ["en", "de"],
                "priority": 80,
                "title": "Web",
                "updatedAt": "2024-03-01T10:00:00Z",
            }
        ],
        "blog": {
            "sectionPath": "/blog",
            "routeStyle": "prefix",
            "items": [{"slug": "/post", "locales": ["de"], "publishedAt": "2024-01-15T00:00:00Z", "title": "Post"}],
        },
    },
    "contact": {"email": "hi@example.com", "social": {"github": "https://github.com/example"}},
    "policy": {
        "geoPolicy": "EU only",
        "citationRules": "Cite the canonical URL",
        "restrictedClaims": {"enable": True, "forbidden": ["guaranteed"], "whitelist": []},
    },
    "booking": {"url": "https://cal.com/example", "label": "Book a call"},
    "machineHints": {"robots": "https://example.com/robots.txt", "sitemap": "https://example.com/sitemap.xml"},
    "output": {
        "paths": {
            "llmsTxt": "public/llms.txt",
            "llmsFullTxt": "public/llms-full.txt",
            "citations": "public/citations.json",
        }
    },
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.delenv("RUN_ID", raising=False)
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture
def sample_raw() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_CONFIG)


@pytest.fixture
def sample_config(sample_raw: dict[str, Any]) -> LlmSeoConfig:
    return LlmSeoConfig.from_mapping(sample_raw)


@pytest.fixture
def site_root(tmp_path: Path, sample_raw: dict[str, Any]) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    (root / "llm-seo.config.yaml").write_text(yaml.safe_dump(sample_raw, sort_keys=False), encoding="utf-8")
    return root
