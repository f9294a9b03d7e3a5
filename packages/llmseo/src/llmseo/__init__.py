"""Deterministic llms.txt, llms-full.txt and citations.json generation and checking."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
