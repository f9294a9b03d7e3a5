from __future__ import annotations

from .fs import read_text, write_text_atomic

__all__ = ["read_text", "write_text_atomic"]
