from __future__ import annotations

from .check_report import build_check_report, render_check_text
from .generate_report import GeneratedFile, build_generate_report, render_generate_text

__all__ = [
    "GeneratedFile",
    "build_check_report",
    "build_generate_report",
    "render_check_text",
    "render_generate_text",
]
