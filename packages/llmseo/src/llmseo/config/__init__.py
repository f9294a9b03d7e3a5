from __future__ import annotations

from .loader import CONFIG_FILE_NAMES, LoadedConfig, find_config_file, load_config, parse_config
from .model import (
    LlmSeoConfig,
    ManifestItem,
    ManifestSectionConfig,
    PathnameArgs,
    RouteStyle,
)
from .validate import ValidationIssue, validate_config

__all__ = [
    "CONFIG_FILE_NAMES",
    "LlmSeoConfig",
    "LoadedConfig",
    "ManifestItem",
    "ManifestSectionConfig",
    "PathnameArgs",
    "RouteStyle",
    "ValidationIssue",
    "find_config_file",
    "load_config",
    "parse_config",
    "validate_config",
]
