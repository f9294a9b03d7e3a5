"""Configuration discovery, parsing and validation."""

from __future__ import annotations

import importlib
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..contracts import validate as validate_contract
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG_NOT_FOUND, ERR_INVALID_CONFIG
from .model import LlmSeoConfig, PathnameFor
from .validate import ValidationIssue, format_validation_issues, validate_config

CONFIG_FILE_NAMES = (
    "llm-seo.config.yaml",
    "llm-seo.config.yml",
    "llm-seo.config.json",
)


@dataclass(frozen=True)
class LoadedConfig:
    config: LlmSeoConfig
    path: Path
    issues: tuple[ValidationIssue, ...] = ()


def find_config_file(cwd: str | Path | None = None) -> Path | None:
    root = Path(cwd) if cwd else Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate.resolve()
    return None


def load_raw_config(path: Path) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScriptError(f"failed to read config file {path}: {exc}", ERR_CONFIG_NOT_FOUND, kind="config_unreadable") from exc
    try:
        if path.suffix == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ScriptError(f"failed to parse config file {path}: {exc}", ERR_INVALID_CONFIG, kind="config_parse_error") from exc
    if not isinstance(raw, dict):
        raise ScriptError(f"invalid config at {path}: root must be a mapping", ERR_INVALID_CONFIG, kind="config_invalid")
    return raw


def resolve_pathname_ref(ref: str, search_dir: Path | None = None) -> PathnameFor:
    """Resolve a ``module:function`` reference, looking next to the config file first."""
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise ScriptError(f"invalid pathnameFor reference {ref!r}: expected module:function", ERR_INVALID_CONFIG, kind="config_invalid")
    added = False
    if search_dir is not None and str(search_dir) not in sys.path:
        sys.path.insert(0, str(search_dir))
        added = True
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ScriptError(f"cannot import pathnameFor module {module_name!r}: {exc}", ERR_INVALID_CONFIG, kind="config_invalid") from exc
    finally:
        if added:
            sys.path.remove(str(search_dir))
    func = getattr(module, attr, None)
    if not callable(func):
        raise ScriptError(f"pathnameFor reference {ref!r} is not callable", ERR_INVALID_CONFIG, kind="config_invalid")
    return func


def _parse(raw: Mapping[str, Any], source: Path | None) -> tuple[LlmSeoConfig, tuple[ValidationIssue, ...]]:
    where = str(source) if source else "<mapping>"
    try:
        validate_contract("config", raw, ERR_INVALID_CONFIG)
    except ScriptError as exc:
        raise ScriptError(f"invalid config at {where}: {exc.message}", ERR_INVALID_CONFIG, kind="config_invalid") from exc
    search_dir = source.parent if source else None
    config = LlmSeoConfig.from_mapping(raw, resolve_ref=lambda ref: resolve_pathname_ref(ref, search_dir))
    issues = validate_config(config)
    errors = [issue for issue in issues if issue.severity == "error"]
    if errors:
        raise ScriptError(
            f"invalid config at {where}\n{format_validation_issues(errors)}",
            ERR_INVALID_CONFIG,
            kind="config_invalid",
        )
    return config, tuple(issue for issue in issues if issue.severity == "warning")


def parse_config(raw: Mapping[str, Any], source: Path | None = None) -> LlmSeoConfig:
    return _parse(raw, source)[0]


def load_config(path: str | Path | None = None, cwd: str | Path | None = None) -> LoadedConfig:
    root = Path(cwd) if cwd else Path.cwd()
    if path is None:
        found = find_config_file(root)
        if found is None:
            names = ", ".join(CONFIG_FILE_NAMES)
            raise ScriptError(f"no config file found in {root} (looked for {names})", ERR_CONFIG_NOT_FOUND, kind="config_not_found")
        config_path = found
    else:
        candidate = Path(path)
        config_path = (candidate if candidate.is_absolute() else root / candidate).resolve()
        if not config_path.is_file():
            raise ScriptError(f"config file not found: {config_path}", ERR_CONFIG_NOT_FOUND, kind="config_not_found")
    config, warnings = _parse(load_raw_config(config_path), config_path)
    return LoadedConfig(config=config, path=config_path, issues=warnings)


__all__ = [
    "CONFIG_FILE_NAMES",
    "LoadedConfig",
    "find_config_file",
    "load_config",
    "load_raw_config",
    "parse_config",
    "resolve_pathname_ref",
]
