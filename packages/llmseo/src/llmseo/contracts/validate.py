from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import ScriptError
from ..exit_codes import ERR_VALIDATION
from .schemas import schemas_root


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    version: int
    file: str


def _catalog_path() -> Path:
    return schemas_root() / "catalog.json"


def load_catalog() -> dict[str, CatalogEntry]:
    raw = json.loads(_catalog_path().read_text(encoding="utf-8"))
    entries: dict[str, CatalogEntry] = {}
    for row in raw.get("schemas", []):
        entry = CatalogEntry(name=row["name"], version=int(row["version"]), file=row["file"])
        entries[entry.name] = entry
    return entries


def schema_path(schema_name: str) -> Path:
    entry = load_catalog().get(schema_name)
    if entry is None:
        raise ScriptError(f"unknown schema: {schema_name}", ERR_VALIDATION, kind="unknown_schema")
    return schemas_root() / entry.file


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    return json.loads(schema_path(schema_name).read_text(encoding="utf-8"))


def _pointer(error: jsonschema.ValidationError) -> str:
    return "/" + "/".join(str(part) for part in error.absolute_path) if error.absolute_path else "<root>"


def iter_errors(schema_name: str, payload: Any) -> list[jsonschema.ValidationError]:
    validator_cls = jsonschema.validators.validator_for(load_schema(schema_name))
    validator = validator_cls(load_schema(schema_name))
    return sorted(validator.iter_errors(payload), key=lambda err: (list(map(str, err.absolute_path)), err.message))


def validate(schema_name: str, payload: Any, code: int = ERR_VALIDATION) -> None:
    errors = iter_errors(schema_name, payload)
    if not errors:
        return
    first = errors[0]
    raise ScriptError(
        f"schema validation failed for {schema_name} at {_pointer(first)}: {first.message}",
        code,
        kind="schema_validation_failed",
    )


def validate_file(schema_name: str, file_path: str | Path) -> None:
    payload = json.loads(Path(file_path).read_text(encoding="utf-8"))
    validate(schema_name, payload)


__all__ = ["CatalogEntry", "iter_errors", "load_catalog", "load_schema", "schema_path", "validate", "validate_file"]
