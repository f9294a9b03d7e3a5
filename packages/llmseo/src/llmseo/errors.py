from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_INTERNAL, ERR_INVALID_CONFIG


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidBaseUrl(ScriptError):
    code: int = ERR_INVALID_CONFIG
    kind: str = "invalid_base_url"


def invalid_base_url(base_url: str) -> InvalidBaseUrl:
    return InvalidBaseUrl(f"invalid baseUrl: {base_url!r} is not an absolute URL")
