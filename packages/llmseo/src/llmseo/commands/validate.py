from __future__ import annotations

import argparse
import json

from ..config.loader import load_config
from ..context import RunContext
from ..exit_codes import OK
from ..logging import log_event


def run_validate_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    loaded = load_config(ns.config, ctx.cwd)
    config = loaded.config
    log_event(ctx, "info", "validate", "config_valid", path=str(loaded.path))
    payload = {
        "schema_version": 1,
        "tool": "llmseo",
        "kind": "validate-report",
        "status": "ok",
        "run_id": ctx.run_id,
        "config": str(loaded.path),
        "sections": sorted(config.manifests),
        "warnings": [issue.render() for issue in loaded.issues],
    }
    if ctx.output_format == "json":
        print(json.dumps(payload, sort_keys=True))
    elif not ctx.quiet:
        print(f"config ok: {loaded.path}")
        for warning in payload["warnings"]:
            print(f"warning: {warning}")
    return OK


def configure_validate_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("validate", help="load and validate the config without generating")
    p.add_argument("-c", "--config", help="config file path (default: discover llm-seo.config.* in --cwd)")


__all__ = ["configure_validate_parser", "run_validate_command"]
