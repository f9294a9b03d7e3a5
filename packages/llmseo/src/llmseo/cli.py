from __future__ import annotations

import argparse
import json
import os
import sys

from . import __version__
from .commands.check import configure_check_parser, run_check_command
from .commands.generate import configure_generate_parser, run_generate_command
from .commands.validate import configure_validate_parser, run_validate_command
from .context import RunContext
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL
from .logging import log_event
from .run_id import git_short_sha

TOOL = "llmseo"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=TOOL, description="Generate and verify llms.txt artifacts from a site config.")
    p.add_argument("--version", action="version", version=f"{TOOL} {__version__}")
    p.add_argument("--run-id", help="run identifier used in logs and reports")
    p.add_argument("--cwd", help="working directory for config discovery and relative paths")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--json", action="store_true", help="shorthand for --format json")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    configure_generate_parser(sub)
    configure_check_parser(sub)
    configure_validate_parser(sub)
    sub.add_parser("version", help="print version and git context")
    return p


def _emit_error(ctx: RunContext | None, message: str, code: int, kind: str) -> None:
    if ctx is not None and ctx.output_format == "json":
        print(
            json.dumps(
                {
                    "schema_version": 1,
                    "tool": TOOL,
                    "status": "fail",
                    "error": {"message": message, "code": code, "kind": kind},
                },
                sort_keys=True,
            ),
            file=sys.stderr,
        )
    else:
        print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    fmt = "json" if ns.json else (ns.format or ("json" if "CI" in os.environ else "text"))
    ctx: RunContext | None = None
    try:
        ctx = RunContext.from_args(ns.run_id, ns.cwd, fmt, ns.verbose, ns.quiet)
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
        if ns.cmd == "version":
            payload = {"schema_version": 1, "tool": TOOL, "version": __version__, "git_sha": git_short_sha(ctx.cwd)}
            if ctx.output_format == "json":
                print(json.dumps(payload, sort_keys=True))
            else:
                print(f"{TOOL} {__version__}+{payload['git_sha']}")
            return 0
        if ns.cmd == "generate":
            return run_generate_command(ctx, ns)
        if ns.cmd == "check":
            return run_check_command(ctx, ns)
        if ns.cmd == "validate":
            return run_validate_command(ctx, ns)
        return 2
    except ScriptError as exc:
        if ctx is not None:
            log_event(ctx, "error", "cli", "failed", kind=exc.kind, code=exc.code)
        _emit_error(ctx, str(exc), exc.code, exc.kind)
        return exc.code
    except Exception as exc:  # pragma: no cover
        _emit_error(ctx, f"internal error: {exc}", ERR_INTERNAL, "internal_error")
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
