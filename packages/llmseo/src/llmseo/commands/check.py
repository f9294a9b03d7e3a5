from __future__ import annotations

import argparse
import json

from ..check.checker import check_generated_files
from ..config.loader import load_config
from ..context import RunContext
from ..contracts import validate as validate_contract
from ..io.fs import read_text, write_text_atomic
from ..logging import log_event
from ..reporting.check_report import build_check_report, render_check_text


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return number


def run_check_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    loaded = load_config(ns.config, ctx.cwd)
    log_event(ctx, "info", "check", "config_loaded", path=str(loaded.path))
    result = check_generated_files(
        loaded.config,
        fail_on=ns.fail_on,
        read_text=lambda path: read_text(ctx.resolve(path)),
        max_context_lines=ns.max_context_lines,
    )
    log_event(
        ctx,
        "info",
        "check",
        "finished",
        status=result.disposition.value,
        errors=result.summary.errors,
        warnings=result.summary.warnings,
    )
    report = build_check_report(ctx.run_id, result)
    if ns.emit_report:
        validate_contract("check-report", report)
        out = write_text_atomic(ctx.resolve(ns.emit_report), json.dumps(report, indent=2, sort_keys=True) + "\n")
        log_event(ctx, "info", "check", "report_written", path=str(out))
    if ctx.output_format == "json":
        print(json.dumps(report, sort_keys=True))
    elif not ctx.quiet or result.exit_code:
        print(render_check_text(result, verbose=ctx.verbose))
    return result.exit_code


def configure_check_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("check", help="verify generated files against the config")
    p.add_argument("-c", "--config", help="config file path (default: discover llm-seo.config.* in --cwd)")
    p.add_argument("--fail-on", choices=["warn", "error"], default="error", help="lowest severity that fails the run")
    p.add_argument("--max-context-lines", type=_positive_int, default=5, help="diff lines reported per mismatched file")
    p.add_argument("--emit-report", help="also write the JSON report to this path")


__all__ = ["configure_check_parser", "run_check_command"]
