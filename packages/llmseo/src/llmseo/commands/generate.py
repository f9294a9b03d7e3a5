from __future__ import annotations

import argparse
import json

from ..canonical.sections import create_canonical_bundle
from ..config.loader import load_config
from ..context import RunContext
from ..errors import ScriptError
from ..exit_codes import ERR_GENERATION_FAILED, ERR_USAGE, OK
from ..generate.citations import create_citations_json_string
from ..generate.llms_full_txt import create_llms_full_txt, parse_timestamp
from ..generate.llms_txt import create_llms_txt
from ..io.fs import write_text_atomic
from ..logging import log_event
from ..reporting.generate_report import GeneratedFile, build_generate_report, render_generate_text


def _timestamp_arg(value: str | None) -> str | None:
    if value is None:
        return None
    if parse_timestamp(value) is None:
        raise ScriptError(f"invalid --timestamp {value!r}: expected an ISO-8601 datetime", ERR_USAGE, kind="invalid_timestamp")
    return value


def _render_outputs(ctx: RunContext, ns: argparse.Namespace) -> list[tuple[str, str]]:
    loaded = load_config(ns.config, ctx.cwd)
    config = loaded.config
    log_event(ctx, "info", "generate", "config_loaded", path=str(loaded.path), base_url=config.site.base_url)
    for issue in loaded.issues:
        log_event(ctx, "warn", "generate", "config_warning", path=issue.path, message=issue.message)
    timestamp = _timestamp_arg(ns.timestamp)
    try:
        bundle = create_canonical_bundle(config)
        log_event(ctx, "debug", "generate", "bundle_resolved", items=len(bundle.manifest_items), urls=len(bundle.canonical_urls))
        outputs = [
            (config.output.llms_txt, create_llms_txt(config, bundle.canonical_urls).content),
            (
                config.output.llms_full_txt,
                create_llms_full_txt(config, bundle.canonical_urls, bundle.manifest_items, bundle.entries).content,
            ),
        ]
        if ns.emit_citations:
            if config.output.citations:
                citations = create_citations_json_string(config, bundle.manifest_items, bundle.entries, fixed_timestamp=timestamp)
                outputs.append((config.output.citations, citations))
            else:
                log_event(ctx, "warn", "generate", "citations_skipped", reason="output.paths.citations is not configured")
    except ScriptError:
        raise
    except Exception as exc:
        raise ScriptError(f"generation failed: {exc}", ERR_GENERATION_FAILED, kind="generation_failed") from exc
    return outputs


def run_generate_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    outputs = _render_outputs(ctx, ns)
    files: list[GeneratedFile] = []
    for path, content in outputs:
        size = len(content.encode("utf-8"))
        if not ns.dry_run:
            write_text_atomic(ctx.resolve(path), content)
            log_event(ctx, "info", "generate", "file_written", path=path, bytes=size)
        files.append(GeneratedFile(path=path, byte_size=size, written=not ns.dry_run))

    if ctx.output_format == "json":
        print(json.dumps(build_generate_report(ctx.run_id, files, ns.dry_run), sort_keys=True))
        return OK
    if ns.dry_run:
        for path, content in outputs:
            print(f"--- {path} ---")
            print(content, end="" if content.endswith("\n") else "\n")
    if not ctx.quiet:
        print(render_generate_text(files, ns.dry_run))
    return OK


def configure_generate_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("generate", help="render llms.txt, llms-full.txt and optionally citations.json")
    p.add_argument("-c", "--config", help="config file path (default: discover llm-seo.config.* in --cwd)")
    p.add_argument("--dry-run", action="store_true", help="print outputs instead of writing files")
    p.add_argument("--emit-citations", action="store_true", help="also render citations.json")
    p.add_argument("--timestamp", help="fixed ISO-8601 `generated` value for citations.json")


__all__ = ["configure_generate_parser", "run_generate_command"]
