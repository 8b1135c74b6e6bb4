"""Command line interface for the trace annotator."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from trace_annotator import __version__
from trace_annotator.annotate.pipeline import annotate_example
from trace_annotator.config import load_config
from trace_annotator.domain.errors import ExampleLoadError
from trace_annotator.logging import configure_logging, get_logger, get_run_id
from trace_annotator.services import example_service

logger = get_logger(__name__)

PREVIEW_CHARS = 120


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Research trace annotator CLI")
    parser.add_argument("--version", action="version", version=f"trace-annotator {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List available examples")
    list_parser.set_defaults(func=_list_handler)

    for name, help_text, handler in [
        ("annotate", "Print every derived structure for an example", _annotate_handler),
        ("sources", "Print the numbered sources cited by the answer", _sources_handler),
        ("segments", "Print the transcript segments", _segments_handler),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("location", help="Example name, JSON path, or URL")
        sub.set_defaults(func=handler)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return

    config = load_config()
    configure_logging(config.logging.level)
    logger.info("Starting CLI", extra={"run_id": get_run_id(), "command": args.command, "env": config.app.environment})
    args.func(args, config)


def _annotated(args: argparse.Namespace, config):
    try:
        record = example_service.load_example(args.location, config)
    except ExampleLoadError as exc:
        print(json.dumps({"error": str(exc)}, indent=2), file=sys.stderr)
        sys.exit(1)
    return annotate_example(record)


def _list_handler(args: argparse.Namespace, config) -> None:
    print(json.dumps({"examples": example_service.list_examples(config)}, indent=2))


def _annotate_handler(args: argparse.Namespace, config) -> None:
    print(json.dumps(_annotated(args, config).to_dict(), indent=2))


def _sources_handler(args: argparse.Namespace, config) -> None:
    annotated = _annotated(args, config)
    sources = [
        {"number": ns.number, "id": ns.source.id, "title": ns.source.title, "url": ns.source.url}
        for ns in annotated.sources
    ]
    print(json.dumps({"sources": sources}, indent=2))


def _segments_handler(args: argparse.Namespace, config) -> None:
    annotated = _annotated(args, config)
    segments = []
    for seg in annotated.segments:
        preview = seg.content if len(seg.content) <= PREVIEW_CHARS else seg.content[:PREVIEW_CHARS] + "..."
        entry = {"kind": seg.kind, "preview": preview}
        if seg.tool_name is not None:
            entry["tool_name"] = seg.tool_name
            entry["params"] = seg.params_dict()
        segments.append(entry)
    print(json.dumps({"segments": segments}, indent=2))


if __name__ == "__main__":
    main()
