"""Load example records from disk or over HTTP and annotate them."""

from __future__ import annotations

import json
import socket
from pathlib import Path
from typing import List, Optional

import requests
from pydantic import ValidationError

from trace_annotator.annotate.pipeline import annotate_example
from trace_annotator.config import Settings, load_config
from trace_annotator.domain.errors import ExampleLoadError
from trace_annotator.domain.models import AnnotatedExample, ExampleRecord
from trace_annotator.logging import get_logger

logger = get_logger(__name__)


def _is_url(location: str) -> bool:
    return location.startswith("http://") or location.startswith("https://")


def list_examples(config: Optional[Settings] = None) -> List[str]:
    """Example names (file stems) available in the examples directory."""
    cfg = config or load_config()
    directory = Path(cfg.examples.directory)
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*.json"))


def resolve_location(location: str, config: Optional[Settings] = None) -> str:
    """Turn an example name into a path or URL; paths and URLs pass through."""
    cfg = config or load_config()
    if _is_url(location):
        return location
    path = Path(location)
    if path.suffix == ".json" or path.exists():
        return str(path)
    name = f"{location}.json"
    if cfg.examples.base_url:
        return f"{cfg.examples.base_url.rstrip('/')}/{name}"
    return str(Path(cfg.examples.directory) / name)


def _fetch_text(location: str, timeout_s: int) -> str:
    if _is_url(location):
        try:
            resp = requests.get(location, timeout=timeout_s)
        except (requests.RequestException, socket.timeout) as exc:
            raise ExampleLoadError(f"Request for {location} failed: {exc}") from exc
        if resp.status_code != 200:
            raise ExampleLoadError(f"{location} returned {resp.status_code}")
        return resp.text
    path = Path(location)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ExampleLoadError(f"Cannot read {path}: {exc}") from exc


def load_example(location: str, config: Optional[Settings] = None) -> ExampleRecord:
    cfg = config or load_config()
    resolved = resolve_location(location, cfg)
    raw = _fetch_text(resolved, cfg.examples.timeout_s)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ExampleLoadError(f"Invalid JSON in {resolved}: {exc}") from exc
    if not isinstance(data, dict):
        raise ExampleLoadError(f"Example {resolved} is not a JSON object")
    try:
        return ExampleRecord.model_validate(data)
    except ValidationError as exc:
        raise ExampleLoadError(f"Example {resolved} has an unexpected shape: {exc}") from exc


def load_annotated_example(location: str, config: Optional[Settings] = None) -> AnnotatedExample:
    """Load and annotate; a load failure yields an empty result instead of raising."""
    cfg = config or load_config()
    try:
        record = load_example(location, cfg)
    except ExampleLoadError as exc:
        logger.warning("Example load failed", extra={"location": location, "error": str(exc)})
        return AnnotatedExample.empty()
    return annotate_example(record)


__all__ = ["list_examples", "resolve_location", "load_example", "load_annotated_example"]
