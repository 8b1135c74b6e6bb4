"""Extract ``<snippet id=...>`` blocks from a raw transcript."""

from __future__ import annotations

import re
from typing import Dict

from trace_annotator.domain.models import SourceRecord

SNIPPET_PATTERN = re.compile(
    r"<snippet id=([^\s>\"']+)>"
    r"\s*Title:[ \t]*([^\n]*)\n"
    r"\s*URL:[ \t]*([^\n]*)\n"
    r"\s*Snippet:(.*?)</snippet>",
    re.DOTALL,
)


def extract_snippets(text: str) -> Dict[str, SourceRecord]:
    """Map snippet id to its source record; a repeated id keeps the last block."""
    snippets: Dict[str, SourceRecord] = {}
    if not text:
        return snippets
    for match in SNIPPET_PATTERN.finditer(text):
        snippet_id, title, url, body = (part.strip() for part in match.groups())
        snippets[snippet_id] = SourceRecord(id=snippet_id, title=title, url=url, snippet=body)
    return snippets


__all__ = ["SNIPPET_PATTERN", "extract_snippets"]
