"""Collect, number, and inline ``<cite id="...">`` markers in an answer."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Tuple

from trace_annotator.domain.models import AnswerSpan, CitationSpan, NumberedSource, SourceRecord, TextSpan

CITE_PATTERN = re.compile(r'<cite id="([^"]*)">(.*?)</cite>', re.DOTALL)


def _split_ids(raw: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def collect_cited_ids(answer: str) -> Dict[str, None]:
    """Return every cited id as an insertion-ordered set (dict keys).

    Iteration order is first appearance in the answer; citation numbers are
    derived from it.
    """
    cited: Dict[str, None] = {}
    if not answer:
        return cited
    for match in CITE_PATTERN.finditer(answer):
        for cid in _split_ids(match.group(1)):
            cited.setdefault(cid, None)
    return cited


def resolve_sources(cited_ids: Iterable[str], snippets: Mapping[str, SourceRecord]) -> List[NumberedSource]:
    """Number the cited ids that have a snippet, 1-based, in cited order.

    Ids without a snippet are dropped. Repeated ids are numbered once.
    """
    numbered: List[NumberedSource] = []
    seen = set()
    for cid in cited_ids:
        if cid in seen or cid not in snippets:
            continue
        seen.add(cid)
        numbered.append(NumberedSource(number=len(numbered) + 1, source=snippets[cid]))
    return numbered


def inline_citations(answer: str, numbered: Iterable[NumberedSource]) -> List[AnswerSpan]:
    numbered = list(numbered)
    spans: List[AnswerSpan] = []
    if not answer:
        return spans
    cursor = 0
    for match in CITE_PATTERN.finditer(answer):
        if match.start() > cursor:
            spans.append(TextSpan(answer[cursor : match.start()]))
        ids = _split_ids(match.group(1))
        wanted = set(ids)
        sources = tuple(ns for ns in numbered if ns.source.id in wanted)
        spans.append(CitationSpan(text=match.group(2), ids=ids, sources=sources))
        cursor = match.end()
    if cursor < len(answer):
        spans.append(TextSpan(answer[cursor:]))
    return spans


__all__ = ["CITE_PATTERN", "collect_cited_ids", "resolve_sources", "inline_citations"]
