"""Run every annotation pass over one example record."""

from __future__ import annotations

from typing import Sequence

from trace_annotator.annotate.citations import collect_cited_ids, inline_citations, resolve_sources
from trace_annotator.annotate.documents import correlate_documents
from trace_annotator.annotate.segments import segment_trace
from trace_annotator.annotate.snippets import extract_snippets
from trace_annotator.domain.models import (
    SEGMENT_TEXT,
    SEGMENT_TOOL_CALL,
    SEGMENT_TOOL_OUTPUT,
    AnnotatedExample,
    ExampleRecord,
    TraceStats,
)
from trace_annotator.logging import get_logger

logger = get_logger(__name__)


def format_citation_label(numbers: Sequence[int]) -> str:
    if not numbers:
        return "[?]"
    return "[" + ", ".join(str(n) for n in numbers) + "]"


def annotate_example(record: ExampleRecord) -> AnnotatedExample:
    """Derive sources, documents, segments, and answer spans from ``record``.

    Each call builds everything from scratch; nothing is cached between calls.
    """
    traces = record.full_traces
    answer = record.final_response

    snippets = extract_snippets(traces.generated_text)
    cited = collect_cited_ids(answer)
    sources = resolve_sources(cited, snippets)
    documents = correlate_documents(cited, traces.tool_calls)
    segments = segment_trace(traces.generated_text)
    spans = inline_citations(answer, sources)

    kinds = [seg.kind for seg in segments]
    stats = TraceStats(
        total_tokens=traces.total_tokens,
        tool_call_count=traces.tool_call_count,
        cited_id_count=len(cited),
        source_count=len(sources),
        document_count=len(documents),
        text_segments=kinds.count(SEGMENT_TEXT),
        tool_call_segments=kinds.count(SEGMENT_TOOL_CALL),
        tool_output_segments=kinds.count(SEGMENT_TOOL_OUTPUT),
    )
    logger.debug(
        "Annotated example",
        extra={
            "snippets": len(snippets),
            "cited_ids": stats.cited_id_count,
            "sources": stats.source_count,
            "documents": stats.document_count,
            "segments": len(segments),
        },
    )
    return AnnotatedExample(
        problem=record.problem,
        answer=answer,
        sources=tuple(sources),
        documents=tuple(documents),
        segments=tuple(segments),
        answer_spans=tuple(spans),
        stats=stats,
    )


__all__ = ["annotate_example", "format_citation_label"]
