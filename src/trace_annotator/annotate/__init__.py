"""Pure text-to-structure passes over a loaded example."""

from trace_annotator.annotate.citations import collect_cited_ids, inline_citations, resolve_sources
from trace_annotator.annotate.documents import correlate_documents
from trace_annotator.annotate.pipeline import annotate_example, format_citation_label
from trace_annotator.annotate.segments import segment_trace
from trace_annotator.annotate.snippets import extract_snippets

__all__ = [
    "extract_snippets",
    "collect_cited_ids",
    "resolve_sources",
    "inline_citations",
    "correlate_documents",
    "segment_trace",
    "annotate_example",
    "format_citation_label",
]
