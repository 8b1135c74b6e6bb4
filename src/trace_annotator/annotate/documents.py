"""Correlate retrieved tool-call documents with the ids cited in the answer."""

from __future__ import annotations

from typing import Container, Iterable, List

from trace_annotator.domain.models import DocumentRecord, ToolCallRecord


def document_id(call_id: str, index: int) -> str:
    """Positional id of the ``index``-th (0-based) document of a call."""
    return f"{call_id}-{index}"


def correlate_documents(cited_ids: Container[str], tool_calls: Iterable[ToolCallRecord]) -> List[DocumentRecord]:
    """Keep only cited documents, in tool-call order then document order."""
    documents: List[DocumentRecord] = []
    for call in tool_calls:
        for index, doc in enumerate(call.documents):
            doc_id = document_id(call.call_id, index)
            if doc_id not in cited_ids:
                continue
            documents.append(
                DocumentRecord(
                    id=doc_id,
                    title=doc.title,
                    url=doc.url,
                    snippet=doc.snippet,
                    call_id=call.call_id,
                    tool_name=call.tool_name,
                )
            )
    return documents


__all__ = ["document_id", "correlate_documents"]
