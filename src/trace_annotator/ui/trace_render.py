"""Trace, document, and stats rendering."""

from __future__ import annotations

import streamlit as st

from trace_annotator.domain.models import SEGMENT_TOOL_CALL, SEGMENT_TOOL_OUTPUT


def render_trace(annotated) -> None:
    st.markdown("### Trace")
    if not annotated.segments:
        st.info("No trace available.")
        return
    for index, seg in enumerate(annotated.segments, start=1):
        if seg.kind == SEGMENT_TOOL_CALL:
            with st.expander(f"{index}. Tool call: {seg.tool_name}"):
                params = seg.params_dict()
                if params:
                    st.json(params)
                st.code(seg.content)
        elif seg.kind == SEGMENT_TOOL_OUTPUT:
            with st.expander(f"{index}. Tool output"):
                st.text(seg.content)
        else:
            st.markdown(seg.content)


def render_documents(annotated) -> None:
    st.markdown("### Documents")
    if not annotated.documents:
        st.info("No cited documents.")
        return
    for index, doc in enumerate(annotated.documents, start=1):
        title = doc.title or doc.url or doc.id
        link = f" [{doc.url}]({doc.url})" if doc.url else ""
        st.markdown(f"{index}. **{title}**{link} ({doc.tool_name}, call {doc.call_id})")
        if doc.snippet:
            st.caption(doc.snippet)


def render_stats(annotated) -> None:
    stats = annotated.stats
    cols = st.columns(4)
    cols[0].metric("Tokens", stats.total_tokens)
    cols[1].metric("Tool calls", stats.tool_call_count)
    cols[2].metric("Sources", stats.source_count)
    cols[3].metric("Documents", stats.document_count)
