"""Answer and source list rendering."""

from __future__ import annotations

import streamlit as st

from trace_annotator.annotate.pipeline import format_citation_label
from trace_annotator.domain.models import CitationSpan

NO_SOURCE_TEXT = "no source information available"


def answer_markdown(spans) -> str:
    parts = []
    for span in spans:
        if isinstance(span, CitationSpan):
            parts.append(f"{span.text} **{format_citation_label(span.numbers)}**")
        else:
            parts.append(span.text)
    return "".join(parts)


def render_answer(annotated) -> None:
    st.markdown("### Answer")
    if not annotated.answer_spans:
        st.info("No answer available.")
        return
    st.markdown(answer_markdown(annotated.answer_spans))

    with st.expander("Citation details"):
        for span in annotated.answer_spans:
            if not isinstance(span, CitationSpan):
                continue
            label = format_citation_label(span.numbers)
            if not span.sources:
                st.markdown(f"- {label} _{span.text}_: {NO_SOURCE_TEXT}")
                continue
            titles = "; ".join(ns.source.title or ns.source.url for ns in span.sources)
            st.markdown(f"- {label} _{span.text}_: {titles}")


def render_sources(annotated) -> None:
    if not annotated.sources:
        return
    st.markdown("### Sources")
    for ns in annotated.sources:
        source = ns.source
        title = source.title or source.url or source.id
        link = f" [{source.url}]({source.url})" if source.url else ""
        st.markdown(f"{ns.number}. **{title}**{link}")
        if source.snippet:
            st.caption(source.snippet)
