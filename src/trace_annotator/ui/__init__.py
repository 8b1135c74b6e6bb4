"""Streamlit UI helpers for the trace viewer."""

from trace_annotator.ui.answer_render import render_answer, render_sources
from trace_annotator.ui.trace_render import render_documents, render_stats, render_trace
from trace_annotator.ui import session_state

__all__ = ["render_answer", "render_sources", "render_trace", "render_documents", "render_stats", "session_state"]
