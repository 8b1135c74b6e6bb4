import streamlit as st

from trace_annotator.config import load_config
from trace_annotator.logging import configure_logging
from trace_annotator.services import example_service
from trace_annotator.ui import render_answer, render_documents, render_sources, render_stats, render_trace, session_state

st.set_page_config(page_title="Research Trace Viewer", layout="wide")

try:
    cfg = load_config()
except Exception as exc:  # pragma: no cover - UI guard
    st.error(f"Failed to load config: {exc}")
    st.stop()
configure_logging(cfg.logging.level)

st.title("Research Trace Viewer")

examples = example_service.list_examples(cfg)
if not examples:
    st.info(f"No examples found in {cfg.examples.directory}.")
    st.stop()

current = session_state.get_selected_example() or cfg.examples.default
index = examples.index(current) if current in examples else 0
selected = st.sidebar.selectbox("Example", examples, index=index)
session_state.set_selected_example(selected)

annotated = session_state.get_annotated(selected, lambda name: example_service.load_annotated_example(name, cfg))
if annotated.is_empty:
    st.warning("No data available for this example.")
    st.stop()

st.subheader("Question")
st.write(annotated.problem)
render_stats(annotated)

answer_tab, trace_tab, docs_tab = st.tabs(["Answer", "Trace", "Documents"])
with answer_tab:
    render_answer(annotated)
    render_sources(annotated)
with trace_tab:
    render_trace(annotated)
with docs_tab:
    render_documents(annotated)
