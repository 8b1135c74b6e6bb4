"""Helpers for Streamlit session state."""

from __future__ import annotations

from typing import Callable, Optional

import streamlit as st

from trace_annotator.domain.models import AnnotatedExample

SELECTED_EXAMPLE_KEY = "selected_example"
ANNOTATED_KEY = "annotated_example"
ANNOTATED_FOR_KEY = "annotated_example_for"


def get_selected_example() -> Optional[str]:
    return st.session_state.get(SELECTED_EXAMPLE_KEY)


def set_selected_example(name: str) -> None:
    st.session_state[SELECTED_EXAMPLE_KEY] = name


def get_annotated(name: str, loader: Callable[[str], AnnotatedExample]) -> AnnotatedExample:
    """Return the annotation for ``name``, rebuilding it when the selection changed.

    A new selection replaces the previous result wholesale.
    """
    if st.session_state.get(ANNOTATED_FOR_KEY) != name or ANNOTATED_KEY not in st.session_state:
        annotated = loader(name)
        st.session_state[ANNOTATED_KEY] = annotated
        st.session_state[ANNOTATED_FOR_KEY] = name
    return st.session_state[ANNOTATED_KEY]


def clear_annotated() -> None:
    st.session_state.pop(ANNOTATED_KEY, None)
    st.session_state.pop(ANNOTATED_FOR_KEY, None)
