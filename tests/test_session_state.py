from trace_annotator.domain.models import AnnotatedExample
from trace_annotator.ui import session_state


class DummySt:
    def __init__(self):
        self.session_state = {}


def test_annotation_replaced_when_selection_changes(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(session_state, "st", dummy)
    loads = []

    def loader(name):
        loads.append(name)
        return AnnotatedExample(problem=name)

    assert session_state.get_annotated("one", loader).problem == "one"
    assert session_state.get_annotated("one", loader).problem == "one"
    assert session_state.get_annotated("two", loader).problem == "two"
    assert loads == ["one", "two"]

    session_state.clear_annotated()
    session_state.get_annotated("two", loader)
    assert loads == ["one", "two", "two"]


def test_selected_example_roundtrip(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(session_state, "st", dummy)
    assert session_state.get_selected_example() is None
    session_state.set_selected_example("sample")
    assert session_state.get_selected_example() == "sample"
