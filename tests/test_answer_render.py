from trace_annotator.annotate.segments import segment_trace
from trace_annotator.domain.models import (
    AnnotatedExample,
    CitationSpan,
    DocumentRecord,
    NumberedSource,
    SourceRecord,
    TextSpan,
)
from trace_annotator.ui import answer_render, trace_render


class DummyExpander:
    def __init__(self, parent):
        self.parent = parent

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class DummySt:
    def __init__(self):
        self.markdowns = []
        self.captions = []
        self.infos = []
        self.expanders = []
        self.jsons = []
        self.codes = []
        self.texts = []

    def markdown(self, text):
        self.markdowns.append(text)

    def caption(self, text):
        self.captions.append(text)

    def info(self, text):
        self.infos.append(text)

    def expander(self, label, *args, **kwargs):
        self.expanders.append(label)
        return DummyExpander(self)

    def json(self, data):
        self.jsons.append(data)

    def code(self, text):
        self.codes.append(text)

    def text(self, text):
        self.texts.append(text)


SOURCE_A = NumberedSource(1, SourceRecord(id="a", title="Source A", url="https://a.example", snippet="alpha"))
ANNOTATED = AnnotatedExample(
    problem="q",
    answer="...",
    sources=(SOURCE_A,),
    answer_spans=(
        TextSpan("See "),
        CitationSpan(text="this", ids=("a",), sources=(SOURCE_A,)),
        TextSpan(" and "),
        CitationSpan(text="that", ids=("zz",)),
    ),
)


def test_answer_markdown_labels_citations():
    text = answer_render.answer_markdown(ANNOTATED.answer_spans)
    assert text == "See this **[1]** and that **[?]**"


def test_render_answer_reports_missing_sources(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(answer_render, "st", dummy)
    answer_render.render_answer(ANNOTATED)
    assert any(answer_render.NO_SOURCE_TEXT in m for m in dummy.markdowns)
    assert any("Source A" in m for m in dummy.markdowns)


def test_render_sources_lists_numbers(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(answer_render, "st", dummy)
    answer_render.render_sources(ANNOTATED)
    assert any(m.startswith("1. **Source A**") for m in dummy.markdowns)
    assert dummy.captions == ["alpha"]


def test_render_trace_and_documents(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(trace_render, "st", dummy)
    segments = segment_trace('plan <call_tool name="search" q="x">x</call_tool><tool_output>out</tool_output>')
    doc = DocumentRecord(id="c1-0", title="Doc", url="u", snippet="", call_id="c1", tool_name="search")
    annotated = AnnotatedExample(problem="q", segments=tuple(segments), documents=(doc,))
    trace_render.render_trace(annotated)
    trace_render.render_documents(annotated)
    assert dummy.expanders == ["2. Tool call: search", "3. Tool output"]
    assert dummy.jsons == [{"q": "x"}]
    assert dummy.texts == ["out"]
    assert any("(search, call c1)" in m for m in dummy.markdowns)


def test_render_documents_empty(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(trace_render, "st", dummy)
    trace_render.render_documents(AnnotatedExample.empty())
    assert dummy.infos == ["No cited documents."]
