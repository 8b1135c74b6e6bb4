"""Domain models for trace annotation.

Input records are validated with pydantic; everything derived from them is a
frozen dataclass so consumers can share the results of one load freely.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    title: str = ""
    url: str = ""
    snippet: str = ""

    @field_validator("title", "url", "snippet", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class ToolCallRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    tool_name: str
    call_id: str
    documents: List[RawDocument] = Field(default_factory=list)


class FullTraces(BaseModel):
    model_config = ConfigDict(extra="ignore")

    generated_text: str = ""
    total_tokens: int = 0
    tool_call_count: int = 0
    tool_calls: List[ToolCallRecord] = Field(default_factory=list)


class ExampleRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    problem: str = ""
    final_response: str = ""
    full_traces: FullTraces = Field(default_factory=FullTraces)


@dataclass(frozen=True)
class SourceRecord:
    id: str
    title: str
    url: str
    snippet: str = ""


@dataclass(frozen=True)
class NumberedSource:
    number: int
    source: SourceRecord


@dataclass(frozen=True)
class DocumentRecord:
    id: str
    title: str
    url: str
    snippet: str
    call_id: str
    tool_name: str


SEGMENT_TEXT = "text"
SEGMENT_TOOL_CALL = "tool_call"
SEGMENT_TOOL_OUTPUT = "tool_output"


@dataclass(frozen=True)
class TraceSegment:
    """One piece of the transcript.

    ``start``/``end`` are offsets into the original transcript. For text
    segments they cover the untrimmed gap between markup blocks, for tool
    segments the full tag including its delimiters.
    """

    kind: str
    content: str
    start: int
    end: int
    tool_name: Optional[str] = None
    params: Tuple[Tuple[str, str], ...] = ()

    def params_dict(self) -> Dict[str, str]:
        return dict(self.params)


@dataclass(frozen=True)
class TextSpan:
    text: str


@dataclass(frozen=True)
class CitationSpan:
    text: str
    ids: Tuple[str, ...]
    sources: Tuple[NumberedSource, ...] = ()

    @property
    def numbers(self) -> List[int]:
        return [s.number for s in self.sources]


AnswerSpan = Union[TextSpan, CitationSpan]


@dataclass(frozen=True)
class TraceStats:
    total_tokens: int = 0
    tool_call_count: int = 0
    cited_id_count: int = 0
    source_count: int = 0
    document_count: int = 0
    text_segments: int = 0
    tool_call_segments: int = 0
    tool_output_segments: int = 0


@dataclass(frozen=True)
class AnnotatedExample:
    problem: str = ""
    answer: str = ""
    sources: Tuple[NumberedSource, ...] = ()
    documents: Tuple[DocumentRecord, ...] = ()
    segments: Tuple[TraceSegment, ...] = ()
    answer_spans: Tuple[AnswerSpan, ...] = ()
    stats: TraceStats = field(default_factory=TraceStats)

    @classmethod
    def empty(cls) -> "AnnotatedExample":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not (self.problem or self.answer or self.segments)

    def to_dict(self) -> dict:
        spans = []
        for span in self.answer_spans:
            if isinstance(span, CitationSpan):
                spans.append({"type": "citation", "text": span.text, "ids": list(span.ids), "numbers": span.numbers})
            else:
                spans.append({"type": "text", "text": span.text})
        return {
            "problem": self.problem,
            "answer": self.answer,
            "sources": [{"number": s.number, **asdict(s.source)} for s in self.sources],
            "documents": [asdict(d) for d in self.documents],
            "segments": [
                {
                    "kind": seg.kind,
                    "content": seg.content,
                    "start": seg.start,
                    "end": seg.end,
                    "tool_name": seg.tool_name,
                    "params": seg.params_dict(),
                }
                for seg in self.segments
            ],
            "answer_spans": spans,
            "stats": asdict(self.stats),
        }


__all__ = [
    "RawDocument",
    "ToolCallRecord",
    "FullTraces",
    "ExampleRecord",
    "SourceRecord",
    "NumberedSource",
    "DocumentRecord",
    "TraceSegment",
    "TextSpan",
    "CitationSpan",
    "AnswerSpan",
    "TraceStats",
    "AnnotatedExample",
    "SEGMENT_TEXT",
    "SEGMENT_TOOL_CALL",
    "SEGMENT_TOOL_OUTPUT",
]
