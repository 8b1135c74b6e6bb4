"""Split a raw transcript into text, tool-call, and tool-output segments.

Both markup kinds are scanned independently, merged, and sorted by start
offset; the transcript is then walked once in that order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from trace_annotator.domain.models import SEGMENT_TEXT, SEGMENT_TOOL_CALL, SEGMENT_TOOL_OUTPUT, TraceSegment

CALL_TOOL_PATTERN = re.compile(r'<call_tool\s+name="([^"]*)"((?:\s+[\w-]+="[^"]*")*)\s*>(.*?)</call_tool>', re.DOTALL)
TOOL_OUTPUT_PATTERN = re.compile(r"<tool_output>(.*?)</tool_output>", re.DOTALL)
ATTRIBUTE_PATTERN = re.compile(r'([\w-]+)="([^"]*)"')


@dataclass(frozen=True)
class _Match:
    start: int
    end: int
    kind: str
    content: str
    tool_name: Optional[str] = None
    params: Tuple[Tuple[str, str], ...] = ()


def parse_attributes(raw: str) -> Tuple[Tuple[str, str], ...]:
    return tuple((m.group(1), m.group(2)) for m in ATTRIBUTE_PATTERN.finditer(raw or ""))


def _scan_tool_calls(text: str) -> List[_Match]:
    return [
        _Match(
            start=m.start(),
            end=m.end(),
            kind=SEGMENT_TOOL_CALL,
            content=m.group(3).strip(),
            tool_name=m.group(1),
            params=parse_attributes(m.group(2)),
        )
        for m in CALL_TOOL_PATTERN.finditer(text)
    ]


def _scan_tool_outputs(text: str) -> List[_Match]:
    return [
        _Match(start=m.start(), end=m.end(), kind=SEGMENT_TOOL_OUTPUT, content=m.group(1).strip())
        for m in TOOL_OUTPUT_PATTERN.finditer(text)
    ]


def _text_segment(text: str, start: int, end: int) -> Optional[TraceSegment]:
    content = text[start:end].strip()
    if not content:
        return None
    return TraceSegment(kind=SEGMENT_TEXT, content=content, start=start, end=end)


def segment_trace(text: str) -> List[TraceSegment]:
    """Return the transcript's segments in document order.

    Whitespace-only text between blocks is dropped. A block that starts
    inside an earlier block (nested markup) is skipped so segments never
    overlap.
    """
    if not text:
        return []
    matches = _scan_tool_calls(text) + _scan_tool_outputs(text)
    matches.sort(key=lambda m: (m.start, m.end))

    segments: List[TraceSegment] = []
    cursor = 0
    for match in matches:
        if match.start < cursor:
            continue
        gap = _text_segment(text, cursor, match.start)
        if gap is not None:
            segments.append(gap)
        segments.append(
            TraceSegment(
                kind=match.kind,
                content=match.content,
                start=match.start,
                end=match.end,
                tool_name=match.tool_name,
                params=match.params,
            )
        )
        cursor = match.end
    tail = _text_segment(text, cursor, len(text))
    if tail is not None:
        segments.append(tail)
    return segments


__all__ = ["CALL_TOOL_PATTERN", "TOOL_OUTPUT_PATTERN", "ATTRIBUTE_PATTERN", "parse_attributes", "segment_trace"]
