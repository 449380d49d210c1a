"""Host-side selection handling: pick the target range and splice the result."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .transform import SortMode, transform


@dataclass(frozen=True)
class TextEdit:
    start: int
    end: int
    text: str
    mode: SortMode


def current_line_range(document: str, offset: int) -> Tuple[int, int]:
    """Range of the line holding `offset`, without its line break."""
    offset = max(0, min(offset, len(document)))
    start = document.rfind('\n', 0, offset) + 1
    end = document.find('\n', offset)
    if end == -1:
        end = len(document)
    if end > start and document[end - 1] == '\r':
        end -= 1
    return start, end


def resolve_target_range(document: str, start: int, end: int) -> Tuple[int, int]:
    start, end = sorted((start, end))
    start = max(0, min(start, len(document)))
    end = max(0, min(end, len(document)))
    if start == end:
        return current_line_range(document, start)
    return start, end


def sort_selection(document: str, start: int, end: int) -> Tuple[str, TextEdit]:
    start, end = resolve_target_range(document, start, end)
    result = transform(document[start:end])
    edit = TextEdit(start=start, end=end, text=result.replacement, mode=result.mode)
    if result.mode is SortMode.NOOP:
        return document, edit
    return document[:start] + result.replacement + document[end:], edit
