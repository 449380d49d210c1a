from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .comparison import sort_ascii
from .delimiters import DelimiterKind, detect_delimiter
from .lines import split_lines
from .parsing import parse_line
from .reconstruct import reconstruct_line

logger = logging.getLogger(__name__)


class SortMode(Enum):
    LINES = 'lines'
    INLINE = 'inline'
    NOOP = 'no-op'


@dataclass(frozen=True)
class TransformResult:
    replacement: str
    mode: SortMode

    @property
    def changed(self) -> bool:
        return self.mode is not SortMode.NOOP


def sort_inline(line: str) -> TransformResult:
    delimiter = detect_delimiter(line)
    if delimiter is DelimiterKind.NONE:
        logger.debug("No delimiter detected in %r", line)
        return TransformResult(line, SortMode.NOOP)

    parsed = parse_line(line, delimiter)
    logger.debug("Sorting %d inline elements split on %s", len(parsed.elements), delimiter.name)
    return TransformResult(reconstruct_line(parsed, sort_ascii(parsed.elements)), SortMode.INLINE)


def transform(text: str) -> TransformResult:
    """Sort a selection.

    Several lines are reordered as whole lines and rejoined with '\\n'.
    A single line has its inline elements reordered instead; when no
    delimiter is found the text comes back unchanged with mode NOOP.
    """
    lines = split_lines(text)
    if len(lines) > 1:
        logger.debug("Sorting %d lines", len(lines))
        return TransformResult('\n'.join(sort_ascii(lines)), SortMode.LINES)
    return sort_inline(lines[0])
