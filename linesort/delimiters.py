from __future__ import annotations

import re
from enum import Enum
from typing import Optional

BRACKET_REGION = re.compile(r'\[(.*?)\]|\{(.*?)\}|\((.*?)\)')
WHITESPACE_RUN = re.compile(r'\s{2,}')


class DelimiterKind(Enum):
    COMMA = ','
    SEMICOLON = ';'
    PIPE = '|'
    MULTI_SPACE = '  '
    NONE = ''

    @property
    def char(self) -> str:
        return self.value


# Tie order: the first kind reaching the highest count wins.
COUNTED_DELIMITERS = (DelimiterKind.COMMA, DelimiterKind.SEMICOLON, DelimiterKind.PIPE)


def bracket_interior(line: str) -> Optional[str]:
    """Return the text inside the leftmost [...], {...} or (...) region, if any."""
    match = BRACKET_REGION.search(line)
    if match is None:
        return None
    for group in match.groups():
        if group is not None:
            return group
    return ''


def detect_delimiter(line: str) -> DelimiterKind:
    """Decide how a single line should be split into elements.

    Only the bracket interior is analyzed when the line has one. Real
    delimiter characters take priority over whitespace runs, so a line of
    prose with word spacing is not treated as a list.
    """
    interior = bracket_interior(line)
    analyzed = interior if interior is not None else line

    best = DelimiterKind.NONE
    best_count = 0
    for kind in COUNTED_DELIMITERS:
        count = analyzed.count(kind.char)
        if count > best_count:
            best, best_count = kind, count

    if best_count > 0:
        return best
    if WHITESPACE_RUN.search(analyzed):
        return DelimiterKind.MULTI_SPACE
    return DelimiterKind.NONE
