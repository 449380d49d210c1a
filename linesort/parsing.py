from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .delimiters import WHITESPACE_RUN, DelimiterKind

# Checked in this order; only the first matching pair is consumed.
BRACKET_PAIRS = (('[', ']'), ('{', '}'), ('(', ')'))

KEY_VALUE = re.compile(r'([^:=]*[:=]\s*)(.*)', re.DOTALL)
QUOTED = re.compile(r'''(['"])((?:(?!\1).)*)\1''', re.DOTALL)


@dataclass(frozen=True)
class Bracketed:
    prefix: str
    open_bracket: str
    content: str
    close_bracket: str
    suffix: str


@dataclass(frozen=True)
class PrefixedQuoted:
    prefix: str
    content: str
    open_quote: Optional[str] = None
    close_quote: Optional[str] = None


@dataclass(frozen=True)
class Bare:
    content: str


LineShape = Union[Bracketed, PrefixedQuoted, Bare]


@dataclass
class ParsedLine:
    """A single line broken into its fixed context and its sortable elements.

    - prefix / suffix: text kept verbatim around the list
    - open_bracket / close_bracket: captured bracket characters, or None
    - open_quote / close_quote: captured quote characters, or None
    - elements: trimmed, non-empty pieces in left-to-right order
    """
    delimiter: DelimiterKind
    prefix: str = ''
    open_bracket: Optional[str] = None
    open_quote: Optional[str] = None
    elements: List[str] = field(default_factory=list)
    close_quote: Optional[str] = None
    close_bracket: Optional[str] = None
    suffix: str = ''


def match_bracketed(line: str) -> Optional[Bracketed]:
    for open_char, close_char in BRACKET_PAIRS:
        start = line.find(open_char)
        if start == -1:
            continue
        end = line.find(close_char, start + 1)
        if end == -1:
            continue
        return Bracketed(
            prefix=line[:start],
            open_bracket=open_char,
            content=line[start + 1:end],
            close_bracket=close_char,
            suffix=line[end + 1:],
        )
    return None


def match_prefixed(line: str) -> Optional[PrefixedQuoted]:
    m = KEY_VALUE.fullmatch(line)
    if not m:
        return None
    prefix, content = m.group(1), m.group(2)
    quoted = QUOTED.fullmatch(content)
    if quoted:
        quote = quoted.group(1)
        return PrefixedQuoted(prefix=prefix, content=quoted.group(2), open_quote=quote, close_quote=quote)
    return PrefixedQuoted(prefix=prefix, content=content)


def detect_shape(line: str) -> LineShape:
    """Pick the structural shape of a line: brackets, then key/value, then bare."""
    shape = match_bracketed(line)
    if shape is not None:
        return shape
    prefixed = match_prefixed(line)
    if prefixed is not None:
        return prefixed
    return Bare(content=line)


def split_elements(content: str, delimiter: DelimiterKind) -> List[str]:
    if delimiter is DelimiterKind.MULTI_SPACE:
        pieces = WHITESPACE_RUN.split(content)
    elif delimiter is DelimiterKind.NONE:
        pieces = [content]
    else:
        pieces = content.split(delimiter.char)

    elements: List[str] = []
    for piece in pieces:
        piece = piece.strip()
        if piece:
            elements.append(piece)
    return elements


def parse_line(line: str, delimiter: DelimiterKind) -> ParsedLine:
    shape = detect_shape(line)
    elements = split_elements(shape.content, delimiter)

    if isinstance(shape, Bracketed):
        return ParsedLine(
            delimiter=delimiter,
            prefix=shape.prefix,
            open_bracket=shape.open_bracket,
            elements=elements,
            close_bracket=shape.close_bracket,
            suffix=shape.suffix,
        )
    if isinstance(shape, PrefixedQuoted):
        return ParsedLine(
            delimiter=delimiter,
            prefix=shape.prefix,
            open_quote=shape.open_quote,
            elements=elements,
            close_quote=shape.close_quote,
        )
    return ParsedLine(delimiter=delimiter, elements=elements)
