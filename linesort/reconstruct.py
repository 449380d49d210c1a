from __future__ import annotations

from typing import List, Optional

from .delimiters import DelimiterKind
from .parsing import ParsedLine


def join_string(delimiter: DelimiterKind) -> str:
    """Normalized separator used when rebuilding a line.

    Irregular spacing in the source is not preserved.
    """
    if delimiter is DelimiterKind.PIPE:
        return ' | '
    if delimiter is DelimiterKind.MULTI_SPACE:
        return '  '
    return f"{delimiter.char} "


def reconstruct_line(
    parsed: ParsedLine,
    elements: Optional[List[str]] = None,
    joiner: Optional[str] = None,
) -> str:
    if elements is None:
        elements = parsed.elements
    if joiner is None:
        joiner = join_string(parsed.delimiter)

    return ''.join([
        parsed.prefix,
        parsed.open_quote or '',
        parsed.open_bracket or '',
        joiner.join(elements),
        parsed.close_bracket or '',
        parsed.close_quote or '',
        parsed.suffix,
    ])
