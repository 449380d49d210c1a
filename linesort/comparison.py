from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List


def compare_ascii(a: str, b: str) -> int:
    """Case-sensitive code point comparison.

    Punctuation sorts before digits, digits before uppercase,
    uppercase before lowercase.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_ascii(items: Iterable[str]) -> List[str]:
    """Return a new, stably sorted list. The input is never mutated."""
    return sorted(items, key=cmp_to_key(compare_ascii))
