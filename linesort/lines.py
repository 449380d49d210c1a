from __future__ import annotations

import re
from typing import List

LINE_BREAK = re.compile(r'\r?\n')


def split_lines(text: str) -> List[str]:
    # Empty lines are kept; they sort first.
    return LINE_BREAK.split(text)
