from __future__ import annotations

import re

ANY_LINE_BREAK = re.compile(r'\r\n?')


def normalize_line_endings(text: str) -> str:
    """Convert '\\r\\n' and lone '\\r' to '\\n'.

    Selection offsets reported by the editor textbox count every line
    break as a single character, so the loaded text must too.
    """
    return ANY_LINE_BREAK.sub('\n', text)


def read_text_content(file_obj) -> str:
    """Read an uploaded file or file path into editor text.

    A leading UTF-8 byte order mark is dropped and line endings are
    normalized to '\\n'.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return normalize_line_endings(content.lstrip('\ufeff'))

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()
