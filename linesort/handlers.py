import logging
import os
import tempfile
from typing import List, Optional

import gradio as gr

from .editing import sort_selection
from .io_utils import read_text_content
from .transform import SortMode

logger = logging.getLogger(__name__)

NO_DELIMITER_MESSAGE = (
    "No delimiter detected. Select several lines, or a single line with comma, "
    "semicolon, pipe or multi-space separated values."
)

STATUS_BY_MODE = {
    SortMode.LINES: "Sorted {count} lines.",
    SortMode.INLINE: "Sorted inline elements.",
    SortMode.NOOP: NO_DELIMITER_MESSAGE,
}

ALREADY_SORTED_MESSAGE = "Selection is already sorted."


def remember_selection(evt: gr.SelectData) -> Optional[List[int]]:
    """Keep the [start, end] offsets of the latest textbox selection."""
    index = evt.index
    if isinstance(index, (list, tuple)) and len(index) == 2:
        return [int(index[0]), int(index[1])]
    if isinstance(index, int):
        return [index, index]
    return None


def clear_selection(_document=None):
    return None


def alphabetize_handler(document: str, selection):
    if not document:
        return document, "No text to alphabetize.", None

    if not selection:
        return document, "Please select text to alphabetize", None

    try:
        start, end = int(selection[0]), int(selection[1])
        new_document, edit = sort_selection(document, start, end)
    except Exception as e:
        logger.exception("Alphabetize failed")
        return document, f"Failed to alphabetize: {str(e)}", None

    if edit.mode is not SortMode.NOOP and new_document == document:
        message = ALREADY_SORTED_MESSAGE
    else:
        count = edit.text.count('\n') + 1
        message = STATUS_BY_MODE[edit.mode].format(count=count)
    logger.info("Alphabetize finished in %s mode", edit.mode.value)
    return new_document, message, None


def load_text_file_handler(file_obj):
    if file_obj is None:
        return "", "No file uploaded.", None

    try:
        content = read_text_content(file_obj)
    except Exception as e:
        return "", f"Error reading file: {str(e)}", None

    line_count = len(content.splitlines())
    return content, f"Successfully loaded. Found {line_count} lines.", None


def export_text_handler(document: str, file_name: Optional[str] = None):
    if not document:
        return None, "No text to export."

    if not file_name or not file_name.strip():
        file_name = "sorted"
    file_name = file_name.strip()
    if not file_name.lower().endswith(".txt"):
        file_name += ".txt"

    path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(document)
        return path, f"Export successful! Saved to {path}"
    except Exception as e:
        return None, f"Error during export: {str(e)}"
