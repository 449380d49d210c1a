"""Core logic for linesort.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- split a selection into lines
- detect the delimiter of a single line
- parse a line into prefix/brackets/quotes/elements/suffix
- rebuild a line from sorted elements
"""
