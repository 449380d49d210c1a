from linesort.editing import current_line_range, resolve_target_range, sort_selection
from linesort.transform import SortMode


def test_current_line_range():
    assert current_line_range("one\ntwo\nthree", 5) == (4, 7)
    assert current_line_range("one\ntwo\nthree", 3) == (0, 3)
    assert current_line_range("one\ntwo\nthree", 13) == (8, 13)


def test_current_line_range_excludes_carriage_return():
    assert current_line_range("one\r\ntwo", 1) == (0, 3)


def test_resolve_target_range_orders_and_clamps():
    assert resolve_target_range("abcdef", 4, 1) == (1, 4)
    assert resolve_target_range("abc", 1, 99) == (1, 3)


def test_empty_selection_sorts_current_line():
    document = "x\nc, b, a\ny"
    new_document, edit = sort_selection(document, 3, 3)
    assert new_document == "x\na, b, c\ny"
    assert (edit.start, edit.end) == (2, 9)
    assert edit.mode is SortMode.INLINE


def test_selection_of_lines():
    new_document, edit = sort_selection("b\na\nc", 0, 5)
    assert new_document == "a\nb\nc"
    assert edit.mode is SortMode.LINES


def test_partial_selection_leaves_rest_untouched():
    document = "header\nz\ny\nfooter"
    new_document, _ = sort_selection(document, 7, 10)
    assert new_document == "header\ny\nz\nfooter"


def test_noop_returns_document_untouched():
    document = "hello world"
    new_document, edit = sort_selection(document, 0, 0)
    assert new_document is document
    assert edit.mode is SortMode.NOOP
