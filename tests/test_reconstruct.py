import pytest

from linesort.delimiters import DelimiterKind, detect_delimiter
from linesort.parsing import parse_line
from linesort.reconstruct import join_string, reconstruct_line


def test_join_strings():
    assert join_string(DelimiterKind.COMMA) == ", "
    assert join_string(DelimiterKind.SEMICOLON) == "; "
    assert join_string(DelimiterKind.PIPE) == " | "
    assert join_string(DelimiterKind.MULTI_SPACE) == "  "


@pytest.mark.parametrize(
    "line",
    [
        "const colors = [red, blue, green] as const;",
        'colors = "red, blue, green, alpha"',
        "tags: python | javascript | rust | go",
        "path: /usr/bin; /home/user",
        "alpha  beta  gamma",
        "function foo(z, a, m, b)",
        "obj = {zebra, apple, mango}",
    ],
)
def test_unsorted_rebuild_reproduces_line(line):
    parsed = parse_line(line, detect_delimiter(line))
    assert reconstruct_line(parsed) == line


def test_rebuild_with_source_joiner():
    parsed = parse_line("tags: z,a,m,b", DelimiterKind.COMMA)
    assert reconstruct_line(parsed, joiner=",") == "tags: z,a,m,b"
    assert reconstruct_line(parsed) == "tags: z, a, m, b"


def test_rebuild_with_given_elements():
    parsed = parse_line("x = [b, a]", DelimiterKind.COMMA)
    assert reconstruct_line(parsed, ["a", "b"]) == "x = [a, b]"
    assert parsed.elements == ["b", "a"]
