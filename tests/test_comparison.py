from linesort.comparison import compare_ascii, sort_ascii


def test_compare_ascii_signs():
    assert compare_ascii("a", "b") < 0
    assert compare_ascii("b", "a") > 0
    assert compare_ascii("same", "same") == 0


def test_compare_ascii_is_case_sensitive():
    assert compare_ascii("Zebra", "apple") < 0
    assert compare_ascii("APPLE", "Apple") < 0


def test_character_class_order():
    # punctuation < digits < uppercase < lowercase
    assert sort_ascii(["a", "A", "1", "!"]) == ["!", "1", "A", "a"]


def test_empty_string_sorts_first():
    assert sort_ascii(["b", "", "a"]) == ["", "a", "b"]


def test_sort_returns_new_list():
    items = ["c", "b", "a"]
    result = sort_ascii(items)
    assert result == ["a", "b", "c"]
    assert items == ["c", "b", "a"]
    assert result is not items


def test_comparator_is_total_and_transitive():
    samples = ["", "!", "#", "1", "10", "2", "@", "A", "Zoo", "a", "apple", "zebra"]
    for a in samples:
        for b in samples:
            outcomes = [compare_ascii(a, b) < 0, compare_ascii(a, b) == 0, compare_ascii(a, b) > 0]
            assert outcomes.count(True) == 1
            assert (compare_ascii(a, b) < 0) == (compare_ascii(b, a) > 0)
    for a in samples:
        for b in samples:
            for c in samples:
                if compare_ascii(a, b) < 0 and compare_ascii(b, c) < 0:
                    assert compare_ascii(a, c) < 0
