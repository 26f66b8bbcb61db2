import pytest

from minilibc.strings import compare, concat, copy, find, length


@pytest.mark.parametrize("text", ["", "a", "hello world", "中文字串"])
def test_length_matches_len(text):
    assert length(text) == len(text)


def test_length_stops_at_nul():
    assert length("abc\0def") == len("abc")


def test_copy_round_trip():
    assert copy("hello") == "hello"


def test_copy_stops_at_nul():
    assert copy("abc\0def") == "abc"


def test_concat_joins():
    assert concat("foo", "bar") == "foo" + "bar"


def test_concat_length_is_sum():
    dest, src = "first part", "second"
    assert length(concat(dest, src)) == length(dest) + length(src)


def test_concat_respects_terminators():
    assert concat("ab\0zz", "cd\0yy") == "ab" + "cd"


@pytest.mark.parametrize("text", ["", "same", "x y z"])
def test_compare_equal_is_zero(text):
    assert compare(text, text) == 0


@pytest.mark.parametrize(
    "first, second",
    [("apple", "apricot"), ("abc", "abd"), ("ab", "abc"), ("", "a"), ("A", "a")],
)
def test_compare_sign_matches_ordering(first, second):
    assert compare(first, second) < 0
    assert compare(second, first) > 0


def test_compare_is_antisymmetric():
    assert compare("hello", "help") == -compare("help", "hello")


def test_compare_difference_of_first_mismatch():
    assert compare("abc", "abd") == ord("c") - ord("d")


def test_compare_prefix_uses_next_char():
    assert compare("abc", "ab") == ord("c")


@pytest.mark.parametrize(
    "text, sub",
    [("hello world", "world"), ("hello world", "o"), ("aaa", "aa"), ("abc", "abc")],
)
def test_find_matches_builtin(text, sub):
    assert find(text, sub) == text.find(sub)


def test_find_empty_substring_is_zero():
    assert find("anything", "") == 0


def test_find_missing_returns_none():
    assert find("hello", "xyz") is None


def test_find_in_empty_text():
    assert find("", "a") is None