import pytest

from wolfpix.textscan import find_substring, find_unquoted, split_words


def test_find_substring_locates_needle():
    text = "hello world"
    idx = find_substring(text, "world", 20)
    assert text[idx:].startswith("world")
    assert "world" not in text[:idx]


def test_find_substring_limit_and_missing():
    assert find_substring("hello world", "world", 4) == -1
    assert find_substring("hello", "xyz", 10) == -1


def test_find_substring_stops_at_nul():
    assert find_substring("abc\0def", "def", 10) == -1
    assert find_substring("abc\0def", "bc", 10) == 1


def test_find_substring_empty_needle():
    with pytest.raises(ValueError):
        find_substring("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = 'a "x" x'
    assert find_unquoted(text, "x", 10) == text.rindex("x")


def test_find_unquoted_matches_closing_quote():
    text = '"ab"'
    assert find_unquoted(text, '"', 5) == text.rindex('"')


def test_find_unquoted_comment_marker():
    text = '"/* inside */" /* outside */'
    idx = find_unquoted(text, "/*", len(text))
    assert idx == text.rindex("/*")


def test_find_unquoted_missing_and_limit():
    assert find_unquoted('"only quoted x"', "x", 20) == -1
    assert find_unquoted("abc", "abc", 2) == -1


def test_find_unquoted_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "", 3)


def test_split_words_spaces_and_tabs():
    assert split_words("  ab\tcd  ef ") == ["ab", "cd", "ef"]


def test_split_words_blank():
    assert split_words("") == []
    assert split_words("\t \t") == []


def test_split_words_keeps_other_whitespace_and_stops_at_nul():
    assert split_words("a\nb c") == ["a\nb", "c"]
    assert split_words("one two\0three") == ["one", "two"]