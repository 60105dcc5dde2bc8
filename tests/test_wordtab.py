import pytest

from sollong.wordtab import find, find_unquoted, split_words


@pytest.mark.parametrize(
    "text, needle",
    [("hello world", "o"), ('abc"def"', '"'), ("xx/*yy*/", "*/"), ("aaa", "aa")],
)
def test_find_returns_first_occurrence(text, needle):
    pos = find(text, needle)
    assert text[pos:pos + len(needle)] == needle
    assert needle not in text[:pos + len(needle) - 1]


def test_find_missing_gives_minus_one():
    assert find("abc", "z") == -1
    assert find("ab", "abc") == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "")


def test_find_unquoted_skips_quoted_match():
    text = 'x "/*" then /* here'
    assert find_unquoted(text, "/*") == text.rindex("/*")


def test_find_unquoted_plain_match_equals_find():
    text = "ab // cd // ef"
    assert find_unquoted(text, "//") == find(text, "//")


def test_find_unquoted_all_quoted_gives_minus_one():
    assert find_unquoted('"a /* b"', "/*") == -1


def test_find_unquoted_rejects_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_newlines_in_words():
    assert split_words("a\nb c") == ["a\nb", "c"]