import pytest

from ftls.strops import (
    bounded_concat,
    bounded_copy,
    find_char,
    find_sub,
    find_sub_n,
    join,
    length_until,
    map_chars,
    map_chars_indexed,
    rfind_char,
    split,
    substring,
    trim,
    word_count,
)


def test_find_char_first_occurrence():
    text = "hello world"
    assert find_char(text, "o") == text.index("o")
    assert find_char(text, "z") is None


def test_find_char_terminator_is_end():
    assert find_char("abc", "\0") == len("abc")


def test_find_char_rejects_long_pattern():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_rfind_char_last_occurrence():
    text = "hello world"
    assert rfind_char(text, "o") == text.rindex("o")
    assert rfind_char(text, "q") is None
    assert rfind_char(text, "\0") == len(text)


def test_find_sub():
    haystack = "the quick brown fox"
    assert find_sub(haystack, "brown") == haystack.index("brown")
    assert find_sub(haystack, "cat") is None
    assert find_sub(haystack, "") == 0


def test_find_sub_n_limits_search():
    haystack = "foo bar baz"
    pos = haystack.index("bar")
    assert find_sub_n(haystack, "bar", pos + 3) == pos
    assert find_sub_n(haystack, "bar", pos + 2) is None
    assert find_sub_n(haystack, "", 0) == 0
    assert find_sub_n(None, "x", 0) is None


def test_length_until():
    assert length_until("key=value", "=") == len("key")
    assert length_until("novalue", "=") == len("novalue")
    assert length_until(None, "=") == 0


def test_substring():
    text = "abcdef"
    assert substring(text, 2, 3) == text[2:5]
    assert substring(None, 0, 1) is None
    with pytest.raises(IndexError):
        substring(text, 4, 10)


def test_join():
    assert join("Hello, ", "World!") == "Hello, World!"
    assert join(None, "x") is None
    assert join("x", None) is None


def test_trim():
    assert trim(" \t\n  Hello, World!\t \n") == "Hello, World!"
    assert trim(" \t\n ") == ""
    assert trim(None) is None


def test_split_skips_empty_words():
    assert split("**a*bb***ccc*", "*") == ["a", "bb", "ccc"]
    assert split("", "*") == []
    assert split(None, "*") is None


def test_split_and_word_count_agree():
    for text in ["  one two  three ", "single", "", "   "]:
        words = split(text, " ")
        assert word_count(text, " ") == len(words)
        assert " ".join(words) == " ".join(text.split())


def test_map_chars():
    assert map_chars("abc", str.upper) == "ABC"
    assert map_chars(None, str.upper) is None
    assert map_chars("abc", None) is None


def test_map_chars_indexed():
    result = map_chars_indexed("abcd", lambda i, ch: ch.upper() if i % 2 else ch)
    assert result == "aBcD"
    assert map_chars_indexed(None, lambda i, ch: ch) is None


def test_bounded_concat_fits():
    result, needed = bounded_concat("foo", "bar", 64)
    assert result == "foobar"
    assert needed == len("foobar")


def test_bounded_concat_truncates():
    result, needed = bounded_concat("foo", "barbaz", 6)
    assert result == "fooba"
    assert len(result) == 6 - 1
    assert needed == len("foobarbaz")


def test_bounded_concat_zero_size_and_overlong_dst():
    assert bounded_concat("foo", "bar", 0) == ("foo", len("bar"))
    assert bounded_concat("foobar", "xy", 3) == ("foobar", 3 + len("xy"))


def test_bounded_copy():
    assert bounded_copy("hello", 10) == ("hello", len("hello"))
    copied, length = bounded_copy("hello", 3)
    assert copied == "he"
    assert length == len("hello")
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_copy_negative_size():
    with pytest.raises(ValueError):
        bounded_copy("x", -1)