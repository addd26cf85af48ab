import pytest

from wolfmaze.textops import (
    split,
    strchr,
    strcmp,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_counts_characters():
    assert strlen("") == 0
    assert strlen("hello") == len("hello")


def test_strchr_finds_first_occurrence():
    text = "banana"
    assert strchr(text, "n") == text.index("n")
    assert strchr(text, ord("a")) == text.index("a")


def test_strchr_missing_and_terminator():
    text = "banana"
    assert strchr(text, "z") is None
    assert strchr(text, "\0") == len(text)


def test_strrchr_finds_last_occurrence():
    text = "banana"
    assert strrchr(text, "a") == text.rindex("a")
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)


def test_strchr_rejects_multi_character_needle():
    with pytest.raises(ValueError):
        strchr("banana", "an")


def test_strcmp_equal_and_ordering():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("abc", "abd") == -strcmp("abd", "abc")


def test_strcmp_prefix_compares_against_terminator():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strncmp_limits_comparison():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) == ord("x") - ord("y")
    assert strncmp("abc", "xyz", 0) == 0


def test_strnstr_source_example():
    haystack = "Hello, world!"
    assert strnstr(haystack, "world", 0) is None
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")


def test_strnstr_match_must_fit_within_length():
    haystack = "Hello, world!"
    end = haystack.index("world") + len("world")
    assert strnstr(haystack, "world", end) == haystack.index("world")
    assert strnstr(haystack, "world", end - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("Hello", "", 0) == 0


def test_strlcpy_source_example():
    assert strlcpy("BRO", "WSUP", 1) == ("", len("WSUP"))


def test_strlcpy_size_zero_keeps_destination():
    assert strlcpy("BRO", "WSUP", 0) == ("BRO", len("WSUP"))


def test_strlcpy_truncates_to_size_minus_one():
    text, needed = strlcpy("", "WSUP", 3)
    assert len(text) == 2
    assert "WSUP".startswith(text)
    assert needed == len("WSUP")
    assert strlcpy("", "WSUP", 100) == ("WSUP", len("WSUP"))


def test_strlcat_appends_when_room():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("ab") + len("cd"))


def test_strlcat_truncates():
    text, needed = strlcat("ab", "cd", 4)
    assert len(text) == 3
    assert ("ab" + "cd").startswith(text)
    assert needed == len("abcd")


def test_strlcat_small_size():
    assert strlcat("ab", "cd", 0) == ("ab", len("cd"))
    assert strlcat("ab", "cd", 2) == ("ab", 2 + len("cd"))


def test_strdup_copies():
    assert strdup("hello") == "hello"
    assert strdup("") == ""
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_source_example():
    text = "Hello, world!"
    result = substr(text, 2, 8)
    assert len(result) == 8
    assert text.startswith(result, 2)


def test_substr_edges():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""
    assert substr("abc", 1, 100) == "bc"
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_source_example():
    assert strjoin("", "World") == "World"
    joined = strjoin("Hello", "World")
    assert joined.startswith("Hello") and joined.endswith("World")
    assert len(joined) == len("Hello") + len("World")


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_removes_edges_only():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyxmid x midyx", "xy") == "mid x mid"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_split_source_example():
    assert split("hello1world1test", "1") == ["hello", "world", "test"]


def test_split_drops_empty_pieces():
    assert split("11a111b1", "1") == ["a", "b"]
    assert split("1111", "1") == []
    assert split("", "1") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words), " ") == words
    assert split(ord(" ").__index__() and "a b", ord(" ")) == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,,b", ",,")


def test_strmapi_source_example():
    text = "hello world!"
    assert strmapi(text, lambda i, c: c.upper()) == text.upper()


def test_strmapi_passes_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    text = "abcd"
    assert strmapi(text, record) == text
    assert seen == list(range(len(text)))


def test_striteri_modifies_in_place():
    text = "hello world!"
    buffer = list(text)
    assert striteri(buffer, lambda i, c: c.upper()) is None
    assert "".join(buffer) == text.upper()


def test_striteri_on_bytearray_passes_indices():
    buffer = bytearray(b"abc")
    seen = []

    def record(i, b):
        seen.append(i)
        return b

    striteri(buffer, record)
    assert seen == list(range(len(buffer)))
    assert bytes(buffer) == b"abc"


def test_striteri_rejects_non_callable():
    with pytest.raises(TypeError):
        striteri(list("abc"), None)