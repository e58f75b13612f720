import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.textutils import (
    strchr,
    strdup,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
    substr,
)

plain_text = st.text(
    alphabet=st.characters(blacklist_characters="\0", max_codepoint=0x7F), max_size=30
)


@given(plain_text)
def test_strlen_matches_len_without_nul(s):
    assert strlen(s) == len(s)


def test_strlen_stops_at_nul():
    assert strlen("hello\0world") == strlen("hello")


@given(plain_text, st.integers(min_value=1, max_value=40))
def test_strlcpy_copies_what_fits(src, size):
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert len(copied) <= size - 1
    assert src.startswith(copied)


def test_strlcpy_zero_size_copies_nothing():
    copied, total = strlcpy("hello", 0)
    assert copied == ""
    assert total == len("hello")


def test_strlcat_source_example():
    dest, src = "hello world", "coucou"
    result, total = strlcat(dest, src, 100)
    assert result == dest + src
    assert total == len(dest) + len(src)


def test_strlcat_size_not_beyond_dest_leaves_dest():
    dest, src = "hello world", "coucou"
    result, total = strlcat(dest, src, 5)
    assert result == dest
    assert total == 5 + len(src)


@given(plain_text, plain_text, st.integers(min_value=0, max_value=70))
def test_strlcat_invariants(dest, src, size):
    result, total = strlcat(dest, src, size)
    assert result.startswith(dest)
    if size > len(dest):
        assert len(result) <= size - 1
        assert total == len(dest) + len(src)


def test_strchr_finds_first():
    s = "hello"
    assert strchr(s, "l") == s.index("l")
    assert strchr(s, ord("l")) == s.index("l")


def test_strrchr_finds_last():
    s = "hello"
    assert strrchr(s, "l") == s.rindex("l")


def test_strchr_and_strrchr_missing():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_nul_search_returns_terminator_index():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strncmp_source_example_sign():
    assert strncmp("hello", "helio", 5) > 0
    assert strncmp("helio", "hello", 5) < 0


def test_strncmp_within_common_prefix_is_zero():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_compares_lower():
    assert strncmp("ab", "abc", 3) < 0


@given(plain_text, st.integers(min_value=0, max_value=40))
def test_strncmp_equal_strings(s, n):
    assert strncmp(s, s, n) == 0


def test_strnstr_source_example():
    big = "siamo solo conchiglie sparse sulla sabbia"
    assert strnstr(big, "sparse", 42) == big.index("sparse")


def test_strnstr_match_must_fit_within_length():
    big = "siamo solo conchiglie sparse sulla sabbia"
    assert strnstr(big, "sparse", big.index("sparse") + 3) is None


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


@given(plain_text, plain_text)
def test_strjoin_is_concatenation(a, b):
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a) and joined.endswith(b)


def test_strdup_truncates_at_nul():
    assert strdup("abc\0def") == strdup("abc")


def test_substr_source_example():
    assert substr("bjr", 0, 3) == "bjr"


def test_substr_start_past_end_is_empty():
    assert substr("bjr", 10, 2) == ""


@given(plain_text, st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_substr_is_contained(s, start, length):
    part = substr(s, start, length)
    assert len(part) <= length
    if part:
        assert s[start:].startswith(part)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)