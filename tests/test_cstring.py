import pytest
from hypothesis import given, strategies as st

from profanutils.cstring import (
    ascii_to_int,
    basename,
    dirname,
    double_to_ascii,
    hex_to_ascii,
    int_to_ascii,
    memccpy,
    memcmp,
    memmem,
    memrchr,
    stpncpy,
    str_cmp,
    str_count,
    str_delchar,
    str_end_split,
    str_in_str,
    str_start_split,
    strlcat,
    strlcpy,
    strnlen,
    strpbrk,
    strrchr,
)


def test_int_to_ascii_values_from_source():
    assert int_to_ascii(10) == "10"
    assert int_to_ascii(-10) == "-10"


@given(st.integers(min_value=0, max_value=2**31 - 1))
def test_int_ascii_round_trip(n):
    assert ascii_to_int(int_to_ascii(n)) == n


def test_ascii_to_int_plain():
    assert ascii_to_int("10") == 10


def test_hex_zero():
    assert hex_to_ascii(0) == "0x0"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_hex_round_trip(n):
    text = hex_to_ascii(n)
    assert text.startswith("0x")
    assert int(text, 16) == n & 0xFFFFFFFF
    assert set(text[2:]) <= set("0123456789abcdef")
    assert len(text) == 3 or text[2] != "0"


@given(st.floats(min_value=0, max_value=1e6, allow_nan=False))
def test_double_to_ascii_shape(x):
    text = double_to_ascii(x)
    assert text.startswith(int_to_ascii(int(x)) + ".")
    assert text.endswith("0")


@given(st.lists(st.text(alphabet="abc", max_size=4), min_size=1, max_size=6))
def test_str_count_separators(parts):
    assert str_count("/".join(parts), "/") == len(parts) - 1


def test_splits():
    assert str_start_split("ls /bin", " ") == "ls"
    assert str_end_split("ls /bin", " ") == "/bin"
    assert str_start_split("exit", " ") == "exit"
    assert str_end_split("exit", " ") == "exit"


@given(st.text(alphabet="ab/", max_size=20))
def test_str_delchar(text):
    result = str_delchar(text, "/")
    assert "/" not in result
    assert len(result) == len(text) - str_count(text, "/")


def test_str_in_str_skips_last_position():
    assert str_in_str("abcd", "bc") is True
    assert str_in_str("abcd", "cd") is False
    assert str_in_str("abcd", "abcd") is False
    assert str_in_str("abcd", "zz") is False


def test_str_cmp():
    assert str_cmp("abc", "abc") == 0
    assert str_cmp("abc", "abcd") == -1
    assert str_cmp("abd", "abc") > 0
    assert str_cmp("abc", "abd") < 0


def test_basename_cases_from_source():
    assert basename("test1/test2/test3") == "test3"
    assert basename("test1/test2/test3/") == ""
    assert basename("test1/test2/test3//") == ""
    assert basename("/a") == "a"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/usr/lib", "/usr"),
        ("usr", "."),
        ("", "."),
        ("/", "/"),
        ("//", "//"),
        ("/usr", "/"),
        ("usr/lib/", "usr"),
        ("usr/", "."),
    ],
)
def test_dirname(path, expected):
    assert dirname(path) == expected


def test_memccpy():
    assert memccpy(b"hello world", ord(" "), 20) == b"hello "
    assert memccpy(b"hello world", ord(" "), 3) is None
    assert memccpy(b"hello", ord("z"), 5) is None


def test_memcmp():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"b", b"a", 1) > 0


@given(st.binary(max_size=20), st.binary(min_size=1, max_size=3))
def test_memmem(haystack, needle):
    index = memmem(haystack, needle)
    if index is None:
        assert needle not in haystack
    else:
        assert haystack[index:index + len(needle)] == needle
        assert needle not in haystack[: index + len(needle) - 1]


def test_memmem_empty_needle():
    assert memmem(b"abc", b"") == 0


@given(st.binary(max_size=20), st.integers(min_value=0, max_value=255), st.integers(min_value=0, max_value=25))
def test_memrchr(data, value, n):
    index = memrchr(data, value, n)
    window = data[:n]
    if index is None:
        assert value not in window
    else:
        assert window[index] == value
        assert value not in window[index + 1:]


def test_strpbrk():
    assert strpbrk("hello", "lo") == 2
    assert strpbrk("hello", "xyz") is None


def test_strrchr():
    assert strrchr("a/b/c", "/") == 3
    assert strrchr("abc", "\0") == 3
    assert strrchr("abc", "z") is None


@given(st.text(max_size=20), st.integers(min_value=0, max_value=30))
def test_strnlen_bounded(text, maxlen):
    result = strnlen(text, maxlen)
    assert result <= maxlen
    assert result <= len(text)


def test_strlcpy():
    assert strlcpy("hello", 4) == ("hel", 5)
    assert strlcpy("hello", 0) == ("", 5)
    assert strlcpy("hi", 10) == ("hi", 2)


def test_strlcat():
    assert strlcat("foo", "bar", 10) == ("foobar", 6)
    assert strlcat("foo", "bar", 5) == ("foob", 6)
    assert strlcat("foobar", "xy", 3) == ("foobar", 5)


@given(st.text(alphabet="abc", max_size=10), st.integers(min_value=0, max_value=12))
def test_stpncpy(src, n):
    buffer, end = stpncpy(src, n)
    assert len(buffer) == n
    assert buffer[:end] == src[:end]
    assert set(buffer[end:]) <= {"\0"}