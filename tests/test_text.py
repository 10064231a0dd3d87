import pytest

from libft.text import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strndup,
    strnlen,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def c_text(buffer):
    return bytes(buffer).split(b"\0", 1)[0].decode("utf-8")


def test_split_drops_trailing_separators():
    assert split("hello!zzzzzzzz", 122) == ["hello!"]


def test_split_with_string_separator():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_only_separators():
    assert split("zzzz", "z") == []


def test_strlcat_when_size_is_below_dst_length():
    d = bytearray(18)
    d[:11] = b"Destination"
    assert strlen(d) == 11
    assert strlcat(d, "Source", 6) == 12
    assert c_text(d) == "Destination"


def test_strlcat_appends_within_room():
    d = bytearray(18)
    d[:11] = b"Destination"
    assert strlcat(d, "Source", 18) == 17
    assert c_text(d) == "DestinationSource"


def test_strlcat_truncates():
    d = bytearray(18)
    d[:11] = b"Destination"
    assert strlcat(d, "Source", 14) == 17
    assert c_text(d) == "DestinationSo"


def test_strlcat_zero_size_returns_src_length():
    d = bytearray(4)
    assert strlcat(d, "Source", 0) == 6


def test_strlcpy_fixed_buffer():
    s1 = "String to copy"
    assert strlen(s1) == 14
    s2 = bytearray(15)
    assert strlen(s2) == 0
    assert strlcpy(s2, s1, 15) == 14
    assert strlen(s2) == 14
    assert c_text(s2) == "String to copy"


@pytest.mark.parametrize("s1", ["String to copy", "x", ""])
def test_strlcpy_buffer_sized_to_source(s1):
    s2 = bytearray(strlen(s1) + 1)
    assert strlcpy(s2, s1, strlen(s1) + 1) == strlen(s1)
    assert c_text(s2) == s1


def test_strlcpy_large_stack_buffer():
    source = "String to copy"
    buffer = bytearray(128)
    length = strlcpy(buffer, source, len(buffer))
    assert length < len(buffer)
    assert c_text(buffer) == source


def test_strlcpy_truncation_is_reported():
    buffer = bytearray(5)
    assert strlcpy(buffer, "String to copy", 5) == 14
    assert c_text(buffer) == "Stri"


def test_strlcpy_short_source():
    dst = bytearray(8)
    assert strlcpy(dst, "A", 3) == 1
    assert c_text(dst) == "A"


def test_strlcpy_empty_source():
    dst = bytearray(b"x" * 128)
    assert strlcpy(dst, "", 1) == 0
    assert c_text(dst) == ""


def test_strlcpy_size_zero_leaves_dst():
    dst = bytearray(b"abc\0")
    assert strlcpy(dst, "zz", 0) == 2
    assert dst == bytearray(b"abc\0")


def test_strlcpy_size_beyond_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), "abc", 8)


def test_strlen():
    assert strlen("hello") == 5
    assert strlen(b"abc\0def") == 3


def test_strlen_none():
    with pytest.raises(TypeError):
        strlen(None)


def test_strncmp():
    s1 = "HelloVorrrldwe"
    s2 = "HellpRicheddde"
    assert strncmp(s1, s2, 5) == -1
    assert strncmp(s1, s2, 4) == 0
    assert strncmp(s1, s2, 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("abc", "ab", 5) == ord("c")
    assert strncmp("ab", "ab", 10) == 0


def test_strndup():
    assert strndup("abcdef", 10) == "abcdef"
    assert strndup("abcdef", 3) == "abc"


@pytest.mark.parametrize("s, maxlen, expected", [("hello", 3, 3), ("hi", 10, 2), ("", 4, 0)])
def test_strnlen(s, maxlen, expected):
    assert strnlen(s, maxlen) == expected


def test_strnlen_negative():
    with pytest.raises(ValueError):
        strnlen("abc", -1)


def test_strchr_and_strrchr():
    assert strchr("hello", "l") == 2
    assert strrchr("hello", "l") == 3
    assert strchr("hello", "z") is None
    assert strrchr("hello", ord("h")) == 0


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == 5
    assert strrchr("hello", 0) == 5


def test_strnstr():
    assert strnstr("lorem ipsum", "ipsum", 11) == 6
    assert strnstr("lorem ipsum", "ipsum", 10) is None
    assert strnstr("lorem", "", 0) == 0
    assert strnstr("aab", "ab", 3) == 1


def test_strdup_and_strjoin():
    assert strdup("abc") == "abc"
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 9, 2) == ""


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"


def test_strtrim_none():
    with pytest.raises(TypeError):
        strtrim(None, "x")


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch * (i + 1)) == "abbccc"


def test_striteri_in_place():
    buffer = list("abc")
    seen = []

    def upper_odd(i, ch):
        seen.append(i)
        return ch.upper() if i % 2 else None

    striteri(buffer, upper_odd)
    assert buffer == ["a", "B", "c"]
    assert seen == [0, 1, 2]


def test_striteri_bytearray():
    buffer = bytearray(b"abc")
    striteri(buffer, lambda i, b: b - 32)
    assert buffer == bytearray(b"ABC")