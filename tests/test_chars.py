import string

import pytest

from libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_lower,
    is_print,
    is_space,
    is_upper,
    to_lower,
    to_upper,
)


def _matching(predicate):
    return {i for i in range(256) if predicate(i)}


def test_alnum_table():
    expected = {ord(ch) for ch in string.ascii_letters + string.digits}
    assert _matching(is_alnum) == expected


def test_alpha_table():
    assert _matching(is_alpha) == {ord(ch) for ch in string.ascii_letters}


def test_digit_table():
    assert _matching(is_digit) == {ord(ch) for ch in string.digits}


def test_lower_table():
    assert _matching(is_lower) == {ord(ch) for ch in string.ascii_lowercase}


def test_upper_table():
    assert _matching(is_upper) == {ord(ch) for ch in string.ascii_uppercase}


def test_ascii_table():
    assert _matching(is_ascii) == set(range(128))


def test_ascii_simple_case():
    assert is_ascii(23) is True


def test_print_table():
    assert _matching(is_print) == set(range(32, 127))


def test_space_table():
    assert _matching(is_space) == {9, 10, 11, 12, 13, 32}


@pytest.mark.parametrize(
    "ch, alnum, alpha, digit",
    [("a", True, True, False), ("Z", True, True, False), ("5", True, False, True), ("!", False, False, False)],
)
def test_string_arguments(ch, alnum, alpha, digit):
    assert is_alnum(ch) is alnum
    assert is_alpha(ch) is alpha
    assert is_digit(ch) is digit


def test_to_upper_string():
    text = "Hello, World! 42"
    assert "".join(to_upper(ch) for ch in text) == "HELLO, WORLD! 42"


def test_to_lower_string():
    text = "Hello, World! 42"
    assert "".join(to_lower(ch) for ch in text) == "hello, world! 42"


def test_case_conversion_on_codes():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(200) == 200


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")