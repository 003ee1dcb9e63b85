import pytest

from leetkit.text import (
    add_binary,
    clear_digits,
    convert_to_title,
    generate_parenthesis,
    is_valid_parentheses,
    reverse_vowels,
    roman_to_int,
    simplify_path,
    str_str,
)


@pytest.mark.parametrize(
    "roman, expected",
    [("XX", 20), ("XXI", 21), ("MCMXCIV", 1994), ("IV", 4), ("", 0)],
)
def test_roman_to_int(roman, expected):
    assert roman_to_int(roman) == expected


def test_roman_to_int_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        roman_to_int("XQ")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()[]{}", True),
        ("{[]}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


def test_is_valid_parentheses_rejects_other_characters():
    with pytest.raises(ValueError):
        is_valid_parentheses("(a)")


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, []),
        (1, ["()"]),
        (2, ["()()", "(())"]),
        (3, ["((()))", "(()())", "(())()", "()(())", "()()()"]),
    ],
)
def test_generate_parenthesis(size, expected):
    result = generate_parenthesis(size)
    assert set(result) == set(expected)
    assert len(result) == len(expected)


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("sadbutsad", "sad", 0),
        ("leetcode", "leeto", -1),
        ("aaab", "aab", 1),
        ("abc", "", 0),
        ("abc", "c", 2),
    ],
)
def test_str_str(haystack, needle, expected):
    assert str_str(haystack, needle) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("11", "1", "100"),
        ("10", "01", "11"),
        ("11", "11", "110"),
        ("0", "0", "0"),
        ("1010", "1011", "10101"),
    ],
)
def test_add_binary(a, b, expected):
    assert add_binary(a, b) == expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/home//foo/", "/home/foo"),
        ("/home/", "/home"),
        ("/home/user/Documents/../Pictures", "/home/user/Pictures"),
        ("/.../a/../b/c/../d/./", "/.../b/d"),
        ("/", "/"),
        ("/.././GVzvE/./xBjU///../..///././//////T/../../.././zu/q/e", "/zu/q/e"),
    ],
)
def test_simplify_path(path, expected):
    assert simplify_path(path) == expected


@pytest.mark.parametrize(
    "number, expected",
    [(26, "Z"), (27, "AA"), (28, "AB"), (701, "ZY"), (1, "A"), (0, "")],
)
def test_convert_to_title(number, expected):
    assert convert_to_title(number) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("IceCreAm", "AceCreIm"), (" ", " "), ("hello", "holle"), ("xyz", "xyz")],
)
def test_reverse_vowels(text, expected):
    assert reverse_vowels(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("abc", "abc"), ("ab12", ""), ("ab12de", "de"), ("1a", "a")],
)
def test_clear_digits(text, expected):
    assert clear_digits(text) == expected