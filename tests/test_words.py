import pytest

from leetkit.words import group_anagrams, shortest_common_supersequence, word_break


def _normalise(groups):
    return sorted(sorted(group) for group in groups)


def _is_subsequence(small, big):
    chars = iter(big)
    return all(ch in chars for ch in small)


def test_group_anagrams():
    result = group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
    assert _normalise(result) == [["ate", "eat", "tea"], ["bat"], ["nat", "tan"]]


def test_group_anagrams_keeps_duplicates():
    result = group_anagrams(["a", "b", "a"])
    assert _normalise(result) == [["a", "a"], ["b"]]


def test_group_anagrams_empty_word():
    assert group_anagrams([""]) == [[""]]


def test_group_anagrams_rejects_non_lowercase():
    with pytest.raises(ValueError):
        group_anagrams(["Abc"])


@pytest.mark.parametrize(
    "text, words, expected",
    [
        (
            "a" * 150 + "b",
            ["a" * n for n in range(1, 11)],
            False,
        ),
        (
            "a" * 75 + "baab" + "a" * 70,
            ["a" * n for n in range(2, 11)] + ["ba"],
            False,
        ),
        ("leetcode", ["leet", "code"], True),
        ("applepenapple", ["apple", "pen"], True),
        ("ab", ["a"], False),
    ],
)
def test_word_break(text, words, expected):
    assert word_break(text, words) is expected


def test_word_break_rejects_empty_string():
    with pytest.raises(ValueError):
        word_break("", ["a"])


@pytest.mark.parametrize(
    "str1, str2, expected",
    [
        ("abac", "cab", "cabac"),
        ("aaaaaaaa", "aaaaaaaa", "aaaaaaaa"),
        ("bbbaaaba", "bbababbb", "bbbaaababbb"),
        ("abcde", "bcd", "abcde"),
        ("bcd", "abcde", "abcde"),
    ],
)
def test_shortest_common_supersequence(str1, str2, expected):
    assert shortest_common_supersequence(str1, str2) == expected


@pytest.mark.parametrize(
    "str1, str2",
    [("abac", "cab"), ("bcacaaab", "bbabaccc"), ("xyz", "abc"), ("", "abc")],
)
def test_supersequence_contains_both(str1, str2):
    result = shortest_common_supersequence(str1, str2)
    assert _is_subsequence(str1, result)
    assert _is_subsequence(str2, result)
    assert len(result) <= len(str1) + len(str2)