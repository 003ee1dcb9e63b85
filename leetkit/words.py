"""Word puzzles: anagram groups, dictionary segmentation and supersequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple


def _anagram_key(word: str) -> Tuple[int, ...]:
    counts = [0] * 26
    for ch in word:
        index = ord(ch) - ord("a")
        if not 0 <= index < 26:
            raise ValueError(f"expected lowercase latin letters, got {ch!r}")
        counts[index] += 1
    return tuple(counts)


def group_anagrams(strs: Iterable[str]) -> List[List[str]]:
    """Group words that are anagrams of each other.

    Groups appear in order of first occurrence; repeated words sit together.
    """
    groups: Dict[Tuple[int, ...], Dict[str, int]] = {}
    for word in strs:
        group = groups.setdefault(_anagram_key(word), {})
        group[word] = group.get(word, 0) + 1

    return [
        [word for word, count in group.items() for _ in range(count)]
        for group in groups.values()
    ]


@dataclass
class _TrieNode:
    final: bool = False
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)


def _build_trie(words: Iterable[str]) -> _TrieNode:
    root = _TrieNode()
    for word in words:
        node = root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        if node is not root:
            node.final = True
    return root


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into dictionary words.

    The split is greedy: a word is taken as soon as one ends.
    """
    if not s:
        raise ValueError("cannot segment an empty string")

    root = _build_trie(word_dict)
    node = root
    last = len(s) - 1
    for i, ch in enumerate(s):
        child = node.children.get(ch)
        if child is None:
            return False
        if i == last:
            return child.final
        node = root if child.final else child
    return False


def _overlap(a: str, b: str, start: int) -> int:
    matched = 0
    for ch in a[start:]:
        if matched == len(b):
            break
        if ch == b[matched]:
            matched += 1
    return matched


def _concat_min(a: str, b: str) -> str:
    best = max((_overlap(a, b, i) for i in range(len(a))), default=0)
    return a + b[best:]


def shortest_common_supersequence(str1: str, str2: str) -> str:
    """Return a short string holding both inputs as subsequences."""
    if str1 == str2:
        return str1
    if len(str1) > len(str2) and str2 in str1:
        return str1
    if len(str1) < len(str2) and str1 in str2:
        return str2

    first = _concat_min(str1, str2)
    second = _concat_min(str2, str1)
    return second if len(first) > len(second) else first