"""String puzzles: numerals, brackets, paths, binary sums and character edits."""

from __future__ import annotations

import re
from typing import List

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())

_PATH_PART = re.compile(r"/+|[^/]+")

_VOWELS = frozenset("aeouiAEOUI")
_DIGITS = frozenset("0123456789")


def _roman_value(symbol: str) -> int:
    try:
        return _ROMAN_VALUES[symbol]
    except KeyError:
        raise ValueError(f"invalid roman numeral symbol: {symbol!r}") from None


def roman_to_int(s: str) -> int:
    """Convert a roman numeral to an integer."""
    values = [_roman_value(symbol) for symbol in s]
    if not values:
        return 0

    total = 0
    pending = values[0]
    for prev, curr in zip(values, values[1:]):
        if prev == curr:
            pending += curr
        elif prev < curr:
            total += curr - pending
            pending = 0
        else:
            total += pending
            pending = curr
    return total + pending


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    stack: List[str] = []
    for paren in s:
        if paren in _OPENING:
            stack.append(paren)
        elif paren in _PAIRS:
            if not stack or stack.pop() != _PAIRS[paren]:
                return False
        else:
            raise ValueError(f"unexpected paren: {paren!r}")
    return not stack


def generate_parenthesis(n: int) -> List[str]:
    """Return every well-formed string of ``n`` bracket pairs, sorted."""
    if n <= 0:
        return []

    current = {"()"}
    for _ in range(n - 1):
        current = {
            base[:i] + "()" + base[i:]
            for base in current
            for i in range(len(base))
        }
    return sorted(current)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings."""
    width = max(len(a), len(b))
    bits: List[str] = []
    carry = 0
    for x, y in zip(reversed(a.zfill(width)), reversed(b.zfill(width))):
        carry, bit = divmod(int(x) + int(y) + carry, 2)
        bits.append(str(bit))
    bits.append(str(carry))

    result = "".join(reversed(bits))
    if result.startswith("0"):
        return result[1:]
    return result


def simplify_path(path: str) -> str:
    """Reduce a Unix-style path to its canonical form."""
    parts: List[str] = []
    for raw in _PATH_PART.findall(path):
        part = "/" if raw.startswith("/") else raw
        if part == "..":
            parts = parts[: max(len(parts) - 2, 1)]
        elif part == ".":
            continue
        elif part == "/" and parts and parts[-1] == "/":
            continue
        else:
            parts.append(part)

    while len(parts) > 1 and parts[-1] == "/":
        parts.pop()

    return "".join(parts)


def convert_to_title(column_number: int) -> str:
    """Return the spreadsheet column title for a 1-based column number."""
    letters: List[str] = []
    while column_number > 0:
        column_number, rest = divmod(column_number - 1, 26)
        letters.append(chr(ord("A") + rest))
    return "".join(reversed(letters))


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters put."""
    vowels = iter([ch for ch in reversed(s) if ch in _VOWELS])
    return "".join(next(vowels) if ch in _VOWELS else ch for ch in s)


def clear_digits(s: str) -> str:
    """Remove every digit together with the nearest non-digit to its left."""
    kept: List[str] = []
    for ch in s:
        if ch in _DIGITS:
            if kept:
                kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)