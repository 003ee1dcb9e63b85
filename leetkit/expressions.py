"""Insert +, - and * between digits so that an expression hits a target."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Sequence, Tuple

OPERATORS = ("+", "-", "*")

_LEXEME = re.compile(r"\d+|[-+*]")


def digit_groupings(num: str) -> List[str]:
    """Return every way of grouping adjacent digits, groups joined by ``_``.

    A group that is exactly ``0`` never absorbs the digit after it.
    The result is sorted.
    """
    start = tuple(num)
    seen = {start}
    pending = [start]
    while pending:
        parts = pending.pop()
        for i in range(len(parts) - 1):
            if parts[i] == "0":
                continue
            merged = parts[:i] + (parts[i] + parts[i + 1],) + parts[i + 2:]
            if merged not in seen:
                seen.add(merged)
                pending.append(merged)
    return sorted("_".join(parts) for parts in seen)


@lru_cache(maxsize=None)
def _operator_combinations(size: int) -> Tuple[Tuple[str, ...], ...]:
    if size == 0:
        return ()
    if size == 1:
        return tuple((op,) for op in OPERATORS)
    rest = _operator_combinations(size - 1)
    return tuple((op,) + tail for op in OPERATORS for tail in rest)


def operator_combinations(size: int) -> List[Tuple[str, ...]]:
    """Return every tuple of ``size`` operators; none for size 0."""
    if size < 0:
        raise ValueError("size must not be negative")
    return list(_operator_combinations(size))


def _merge(numbers: Sequence[str], operators: Sequence[str]) -> str:
    pieces = [number + op for number, op in zip(numbers, operators)]
    return "".join(pieces) + numbers[-1]


def _evaluate(expression: str) -> int:
    items = _LEXEME.findall(expression)
    if not items or "".join(items) != expression:
        raise ValueError(f"malformed expression: {expression!r}")

    total = 0
    sign = 1
    term = int(items[0])
    for op, number in zip(items[1::2], items[2::2]):
        value = int(number)
        if op == "*":
            term *= value
        else:
            total += sign * term
            sign = 1 if op == "+" else -1
            term = value
    return total + sign * term


def add_operators(num: str, target: int) -> List[str]:
    """Return the expressions over the digits of ``num`` that evaluate to ``target``."""
    found: List[str] = []
    for grouping in digit_groupings(num):
        numbers = grouping.split("_")
        combinations = operator_combinations(len(numbers) - 1)
        if combinations:
            candidates = [_merge(numbers, ops) for ops in combinations]
        else:
            candidates = [grouping]
        found.extend(expr for expr in candidates if _evaluate(expr) == target)
    return found