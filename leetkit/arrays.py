"""Array puzzles: searching, combinations, jumps, windows and list matching."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise, permutations
from typing import Dict, List, Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    if not nums:
        raise ValueError("cannot search an empty sequence")
    start, end = 0, len(nums)
    while end - start > 1:
        middle = (start + end) // 2
        if target > nums[middle]:
            start = middle
        else:
            end = middle
    return start if nums[start] > target else start + 1


def combination_sum(candidates: Sequence[int], target: int) -> List[List[int]]:
    """Return every multiset of candidates summing to ``target``.

    Each combination lists candidates in the order they appear in the input,
    and a candidate may be repeated.
    """
    found: List[List[int]] = []

    def search(prefix: List[int], start: int, remaining: int) -> None:
        for index in range(start, len(candidates)):
            value = candidates[index]
            if value == remaining:
                found.append(prefix + [value])
            elif value < remaining:
                search(prefix + [value], index, remaining - value)

    search([], 0, target)
    return found


def permute(nums: Sequence[int]) -> List[List[int]]:
    """Return every ordering of ``nums``; none for an empty input."""
    if not nums:
        return []
    return [list(order) for order in permutations(nums)]


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from the first.

    ``nums[i]`` is the longest jump allowed from ``i``. Targets are explored
    from the farthest down, stopping at the first one already seen.
    """
    if not nums:
        raise ValueError("cannot jump through an empty sequence")
    dest = len(nums) - 1
    visited = {0}
    stack = [0]
    while stack:
        current = stack.pop()
        if current == dest:
            return True
        for target in range(min(current + nums[current], dest), current, -1):
            if target in visited:
                break
            visited.add(target)
            stack.append(target)
    return False


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    window: Counter[int] = Counter()
    size = 0
    for index, value in enumerate(nums):
        if size == k + 1:
            window[nums[index - k - 1]] -= 1
            size -= 1
        window[value] += 1
        size += 1
        if window[value] > 1:
            return True
    return False


def find_poisoned_duration(time_series: Sequence[int], duration: int) -> int:
    """Return the total time poisoned by attacks at ``time_series``."""
    return duration + sum(
        min(later - earlier, duration) for earlier, later in pairwise(time_series)
    )


def find_restaurant(list1: Sequence[str], list2: Sequence[str]) -> List[str]:
    """Return the common entries with the smallest index sum."""
    positions: Dict[str, int] = {name: index for index, name in enumerate(list1)}
    common = [
        (positions[name] + second, name)
        for second, name in enumerate(list2)
        if name in positions
    ]
    if not common:
        return []
    best = min(total for total, _ in common)
    return [name for total, name in common if total == best]