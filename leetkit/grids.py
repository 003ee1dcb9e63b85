"""Grid and triangle puzzles: walks, path counts and Pascal's triangle."""

from __future__ import annotations

from itertools import accumulate
from operator import add
from typing import List, Sequence, Tuple

_ROTATION = {
    (1, 0): (0, -1),
    (0, 1): (-1, 0),
    (-1, 0): (0, -1),
    (0, -1): (0, -1),
}

_PASCAL_ROWS: List[Tuple[int, ...]] = [(1,)]


def generate_matrix(n: int) -> List[List[int]]:
    """Walk an ``n`` x ``n`` grid writing the square of each step number.

    The walk turns whenever the next cell is free or off the grid; for
    ``n >= 2`` it steps off the grid, which raises ``IndexError``.
    """
    if n < 0:
        raise ValueError("size must not be negative")
    grid = [[0] * n for _ in range(n)]
    dx, dy = 1, 0
    x = y = 0

    def inside(px: int, py: int) -> bool:
        return 0 <= px < n and 0 <= py < n

    for step in range(1, n * n + 1):
        if not inside(x, y):
            raise IndexError(f"walk left the grid at ({x}, {y})")
        grid[x][y] = step * step
        nx, ny = x + dx, y + dy
        if not (inside(nx, ny) and grid[nx][ny] > 0):
            dx, dy = _ROTATION[(dx, dy)]
        x, y = x + dx, y + dy
    return grid


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` x ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths avoiding cells equal to 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")

    row: List[int] = []
    blocked = False
    for cell in grid[0]:
        blocked = blocked or cell == 1
        row.append(0 if blocked else 1)

    for cells in grid[1:]:
        current = [0 if cells[0] == 1 else row[0]]
        for j, cell in enumerate(cells[1:], start=1):
            current.append(0 if cell == 1 else current[j - 1] + row[j])
        row = current
    return row[len(grid[0]) - 1]


def _pascal(index: int) -> Tuple[int, ...]:
    while len(_PASCAL_ROWS) <= index:
        prev = _PASCAL_ROWS[-1]
        _PASCAL_ROWS.append((1,) + tuple(map(add, prev, prev[1:])) + (1,))
    return _PASCAL_ROWS[index]


def generate_pascal(num_rows: int) -> List[List[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("number of rows must not be negative")
    return [list(_pascal(i)) for i in range(num_rows)]


def pascal_row(row_index: int) -> List[int]:
    """Return row ``row_index`` (0-based) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row index must not be negative")
    return list(_pascal(row_index))


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum through a triangle."""
    if not triangle:
        raise ValueError("triangle must not be empty")

    prev: List[int] = []
    for row in triangle:
        current: List[int] = []
        last = len(row) - 1
        for i, value in enumerate(row):
            if i == 0:
                best = prev[0] if prev else 0
            elif i == last:
                best = prev[i - 1]
            else:
                best = min(prev[i - 1], prev[i])
            current.append(value + best)
        prev = current
    return min(prev)