"""Number puzzles: decimal strings, digit lists, square roots and happy numbers."""

from __future__ import annotations

from typing import Iterable, List

_SQRT_UPPER = int(float(1 << 15) * 1.5)
_PERFECT_SQUARE_UPPER = int(float(1 << 15) * 1.42)


def _digit_of(ch: str) -> int:
    if not "0" <= ch <= "9" or len(ch) != 1:
        raise ValueError(f"unexpected digit: {ch!r}")
    return ord(ch) - ord("0")


class BigInt:
    """Arbitrary-length non-negative integer held as decimal digits, most significant first."""

    __slots__ = ("_digits",)

    def __init__(self, digits: Iterable[int] = ()) -> None:
        values = list(digits)
        for digit in values:
            if not 0 <= digit <= 9:
                raise ValueError(f"unexpected digit: {digit!r}")
        self._digits: List[int] = values or [0]

    @classmethod
    def from_string(cls, text: str) -> "BigInt":
        """Parse a string of decimal digits."""
        return cls(_digit_of(ch) for ch in text)

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self._digits)

    def __repr__(self) -> str:
        return f"BigInt{{{self}}}"

    def __len__(self) -> int:
        return len(self._digits)

    def _digit_at(self, offset: int) -> int:
        """Digit at ``offset`` counted from the least significant end; 0 beyond."""
        if offset >= len(self._digits):
            return 0
        return self._digits[-offset - 1]

    def __add__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        reversed_digits: List[int] = []
        carry = 0
        for offset in range(max(len(self), len(other))):
            carry, digit = divmod(
                carry + self._digit_at(offset) + other._digit_at(offset), 10
            )
            reversed_digits.append(digit)
        if carry:
            reversed_digits.append(carry)
        return BigInt(reversed(reversed_digits))

    def _times_digit(self, digit: int) -> "BigInt":
        if not 0 <= digit <= 9:
            raise ValueError(f"unexpected digit: {digit!r}")
        if digit == 0:
            return BigInt([0])
        reversed_digits: List[int] = []
        carry = 0
        for value in reversed(self._digits):
            carry, rest = divmod(carry + value * digit, 10)
            reversed_digits.append(rest)
        if carry:
            reversed_digits.append(carry)
        return BigInt(reversed(reversed_digits))

    def __mul__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        bigger, lower = (self, other) if len(self) >= len(other) else (other, self)
        result = BigInt([0])
        for offset in range(len(lower)):
            result = result + bigger.left_shift(offset)._times_digit(
                lower._digit_at(offset)
            )
        return result

    def left_shift(self, places: int) -> "BigInt":
        """Return this number multiplied by ``10 ** places``."""
        if places < 0:
            raise ValueError("cannot shift by a negative number of places")
        return BigInt(self._digits + [0] * places)


def multiply(num1: str, num2: str) -> str:
    """Multiply two non-negative integers given as decimal strings."""
    return str(BigInt.from_string(num1) * BigInt.from_string(num2))


def plus_one(digits: Iterable[int]) -> List[int]:
    """Return the digit list of the number ``digits`` plus one."""
    result = list(digits)
    carry = 1
    for index in reversed(range(len(result))):
        if not carry:
            break
        carry, result[index] = divmod(result[index] + carry, 10)
    if carry:
        result.insert(0, 1)
    return result


def _bisect_sqrt(num: int, upper: int) -> int:
    start, end = 0, upper
    while end - start > 1:
        middle = (start + end) // 2
        if middle * middle > num:
            end = middle
        else:
            start = middle
    return start


def my_sqrt(x: int) -> int:
    """Integer square root, searched below a fixed bound of 49152."""
    return _bisect_sqrt(x, _SQRT_UPPER)


def num_decodings(s: str) -> int:
    """Count decodings of a digit string with the recurrence this module uses."""
    if not s or not "1" <= s[0] <= "9":
        return 0

    def code(ch: str) -> int:
        return (ord(ch) - ord("0")) % 256

    counts = [1]
    for i in range(1, len(s)):
        pair = code(s[i - 1]) * 10 + code(s[i])
        count = counts[i - 1] + 1
        if pair <= 26 and i >= 2:
            count += counts[i - 2] + 1
        counts.append(count)
    return counts[-1]


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n)) if n > 0 else 0


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen = set()
    while True:
        seen.add(n)
        total = _digit_square_sum(n)
        if total == 1:
            return True
        if total in seen:
            return False
        n = total


def is_perfect_square(num: int) -> bool:
    """Tell whether ``num`` is the square of an integer below 46530."""
    root = _bisect_sqrt(num, _PERFECT_SQUARE_UPPER)
    return root * root == num