"""Generic containers: a binary heap, a FIFO queue, a LIFO stack and two adapters."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Generic, List, TypeVar

T = TypeVar("T")

CompareFn = Callable[[T, T], int]


class Heap(Generic[T]):
    """Binary max-heap ordered by a three-way ``compare(a, b)`` function."""

    def __init__(self, compare: Callable[[T, T], int]) -> None:
        self._compare = compare
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the largest item."""
        if not self._items:
            raise IndexError("empty binary heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the largest item without removing it."""
        if not self._items:
            raise IndexError("empty binary heap")
        return self._items[0]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(items[parent], items[index]) >= 0:
                return
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if left < size and self._compare(items[left], items[largest]) > 0:
                largest = left
            if right < size and self._compare(items[right], items[largest]) > 0:
                largest = right
            if largest == index:
                return
            items[largest], items[index] = items[index], items[largest]
            index = largest


class Queue(Generic[T]):
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: T) -> None:
        """Append ``value`` at the tail."""
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the item at the head."""
        if not self._items:
            raise IndexError("empty queue")
        return self._items.popleft()


class Stack(Generic[T]):
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]


class QueueStack:
    """A stack of integers built on a single queue by rotation."""

    def __init__(self) -> None:
        self._queue: Queue[int] = Queue()

    def push(self, x: int) -> None:
        self._queue.enqueue(x)

    def pop(self) -> int:
        self._rotate(len(self._queue) - 1)
        return self._queue.dequeue()

    def top(self) -> int:
        self._rotate(len(self._queue) - 1)
        value = self._queue.dequeue()
        self._queue.enqueue(value)
        return value

    def empty(self) -> bool:
        return len(self._queue) == 0

    def _rotate(self, times: int) -> None:
        for _ in range(times):
            self._queue.enqueue(self._queue.dequeue())


class StackQueue:
    """A queue of integers built on two stacks."""

    def __init__(self) -> None:
        self._head: Stack[int] = Stack()
        self._tail: Stack[int] = Stack()

    def push(self, x: int) -> None:
        self._tail.push(x)

    def pop(self) -> int:
        self._migrate_to_head()
        return self._head.pop()

    def peek(self) -> int:
        self._migrate_to_head()
        return self._head.peek()

    def empty(self) -> bool:
        return not self._head and not self._tail

    def _migrate_to_head(self) -> None:
        if not self._head:
            while self._tail:
                self._head.push(self._tail.pop())