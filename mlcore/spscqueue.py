"""A fixed-size single-producer, single-consumer ring queue."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


def bits_to_contain(x: int) -> int:
    """Return the exponent of the smallest power of two that is >= x."""
    exp = 0
    while (1 << exp) < x:
        exp += 1
    return exp


class Queue(Generic[T]):
    """Ring buffer whose storage is a power of two; one slot stays empty."""

    def __init__(self, size: int) -> None:
        self._data: list[T | None] = []
        self._size_mask = 0
        self._write_index = 0
        self._read_index = 0
        self.resize(size)

    def resize(self, capacity: int) -> None:
        """Make room for at least capacity elements, discarding the contents."""
        # An equal read and write index means empty, so one slot is never used.
        size = 1 << bits_to_contain(capacity + 1)
        self._data = [None] * size
        self._size_mask = size - 1
        self._write_index = 0
        self._read_index = 0
        self.clear()

    def size(self) -> int:
        """Return the number of slots in the ring."""
        return len(self._data)

    def _increment(self, index: int) -> int:
        return (index + 1) & self._size_mask

    def push(self, item: T) -> bool:
        """Add item; return False if the queue is full."""
        current = self._write_index
        following = self._increment(current)
        if following == self._read_index:
            return False
        self._data[current] = item
        self._write_index = following
        return True

    def pop(self) -> T | None:
        """Remove and return the oldest element, or None if the queue is empty."""
        current = self._read_index
        if current == self._write_index:
            return None
        item = self._data[current]
        self._data[current] = None
        self._read_index = self._increment(current)
        return item

    def clear(self) -> None:
        """Discard all waiting elements."""
        while self.elements_available():
            self.pop()

    def elements_available(self) -> int:
        """Return the number of elements waiting to be read."""
        return (self._write_index - self._read_index) & self._size_mask

    def peek(self) -> T:
        """Return the oldest element without removing it."""
        if self._read_index == self._write_index:
            raise IndexError("peek from an empty queue")
        return self._data[self._read_index]  # type: ignore[return-value]

    def was_empty(self) -> bool:
        """Return True if nothing was waiting when checked."""
        return self._write_index == self._read_index

    def was_full(self) -> bool:
        """Return True if no more elements could be pushed when checked."""
        return self._increment(self._write_index) == self._read_index