"""Array-backed queues: a simple linear queue and a circular queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when an item is requested from an empty queue."""


class QueueFullError(IndexError):
    """Raised when an item is added to a full queue."""


_EMPTY_MESSAGE = "queue is empty"
_FULL_MESSAGE = "queue is full"


class SimpleQueue:
    """A linear array queue whose slots are reclaimed only once it empties."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("invalid size")
        self._capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __str__(self) -> str:
        if self.is_empty():
            return _EMPTY_MESSAGE
        return " ".join(map(str, self))

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_full(self) -> bool:
        return len(self._slots) == self._capacity

    def enqueue(self, item: Any) -> None:
        """Store ``item`` after the rear."""
        if self.is_full():
            raise QueueFullError(_FULL_MESSAGE)
        self._slots.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError(_EMPTY_MESSAGE)
        item = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots = []
            self._front = 0
        return item

    def front(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError(_EMPTY_MESSAGE)
        return self._slots[self._front]

    def rear(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError(_EMPTY_MESSAGE)
        return self._slots[-1]


class CircularQueue:
    """A fixed-capacity queue whose indices wrap around its storage."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("invalid size")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._slots[self._wrap(self._front + offset)]

    def __str__(self) -> str:
        if self.is_empty():
            return _EMPTY_MESSAGE
        return "\n".join(map(str, self))

    def _wrap(self, index: int) -> int:
        return index % len(self._slots)

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def enqueue(self, item: Any) -> None:
        """Store ``item`` after the rear."""
        if self.is_full():
            raise QueueFullError(_FULL_MESSAGE)
        if self.is_empty():
            self._front = 0
        self._slots[self._wrap(self._front + self._count)] = item
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError(_EMPTY_MESSAGE)
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._wrap(self._front + 1)
        self._count -= 1
        return item

    def front(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError(_EMPTY_MESSAGE)
        return self._slots[self._front]

    def rear(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError(_EMPTY_MESSAGE)
        return self._slots[self._wrap(self._front + self._count - 1)]