"""A first-in, first-out queue built from singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dsbasics.linked_list import _Node, _walk


class LinkedQueue:
    """A FIFO queue that keeps pointers to both its front and rear nodes."""

    def __init__(self) -> None:
        self.make_empty()

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._front)

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear of the queue."""
        node = _Node(item)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node

    def dequeue(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self._front is None:
            raise IndexError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        return node.value

    def make_empty(self) -> None:
        """Remove every item from the queue."""
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None


def queue_length(queue: LinkedQueue) -> int:
    """Count the items of ``queue`` using only queue operations, leaving it unchanged."""
    holding = LinkedQueue()
    while not queue.is_empty():
        holding.enqueue(queue.dequeue())
    length = 0
    while not holding.is_empty():
        queue.enqueue(holding.dequeue())
        length += 1
    return length