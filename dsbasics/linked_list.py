"""A singly linked list addressed by position, and the node chain it is built from."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


def _walk(node: Optional[_Node]) -> Iterator[Any]:
    """Yield the values of a node chain, starting at ``node``."""
    while node is not None:
        yield node.value
        node = node.next


class LinkedList:
    """A singly linked list with insertion and deletion by position."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        return self._head is None

    def _node_at(self, steps: int) -> Optional[_Node]:
        node = self._head
        for _ in range(steps):
            if node is None:
                break
            node = node.next
        return node

    def insert_at_position(self, position: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at zero-based ``position``."""
        if position < 0:
            raise IndexError("invalid position")
        if position == 0:
            self._head = _Node(data, self._head)
        else:
            previous = self._node_at(position - 1)
            if previous is None:
                raise IndexError("position is greater than number of elements")
            previous.next = _Node(data, previous.next)
        self._count += 1

    def delete_at_position(self, position: int) -> Any:
        """Remove and return the item at one-based ``position``."""
        if self.is_empty():
            raise IndexError("linked list is empty")
        if position <= 0:
            raise IndexError("invalid position")
        if position == 1:
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(position - 2)
            removed = previous.next if previous is not None else None
            if removed is None:
                raise IndexError("invalid position")
            previous.next = removed.next
        self._count -= 1
        return removed.value