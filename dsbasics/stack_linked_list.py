"""A last-in, first-out stack built from singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dsbasics.linked_list import _Node, _walk


class LinkedStack:
    """A LIFO stack whose top is the head of a linked chain."""

    def __init__(self) -> None:
        self.make_empty()

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the top of the stack downwards."""
        return _walk(self._top)

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, item: Any) -> None:
        """Place ``item`` on top of the stack."""
        self._top = _Node(item, self._top)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise IndexError("stack is empty")
        node = self._top
        self._top = node.next
        return node.value

    def make_empty(self) -> None:
        """Remove every item from the stack."""
        self._top: Optional[_Node] = None


def replace_item(stack: LinkedStack, old_item: Any, new_item: Any) -> None:
    """Replace every ``old_item`` in ``stack`` by ``new_item``, keeping the order."""
    holding = LinkedStack()
    while not stack.is_empty():
        item = stack.pop()
        holding.push(new_item if item == old_item else item)
    while not holding.is_empty():
        stack.push(holding.pop())