"""A growable array-backed list with a fixed starting capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_GROWTH_STEP = 5


class ArrayList:
    """An ordered list stored in an array that grows by a fixed step when full."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 1:
            raise ValueError("invalid size")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of items the list can hold before it has to grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __str__(self) -> str:
        if self.is_empty():
            return "Array is empty"
        return " ".join(map(str, self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"

    def copy(self) -> ArrayList:
        """Return an independent list with the same capacity and items."""
        duplicate = type(self)(self._capacity)
        duplicate._items = list(self._items)
        return duplicate

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def _make_room(self) -> None:
        if self.is_full():
            self._capacity += _GROWTH_STEP

    def _check_index(self, index: int) -> None:
        if self.is_empty():
            raise IndexError("list is empty")
        if not 0 <= index < len(self._items):
            raise IndexError("invalid index")

    def append(self, item: Any) -> None:
        """Add an item at the end, growing the storage if it is full."""
        self._make_room()
        self._items.append(item)

    def insert(self, index: int, item: Any) -> None:
        """Insert an item before position ``index``, shifting later items right."""
        if not 0 <= index <= len(self._items):
            raise IndexError("invalid index")
        self._make_room()
        self._items.insert(index, item)

    def retrieve_at(self, index: int) -> Any:
        """Return the item stored at ``index``."""
        self._check_index(index)
        return self._items[index]

    def replace_at(self, index: int, item: Any) -> None:
        """Overwrite the item stored at ``index``."""
        self._check_index(index)
        self._items[index] = item

    def delete(self, index: int) -> Any:
        """Remove and return the item at ``index``, shifting later items left."""
        self._check_index(index)
        return self._items.pop(index)

    def sequential_search(self, item: Any) -> int:
        """Return the index of the first occurrence of ``item``, or -1."""
        return next((pos for pos, value in enumerate(self._items) if value == item), -1)

    def binary_search(self, item: Any) -> int:
        """Search a sorted list for ``item``; return its index or -1."""
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            value = self._items[mid]
            if value == item:
                return mid
            if value > item:
                high = mid - 1
            else:
                low = mid + 1
        return -1

    def _extreme(self, pick: Any) -> Any:
        if self.is_empty():
            raise ValueError("list is empty")
        return pick(self._items)

    def max_item(self) -> Any:
        """Return the largest item."""
        return self._extreme(max)

    def min_item(self) -> Any:
        """Return the smallest item."""
        return self._extreme(min)

    def is_item_equal(self, index: int, item: Any) -> bool:
        """Tell whether the item at ``index`` equals ``item``."""
        return self.retrieve_at(index) == item