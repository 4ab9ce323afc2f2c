"""A double-ended queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class Queue:
    """A double-ended queue with constant-time operations at both ends."""

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(iterable)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __copy__(self) -> Queue:
        return Queue(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def append(self, value: Any) -> None:
        self._items.append(value)

    def appendleft(self, value: Any) -> None:
        self._items.appendleft(value)

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty Queue")
        return self._items.pop()

    def popleft(self) -> Any:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("pop from an empty Queue")
        return self._items.popleft()