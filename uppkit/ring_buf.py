"""A growable double-ended ring buffer with power-of-two capacity."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class RingBuf:
    """A double-ended sequence stored in a circular buffer.

    The capacity is always a power of two. It doubles when the buffer is full
    and only shrinks when asked to.
    """

    __slots__ = ("_data", "_offset", "_count")

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._data: list[Any] = []
        self._offset = 0
        self._count = 0
        if iterable is None:
            return
        if hasattr(iterable, "__len__"):
            self._ensure_capacity(len(iterable))  # type: ignore[arg-type]
        for value in iterable:
            self.append(value)

    def _ensure_capacity(self, size: int) -> None:
        if not self._data:
            cap = 1
            while cap < size:
                cap *= 2
            self._data = [None] * cap
            self._offset = 0
            return
        cap = len(self._data)
        if cap >= size:
            return
        while cap < size:
            cap *= 2
        self._rebuild(cap)

    def _rebuild(self, cap: int) -> None:
        items = list(self)
        self._data = items + [None] * (cap - len(items))
        self._offset = 0

    def _slot(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"RingBuf indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("RingBuf index out of range")
        return (self._offset + index) % len(self._data)

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[Any]:
        cap = len(self._data)
        for i in range(self._count):
            yield self._data[(self._offset + i) % cap]

    def __reversed__(self) -> Iterator[Any]:
        cap = len(self._data)
        for i in reversed(range(self._count)):
            yield self._data[(self._offset + i) % cap]

    def __getitem__(self, index: int) -> Any:
        return self._data[self._slot(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._slot(index)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RingBuf):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RingBuf):
            return NotImplemented
        return list(self) < list(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RingBuf):
            return NotImplemented
        return list(self) <= list(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RingBuf):
            return NotImplemented
        return list(self) > list(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RingBuf):
            return NotImplemented
        return list(self) >= list(other)

    def __copy__(self) -> RingBuf:
        return RingBuf(list(self))

    def __repr__(self) -> str:
        return f"RingBuf({list(self)!r})"

    def capacity(self) -> int:
        return len(self._data)

    def offset(self) -> int:
        """Storage slot holding the first element."""
        return self._offset

    def reserve(self, hint: int) -> None:
        """Make room for at least ``hint`` elements."""
        if hint < 0:
            raise ValueError("hint must not be negative")
        self._ensure_capacity(hint)

    def shrink_to_fit(self) -> None:
        """Reduce the capacity towards the number of stored elements."""
        if not self._data:
            return
        cap = len(self._data)
        new_cap = cap
        while new_cap > self._count:
            new_cap //= 2
        new_cap = max(new_cap * 2, 1)
        if new_cap < cap:
            self._rebuild(new_cap)

    def append(self, value: Any) -> None:
        self._ensure_capacity(self._count + 1)
        self._data[(self._offset + self._count) % len(self._data)] = value
        self._count += 1

    def appendleft(self, value: Any) -> None:
        self._ensure_capacity(self._count + 1)
        offset = (self._offset or len(self._data)) - 1
        self._data[offset] = value
        self._offset = offset
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._count:
            raise IndexError("pop from an empty RingBuf")
        idx = (self._offset + self._count - 1) % len(self._data)
        value = self._data[idx]
        self._data[idx] = None
        self._count -= 1
        return value

    def popleft(self) -> Any:
        """Remove and return the first element."""
        if not self._count:
            raise IndexError("pop from an empty RingBuf")
        value = self._data[self._offset]
        self._data[self._offset] = None
        self._offset = (self._offset + 1) % len(self._data)
        self._count -= 1
        return value

    def front(self) -> Any:
        if not self._count:
            raise IndexError("front of an empty RingBuf")
        return self[0]

    def back(self) -> Any:
        if not self._count:
            raise IndexError("back of an empty RingBuf")
        return self[self._count - 1]

    def at(self, index: int) -> Any:
        """The element at a non-negative ``index``; IndexError when out of range."""
        if not isinstance(index, int) or not 0 <= index < self._count:
            raise IndexError("RingBuf::at")
        return self[index]