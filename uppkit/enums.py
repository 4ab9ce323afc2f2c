"""Enum helpers: conversion to and from values, bit masks and enum-keyed maps."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Iterator

_MISSING = object()


def underlying_cast(value: Any, enum_cls: type[Enum] | None = None) -> Any:
    """Convert between an enum member and its underlying value.

    With no ``enum_cls``, ``value`` must be a member and its value is returned.
    With ``enum_cls``, ``value`` is turned into the member of that enum.
    """
    if enum_cls is None:
        if not isinstance(value, Enum):
            raise TypeError(f"{value!r} is not an enum member")
        return value.value
    return enum_cls(value)


def is_enum_bitmask(enum_cls: type[Enum]) -> bool:
    """Whether no two members of ``enum_cls`` share a set bit."""
    mask = 0
    for member in enum_cls:
        bits = int(member.value)
        if bits & mask:
            return False
        mask |= bits
    return True


class BitMask:
    """A set of flags drawn from an enum whose members use disjoint bits."""

    __slots__ = ("_enum_cls", "_value")

    def __init__(self, enum_cls: type[Enum], *args: Enum) -> None:
        if not is_enum_bitmask(enum_cls):
            raise TypeError(f"{enum_cls.__name__} members overlap; not a bit mask")
        self._enum_cls = enum_cls
        value = 0
        for member in args:
            value |= self._bits_of(member)
        self._value = value

    @classmethod
    def from_value(cls, enum_cls: type[Enum], value: int) -> BitMask:
        """A mask holding the raw integer ``value``."""
        mask = cls(enum_cls)
        mask._value = int(value)
        return mask

    def _bits_of(self, member: Enum) -> int:
        if not isinstance(member, self._enum_cls):
            raise TypeError(f"{member!r} is not a member of {self._enum_cls.__name__}")
        return int(member.value)

    def _operand(self, other: Any) -> int | None:
        if isinstance(other, BitMask):
            if other._enum_cls is not self._enum_cls:
                raise TypeError("bit masks over different enums")
            return other._value
        if isinstance(other, self._enum_cls):
            return int(other.value)
        return None

    def __or__(self, other: Any) -> BitMask:
        bits = self._operand(other)
        if bits is None:
            return NotImplemented
        return BitMask.from_value(self._enum_cls, self._value | bits)

    def __and__(self, other: Any) -> BitMask:
        bits = self._operand(other)
        if bits is None:
            return NotImplemented
        return BitMask.from_value(self._enum_cls, self._value & bits)

    def __xor__(self, other: Any) -> BitMask:
        if not isinstance(other, BitMask):
            return NotImplemented
        bits = self._operand(other)
        return BitMask.from_value(self._enum_cls, self._value ^ bits)

    def __invert__(self) -> BitMask:
        return BitMask.from_value(self._enum_cls, ~self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitMask):
            return NotImplemented
        return self._enum_cls is other._enum_cls and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._enum_cls, self._value))

    def none(self) -> bool:
        return not self._value

    def any(self) -> bool:
        return bool(self._value)

    def all(self) -> bool:
        """Whether every member's bits are set (true for an enum with no members)."""
        return all(self._value & int(member.value) for member in self._enum_cls)

    def __bool__(self) -> bool:
        return self.any()

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"BitMask({self._enum_cls.__name__}, {self._value:#x})"


class EnumMap:
    """A map with one slot per member of an enum, iterated in member order."""

    def __init__(
        self,
        enum_cls: type[Enum],
        default_factory: Callable[[], Any] | None = None,
        items: Any = (),
    ) -> None:
        self._enum_cls = enum_cls
        self._members = list(enum_cls)
        self._index = {member: idx for idx, member in enumerate(self._members)}
        self._default_factory = default_factory
        self._slots: list[Any] = [_MISSING] * len(self._members)
        self._size = 0
        pairs: Iterable[tuple[Enum, Any]] = items.items() if hasattr(items, "items") else items
        for key, value in pairs:
            self[key] = value

    def _slot(self, key: Any) -> int:
        if not isinstance(key, self._enum_cls):
            raise TypeError(f"{key!r} is not a member of {self._enum_cls.__name__}")
        return self._index[key]

    def capacity(self) -> int:
        return len(self._members)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, self._enum_cls):
            return False
        return self._slots[self._index[key]] is not _MISSING

    def __getitem__(self, key: Enum) -> Any:
        """The value for ``key``, inserting a default when it is absent."""
        idx = self._slot(key)
        value = self._slots[idx]
        if value is _MISSING:
            if self._default_factory is None:
                raise KeyError(key)
            value = self._default_factory()
            self._slots[idx] = value
            self._size += 1
        return value

    def __setitem__(self, key: Enum, value: Any) -> None:
        idx = self._slot(key)
        if self._slots[idx] is _MISSING:
            self._size += 1
        self._slots[idx] = value

    def at(self, key: Enum) -> Any:
        """The value for ``key``; KeyError when it is absent."""
        value = self._slots[self._slot(key)]
        if value is _MISSING:
            raise KeyError(key)
        return value

    def erase(self, key: Enum) -> int:
        """Remove ``key``; return how many entries were removed (0 or 1)."""
        idx = self._slot(key)
        if self._slots[idx] is _MISSING:
            return 0
        self._slots[idx] = _MISSING
        self._size -= 1
        return 1

    def __iter__(self) -> Iterator[Enum]:
        for member, value in zip(self._members, self._slots):
            if value is not _MISSING:
                yield member

    def __reversed__(self) -> Iterator[Enum]:
        for member, value in zip(reversed(self._members), reversed(self._slots)):
            if value is not _MISSING:
                yield member

    def items(self) -> Iterator[tuple[Enum, Any]]:
        for member, value in zip(self._members, self._slots):
            if value is not _MISSING:
                yield member, value

    def values(self) -> Iterator[Any]:
        for value in self._slots:
            if value is not _MISSING:
                yield value

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({self._enum_cls.__name__}, {{{body}}})"


class EnumMapStatic(EnumMap):
    """An EnumMap whose slots are allocated together with the map itself."""