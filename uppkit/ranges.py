"""Counting ranges."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


def _iota(start: Any, stop: Any) -> Iterator[Any]:
    value = start
    while value < stop:
        yield value
        value += 1


def upto(stop: Any) -> Iterable[Any]:
    """Count from the zero value of ``stop``'s type up to, not including, ``stop``."""
    if isinstance(stop, int):
        return range(int(stop))
    return _iota(type(stop)(), stop)