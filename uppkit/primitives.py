"""Semaphore, mutex and channels for tasks run by the cooperative scheduler."""

from __future__ import annotations

from typing import Any

from uppkit.ring_buf import RingBuf
from uppkit.scheduler import current_context, suspend_current


class Semaphore:
    """A counting semaphore; waiting tasks are woken in arrival order.

    A release that wakes a waiting task hands the permit straight to it.
    """

    def __init__(self, count: int = 0) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._counter = count
        self._waiters = RingBuf()

    async def acquire(self) -> None:
        """Take a permit, waiting for one if none is free."""
        if self._counter:
            self._counter -= 1
            return
        self._waiters.append(current_context())
        await suspend_current()

    def try_acquire(self) -> bool:
        """Take a permit if one is free, without waiting."""
        if self._counter:
            self._counter -= 1
            return True
        return False

    def release(self, count: int = 1) -> None:
        """Give back ``count`` permits, waking waiters first."""
        if count < 0:
            raise ValueError("count must not be negative")
        while self._waiters and count:
            self._waiters.popleft().activate()
            count -= 1
        self._counter += count

    def count(self) -> int:
        return self._counter


class AsyncMutex:
    """A mutex for scheduler tasks; unlocking hands it to the first waiter."""

    def __init__(self) -> None:
        self._locked = False
        self._waiters = RingBuf()

    async def lock(self) -> None:
        if not self._locked:
            self._locked = True
            return
        self._waiters.append(current_context())
        await suspend_current()

    def unlock(self) -> None:
        if not self._locked:
            raise RuntimeError("unlock of an unlocked mutex")
        if self._waiters:
            self._waiters.popleft().activate()
            return
        self._locked = False

    def locked(self) -> bool:
        return self._locked

    async def __aenter__(self) -> AsyncMutex:
        await self.lock()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        self.unlock()
        return False


class _MutexGuard:
    __slots__ = ("_mutex",)

    def __init__(self, mutex: AsyncMutex) -> None:
        self._mutex = mutex

    async def __aenter__(self) -> AsyncMutex:
        await self._mutex.lock()
        return self._mutex

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        self._mutex.unlock()
        return False


def unique_lock(mutex: AsyncMutex) -> _MutexGuard:
    """An async context manager holding ``mutex`` for the body of the block."""
    return _MutexGuard(mutex)


class Channel:
    """An unbounded FIFO of values; reading waits while it is empty."""

    def __init__(self) -> None:
        self._sem = Semaphore()
        self._messages = RingBuf()

    async def read(self) -> Any:
        await self._sem.acquire()
        return self._messages.popleft()

    def write(self, value: Any) -> None:
        self._messages.append(value)
        self._sem.release()

    def empty(self) -> bool:
        return not self._messages

    def size(self) -> int:
        return len(self._messages)


class SignalChannel:
    """A channel carrying no values, only a count of signals."""

    def __init__(self) -> None:
        self._sem = Semaphore()

    async def read(self) -> None:
        await self._sem.acquire()

    def write(self) -> None:
        self._sem.release()

    def empty(self) -> bool:
        return not self._sem.count()

    def size(self) -> int:
        return self._sem.count()