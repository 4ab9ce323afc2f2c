"""A value guarded by a lock, reachable only while the lock is held."""

from __future__ import annotations

import threading
from typing import Any, Callable


class MutexLock:
    """Access to a guarded value while its lock is held."""

    def __init__(self, owner: BasicMutex, release: Callable[[], Any]) -> None:
        self._owner = owner
        self._release = release
        self._held = True

    def _ensure_held(self) -> None:
        if not self._held:
            raise RuntimeError("lock already released")

    def value(self) -> Any:
        self._ensure_held()
        return self._owner._value

    def set(self, value: Any) -> None:
        self._ensure_held()
        self._owner._value = value

    def release(self) -> None:
        self._ensure_held()
        self._held = False
        self._release()

    def __enter__(self) -> MutexLock:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._held:
            self.release()
        return False


class _SharedMutexLock(MutexLock):
    def set(self, value: Any) -> None:
        raise TypeError("a shared lock gives read-only access")


class BasicMutex:
    """A value guarded by any lock with ``acquire``/``release``.

    Shared locking needs ``acquire_shared``/``release_shared`` on the lock.
    """

    def __init__(self, value: Any = None, lock: Any = None) -> None:
        self._value = value
        self._lock = lock if lock is not None else threading.Lock()

    def _require(self, *names: str) -> None:
        missing = [n for n in names if not callable(getattr(self._lock, n, None))]
        if missing:
            raise TypeError(f"lock object lacks {', '.join(missing)}")

    def lock(self) -> MutexLock:
        self._require("acquire", "release")
        self._lock.acquire()
        return MutexLock(self, self._lock.release)

    def lock_shared(self) -> MutexLock:
        self._require("acquire_shared", "release_shared")
        self._lock.acquire_shared()
        return _SharedMutexLock(self, self._lock.release_shared)

    def try_lock(self) -> MutexLock | None:
        self._require("acquire", "release")
        if not self._lock.acquire(blocking=False):
            return None
        return MutexLock(self, self._lock.release)


class Mutex(BasicMutex):
    """A value guarded by a ``threading.Lock``."""

    def __init__(self, value: Any = None) -> None:
        super().__init__(value, threading.Lock())