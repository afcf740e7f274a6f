"""A first-come-first-served mutex.

A caller first takes a place in the queue with :meth:`CstMutex.acquire`,
which never blocks, and later blocks in :meth:`CstMutexPermit.wait` until
every permit taken before it has been released. Holders therefore get the
protected value in exactly the order the permits were acquired.
"""

from __future__ import annotations

from collections import deque
import threading
import typing as t

T = t.TypeVar("T")


class _Entry:
    """A place in the queue; its event is set when the place holds the lock."""

    __slots__ = ("event",)

    def __init__(self) -> None:
        self.event = threading.Event()


class _Core(t.Generic[T]):
    def __init__(self, value: T) -> None:
        self.lock = threading.Lock()
        self.queue: list[_Entry] = []
        self.pool: deque[_Entry] = deque()
        self.data = value

    def acquire(self) -> _Entry:
        with self.lock:
            entry = self.pool.popleft() if self.pool else _Entry()
            if not self.queue:
                entry.event.set()
            self.queue.append(entry)
            return entry

    def release(self, entry: _Entry) -> None:
        with self.lock:
            idx = next(i for i, e in enumerate(self.queue) if e is entry)
            held = entry.event.is_set()
            del self.queue[idx]
            entry.event.clear()
            self.pool.append(entry)
            if held and idx < len(self.queue):
                self.queue[idx].event.set()


def _check_count(name: str, n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an integer")
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


class CstMutex(t.Generic[T]):
    """A mutex granting access in the order permits were acquired."""

    def __init__(self, value: T) -> None:
        self._core: _Core[T] = _Core(value)

    def acquire(self) -> CstMutexPermit[T]:
        """Take the next place in the queue without blocking."""
        return CstMutexPermit(self._core, self._core.acquire())

    def shrink_to(self, min_capacity: int) -> None:
        """Drop pooled queue places beyond ``min_capacity``."""
        _check_count("min_capacity", min_capacity)
        with self._core.lock:
            while len(self._core.pool) > min_capacity:
                self._core.pool.pop()

    def reserve(self, additional: int) -> None:
        """Pre-allocate ``additional`` queue places for later permits."""
        _check_count("additional", additional)
        fresh = [_Entry() for _ in range(additional)]
        with self._core.lock:
            self._core.pool.extend(fresh)


class CstMutexPermit(t.Generic[T]):
    """A reserved place in the queue of a :class:`CstMutex`."""

    def __init__(self, core: _Core[T], entry: _Entry) -> None:
        self._core = core
        self._entry: _Entry | None = entry

    def _take(self) -> _Entry:
        entry = self._entry
        if entry is None:
            raise RuntimeError("permit has already been used")
        self._entry = None
        return entry

    def wait(self) -> CstMutexGuard[T]:
        """Block until every earlier permit is released; consume this permit."""
        entry = self._take()
        entry.event.wait()
        return CstMutexGuard(self._core, entry)

    def release(self) -> None:
        """Give up the place in the queue without taking the lock."""
        self._core.release(self._take())


class CstMutexGuard(t.Generic[T]):
    """Exclusive access to the protected value until released."""

    def __init__(self, core: _Core[T], entry: _Entry) -> None:
        self._core = core
        self._entry: _Entry | None = entry

    def _check(self) -> None:
        if self._entry is None:
            raise RuntimeError("guard has already been released")

    @property
    def value(self) -> T:
        self._check()
        return self._core.data

    @value.setter
    def value(self, new: T) -> None:
        self._check()
        self._core.data = new

    def release(self) -> None:
        """Unlock and pass the lock to the next permit in the queue."""
        self._check()
        entry, self._entry = self._entry, None
        self._core.release(t.cast(_Entry, entry))

    def __enter__(self) -> CstMutexGuard[T]:
        self._check()
        return self

    def __exit__(self, *args: object) -> None:
        if self._entry is not None:
            self.release()