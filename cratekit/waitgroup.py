"""An async wait group: wait until every outstanding worker handle is done."""

from __future__ import annotations

import asyncio
import threading


class _Shared:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.count = 0
        self.waiters: list[tuple[asyncio.AbstractEventLoop, asyncio.Future[None]]] = []

    def increment(self) -> None:
        with self.lock:
            self.count += 1

    def decrement(self) -> None:
        with self.lock:
            self.count -= 1
            if self.count:
                return
            waiters, self.waiters = self.waiters, []
        for loop, fut in waiters:
            try:
                loop.call_soon_threadsafe(_wake, fut)
            except RuntimeError:
                pass


def _wake(fut: asyncio.Future[None]) -> None:
    if not fut.done():
        fut.set_result(None)


class Working:
    """A handle that keeps its :class:`WaitGroup` busy until :meth:`done`."""

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared
        self._active = True
        shared.increment()

    def _check(self) -> None:
        if not self._active:
            raise RuntimeError("working handle is already done")

    def count(self) -> int:
        """The number of handles of the group still working."""
        return self._shared.count

    def clone(self) -> Working:
        """Another handle of the same group."""
        self._check()
        return Working(self._shared)

    def done(self) -> None:
        """Mark this handle finished; wake waiters when it was the last."""
        self._check()
        self._active = False
        self._shared.decrement()

    def __enter__(self) -> Working:
        self._check()
        return self

    def __exit__(self, *args: object) -> None:
        if self._active:
            self.done()


class WaitGroup:
    """Counts outstanding :class:`Working` handles and lets tasks wait for zero."""

    def __init__(self) -> None:
        self._shared = _Shared()

    def working(self) -> Working:
        """A new handle that counts as one unit of outstanding work."""
        return Working(self._shared)

    def count(self) -> int:
        """The number of handles still working."""
        return self._shared.count

    async def wait(self) -> None:
        """Return once no handle is working."""
        shared = self._shared
        loop = asyncio.get_running_loop()
        fut: asyncio.Future[None] = loop.create_future()
        with shared.lock:
            if shared.count == 0:
                return
            waiter = (loop, fut)
            shared.waiters.append(waiter)
        try:
            await fut
        finally:
            with shared.lock:
                if waiter in shared.waiters:
                    shared.waiters.remove(waiter)