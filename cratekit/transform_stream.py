"""Async streams fed by a producer coroutine through a :class:`Yielder`.

A stream is built from a factory that receives a :class:`Yielder` and
returns an awaitable (usually a coroutine). The producer runs only while the
consumer asks for the next item. Each ``await yielder.yield_(value)``
suspends the producer and hands ``value`` to the consumer. Any other
suspension of the producer is passed on to the event loop.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import types
import typing as t

_EMPTY: t.Any = object()
_END: t.Any = object()


class _YieldSignal:
    """Marker sent up the await chain when a producer yields an item."""

    __slots__ = ("owner",)

    def __init__(self, owner: _StreamBase) -> None:
        self.owner = owner


class _Item(t.NamedTuple):
    is_err: bool
    value: t.Any


@types.coroutine
def _emit(stream: _StreamBase, item: _Item):
    if not stream._running or stream._slot is not _EMPTY:
        raise RuntimeError("invalid usage")
    stream._slot = item
    yield stream._signal


class Yielder:
    """A handle for sending items into the stream it belongs to."""

    def __init__(self, stream: _StreamBase) -> None:
        self._stream = stream

    async def yield_(self, value: t.Any) -> None:
        """Send ``value`` into the stream."""
        await _emit(self._stream, _Item(False, value))

    async def yield_ok(self, value: t.Any) -> None:
        """Send a successful ``value`` into the stream."""
        await self.yield_(value)

    async def yield_err(self, err: BaseException) -> None:
        """Send ``err`` into a try stream; the consumer's next read raises it."""
        if not self._stream._accepts_errors:
            raise TypeError("only a try stream can carry errors")
        if not isinstance(err, BaseException):
            raise TypeError(f"expected an exception, got {type(err).__name__}")
        await _emit(self._stream, _Item(True, err))


class _StreamBase:
    _accepts_errors = False

    def __init__(self, factory: Callable[[Yielder], Awaitable[t.Any]]) -> None:
        self._done = False
        self._running = False
        self._slot: t.Any = _EMPTY
        self._signal = _YieldSignal(self)
        awaitable = factory(Yielder(self))
        if not isinstance(awaitable, Awaitable):
            raise TypeError("the stream factory must return an awaitable")
        self._gen = awaitable.__await__()

    @types.coroutine
    def _step(self):
        """Run the producer until it yields an item or finishes."""
        if self._done:
            return _END
        if self._running:
            raise RuntimeError("stream is already being polled")
        self._running = True
        try:
            to_send: t.Any = None
            to_throw: BaseException | None = None
            while True:
                try:
                    if to_throw is not None:
                        exc, to_throw = to_throw, None
                        signal = self._gen.throw(exc)
                    else:
                        signal = self._gen.send(to_send)
                except StopIteration:
                    self._done = True
                    return _END
                except BaseException:
                    self._done = True
                    raise

                if isinstance(signal, _YieldSignal):
                    if signal.owner is self:
                        item, self._slot = self._slot, _EMPTY
                        return item
                    to_throw = RuntimeError("invalid usage")
                    continue

                to_send = None
                try:
                    to_send = yield signal
                except GeneratorExit:
                    self._done = True
                    self._gen.close()
                    raise
                except BaseException as exc:
                    to_throw = exc
        finally:
            self._running = False


class AsyncStream(_StreamBase):
    """Asynchronous stream of items.

    An exception raised by the producer ends the stream and propagates to
    the consumer.
    """

    def __init__(self, factory: Callable[[Yielder], Awaitable[t.Any]]) -> None:
        super().__init__(factory)

    def __aiter__(self) -> AsyncStream:
        return self

    async def __anext__(self) -> t.Any:
        item = await self._step()
        if item is _END:
            raise StopAsyncIteration
        return item.value

    def is_terminated(self) -> bool:
        """True once the producer has finished."""
        return self._done


class AsyncTryStream(_StreamBase):
    """Asynchronous stream of results.

    Values sent with :meth:`Yielder.yield_ok` are returned to the consumer;
    errors sent with :meth:`Yielder.yield_err` are raised at the consumer.
    An exception raised by the producer is delivered to the consumer and
    ends the stream.
    """

    _accepts_errors = True

    def __init__(self, factory: Callable[[Yielder], Awaitable[t.Any]]) -> None:
        super().__init__(factory)

    def __aiter__(self) -> AsyncTryStream:
        return self

    async def __anext__(self) -> t.Any:
        item = await self._step()
        if item is _END:
            raise StopAsyncIteration
        if item.is_err:
            raise item.value
        return item.value

    def is_terminated(self) -> bool:
        """True once the producer has finished and its error, if any, was delivered."""
        return self._done