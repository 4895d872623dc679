"""Observable last-value stream.

A :class:`StateStream` holds one current value and fans every change out to
its subscribers.  Publishing a value equal to the current one is dropped, so
subscribers only ever see distinct consecutive values.  Late subscribers get
the current value straight away, never a replay of earlier ones.

Thread-safe: subscribers may attach, detach and receive values on any
thread.  Async consumers use :meth:`StateStream.changes` or
:meth:`StateStream.wait_for`, which hop onto their own event loop.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections import deque
from collections.abc import AsyncIterator, Callable
from typing import Any, Generic, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription(Generic[T]):
    """Handle for one attached subscriber.

    Cancelling is idempotent and only affects this subscriber.
    """

    def __init__(self, stream: StateStream[T], callback: Callable[[T], None]) -> None:
        self._stream = stream
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._stream._remove(self)

    def _deliver(self, value: T) -> None:
        if not self._active:
            return
        try:
            self._callback(value)
        except Exception:
            _logger.debug("%s subscriber callback failed", self._stream.name, exc_info=True)

    def __enter__(self) -> Subscription[T]:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.cancel()


class StateStream(Generic[T]):
    """Cached, multicast, distinct-until-changed value."""

    def __init__(self, initial: T, *, name: str = "stream") -> None:
        self.name = name
        self._value = initial
        self._subscribers: list[Subscription[T]] = []
        self._lock = threading.Lock()
        # Held across delivery so every subscriber sees values in publish order.
        self._delivery_lock = threading.RLock()
        # Values published by a subscriber while a fan-out is running.
        self._pending: deque[T] = deque()
        self._delivering = False

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, callback: Callable[[T], None], *, emit_current: bool = True) -> Subscription[T]:
        """Attach *callback* and, by default, call it with the current value."""
        subscription = Subscription(self, callback)
        with self._delivery_lock:
            with self._lock:
                self._subscribers.append(subscription)
                current = self._value
            # Queued values still reach this subscriber and end on the current one.
            if emit_current and not self._pending:
                subscription._deliver(current)
        return subscription

    def publish(self, value: T) -> bool:
        """Set the current value and notify subscribers.

        Returns ``False`` (and notifies nobody) when *value* equals the
        current value.  A subscriber that publishes during delivery has its
        value queued and fanned out, in order, once the running fan-out
        completes.
        """
        with self._delivery_lock:
            with self._lock:
                if value == self._value:
                    return False
                self._value = value
            self._pending.append(value)
            if self._delivering:
                return True
            self._delivering = True
            try:
                while self._pending:
                    self._fan_out(self._pending.popleft())
            finally:
                self._delivering = False
                self._pending.clear()
        return True

    def _fan_out(self, value: T) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        _logger.debug("%s -> %s (subscribers=%d)", self.name, value, len(subscribers))
        for subscription in subscribers:
            subscription._deliver(value)

    def _remove(self, subscription: Subscription[T]) -> None:
        with self._lock:
            if subscription in self._subscribers:
                self._subscribers.remove(subscription)

    async def changes(self) -> AsyncIterator[T]:
        """Yield the current value, then every subsequent change.

        Values are handed to the running loop with ``call_soon_threadsafe``
        so publishers may live on any thread.  Closing the iterator detaches
        the subscriber.
        """
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue[T] = asyncio.Queue()

        def _enqueue(value: T) -> None:
            loop.call_soon_threadsafe(queue.put_nowait, value)

        subscription = self.subscribe(_enqueue)
        try:
            while True:
                yield await queue.get()
        finally:
            subscription.cancel()

    async def wait_for(self, expected: T | Callable[[T], bool], timeout: float | None = None) -> bool:
        """Wait until the stream holds *expected* (a value or a predicate).

        Returns ``True`` as soon as a matching value is current, ``False`` if
        *timeout* seconds pass first.
        """
        if callable(expected):
            predicate: Callable[[T], bool] = expected  # type: ignore[assignment]
        else:

            def predicate(value: T) -> bool:
                return value == expected

        if predicate(self.value):
            return True

        loop = asyncio.get_running_loop()
        waiter = asyncio.Event()

        def _check(value: T) -> None:
            if predicate(value):
                loop.call_soon_threadsafe(waiter.set)

        with self.subscribe(_check):
            try:
                await asyncio.wait_for(waiter.wait(), timeout)
                return True
            except TimeoutError:
                return False

    def __repr__(self) -> str:
        return f"StateStream(name={self.name!r}, value={self.value!r})"
