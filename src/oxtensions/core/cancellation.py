"""Cooperative cancellation primitives.

A `CancellationTokenSource` owns a one-way cancellation flag; the
`CancellationToken` it hands out is a read-only view that can be shared with
any number of observers. Observers either poll the token or register a
callback, which is invoked exactly once when cancellation is requested (or
immediately, if it already was). There is no reset: once cancelled, a source
stays cancelled.

Callbacks run on the thread that calls `cancel()`. Async consumers that need
to resume on their event loop wait on `cancellation_future` instead.
"""

from __future__ import annotations

import asyncio
import contextlib
import itertools
import threading
from datetime import timedelta
from typing import Callable, Dict, Iterator, Optional

from oxtensions.core.exceptions import OperationCancelledError
from oxtensions.core.settings import logger


class CancellationRegistration:
    """Handle returned by `CancellationToken.register`.

    Disposing it unsubscribes the callback; disposing twice, or after the
    callback already ran, is a no-op.
    """

    def __init__(self, source: Optional[CancellationTokenSource] = None, key: Optional[int] = None):
        self._source = source
        self._key = key

    def dispose(self) -> None:
        if self._source is not None and self._key is not None:
            self._source._unregister(self._key)
        self._source = None

    def __enter__(self) -> "CancellationRegistration":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()


class CancellationToken:
    """Read-only cancellation signal shared with observers.

    Instances should be obtained from `CancellationTokenSource.token` or
    `CancellationToken.none()`.
    """

    def __init__(self, source: Optional[CancellationTokenSource] = None):
        self._source = source

    @classmethod
    def none(cls) -> "CancellationToken":
        """Return a token that can never be cancelled."""
        return cls(None)

    @property
    def can_be_cancelled(self) -> bool:
        return self._source is not None

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source is not None and self._source.is_cancelled

    def throw_if_cancellation_requested(self) -> None:
        """Raise `OperationCancelledError` when cancellation was requested."""
        if self.is_cancellation_requested:
            raise OperationCancelledError()

    def register(self, callback: Callable[[], None]) -> CancellationRegistration:
        """Subscribe `callback` to the cancellation transition.

        If cancellation was already requested the callback runs synchronously
        before this method returns.
        """
        if self._source is None:
            return CancellationRegistration()
        return self._source._register(callback)


class CancellationTokenSource:
    """Owner and controller of a `CancellationToken`."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cancelled = False
        self._callbacks: Dict[int, Callable[[], None]] = {}
        self._ids = itertools.count()
        self._token = CancellationToken(self)

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Request cancellation and notify every registered callback once.

        A failing callback is logged and does not prevent the remaining
        callbacks from running.
        """
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks = list(self._callbacks.values())
            self._callbacks.clear()

        logger.debug(f"[cancellation:cancel] notifying callbacks count={len(callbacks)}")
        for callback in callbacks:
            self._invoke(callback)

    def cancel_after(self, delay: timedelta | float) -> asyncio.TimerHandle:
        """Schedule `cancel()` on the running event loop after `delay`.

        Returns the loop's timer handle so the caller can call it off.
        """
        seconds = delay.total_seconds() if isinstance(delay, timedelta) else float(delay)
        if seconds < 0:
            raise ValueError("delay must be non-negative")
        loop = asyncio.get_running_loop()
        return loop.call_later(seconds, self.cancel)

    def _register(self, callback: Callable[[], None]) -> CancellationRegistration:
        with self._lock:
            if not self._cancelled:
                key = next(self._ids)
                self._callbacks[key] = callback
                return CancellationRegistration(self, key)
        # already cancelled: run outside the lock
        self._invoke(callback)
        return CancellationRegistration()

    def _unregister(self, key: int) -> None:
        with self._lock:
            self._callbacks.pop(key, None)

    @staticmethod
    def _invoke(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception as exc:
            logger.error(
                f"[cancellation:error] callback failed callback={getattr(callback, '__name__', callback)!r} error={exc!r}"
            )


def _resolve(future: asyncio.Future) -> None:
    if not future.done():
        future.set_result(None)


@contextlib.contextmanager
def cancellation_future(token: CancellationToken) -> Iterator[asyncio.Future]:
    """Yield a future on the running loop that resolves when `token` fires.

    The notification is marshalled with `call_soon_threadsafe`, so `cancel()`
    may come from any thread. On exit the registration is disposed and the
    future cancelled; a notification that arrives late finds it done and is
    dropped.
    """
    loop = asyncio.get_running_loop()
    cancelled = loop.create_future()

    def _on_cancel() -> None:
        loop.call_soon_threadsafe(_resolve, cancelled)

    registration = token.register(_on_cancel)
    try:
        yield cancelled
    finally:
        registration.dispose()
        cancelled.cancel()
