"""Control-flow wrappers for asyncio awaitables.

Four independent helpers that change what the *caller* observes about an
operation without changing what the operation does:

* `with_timeout`: race an operation against a deadline.
* `with_cancellation`: race an operation against a `CancellationToken`.
* `retry`: re-run an operation factory with a fixed delay between attempts.
* `fire_and_forget`: schedule an operation and route its failure to a callback.

Losers of a race are abandoned, not killed: the underlying task keeps
running on the event loop and its eventual outcome is retrieved and
discarded. A truly cancellable operation has to observe the token itself.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from datetime import timedelta
from typing import Any, Awaitable, Callable, Optional, Set, TypeVar

from oxtensions.adapters.retry_tenacity import TenacityRetryAdapter
from oxtensions.core.cancellation import CancellationToken, cancellation_future
from oxtensions.core.config import RetryPolicy
from oxtensions.core.exceptions import DeadlineExceededError, OperationCancelledError
from oxtensions.core.interfaces.retry import RetryPort
from oxtensions.core.settings import logger

T = TypeVar("T")

# Strong references to abandoned and fire-and-forget tasks; the event loop
# only keeps weak ones.
_background_tasks: Set[asyncio.Future] = set()


def _discard_outcome(task: asyncio.Future) -> None:
    _background_tasks.discard(task)
    if not task.cancelled():
        # retrieve so asyncio does not report "exception was never retrieved"
        task.exception()


def _abandon(operation: Awaitable[Any]) -> None:
    """Stop caring about `operation` without stopping it."""
    if inspect.iscoroutine(operation):
        # never scheduled, nothing to keep running
        operation.close()
        return
    future = asyncio.ensure_future(operation)
    _background_tasks.add(future)
    future.add_done_callback(_discard_outcome)


async def with_timeout(operation: Awaitable[T], timeout: timedelta | float) -> T:
    """Await `operation`, giving up after `timeout`.

    Args:
        operation: Coroutine, task or future to wait for.
        timeout: Maximum duration, as a timedelta or a number of seconds.

    Returns:
        The operation's result, unchanged.

    Raises:
        DeadlineExceededError: The deadline elapsed before the operation
            finished. The operation keeps running in the background.
        ValueError: `timeout` is negative.
        Exception: Whatever the operation itself raised.

    An operation that completes at the very instant the deadline fires may
    be reported either way.
    """
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
    if seconds < 0:
        _abandon(operation)
        raise ValueError("timeout must be non-negative")

    task = asyncio.ensure_future(operation)
    try:
        # asyncio.wait cancels its internal timer handle once it returns
        done, _ = await asyncio.wait({task}, timeout=seconds)
    except BaseException:
        # the caller was cancelled; the operation carries on unobserved
        _abandon(task)
        raise
    if task in done:
        return task.result()

    _abandon(task)
    raise DeadlineExceededError(timeout)


async def with_cancellation(operation: Awaitable[T], cancellation: CancellationToken) -> T:
    """Await `operation` unless `cancellation` fires first.

    Raises:
        OperationCancelledError: The token was cancelled before the operation
            finished, including the case where it was cancelled before this
            call. The operation itself is not stopped.
        Exception: Whatever the operation itself raised.
    """
    if cancellation.is_cancellation_requested:
        _abandon(operation)
        raise OperationCancelledError()

    task = asyncio.ensure_future(operation)
    try:
        with cancellation_future(cancellation) as cancelled:
            await asyncio.wait({task, cancelled}, return_when=asyncio.FIRST_COMPLETED)
    except BaseException:
        _abandon(task)
        raise

    if task.done():
        return task.result()

    _abandon(task)
    raise OperationCancelledError()


def retry(
    factory: Callable[[], Awaitable[T]],
    max_attempts: int,
    delay: Optional[timedelta | float] = None,
    cancellation: Optional[CancellationToken] = None,
    *,
    retrier: Callable[[RetryPolicy], RetryPort] = TenacityRetryAdapter,
) -> Awaitable[T]:
    """Run `factory()` until an attempt succeeds or `max_attempts` is reached.

    The policy is validated here, synchronously: an invalid `max_attempts`
    or `delay` raises before the factory is called even once, and before
    anything has to be awaited.

    Args:
        factory: Zero-argument callable returning a new awaitable per attempt.
        max_attempts: Total number of attempts (minimum 1).
        delay: Fixed pause between attempts, as a timedelta or seconds.
        cancellation: Optional token that stops the loop, including mid-delay.
        retrier: Builds the RetryPort that runs the loop for a validated
            policy. Defaults to the tenacity adapter.

    Returns:
        Awaitable resolving to the first successful attempt's result.

    Raises:
        pydantic.ValidationError: Invalid policy (a ValueError subclass).

    The awaitable re-raises the last attempt's exception when every attempt
    failed (earlier exceptions are discarded), or OperationCancelledError
    when the token fires.
    """
    policy = RetryPolicy(max_attempts=max_attempts, delay=delay)
    adapter: RetryPort = retrier(policy)
    return adapter.execute(factory, cancellation)


def fire_and_forget(
    operation: Awaitable[Any],
    on_error: Optional[Callable[[BaseException], Any]] = None,
) -> None:
    """Schedule `operation` on the running loop and return immediately.

    `on_error` is called once with the operation's exception if, and only
    if, the operation fails. Without a handler the failure is dropped on
    purpose. Must be called from within a running event loop when
    `operation` is a coroutine.
    """
    task = asyncio.ensure_future(operation)
    _background_tasks.add(task)
    task.add_done_callback(functools.partial(_report_failure, on_error))


def _report_failure(
    on_error: Optional[Callable[[BaseException], Any]],
    task: asyncio.Future,
) -> None:
    _background_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is None:
        return
    if on_error is None:
        if logger.is_enabled_for(logging.DEBUG):
            logger.debug(f"[tasks:fire-and-forget] discarded failure error={exc!r}")
        return
    try:
        on_error(exc)
    except Exception as handler_exc:
        logger.error(
            f"[tasks:fire-and-forget] error handler failed error={exc!r} handler_error={handler_exc!r}"
        )
