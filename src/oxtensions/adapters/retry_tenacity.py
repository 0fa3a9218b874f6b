import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from oxtensions.core.cancellation import CancellationToken, cancellation_future
from oxtensions.core.config import RetryPolicy
from oxtensions.core.exceptions import OperationCancelledError
from oxtensions.core.settings import app_settings, logger


async def _cancellable_sleep(token: CancellationToken, seconds: float) -> None:
    """Sleep for `seconds` unless `token` fires first."""
    token.throw_if_cancellation_requested()
    if seconds <= 0:
        await asyncio.sleep(0)
        token.throw_if_cancellation_requested()
        return

    with cancellation_future(token) as cancelled:
        await asyncio.wait({cancelled}, timeout=seconds)
    token.throw_if_cancellation_requested()


class TenacityRetryAdapter:
    """Tenacity-based retry adapter implementing RetryPort.

    Applies a constant delay between strictly sequential attempts and
    re-raises the last attempt's exception once the budget is spent. Only
    `Exception` subclasses are retried; `OperationCancelledError` and
    `BaseException`s such as `asyncio.CancelledError` end the loop at once.
    """

    def __init__(self, policy: Optional[RetryPolicy] = None) -> None:
        self.policy = policy or RetryPolicy.from_app_settings(app_settings)

    async def execute(
        self,
        factory: Callable[[], Awaitable[Any]],
        cancellation: Optional[CancellationToken] = None,
    ) -> Any:
        token = cancellation or CancellationToken.none()

        async def sleep(seconds: float) -> None:
            await _cancellable_sleep(token, seconds)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.policy.max_attempts),
            wait=wait_fixed(self.policy.delay_seconds),
            retry=(
                retry_if_exception_type(Exception)
                & retry_if_not_exception_type(OperationCancelledError)
            ),
            sleep=sleep,
            before_sleep=self._log_retry,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                token.throw_if_cancellation_requested()
                return await factory()

    def _log_retry(self, retry_state: RetryCallState) -> None:
        if not logger.is_enabled_for(logging.DEBUG):
            return
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.debug(
            f"[retry:attempt] attempt {retry_state.attempt_number}/{self.policy.max_attempts} failed, "
            f"retrying in {self.policy.delay_seconds}s error={exc!r}"
        )
