"""Unit tests for CancellationTokenSource, CancellationToken and registrations."""

import asyncio
import logging
import threading
from unittest.mock import Mock

import pytest

from oxtensions.core.cancellation import (
    CancellationRegistration,
    CancellationToken,
    CancellationTokenSource,
    cancellation_future,
)
from oxtensions.core.exceptions import OperationCancelledError


class TestCancellationToken:
    """Read-only view over a source."""

    def test_none_token_is_never_cancelled(self):
        token = CancellationToken.none()
        assert not token.can_be_cancelled
        assert not token.is_cancellation_requested
        token.throw_if_cancellation_requested()

    def test_none_token_register_returns_inert_registration(self):
        callback = Mock()
        registration = CancellationToken.none().register(callback)

        assert isinstance(registration, CancellationRegistration)
        registration.dispose()
        callback.assert_not_called()

    def test_token_reflects_source_state(self):
        source = CancellationTokenSource()
        token = source.token

        assert token.can_be_cancelled
        assert not token.is_cancellation_requested

        source.cancel()

        assert token.is_cancellation_requested
        with pytest.raises(OperationCancelledError):
            token.throw_if_cancellation_requested()


class TestCancellationTokenSource:
    """One-shot cancellation and callback delivery."""

    def test_callbacks_run_once_on_cancel(self):
        source = CancellationTokenSource()
        first, second = Mock(), Mock()
        source.token.register(first)
        source.token.register(second)

        source.cancel()
        source.cancel()

        first.assert_called_once_with()
        second.assert_called_once_with()
        assert source.is_cancelled

    def test_register_after_cancel_runs_immediately(self):
        source = CancellationTokenSource()
        source.cancel()
        callback = Mock()

        source.token.register(callback)

        callback.assert_called_once_with()

    def test_disposed_registration_is_not_called(self):
        source = CancellationTokenSource()
        callback = Mock()
        registration = source.token.register(callback)

        registration.dispose()
        registration.dispose()
        source.cancel()

        callback.assert_not_called()

    def test_registration_as_context_manager(self):
        source = CancellationTokenSource()
        callback = Mock()

        with source.token.register(callback):
            pass
        source.cancel()

        callback.assert_not_called()

    def test_failing_callback_does_not_block_others(self, caplog):
        source = CancellationTokenSource()
        failing = Mock(side_effect=RuntimeError("observer broke"))
        healthy = Mock()
        source.token.register(failing)
        source.token.register(healthy)

        with caplog.at_level(logging.ERROR, logger="oxtensions"):
            source.cancel()

        healthy.assert_called_once_with()
        assert "[cancellation:error]" in caplog.text

    def test_concurrent_cancel_notifies_once(self):
        source = CancellationTokenSource()
        callback = Mock()
        source.token.register(callback)

        threads = [threading.Thread(target=source.cancel) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        callback.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_cancel_after_fires_on_loop(self):
        source = CancellationTokenSource()
        source.cancel_after(0.01)

        assert not source.is_cancelled
        await asyncio.sleep(0.05)
        assert source.is_cancelled

    @pytest.mark.asyncio
    async def test_cancel_after_handle_can_be_called_off(self):
        source = CancellationTokenSource()
        handle = source.cancel_after(0.01)
        handle.cancel()

        await asyncio.sleep(0.05)
        assert not source.is_cancelled

    @pytest.mark.asyncio
    async def test_cancel_after_rejects_negative_delay(self):
        with pytest.raises(ValueError):
            CancellationTokenSource().cancel_after(-1)


class TestCancellationFuture:
    """Loop-side view of a token."""

    @pytest.mark.asyncio
    async def test_resolves_when_cancelled_from_another_thread(self):
        source = CancellationTokenSource()

        with cancellation_future(source.token) as cancelled:
            threading.Thread(target=source.cancel).start()
            await asyncio.wait_for(cancelled, 1)

        assert source._callbacks == {}

    @pytest.mark.asyncio
    async def test_exit_releases_registration(self):
        source = CancellationTokenSource()

        with cancellation_future(source.token) as cancelled:
            assert len(source._callbacks) == 1

        assert cancelled.cancelled()
        assert source._callbacks == {}
        source.cancel()
        await asyncio.sleep(0)

    @pytest.mark.asyncio
    async def test_pre_cancelled_token_resolves_on_next_iteration(self):
        source = CancellationTokenSource()
        source.cancel()

        with cancellation_future(source.token) as cancelled:
            assert not cancelled.done()
            await asyncio.sleep(0)
            assert cancelled.done()
