from typing import Protocol, Any, Awaitable, Callable, Optional

from oxtensions.core.cancellation import CancellationToken

class RetryPort(Protocol):
    """Abstract retry interface for async operations.

    Implementations re-run an operation factory until one attempt succeeds or
    the attempt budget is exhausted. The contract keeps the core decoupled
    from a specific library (tenacity/backoff).
    """
    async def execute(
        self,
        factory: Callable[[], Awaitable[Any]],
        cancellation: Optional[CancellationToken] = None,
    ) -> Any:  # pragma: no cover - protocol
        """Execute an async factory with retry semantics.

        Args:
            factory: Zero-argument callable returning a fresh awaitable per attempt.
            cancellation: Optional token; once cancelled no further attempt starts.
        Returns:
            Result of the first successful attempt.
        Raises:
            The last attempt's exception after exhausting attempts, or
            OperationCancelledError when the token fires.
        """
        ...
