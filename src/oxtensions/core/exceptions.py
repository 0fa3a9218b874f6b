from datetime import timedelta


class OxtensionsError(Exception):
    """Base exception for errors raised by the library itself."""


class DeadlineExceededError(OxtensionsError, TimeoutError):
    """Raised when an awaited operation does not finish within its time budget.

    The operation itself is not cancelled; it keeps running in the background
    and its eventual outcome is discarded.

    Attributes:
        timeout: The configured time budget, as given by the caller
        timeout_seconds: The same budget in seconds
    """
    def __init__(self, timeout: timedelta | float):
        self.timeout = timeout
        if isinstance(timeout, timedelta):
            self.timeout_seconds = timeout.total_seconds()
        else:
            self.timeout_seconds = float(timeout)
        super().__init__(f"The operation timed out after {timeout}.")


class OperationCancelledError(OxtensionsError):
    """Raised when a cancellation token is observed in the cancelled state."""
    def __init__(self, message: str = "The operation was cancelled."):
        self.message = message
        super().__init__(message)
