"""Configuration models for core components.

This module provides Pydantic-based configuration classes so that policies
are validated once, at construction time, and can then be passed around as
immutable values.
"""

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RetryPolicy(BaseModel):
    """Configuration for retry-with-fixed-delay behavior.

    Built fresh per call and never mutated. Invalid values (e.g. fewer than
    one attempt) raise `pydantic.ValidationError`, a `ValueError` subclass,
    before any attempt is made.

    Attributes:
        max_attempts: Total number of attempts, including the first one
        delay: Constant pause between two attempts (None = retry immediately)
    """

    max_attempts: int = Field(
        ge=1,
        description="Total number of attempts (minimum 1)"
    )

    delay: Optional[timedelta] = Field(
        default=None,
        description="Fixed delay between attempts; numbers are read as seconds"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @property
    def delay_seconds(self) -> float:
        """Inter-attempt delay in seconds (0.0 when no delay is configured)."""
        return self.delay.total_seconds() if self.delay is not None else 0.0

    @field_validator("delay")
    @classmethod
    def ensure_non_negative(cls, value: Optional[timedelta]) -> Optional[timedelta]:
        """Reject negative delays."""
        if value is not None and value < timedelta(0):
            raise ValueError("delay must be non-negative")
        return value

    @classmethod
    def from_app_settings(cls, settings) -> "RetryPolicy":
        """Factory method to construct the default policy from settings.

        Args:
            settings: OxtensionsSettings instance from core.settings

        Returns:
            RetryPolicy populated from OX_RETRY_* settings
        """
        return cls(
            max_attempts=settings.OX_RETRY_MAX_ATTEMPTS,
            delay=settings.OX_RETRY_DELAY_SECONDS,
        )
