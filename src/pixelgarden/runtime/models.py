"""Runtime policy models."""

from __future__ import annotations

from dataclasses import dataclass

from pixelgarden.config import GardenSettings


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Bounded retry for a forced save that failed.

    The engine reports one attempt; retrying is the caller's policy.
    """

    max_attempts: int = 2
    """Total attempts including the first (2 = one retry)."""

    delay: float = 3.0
    """Fixed delay in seconds before each retry."""

    @classmethod
    def from_settings(cls, settings: GardenSettings) -> RetryPolicy:
        return cls(max_attempts=settings.save_retry_attempts, delay=settings.save_retry_delay)
