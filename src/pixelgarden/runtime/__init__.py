"""Session runtime: periodic tick driver and forced-save retry policy."""

from pixelgarden.runtime.loop import GameLoop
from pixelgarden.runtime.models import RetryPolicy
from pixelgarden.runtime.retry import save_with_retry

__all__ = [
    "GameLoop",
    "RetryPolicy",
    "save_with_retry",
]
