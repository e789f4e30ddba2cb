"""Forced save with one bounded retry, built on tenacity.

Usage:
    ok = await save_with_retry(engine, RetryPolicy(max_attempts=2, delay=3.0),
                               on_failure=lambda attempt: show_save_warning())
    if ok:
        hide_save_warning()
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import tenacity

from pixelgarden.engine import GameEngine
from pixelgarden.runtime.models import RetryPolicy

logger = logging.getLogger(__name__)


async def save_with_retry(
    engine: GameEngine,
    policy: RetryPolicy | None = None,
    on_failure: Callable[[int], None] | None = None,
) -> bool:
    """Force a save, retrying after a fixed delay while it reports failure.

    Args:
        engine: Engine to save.
        policy: Attempt count and delay. Defaults to one retry after 3 seconds.
        on_failure: Called with the attempt number each time an attempt fails
            and another will follow (e.g. to show a failure indicator).

    Returns:
        Result of the last attempt.
    """
    policy = policy or RetryPolicy()

    def _before_sleep(state: tenacity.RetryCallState) -> None:
        logger.warning(
            "Save attempt %d failed, retrying in %.1fs", state.attempt_number, policy.delay
        )
        if on_failure is not None:
            on_failure(state.attempt_number)

    retryer = tenacity.AsyncRetrying(
        stop=tenacity.stop_after_attempt(policy.max_attempts),
        wait=tenacity.wait_fixed(policy.delay),
        retry=tenacity.retry_if_result(lambda ok: ok is False),
        before_sleep=_before_sleep,
        retry_error_callback=lambda state: state.outcome.result() if state.outcome else False,
    )
    return await retryer(engine.save_game)
