r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that awaits a
coroutine operation with automatic retry logic. Between attempts it
yields to the event loop instead of blocking a thread.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
from typing import TYPE_CHECKING, TypeVar

from chronoretry.outcome import Exhausted, NonRetryable, Success
from chronoretry.retry.executor_core import BaseRetryExecutor
from chronoretry.retry.sleep import robust_sleep_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from chronoretry.backoff.jitter import RandomSource
    from chronoretry.backoff.policy import BackoffPolicy
    from chronoretry.outcome import Outcome
    from chronoretry.policy import Policy

T = TypeVar("T")


class AsyncRetryExecutor(BaseRetryExecutor):
    """Awaits a coroutine operation with automatic retry logic.

    This class implements the same retry state machine as
    ``RetryExecutor``. The only difference is the suspension point: the
    executor awaits ``sleep`` between attempts, so cancelling the task
    while it waits cancels the whole retry sequence.

    Args:
        policy: The retry policy. Defaults to ``Policy()``.
        backoff: Optional backoff policy. Defaults to the backoff policy
            built from ``policy``.
        sleep: The cooperative sleep function used between attempts.
        precompute: If ``True`` and ``backoff`` is not given, tabulate the
            raw delays of every allowed attempt up front.
        rng: Optional source of uniform samples used for jitter.

    Example:
        ```pycon
        >>> import asyncio
        >>> from chronoretry.policy import Policy
        >>> from chronoretry.retry import AsyncRetryExecutor
        >>> async def fetch():
        ...     return "ok"
        ...
        >>> executor = AsyncRetryExecutor(Policy(max_attempts=3))
        >>> asyncio.run(executor.call(fetch))
        'ok'

        ```
    """

    def __init__(
        self,
        policy: Policy | None = None,
        *,
        backoff: BackoffPolicy | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        precompute: bool = False,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(policy, backoff=backoff, precompute=precompute, rng=rng)
        self.sleep = sleep

    async def run(self, operation: Callable[[], Awaitable[T]]) -> Outcome:
        """Await the operation until it reaches a terminal outcome.

        Args:
            operation: The zero-argument coroutine function to await.

        Returns:
            ``Success``, ``Exhausted`` or ``NonRetryable``.

        Raises:
            InvalidJitterFactorError: If the policy jitter factor is NaN or
                not a real number.
            asyncio.CancelledError: If the task is cancelled, including
                while waiting between attempts.
        """
        attempts = 0
        total_delay = 0.0
        while True:
            attempts += 1
            try:
                result = await operation()
            except Exception as exc:
                decision = self._handle_failure(exc, attempts, total_delay)
                if isinstance(decision, (Exhausted, NonRetryable)):
                    return decision
                await robust_sleep_async(self.sleep, decision)
                total_delay += decision
                continue

            self.callbacks.on_success(result, attempts)
            return Success(value=result, attempts=attempts, total_delay=total_delay)

    async def call(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Await the operation with automatic retry logic.

        Args:
            operation: The zero-argument coroutine function to await.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            MaxRetriesExceededError: If every allowed attempt failed with a
                retryable error.
            Exception: A non-retryable failure, propagated unchanged.
        """
        outcome = await self.run(operation)
        return outcome.unwrap()
