r"""Synchronous retry executor.

This module provides the RetryExecutor class that calls an operation
with automatic retry logic, blocking the calling thread between attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import time
from typing import TYPE_CHECKING, TypeVar

from chronoretry.outcome import Exhausted, NonRetryable, Success
from chronoretry.retry.executor_core import BaseRetryExecutor
from chronoretry.retry.sleep import robust_sleep

if TYPE_CHECKING:
    from collections.abc import Callable

    from chronoretry.backoff.jitter import RandomSource
    from chronoretry.backoff.policy import BackoffPolicy
    from chronoretry.outcome import Outcome
    from chronoretry.policy import Policy

T = TypeVar("T")


class RetryExecutor(BaseRetryExecutor):
    """Calls an operation with automatic retry logic.

    The executor orchestrates the following components:
    - BackoffPolicy: Calculates the delay between attempts
    - RetryDecider: Determines whether a failure is retryable
    - CallbackManager: Invokes the lifecycle observers

    Args:
        policy: The retry policy. Defaults to ``Policy()``.
        backoff: Optional backoff policy. Defaults to the backoff policy
            built from ``policy``.
        sleep: The blocking sleep function used between attempts.
        precompute: If ``True`` and ``backoff`` is not given, tabulate the
            raw delays of every allowed attempt up front.
        rng: Optional source of uniform samples used for jitter.

    Example:
        ```pycon
        >>> from chronoretry.policy import Policy
        >>> from chronoretry.retry import RetryExecutor
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("transient")
        ...     return "ok"
        ...
        >>> executor = RetryExecutor(Policy(max_attempts=3, base_delay=0.0))
        >>> executor.call(flaky)
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self,
        policy: Policy | None = None,
        *,
        backoff: BackoffPolicy | None = None,
        sleep: Callable[[float], None] = time.sleep,
        precompute: bool = False,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(policy, backoff=backoff, precompute=precompute, rng=rng)
        self.sleep = sleep

    def run(self, operation: Callable[[], T]) -> Outcome:
        """Call the operation until it reaches a terminal outcome.

        Args:
            operation: The zero-argument operation to call.

        Returns:
            ``Success``, ``Exhausted`` or ``NonRetryable``.

        Raises:
            InvalidJitterFactorError: If the policy jitter factor is NaN or
                not a real number.
        """
        attempts = 0
        total_delay = 0.0
        while True:
            attempts += 1
            try:
                result = operation()
            except Exception as exc:
                decision = self._handle_failure(exc, attempts, total_delay)
                if isinstance(decision, (Exhausted, NonRetryable)):
                    return decision
                robust_sleep(self.sleep, decision)
                total_delay += decision
                continue

            self.callbacks.on_success(result, attempts)
            return Success(value=result, attempts=attempts, total_delay=total_delay)

    def call(self, operation: Callable[[], T]) -> T:
        """Call the operation with automatic retry logic.

        Args:
            operation: The zero-argument operation to call.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            MaxRetriesExceededError: If every allowed attempt failed with a
                retryable error. The last failure is available as
                ``original_exception``.
            Exception: A non-retryable failure, propagated unchanged.
        """
        return self.run(operation).unwrap()

    def __call__(self, operation: Callable[[], T]) -> T:
        return self.call(operation)
