r"""Shared core logic for retry executors.

This module provides the base class of the synchronous and asynchronous
retry executors. It owns the parts of the retry state machine that do not
depend on how the operation is invoked nor on how the executor waits:
classifying a failure, checking the attempt budget, computing the delay,
and invoking the observers.
"""

from __future__ import annotations

__all__ = ["BaseRetryExecutor"]

import logging
from typing import TYPE_CHECKING

from chronoretry.backoff.policy import create_backoff_policy
from chronoretry.outcome import Exhausted, NonRetryable
from chronoretry.policy import Policy
from chronoretry.retry.decider import RetryDecider
from chronoretry.retry.manager import CallbackManager
from chronoretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from chronoretry.backoff.jitter import RandomSource
    from chronoretry.backoff.policy import BackoffPolicy

logger: logging.Logger = logging.getLogger(__name__)


class BaseRetryExecutor:
    """Base class of the retry executors.

    An executor holds no per-call state: the attempt counter and the last
    failure live in the frame of each ``call``, so one executor can serve
    concurrent callers.

    Args:
        policy: The retry policy. Defaults to ``Policy()``.
        backoff: Optional backoff policy. Defaults to the backoff policy
            built from ``policy``.
        precompute: If ``True`` and ``backoff`` is not given, tabulate the
            raw delays of every allowed attempt up front.
        rng: Optional source of uniform samples used for jitter when
            ``backoff`` is not given.

    Attributes:
        policy: The retry policy.
        backoff: Calculates the delay between attempts.
        decider: Decides whether a failure is retryable.
        callbacks: Invokes the lifecycle observers.
    """

    def __init__(
        self,
        policy: Policy | None = None,
        *,
        backoff: BackoffPolicy | None = None,
        precompute: bool = False,
        rng: RandomSource | None = None,
    ) -> None:
        self.policy = policy if policy is not None else Policy()
        self.backoff = (
            backoff
            if backoff is not None
            else create_backoff_policy(self.policy, precompute=precompute, rng=rng)
        )
        self.decider = RetryDecider(self.policy.retryable_exceptions, self.policy.retry_if)
        self.callbacks = CallbackManager(
            on_success=self.policy.on_success,
            on_retry=self.policy.on_retry,
            on_failure=self.policy.on_failure,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy!r}, backoff={self.backoff!r})"

    def _handle_failure(
        self, exc: Exception, attempts: int, total_delay: float
    ) -> Exhausted | NonRetryable | float:
        """Decide what happens after a failed attempt.

        The classification is evaluated before the attempt budget, so a
        non-retryable failure on the last allowed attempt is still reported
        as non-retryable.

        Args:
            exc: The failure raised by the attempt.
            attempts: The number of attempts made so far.
            total_delay: The sum of the delays requested so far (seconds).

        Returns:
            The terminal outcome, or the delay in seconds to wait before the
            next attempt.
        """
        if not self.decider.is_retryable(exc):
            logger.debug(
                f"Attempt {attempts} failed with non-retryable {type(exc).__name__}: {exc}"
            )
            self.callbacks.on_failure(exc, attempts)
            return NonRetryable(failure=exc, attempts=attempts, total_delay=total_delay)

        if attempts >= self.policy.max_attempts:
            log_structured(
                logger,
                logging.DEBUG,
                f"Giving up after {attempts} attempts: {type(exc).__name__}: {exc}",
                attempt=attempts,
                max_attempts=self.policy.max_attempts,
                error_type=type(exc).__name__,
            )
            self.callbacks.on_failure(exc, attempts)
            return Exhausted(failure=exc, attempts=attempts, total_delay=total_delay)

        delay = self.backoff.delay(attempts)
        self.callbacks.on_retry(exc, attempts, delay)
        log_structured(
            logger,
            logging.DEBUG,
            f"Attempt {attempts}/{self.policy.max_attempts} failed with "
            f"{type(exc).__name__}, retrying in {delay:.6f}s",
            attempt=attempts,
            max_attempts=self.policy.max_attempts,
            delay=delay,
            error_type=type(exc).__name__,
        )
        return delay
