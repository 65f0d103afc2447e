r"""Backoff policies turning an attempt number into a jittered delay.

A backoff policy combines a backoff strategy (the raw, deterministic delay)
with jitter. Two implementations share the same contract and are selected
when the policy is built:

- ``StandardBackoffPolicy`` evaluates the strategy on every call.
- ``PrecomputedBackoffPolicy`` tabulates the raw delays of every attempt
  allowed by the retry policy once, and only draws the jitter per call.
"""

from __future__ import annotations

__all__ = [
    "BackoffPolicy",
    "PrecomputedBackoffPolicy",
    "StandardBackoffPolicy",
    "create_backoff_policy",
    "create_backoff_strategy",
]

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from chronoretry.backoff.constant import ConstantBackoff
from chronoretry.backoff.exponential import ExponentialBackoff
from chronoretry.backoff.fibonacci import FibonacciBackoff
from chronoretry.backoff.jitter import apply_jitter
from chronoretry.core.validation import validate_attempt
from chronoretry.policy import BackoffStrategy

if TYPE_CHECKING:
    from chronoretry.backoff.base import BaseBackoffStrategy
    from chronoretry.backoff.jitter import RandomSource
    from chronoretry.policy import Policy

logger: logging.Logger = logging.getLogger(__name__)


class BackoffPolicy(ABC):
    """Map a failed attempt number to the delay to wait before retrying.

    Args:
        strategy: The backoff strategy computing the raw delay.
        jitter_factor: The jitter factor. It is normalized on every call, so
            an invalid value is reported by the first ``delay`` call.
        rng: Optional source of uniform samples used for jitter. Defaults
            to the ``random`` module.
    """

    def __init__(
        self,
        strategy: BaseBackoffStrategy,
        jitter_factor: Any = 0.0,
        rng: RandomSource | None = None,
    ) -> None:
        self.strategy = strategy
        self.jitter_factor = jitter_factor
        self.rng = rng

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(strategy={self.strategy!r}, "
            f"jitter_factor={self.jitter_factor!r})"
        )

    @abstractmethod
    def raw_delay(self, attempt: int) -> float:
        """Return the un-jittered delay after a failed attempt.

        Args:
            attempt: The number of the attempt that failed (1-indexed).

        Returns:
            The raw delay in seconds.
        """

    def delay(self, attempt: int) -> float:
        """Return the jittered delay after a failed attempt.

        Args:
            attempt: The number of the attempt that failed (1-indexed).

        Returns:
            A finite, non-negative delay in seconds, never larger than the
            raw delay.

        Raises:
            InvalidJitterFactorError: If the jitter factor is NaN or not a
                real number.
            ValueError: If ``attempt`` is lower than 1.
        """
        raw = self.raw_delay(attempt)
        delay = apply_jitter(raw, self.jitter_factor, self.rng)
        logger.debug(f"Backoff for attempt {attempt}: {delay:.6f}s (raw={raw:.6f}s)")
        return delay


class StandardBackoffPolicy(BackoffPolicy):
    """Backoff policy evaluating its strategy on every call.

    Example:
        ```pycon
        >>> from chronoretry.backoff import ExponentialBackoff, StandardBackoffPolicy
        >>> backoff = StandardBackoffPolicy(ExponentialBackoff(base_delay=1.0), jitter_factor=0.0)
        >>> [backoff.delay(attempt) for attempt in range(1, 5)]
        [1.0, 2.0, 4.0, 8.0]

        ```
    """

    def raw_delay(self, attempt: int) -> float:
        return self.strategy.calculate(attempt)


class PrecomputedBackoffPolicy(BackoffPolicy):
    """Backoff policy reading raw delays from a table built once.

    The table covers attempts ``1..size``. Later attempts fall back to the
    strategy, so both implementations return the same raw delays.

    Args:
        strategy: The backoff strategy computing the raw delay.
        jitter_factor: The jitter factor.
        rng: Optional source of uniform samples used for jitter.
        size: The number of attempts to tabulate. Must be >= 0.

    Example:
        ```pycon
        >>> from chronoretry.backoff import FibonacciBackoff, PrecomputedBackoffPolicy
        >>> backoff = PrecomputedBackoffPolicy(
        ...     FibonacciBackoff(base_delay=1.0, max_delay=100.0), jitter_factor=0.0, size=5
        ... )
        >>> backoff.table
        (1.0, 1.0, 2.0, 3.0, 5.0)
        >>> backoff.delay(7)  # Outside of the table
        13.0

        ```
    """

    def __init__(
        self,
        strategy: BaseBackoffStrategy,
        jitter_factor: Any = 0.0,
        rng: RandomSource | None = None,
        size: int = 0,
    ) -> None:
        if size < 0:
            msg = f"size must be >= 0, got {size}"
            raise ValueError(msg)
        super().__init__(strategy, jitter_factor=jitter_factor, rng=rng)
        self.table: tuple[float, ...] = tuple(
            strategy.calculate(attempt) for attempt in range(1, size + 1)
        )

    def raw_delay(self, attempt: int) -> float:
        validate_attempt(attempt)
        if attempt <= len(self.table):
            return self.table[attempt - 1]
        return self.strategy.calculate(attempt)


def create_backoff_strategy(policy: Policy) -> BaseBackoffStrategy:
    """Create the backoff strategy described by a retry policy.

    Args:
        policy: The retry policy.

    Returns:
        The backoff strategy matching ``policy.strategy``.

    Example:
        ```pycon
        >>> from chronoretry.backoff import create_backoff_strategy
        >>> from chronoretry.policy import Policy
        >>> create_backoff_strategy(Policy(strategy="constant", base_delay=0.5))
        ConstantBackoff(delay=0.5)

        ```
    """
    if policy.strategy is BackoffStrategy.EXPONENTIAL:
        return ExponentialBackoff(
            base_delay=policy.base_delay,
            multiplier=policy.multiplier,
            max_delay=policy.max_delay,
        )
    if policy.strategy is BackoffStrategy.FIBONACCI:
        return FibonacciBackoff(base_delay=policy.base_delay, max_delay=policy.max_delay)
    return ConstantBackoff(delay=policy.base_delay)


def create_backoff_policy(
    policy: Policy,
    precompute: bool = False,
    rng: RandomSource | None = None,
) -> BackoffPolicy:
    """Create the backoff policy used to time the retries of a policy.

    Args:
        policy: The retry policy.
        precompute: If ``True``, tabulate the raw delays of every attempt
            allowed by ``policy`` up front.
        rng: Optional source of uniform samples used for jitter.

    Returns:
        The backoff policy.

    Example:
        ```pycon
        >>> from chronoretry.backoff import create_backoff_policy
        >>> from chronoretry.policy import Policy
        >>> backoff = create_backoff_policy(Policy(base_delay=1.0, jitter_factor=0.0))
        >>> backoff.delay(3)
        4.0

        ```
    """
    strategy = create_backoff_strategy(policy)
    if precompute:
        return PrecomputedBackoffPolicy(
            strategy, jitter_factor=policy.jitter_factor, rng=rng, size=policy.max_attempts
        )
    return StandardBackoffPolicy(strategy, jitter_factor=policy.jitter_factor, rng=rng)
