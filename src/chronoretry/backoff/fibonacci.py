r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

import math

from chronoretry.backoff.base import BaseBackoffStrategy
from chronoretry.core.defaults import DEFAULT_BASE_DELAY, DEFAULT_MAX_DELAY
from chronoretry.core.validation import validate_attempt


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: ``min(base_delay * fibonacci(attempt), max_delay)``.

    This strategy provides a middle ground between linear and exponential backoff,
    starting slow and ramping up gradually. The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...)
    provides a more gradual increase than exponential backoff.

    The sequence is walked iteratively and the walk stops as soon as the
    delay reaches ``max_delay``, so the cost of a call is bounded by the cap
    and not by the attempt number.

    Args:
        base_delay: The base delay in seconds.
        max_delay: The maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from chronoretry.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1.0, max_delay=100.0)
        >>> [backoff.calculate(attempt) for attempt in range(1, 8)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0, 13.0]
        >>> backoff = FibonacciBackoff(base_delay=1.0, max_delay=10.0)
        >>> backoff.calculate(11)  # fib(11) = 89, but capped
        10.0

        ```
    """

    def __init__(
        self, base_delay: float = DEFAULT_BASE_DELAY, max_delay: float = DEFAULT_MAX_DELAY
    ) -> None:
        if not math.isfinite(base_delay) or base_delay < 0:
            msg = f"base_delay must be finite and non-negative, got {base_delay}"
            raise ValueError(msg)
        if not math.isfinite(max_delay) or max_delay < 0:
            msg = f"max_delay must be finite and non-negative, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = float(base_delay)
        self.max_delay = float(max_delay)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def _scaled(self, fibonacci: int) -> float:
        # A term beyond the float range is above any finite cap
        try:
            return self.base_delay * fibonacci
        except OverflowError:
            return math.inf

    def calculate(self, attempt: int) -> float:
        validate_attempt(attempt)
        if self.base_delay == 0.0:
            return 0.0

        previous, current = 0, 1
        for _ in range(attempt - 1):
            # The sequence never decreases, so the cap holds for every later term
            if self._scaled(current) >= self.max_delay:
                return self.max_delay
            previous, current = current, previous + current
        return min(self._scaled(current), self.max_delay)
