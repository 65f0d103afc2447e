r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from chronoretry.backoff.base import BaseBackoffStrategy
from chronoretry.core.defaults import DEFAULT_BASE_DELAY, DEFAULT_MAX_DELAY, DEFAULT_MULTIPLIER
from chronoretry.core.validation import validate_attempt


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: ``min(base_delay * multiplier ** (attempt - 1), max_delay)``.

    This is the default backoff strategy and works well for most scenarios
    where you want progressively longer delays between retries. A power that
    overflows the float range saturates at ``max_delay``, so arbitrarily large
    attempt numbers are safe.

    Args:
        base_delay: The delay in seconds after the first failed attempt.
        multiplier: The growth factor between two consecutive delays.
        max_delay: The maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from chronoretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5, multiplier=2.0, max_delay=10.0)
        >>> backoff.calculate(1)
        0.5
        >>> backoff.calculate(2)
        1.0
        >>> backoff.calculate(3)
        2.0
        >>> backoff.calculate(100)  # Would be huge, but capped
        10.0

        ```
    """

    def __init__(
        self,
        base_delay: float = DEFAULT_BASE_DELAY,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_delay: float = DEFAULT_MAX_DELAY,
    ) -> None:
        if not math.isfinite(base_delay) or base_delay < 0:
            msg = f"base_delay must be finite and non-negative, got {base_delay}"
            raise ValueError(msg)
        if not math.isfinite(multiplier) or multiplier <= 0:
            msg = f"multiplier must be finite and positive, got {multiplier}"
            raise ValueError(msg)
        if not math.isfinite(max_delay) or max_delay < 0:
            msg = f"max_delay must be finite and non-negative, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = float(base_delay)
        self.multiplier = float(multiplier)
        self.max_delay = float(max_delay)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"multiplier={self.multiplier}, max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        validate_attempt(attempt)
        if self.base_delay == 0.0:
            return 0.0
        try:
            delay = self.base_delay * self.multiplier ** (attempt - 1)
        except OverflowError:
            return self.max_delay
        return min(delay, self.max_delay)
