r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

import math

from chronoretry.backoff.base import BaseBackoffStrategy
from chronoretry.core.defaults import DEFAULT_BASE_DELAY
from chronoretry.core.validation import validate_attempt


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry attempt, regardless of the attempt
    number. The delay is not capped by ``max_delay``.

    Args:
        delay: The fixed delay in seconds to use for all retry attempts.

    Example:
        ```pycon
        >>> from chronoretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.calculate(1)
        2.5
        >>> backoff.calculate(10)
        2.5

        ```
    """

    def __init__(self, delay: float = DEFAULT_BASE_DELAY) -> None:
        if not math.isfinite(delay) or delay < 0:
            msg = f"delay must be finite and non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = float(delay)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:
        validate_attempt(attempt)
        return self.delay
