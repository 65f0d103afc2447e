r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps an attempt number to the un-jittered delay to
    wait before the next attempt. Strategies hold no state besides their
    configuration, so one instance can be shared by concurrent callers.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the raw backoff delay after a failed attempt.

        Args:
            attempt: The number of the attempt that just failed (1-indexed).
                For example, attempt=1 is the delay before the first retry.

        Returns:
            The delay in seconds, before jitter.

        Raises:
            ValueError: If ``attempt`` is lower than 1.
        """
