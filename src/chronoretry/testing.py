r"""Helpers for testing code that retries.

Example:
    ```pycon
    >>> from chronoretry.policy import Policy
    >>> from chronoretry.retry import RetryExecutor
    >>> from chronoretry.testing import RecordingSleeper
    >>> sleeper = RecordingSleeper()
    >>> executor = RetryExecutor(Policy(max_attempts=3, base_delay=1.0, jitter_factor=0.0), sleep=sleeper)
    >>> executor.run(lambda: 1 / 0).attempts
    3
    >>> sleeper.delays
    [1.0, 2.0]

    ```
"""

from __future__ import annotations

__all__ = ["AsyncRecordingSleeper", "RecordingSleeper", "assert_delay_in_range"]


class RecordingSleeper:
    """Sleep function recording the requested delays without waiting.

    Attributes:
        delays: The delays requested so far, in seconds.
    """

    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, delay: float) -> None:
        self.delays.append(delay)

    @property
    def total(self) -> float:
        """The sum of the requested delays in seconds."""
        return sum(self.delays)


class AsyncRecordingSleeper(RecordingSleeper):
    """Cooperative sleep function recording the requested delays."""

    async def __call__(self, delay: float) -> None:  # type: ignore[override]
        self.delays.append(delay)


def assert_delay_in_range(
    delay: float, expected_min: float, expected_max: float, message: str = ""
) -> None:
    """Assert that a delay lies in ``[expected_min, expected_max]``.

    Args:
        delay: The delay to check.
        expected_min: The smallest accepted delay.
        expected_max: The largest accepted delay.
        message: Optional text appended to the assertion message.

    Raises:
        AssertionError: If the delay is out of range.

    Example:
        ```pycon
        >>> from chronoretry.testing import assert_delay_in_range
        >>> assert_delay_in_range(0.5, 0.0, 1.0)

        ```
    """
    assert delay >= expected_min, f"Expected delay {delay} to be >= {expected_min}. {message}"
    assert delay <= expected_max, f"Expected delay {delay} to be <= {expected_max}. {message}"
