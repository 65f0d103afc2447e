r"""Define the exceptions raised by the retry engine.

The engine only raises its own exceptions for the terminal conditions it
owns. A failure that is not retryable is never wrapped: it reaches the
caller unchanged.
"""

from __future__ import annotations

__all__ = [
    "ChronoRetryError",
    "InvalidJitterFactorError",
    "MaxRetriesExceededError",
    "UnknownPolicyError",
]

from typing import Any


class ChronoRetryError(Exception):
    """Base class for the exceptions raised by chronoretry."""


class MaxRetriesExceededError(ChronoRetryError):
    """Raised when every allowed attempt failed with a retryable error.

    Args:
        original_exception: The failure raised by the last attempt.
        attempts: The number of attempts that were made.

    Example:
        ```pycon
        >>> from chronoretry.exceptions import MaxRetriesExceededError
        >>> error = MaxRetriesExceededError(RuntimeError("Always fails"), 2)
        >>> error.attempts
        2
        >>> str(error)
        'Max retries (2) exceeded. Original error: RuntimeError: Always fails'

        ```
    """

    def __init__(self, original_exception: Exception, attempts: int) -> None:
        self.original_exception = original_exception
        self.attempts = attempts
        super().__init__(
            f"Max retries ({attempts}) exceeded. Original error: "
            f"{type(original_exception).__name__}: {original_exception}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.original_exception, self.attempts))


class InvalidJitterFactorError(ChronoRetryError, ValueError):
    """Raised when a jitter factor is NaN or not a real number.

    Out-of-range numeric values are clamped and never raise this error.

    Args:
        jitter_factor: The rejected value.
    """

    def __init__(self, jitter_factor: Any) -> None:
        self.jitter_factor = jitter_factor
        super().__init__(f"jitter_factor must be a real number, got {jitter_factor!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.jitter_factor,))


class UnknownPolicyError(ChronoRetryError, KeyError):
    """Raised when a named policy is not registered.

    Args:
        name: The policy name that was looked up.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Policy '{self.name}' not found."

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.name,))
