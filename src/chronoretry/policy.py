r"""Retry policy value object.

A ``Policy`` gathers everything the engine needs to retry one call site:
the backoff strategy and its bounds, the number of attempts, which failures
are retryable, and the optional lifecycle observers. It is immutable once
built and can be shared by concurrent callers.
"""

from __future__ import annotations

__all__ = ["BackoffStrategy", "Policy"]

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from chronoretry.core.defaults import (
    DEFAULT_BASE_DELAY,
    DEFAULT_JITTER_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    DEFAULT_MULTIPLIER,
)
from chronoretry.core.validation import validate_policy_params

if TYPE_CHECKING:
    from collections.abc import Callable


class BackoffStrategy(str, Enum):
    """Backoff strategies supported by a ``Policy``.

    Attributes:
        EXPONENTIAL: ``base_delay * multiplier ** (attempt - 1)``, capped.
        CONSTANT: ``base_delay`` for every attempt.
        FIBONACCI: ``base_delay * fibonacci(attempt)``, capped.
    """

    EXPONENTIAL = "exponential"
    CONSTANT = "constant"
    FIBONACCI = "fibonacci"

    @classmethod
    def parse(cls, value: BackoffStrategy | str) -> BackoffStrategy:
        """Convert a strategy tag to a ``BackoffStrategy``.

        Args:
            value: A ``BackoffStrategy`` or its name (case-insensitive).

        Returns:
            The matching strategy.

        Raises:
            ValueError: If the tag does not name a known strategy.

        Example:
            ```pycon
            >>> from chronoretry.policy import BackoffStrategy
            >>> BackoffStrategy.parse("Fibonacci")
            <BackoffStrategy.FIBONACCI: 'fibonacci'>

            ```
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        valid = ", ".join(repr(member.value) for member in cls)
        msg = f"Unknown backoff strategy {value!r}, expected one of {valid}"
        raise ValueError(msg)


@dataclass(frozen=True)
class Policy:
    """Configuration of one retry call site.

    The jitter factor is not checked when the policy is built: values outside
    ``[0, 1]`` are clamped when a delay is computed, and a NaN or non-numeric
    value raises ``InvalidJitterFactorError`` the first time a delay is
    computed.

    Args:
        strategy: Backoff strategy, as a ``BackoffStrategy`` or its name.
        max_attempts: Maximum number of attempts, including the first one.
            Must be >= 1.
        base_delay: Base delay in seconds. Must be >= 0.
        multiplier: Growth factor of the exponential strategy. Must be > 0.
        max_delay: Upper bound in seconds of the delay before jitter, for the
            exponential and Fibonacci strategies. Must be >= 0.
        jitter_factor: 0 for a deterministic delay, 1 for full jitter.
        retryable_exceptions: Exception types that trigger another attempt.
            Defaults to every ``Exception``.
        retry_if: Optional predicate deciding if a failure is retryable.
            When set, it replaces the ``retryable_exceptions`` check.
        on_success: Optional observer called with ``(result, attempts)``.
        on_retry: Optional observer called with
            ``(failure, attempt, next_delay)`` before each wait.
        on_failure: Optional observer called with ``(failure, attempts)``
            when the retry sequence gives up.

    Raises:
        ValueError: If the strategy is unknown or a numeric parameter is
            out of range.
        TypeError: If ``max_attempts`` is not an integer or
            ``retryable_exceptions`` holds something that is not an
            exception type.

    Example:
        ```pycon
        >>> from chronoretry.policy import Policy
        >>> policy = Policy()  # Use defaults
        >>> policy.max_attempts
        3
        >>> policy = Policy(strategy="fibonacci", max_attempts=5)
        >>> policy.strategy
        <BackoffStrategy.FIBONACCI: 'fibonacci'>
        >>> policy.merge(max_attempts=10).max_attempts
        10
        >>> policy.max_attempts  # Original unchanged
        5

        ```
    """

    strategy: BackoffStrategy = BackoffStrategy.EXPONENTIAL
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    multiplier: float = DEFAULT_MULTIPLIER
    max_delay: float = DEFAULT_MAX_DELAY
    jitter_factor: float = DEFAULT_JITTER_FACTOR
    retryable_exceptions: tuple[type[Exception], ...] = field(default=(Exception,))
    retry_if: Callable[[Exception], bool] | None = None
    on_success: Callable[[Any, int], None] | None = None
    on_retry: Callable[[Exception, int, float], None] | None = None
    on_failure: Callable[[Exception, int], None] | None = None

    def __post_init__(self) -> None:
        # frozen dataclass: normalized values are written with object.__setattr__
        object.__setattr__(self, "strategy", BackoffStrategy.parse(self.strategy))
        retryable = self.retryable_exceptions
        if isinstance(retryable, type):
            retryable = (retryable,)
        retryable = tuple(retryable)
        for exc_type in retryable:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                msg = f"retryable_exceptions must contain exception types, got {exc_type!r}"
                raise TypeError(msg)
        object.__setattr__(self, "retryable_exceptions", retryable)
        validate_policy_params(
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            multiplier=self.multiplier,
            max_delay=self.max_delay,
        )

    def merge(self, **overrides: Any) -> Policy:
        """Create a new policy with the specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``Policy`` with the overrides applied.

        Raises:
            TypeError: If an override does not name a policy field.

        Example:
            ```pycon
            >>> from chronoretry.policy import Policy
            >>> policy = Policy(max_attempts=3)
            >>> policy.merge(max_attempts=5, base_delay=None).max_attempts
            5

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the policy to a dictionary of its fields.

        Returns:
            Dictionary with one entry per policy field.

        Example:
            ```pycon
            >>> from chronoretry.policy import Policy
            >>> Policy(max_attempts=5).to_dict()["max_attempts"]
            5

            ```
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

