r"""Parameter validation utilities for retry policies.

This module provides validation functions for the numeric parameters of
a retry policy so that configuration errors are reported when the policy
is built, not in the middle of a retry sequence.
"""

from __future__ import annotations

__all__ = ["validate_attempt", "validate_policy_params"]

import math


def validate_attempt(attempt: int) -> None:
    """Validate a 1-indexed attempt number.

    Args:
        attempt: The attempt number. The first attempt is 1.

    Raises:
        ValueError: If ``attempt`` is lower than 1.

    Example:
        ```pycon
        >>> from chronoretry.core.validation import validate_attempt
        >>> validate_attempt(1)
        >>> validate_attempt(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: attempt must be >= 1, got 0

        ```
    """
    if attempt < 1:
        msg = f"attempt must be >= 1, got {attempt}"
        raise ValueError(msg)


def validate_policy_params(
    max_attempts: int,
    base_delay: float = 0.0,
    multiplier: float = 1.0,
    max_delay: float = 0.0,
) -> None:
    """Validate retry policy parameters.

    The jitter factor is deliberately not validated here: out-of-range
    values are clamped and invalid values are reported the first time a
    delay is computed.

    Args:
        max_attempts: Maximum number of attempts, including the first one.
            Must be >= 1.
        base_delay: Base delay in seconds. Must be finite and >= 0.
        multiplier: Growth factor of the exponential strategy.
            Must be finite and > 0.
        max_delay: Upper bound in seconds of the computed delay before
            jitter. Must be finite and >= 0.

    Raises:
        ValueError: If any parameter is out of its valid range.

    Example:
        ```pycon
        >>> from chronoretry.core.validation import validate_policy_params
        >>> validate_policy_params(max_attempts=3)
        >>> validate_policy_params(max_attempts=3, base_delay=0.1, multiplier=2.0, max_delay=10.0)
        >>> validate_policy_params(max_attempts=0)  # doctest: +SKIP

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {max_attempts!r}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    if not math.isfinite(base_delay) or base_delay < 0:
        msg = f"base_delay must be finite and >= 0, got {base_delay}"
        raise ValueError(msg)
    if not math.isfinite(multiplier) or multiplier <= 0:
        msg = f"multiplier must be finite and > 0, got {multiplier}"
        raise ValueError(msg)
    if not math.isfinite(max_delay) or max_delay < 0:
        msg = f"max_delay must be finite and >= 0, got {max_delay}"
        raise ValueError(msg)
