r"""Jitter utilities for spreading retry delays in time.

Jitter blends the deterministic delay computed by a backoff strategy with a
uniform random sample so that many clients failing at the same moment do not
retry in lockstep.
"""

from __future__ import annotations

__all__ = ["RandomSource", "apply_jitter", "normalize_jitter_factor"]

import decimal
import math
import numbers
import random
from typing import Any, Protocol

from chronoretry.exceptions import InvalidJitterFactorError


class RandomSource(Protocol):
    """Anything that draws uniform samples from ``[0, 1)``, e.g. ``random.Random``."""

    def random(self) -> float: ...


def normalize_jitter_factor(jitter_factor: Any) -> float:
    """Clamp a jitter factor to ``[0.0, 1.0]``.

    Args:
        jitter_factor: The configured jitter factor. Any real number or
            ``decimal.Decimal`` is accepted.

    Returns:
        The jitter factor as a float in ``[0.0, 1.0]``.

    Raises:
        InvalidJitterFactorError: If ``jitter_factor`` is NaN or is not a
            real number. Out-of-range values are clamped, never rejected.

    Example:
        ```pycon
        >>> from chronoretry.backoff.jitter import normalize_jitter_factor
        >>> normalize_jitter_factor(0.25)
        0.25
        >>> normalize_jitter_factor(5)
        1.0
        >>> normalize_jitter_factor(-0.5)
        0.0

        ```
    """
    if isinstance(jitter_factor, decimal.Decimal):
        if jitter_factor.is_nan():
            raise InvalidJitterFactorError(jitter_factor)
    elif not isinstance(jitter_factor, numbers.Real):
        raise InvalidJitterFactorError(jitter_factor)
    value = float(jitter_factor)
    if math.isnan(value):
        raise InvalidJitterFactorError(jitter_factor)
    return min(max(value, 0.0), 1.0)


def apply_jitter(delay: float, jitter_factor: Any, rng: RandomSource | None = None) -> float:
    """Blend a raw delay with a uniform random sample.

    The jittered delay is calculated as:
    ``delay * (1 - jitter + uniform(0, 1) * jitter)`` where ``jitter`` is the
    normalized jitter factor. A jitter of 0 returns ``delay`` unchanged
    without drawing a sample, and a jitter of 1 draws the delay uniformly
    from ``[0, delay]`` ("full jitter").

    Args:
        delay: The raw delay in seconds.
        jitter_factor: The jitter factor, clamped to ``[0.0, 1.0]``.
        rng: Optional source of uniform samples. Defaults to the
            ``random`` module.

    Returns:
        The jittered delay in seconds, in ``[delay * (1 - jitter), delay]``.

    Raises:
        InvalidJitterFactorError: If ``jitter_factor`` is NaN or is not a
            real number.

    Example:
        ```pycon
        >>> from chronoretry.backoff.jitter import apply_jitter
        >>> apply_jitter(2.0, jitter_factor=0.0)
        2.0
        >>> 0.0 <= apply_jitter(2.0, jitter_factor=1.0) <= 2.0
        True

        ```
    """
    jitter = normalize_jitter_factor(jitter_factor)
    if jitter == 0.0:
        return delay
    sample = (rng if rng is not None else random).random()  # noqa: S311
    return delay * (1.0 - jitter + sample * jitter)
