r"""Core shared logic for the sync and async retry executors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_JITTER_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MULTIPLIER",
    "validate_attempt",
    "validate_policy_params",
]

from chronoretry.core.defaults import (
    DEFAULT_BASE_DELAY,
    DEFAULT_JITTER_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    DEFAULT_MULTIPLIER,
)
from chronoretry.core.validation import validate_attempt, validate_policy_params
