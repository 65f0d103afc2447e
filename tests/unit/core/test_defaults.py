r"""Unit tests for the default policy values."""

from __future__ import annotations

from chronoretry.core import (
    DEFAULT_BASE_DELAY,
    DEFAULT_JITTER_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    DEFAULT_MULTIPLIER,
)
from chronoretry.policy import Policy


def test_default_values() -> None:
    """Test the default values of a retry policy."""
    assert DEFAULT_MAX_ATTEMPTS == 3
    assert DEFAULT_BASE_DELAY == 0.1
    assert DEFAULT_MULTIPLIER == 2.0
    assert DEFAULT_MAX_DELAY == 10.0
    assert DEFAULT_JITTER_FACTOR == 0.1


def test_policy_uses_default_values() -> None:
    """Test that Policy() uses the default values."""
    policy = Policy()
    assert policy.max_attempts == DEFAULT_MAX_ATTEMPTS
    assert policy.base_delay == DEFAULT_BASE_DELAY
    assert policy.multiplier == DEFAULT_MULTIPLIER
    assert policy.max_delay == DEFAULT_MAX_DELAY
    assert policy.jitter_factor == DEFAULT_JITTER_FACTOR
