r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import math

import pytest

from chronoretry.backoff.constant import ConstantBackoff


def test_constant_backoff_basic() -> None:
    """Test that every attempt gets the same delay."""
    backoff = ConstantBackoff(delay=2.5)
    assert [backoff.calculate(attempt) for attempt in range(1, 6)] == [2.5] * 5


def test_constant_backoff_large_attempt() -> None:
    """Test that the attempt number is ignored."""
    assert ConstantBackoff(delay=0.5).calculate(10**9) == 0.5


def test_constant_backoff_default_values() -> None:
    """Test ConstantBackoff with default values."""
    backoff = ConstantBackoff()
    assert backoff.delay == 0.1
    assert backoff.calculate(1) == 0.1


def test_constant_backoff_is_not_capped() -> None:
    """Test that a constant delay above the default max_delay is kept."""
    assert ConstantBackoff(delay=60.0).calculate(3) == 60.0


def test_constant_backoff_zero_delay() -> None:
    """Test ConstantBackoff with zero delay."""
    assert ConstantBackoff(delay=0.0).calculate(4) == 0.0


@pytest.mark.parametrize("delay", [-1.0, math.inf, math.nan])
def test_constant_backoff_invalid_delay(delay: float) -> None:
    """Test that an invalid delay raises ValueError."""
    with pytest.raises(ValueError, match=r"delay must be finite and non-negative"):
        ConstantBackoff(delay=delay)


def test_constant_backoff_invalid_attempt() -> None:
    """Test that attempt 0 raises ValueError."""
    with pytest.raises(ValueError, match=r"attempt must be >= 1, got 0"):
        ConstantBackoff(delay=1.0).calculate(0)


def test_constant_backoff_repr() -> None:
    """Test ConstantBackoff string representation."""
    assert repr(ConstantBackoff(delay=0.5)) == "ConstantBackoff(delay=0.5)"
