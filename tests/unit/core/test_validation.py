r"""Unit tests for retry policy parameter validation."""

from __future__ import annotations

import math

import pytest

from chronoretry.core import validate_attempt, validate_policy_params

######################################
#     Tests for validate_attempt     #
######################################


@pytest.mark.parametrize("attempt", [1, 2, 10**9])
def test_validate_attempt_valid(attempt: int) -> None:
    """Test that attempts >= 1 are accepted."""
    validate_attempt(attempt)


@pytest.mark.parametrize("attempt", [0, -1])
def test_validate_attempt_invalid(attempt: int) -> None:
    """Test that attempts < 1 raise ValueError."""
    with pytest.raises(ValueError, match=rf"attempt must be >= 1, got {attempt}"):
        validate_attempt(attempt)


############################################
#     Tests for validate_policy_params     #
############################################


def test_validate_policy_params_valid() -> None:
    """Test that valid parameters pass validation."""
    validate_policy_params(max_attempts=3, base_delay=0.1, multiplier=2.0, max_delay=10.0)


def test_validate_policy_params_zero_delays() -> None:
    """Test that zero delays are accepted."""
    validate_policy_params(max_attempts=1, base_delay=0.0, multiplier=1.0, max_delay=0.0)


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_validate_policy_params_max_attempts_too_small(max_attempts: int) -> None:
    """Test that max_attempts < 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        validate_policy_params(max_attempts=max_attempts)


@pytest.mark.parametrize("max_attempts", [2.0, "3", True, None])
def test_validate_policy_params_max_attempts_not_int(max_attempts: object) -> None:
    """Test that a non-integer max_attempts raises TypeError."""
    with pytest.raises(TypeError, match=r"max_attempts must be an integer"):
        validate_policy_params(max_attempts=max_attempts)  # type: ignore[arg-type]


@pytest.mark.parametrize("base_delay", [-0.1, math.inf, math.nan])
def test_validate_policy_params_invalid_base_delay(base_delay: float) -> None:
    """Test that an invalid base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be finite and >= 0"):
        validate_policy_params(max_attempts=3, base_delay=base_delay)


@pytest.mark.parametrize("multiplier", [0.0, -1.0, math.inf, math.nan])
def test_validate_policy_params_invalid_multiplier(multiplier: float) -> None:
    """Test that an invalid multiplier raises ValueError."""
    with pytest.raises(ValueError, match=r"multiplier must be finite and > 0"):
        validate_policy_params(max_attempts=3, multiplier=multiplier)


@pytest.mark.parametrize("max_delay", [-1.0, math.inf, math.nan])
def test_validate_policy_params_invalid_max_delay(max_delay: float) -> None:
    """Test that an invalid max_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"max_delay must be finite and >= 0"):
        validate_policy_params(max_attempts=3, max_delay=max_delay)
