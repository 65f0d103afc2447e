r"""Unit tests for the Policy value object."""

from __future__ import annotations

import dataclasses
import math

import pytest
from coola.equality import objects_are_equal

from chronoretry.policy import BackoffStrategy, Policy

######################################
#     Tests for BackoffStrategy      #
######################################


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("exponential", BackoffStrategy.EXPONENTIAL),
        ("CONSTANT", BackoffStrategy.CONSTANT),
        ("Fibonacci", BackoffStrategy.FIBONACCI),
        (BackoffStrategy.CONSTANT, BackoffStrategy.CONSTANT),
    ],
)
def test_backoff_strategy_parse(value: str, expected: BackoffStrategy) -> None:
    """Test parsing strategy tags."""
    assert BackoffStrategy.parse(value) is expected


@pytest.mark.parametrize("value", ["linear", "", 1, None])
def test_backoff_strategy_parse_unknown(value: object) -> None:
    """Test that unknown tags raise ValueError."""
    with pytest.raises(ValueError, match=r"Unknown backoff strategy"):
        BackoffStrategy.parse(value)  # type: ignore[arg-type]


def test_backoff_strategy_is_str() -> None:
    """Test that strategies compare equal to their names."""
    assert BackoffStrategy.FIBONACCI == "fibonacci"


#############################
#     Tests for Policy      #
#############################


def test_policy_defaults() -> None:
    """Test the default policy."""
    policy = Policy()
    assert policy.strategy is BackoffStrategy.EXPONENTIAL
    assert policy.max_attempts == 3
    assert policy.retryable_exceptions == (Exception,)
    assert policy.retry_if is None
    assert policy.on_success is None
    assert policy.on_retry is None
    assert policy.on_failure is None


def test_policy_strategy_string_is_coerced() -> None:
    """Test that strategy names are converted to BackoffStrategy."""
    assert Policy(strategy="constant").strategy is BackoffStrategy.CONSTANT


def test_policy_unknown_strategy() -> None:
    """Test that an unknown strategy raises ValueError."""
    with pytest.raises(ValueError, match=r"Unknown backoff strategy 'linear'"):
        Policy(strategy="linear")


def test_policy_single_retryable_exception_type() -> None:
    """Test that a single exception type is wrapped in a tuple."""
    policy = Policy(retryable_exceptions=ConnectionError)  # type: ignore[arg-type]
    assert policy.retryable_exceptions == (ConnectionError,)


def test_policy_retryable_exceptions_list() -> None:
    """Test that a list of exception types is converted to a tuple."""
    policy = Policy(retryable_exceptions=[ConnectionError, TimeoutError])  # type: ignore[arg-type]
    assert policy.retryable_exceptions == (ConnectionError, TimeoutError)


def test_policy_invalid_retryable_exceptions() -> None:
    """Test that non exception types raise TypeError."""
    with pytest.raises(TypeError, match=r"retryable_exceptions must contain exception types"):
        Policy(retryable_exceptions=(ValueError, "KeyError"))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"max_attempts": 0}, r"max_attempts must be >= 1"),
        ({"base_delay": -1.0}, r"base_delay must be finite and >= 0"),
        ({"multiplier": 0.0}, r"multiplier must be finite and > 0"),
        ({"max_delay": math.inf}, r"max_delay must be finite and >= 0"),
    ],
)
def test_policy_invalid_parameters(kwargs: dict, match: str) -> None:
    """Test that invalid numeric parameters raise ValueError."""
    with pytest.raises(ValueError, match=match):
        Policy(**kwargs)


@pytest.mark.parametrize("jitter_factor", [math.nan, -1.0, 3.0, "high"])
def test_policy_jitter_factor_not_validated_at_construction(jitter_factor: object) -> None:
    """Test that jitter factors are accepted as is at construction."""
    assert Policy(jitter_factor=jitter_factor).jitter_factor is jitter_factor  # type: ignore[arg-type]


def test_policy_is_frozen() -> None:
    """Test that a policy cannot be mutated."""
    policy = Policy()
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.max_attempts = 10  # type: ignore[misc]


def test_policy_equality() -> None:
    """Test that policies with the same fields are equal."""
    assert Policy(max_attempts=5) == Policy(max_attempts=5)
    assert Policy(max_attempts=5) != Policy(max_attempts=6)


def test_policy_merge() -> None:
    """Test merging overrides into a policy."""
    policy = Policy(max_attempts=3, base_delay=0.5)
    merged = policy.merge(max_attempts=5, strategy="fibonacci")
    assert merged.max_attempts == 5
    assert merged.base_delay == 0.5
    assert merged.strategy is BackoffStrategy.FIBONACCI
    assert policy.max_attempts == 3


def test_policy_merge_ignores_none() -> None:
    """Test that None overrides are ignored."""
    policy = Policy(max_attempts=4)
    assert policy.merge(max_attempts=None, base_delay=None) == policy


def test_policy_merge_validates() -> None:
    """Test that merged values are validated."""
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        Policy().merge(max_attempts=0)


def test_policy_merge_unknown_field() -> None:
    """Test that an unknown override raises TypeError."""
    with pytest.raises(TypeError):
        Policy().merge(max_retries=3)


def test_policy_to_dict() -> None:
    """Test converting a policy to a dictionary."""
    assert objects_are_equal(
        Policy(max_attempts=5, base_delay=1.0, jitter_factor=0.0).to_dict(),
        {
            "strategy": BackoffStrategy.EXPONENTIAL,
            "max_attempts": 5,
            "base_delay": 1.0,
            "multiplier": 2.0,
            "max_delay": 10.0,
            "jitter_factor": 0.0,
            "retryable_exceptions": (Exception,),
            "retry_if": None,
            "on_success": None,
            "on_retry": None,
            "on_failure": None,
        },
    )
