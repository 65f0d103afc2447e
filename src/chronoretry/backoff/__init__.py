r"""Backoff strategies and policies for retry delays.

This package provides the backoff strategies computing the raw delay
between two attempts (exponential, constant and Fibonacci), the jitter
utilities, and the backoff policies combining both.
"""

from __future__ import annotations

__all__ = [
    "BackoffPolicy",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "PrecomputedBackoffPolicy",
    "StandardBackoffPolicy",
    "apply_jitter",
    "create_backoff_policy",
    "create_backoff_strategy",
    "normalize_jitter_factor",
]

from chronoretry.backoff.base import BaseBackoffStrategy
from chronoretry.backoff.constant import ConstantBackoff
from chronoretry.backoff.exponential import ExponentialBackoff
from chronoretry.backoff.fibonacci import FibonacciBackoff
from chronoretry.backoff.jitter import apply_jitter, normalize_jitter_factor
from chronoretry.backoff.policy import (
    BackoffPolicy,
    PrecomputedBackoffPolicy,
    StandardBackoffPolicy,
    create_backoff_policy,
    create_backoff_strategy,
)
