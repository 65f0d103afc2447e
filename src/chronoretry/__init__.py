r"""chronoretry - Retry engine with configurable backoff policies.

This package re-executes fallible operations under a retry policy. The
delay between two attempts follows a backoff strategy and is spread in
time with jitter, so that many clients failing at once do not hammer a
recovering dependency in lockstep.

Key Features:
    - Exponential, constant and Fibonacci backoff strategies
    - Jitter from deterministic (0) to full jitter (1)
    - Retryable exception types or a custom ``retry_if`` predicate
    - Success, retry and failure observers
    - Synchronous and asynchronous executors sharing one state machine
    - Registry of named policies and a ``@retryable`` decorator

Example:
    ```pycon
    >>> from chronoretry import Policy, RetryExecutor, retry
    >>> retry(lambda: "ok", max_attempts=2)
    'ok'
    >>> executor = RetryExecutor(Policy(max_attempts=2, base_delay=0.0))
    >>> outcome = executor.run(lambda: 1 / 0)
    >>> type(outcome).__name__, outcome.attempts
    ('Exhausted', 2)

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "BackoffPolicy",
    "BackoffStrategy",
    "ChronoRetryError",
    "ConstantBackoff",
    "Exhausted",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "InvalidJitterFactorError",
    "MaxRetriesExceededError",
    "NonRetryable",
    "Outcome",
    "Policy",
    "PolicyRegistry",
    "RetryExecutor",
    "Success",
    "UnknownPolicyError",
    "__version__",
    "create_backoff_policy",
    "get_default_registry",
    "retry",
    "retry_async",
    "retryable",
]

from importlib.metadata import PackageNotFoundError, version

from chronoretry.api import retry, retry_async
from chronoretry.backoff import (
    BackoffPolicy,
    ConstantBackoff,
    ExponentialBackoff,
    FibonacciBackoff,
    create_backoff_policy,
)
from chronoretry.config import PolicyRegistry, get_default_registry
from chronoretry.decorators import retryable
from chronoretry.exceptions import (
    ChronoRetryError,
    InvalidJitterFactorError,
    MaxRetriesExceededError,
    UnknownPolicyError,
)
from chronoretry.outcome import Exhausted, NonRetryable, Outcome, Success
from chronoretry.policy import BackoffStrategy, Policy
from chronoretry.retry import AsyncRetryExecutor, RetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
