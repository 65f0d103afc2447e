r"""Retry package implementing the retry state machine.

This package provides the retry executors and the components they are
composed of.

Public API:
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - RetryDecider: Logic for deciding whether a failure is retryable
    - CallbackManager: Manager for observer invocations
    - robust_sleep / robust_sleep_async: Suspension between attempts
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "BaseRetryExecutor",
    "CallbackManager",
    "RetryDecider",
    "RetryExecutor",
    "robust_sleep",
    "robust_sleep_async",
]

from chronoretry.retry.decider import RetryDecider
from chronoretry.retry.executor import RetryExecutor
from chronoretry.retry.executor_async import AsyncRetryExecutor
from chronoretry.retry.executor_core import BaseRetryExecutor
from chronoretry.retry.manager import CallbackManager
from chronoretry.retry.sleep import robust_sleep, robust_sleep_async
