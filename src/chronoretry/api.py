r"""Convenience entry points running an operation under a retry policy.

Example:
    ```pycon
    >>> from chronoretry import retry
    >>> retry(lambda: "ok", max_attempts=2)
    'ok'

    ```
"""

from __future__ import annotations

__all__ = ["resolve_policy", "retry", "retry_async"]

import asyncio
import time
from typing import TYPE_CHECKING, Any, TypeVar

from chronoretry.config import get_default_registry
from chronoretry.policy import Policy
from chronoretry.retry.executor import RetryExecutor
from chronoretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from chronoretry.config import PolicyRegistry

T = TypeVar("T")


def resolve_policy(
    policy: Policy | str | None = None,
    registry: PolicyRegistry | None = None,
    **overrides: Any,
) -> Policy:
    """Resolve the policy to use for one call.

    Args:
        policy: A ``Policy``, the name of a registered policy, or ``None``
            for the registry's default policy.
        registry: The registry to look names up in. Defaults to the
            process-wide registry.
        **overrides: Policy fields overriding the resolved policy.

    Returns:
        The resolved policy.

    Raises:
        UnknownPolicyError: If ``policy`` names an unregistered policy.

    Example:
        ```pycon
        >>> from chronoretry.api import resolve_policy
        >>> from chronoretry.config import PolicyRegistry
        >>> registry = PolicyRegistry()
        >>> _ = registry.define_policy("patient", max_attempts=10)
        >>> resolve_policy("patient", registry, base_delay=1.0).max_attempts
        10

        ```
    """
    if isinstance(policy, Policy):
        resolved = policy
    else:
        if registry is None:
            registry = get_default_registry()
        resolved = registry.default_policy if policy is None else registry.get_policy(policy)
    return resolved.merge(**overrides) if overrides else resolved


def retry(
    operation: Callable[[], T],
    policy: Policy | str | None = None,
    *,
    registry: PolicyRegistry | None = None,
    sleep: Callable[[float], None] = time.sleep,
    **overrides: Any,
) -> T:
    """Call an operation with automatic retry logic.

    Args:
        operation: The zero-argument operation to call.
        policy: A ``Policy``, the name of a registered policy, or ``None``
            for the registry's default policy.
        registry: The registry to look names up in. Defaults to the
            process-wide registry.
        sleep: The blocking sleep function used between attempts.
        **overrides: Policy fields overriding the resolved policy.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        MaxRetriesExceededError: If every allowed attempt failed with a
            retryable error.
        UnknownPolicyError: If ``policy`` names an unregistered policy.
        Exception: A non-retryable failure, propagated unchanged.
    """
    resolved = resolve_policy(policy, registry, **overrides)
    return RetryExecutor(resolved, sleep=sleep).call(operation)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: Policy | str | None = None,
    *,
    registry: PolicyRegistry | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    **overrides: Any,
) -> T:
    """Await a coroutine operation with automatic retry logic.

    Args:
        operation: The zero-argument coroutine function to await.
        policy: A ``Policy``, the name of a registered policy, or ``None``
            for the registry's default policy.
        registry: The registry to look names up in. Defaults to the
            process-wide registry.
        sleep: The cooperative sleep function used between attempts.
        **overrides: Policy fields overriding the resolved policy.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        MaxRetriesExceededError: If every allowed attempt failed with a
            retryable error.
        UnknownPolicyError: If ``policy`` names an unregistered policy.
        Exception: A non-retryable failure, propagated unchanged.
    """
    resolved = resolve_policy(policy, registry, **overrides)
    return await AsyncRetryExecutor(resolved, sleep=sleep).call(operation)
