r"""Decorator attaching a retry policy to a function.

Example:
    ```pycon
    >>> from chronoretry import retryable
    >>> attempts = []
    >>> @retryable(max_attempts=3, base_delay=0.0, retryable_exceptions=(ConnectionError,))
    ... def fetch():
    ...     attempts.append(1)
    ...     if len(attempts) < 2:
    ...         raise ConnectionError("transient")
    ...     return "data"
    ...
    >>> fetch()
    'data'
    >>> len(attempts)
    2

    ```
"""

from __future__ import annotations

__all__ = ["retryable"]

import functools
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from chronoretry.api import retry, retry_async

if TYPE_CHECKING:
    from collections.abc import Callable

    from chronoretry.config import PolicyRegistry
    from chronoretry.policy import Policy

F = TypeVar("F", bound="Callable[..., Any]")


def retryable(
    policy: Policy | str | None = None,
    *,
    registry: PolicyRegistry | None = None,
    **overrides: Any,
) -> Callable[[F], F]:
    """Retry every call of the decorated function under a policy.

    Coroutine functions are retried with the asynchronous executor, other
    functions with the synchronous one. A policy given by name is looked
    up on every call, so it can be registered after the function is
    decorated.

    Args:
        policy: A ``Policy``, the name of a registered policy, or ``None``
            for the registry's default policy.
        registry: The registry to look names up in. Defaults to the
            process-wide registry.
        **overrides: Policy fields overriding the resolved policy.

    Returns:
        The decorator.
    """

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await retry_async(
                    lambda: func(*args, **kwargs), policy, registry=registry, **overrides
                )

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return retry(lambda: func(*args, **kwargs), policy, registry=registry, **overrides)

        return wrapper  # type: ignore[return-value]

    return decorator
