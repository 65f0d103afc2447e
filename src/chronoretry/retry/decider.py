r"""Retry decision logic for classifying failures.

This module provides the RetryDecider class that decides whether a
failure raised by an operation should trigger another attempt.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a failure should be retried.

    The decision only depends on the failure. Whether attempts are left is
    checked by the executor, after the failure has been classified.

    Args:
        retryable_exceptions: Exception types that trigger another attempt.
        retry_if: Optional custom predicate. When set, it replaces the
            ``retryable_exceptions`` check. An error raised by the predicate
            propagates to the caller.

    Example:
        ```pycon
        >>> from chronoretry.retry import RetryDecider
        >>> decider = RetryDecider((ConnectionError, TimeoutError))
        >>> decider.is_retryable(ConnectionResetError())
        True
        >>> decider.is_retryable(ValueError())
        False
        >>> decider = RetryDecider(retry_if=lambda exc: "again" in str(exc))
        >>> decider.is_retryable(RuntimeError("try again"))
        True

        ```
    """

    def __init__(
        self,
        retryable_exceptions: tuple[type[BaseException], ...] = (Exception,),
        retry_if: Callable[[Exception], bool] | None = None,
    ) -> None:
        self.retryable_exceptions = retryable_exceptions
        self.retry_if = retry_if

    def __repr__(self) -> str:
        names = ", ".join(exc_type.__name__ for exc_type in self.retryable_exceptions)
        return (
            f"{self.__class__.__qualname__}(retryable_exceptions=({names}), "
            f"retry_if={self.retry_if!r})"
        )

    def is_retryable(self, exception: Exception) -> bool:
        """Determine if a failure should trigger another attempt.

        Args:
            exception: The failure raised by the operation.

        Returns:
            ``True`` if the failure is retryable.
        """
        if self.retry_if is not None:
            should_retry = bool(self.retry_if(exception))
            reason = "retry_if predicate"
        else:
            should_retry = isinstance(exception, self.retryable_exceptions)
            reason = "retryable_exceptions"
        logger.debug(
            f"{type(exception).__name__} is {'' if should_retry else 'not '}retryable ({reason})"
        )
        return should_retry
