r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined observers at the points of the retry lifecycle. Observers
are best effort: an error raised by one is logged and discarded so that it
never changes the retry decision nor masks the real result or failure.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class CallbackManager:
    """Manages observer invocations during the retry lifecycle.

    Args:
        on_success: Optional observer called with ``(result, attempts)``.
        on_retry: Optional observer called with
            ``(failure, attempt, next_delay)``.
        on_failure: Optional observer called with ``(failure, attempts)``.

    Example:
        ```pycon
        >>> from chronoretry.retry import CallbackManager
        >>> def broken(result, attempts):
        ...     raise RuntimeError("observer bug")
        ...
        >>> CallbackManager(on_success=broken).on_success("ok", 1)  # Error is discarded

        ```
    """

    def __init__(
        self,
        on_success: Callable[[Any, int], None] | None = None,
        on_retry: Callable[[Exception, int, float], None] | None = None,
        on_failure: Callable[[Exception, int], None] | None = None,
    ) -> None:
        self.success_callback = on_success
        self.retry_callback = on_retry
        self.failure_callback = on_failure

    def on_success(self, result: Any, attempts: int) -> None:
        """Invoke the success observer.

        Args:
            result: The value returned by the operation.
            attempts: The number of attempts made (1-indexed).
        """
        self._invoke("on_success", self.success_callback, result, attempts)

    def on_retry(self, failure: Exception, attempt: int, next_delay: float) -> None:
        """Invoke the retry observer.

        Args:
            failure: The retryable failure of the attempt.
            attempt: The number of the attempt that failed (1-indexed).
            next_delay: The delay in seconds before the next attempt.
        """
        self._invoke("on_retry", self.retry_callback, failure, attempt, next_delay)

    def on_failure(self, failure: Exception, attempts: int) -> None:
        """Invoke the failure observer.

        Args:
            failure: The failure that ended the retry sequence.
            attempts: The number of attempts made (1-indexed).
        """
        self._invoke("on_failure", self.failure_callback, failure, attempts)

    @staticmethod
    def _invoke(name: str, callback: Callable[..., Any] | None, *args: Any) -> None:
        if callback is None:
            return
        try:
            callback(*args)
        except Exception:
            logger.warning(f"{name} callback raised an error, ignoring it", exc_info=True)
