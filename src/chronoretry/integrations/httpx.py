r"""Retry classification for httpx errors.

This module provides a ``retry_if`` predicate recognizing the transient
failures of HTTP calls made with httpx: timeouts, transport errors, and
responses whose status code signals a temporary condition.

Example:
    ```pycon
    >>> import httpx
    >>> from chronoretry.integrations.httpx import httpx_policy
    >>> policy = httpx_policy(max_attempts=5)
    >>> policy.retry_if(httpx.ConnectTimeout("timed out"))
    True
    >>> policy.retry_if(ValueError("bad input"))
    False

    ```
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "HttpxRetryPredicate", "httpx_policy"]

import logging
from typing import Any

import httpx

from chronoretry.policy import Policy

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that signal a temporary condition
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


class HttpxRetryPredicate:
    """Decide if an httpx failure is transient.

    Retries ``httpx.TransportError`` (timeouts, connection and network
    errors) and ``httpx.HTTPStatusError`` whose status code is in
    ``status_forcelist``. Every other failure is not retryable.

    Args:
        status_forcelist: HTTP status codes that trigger a retry.

    Example:
        ```pycon
        >>> import httpx
        >>> from chronoretry.integrations.httpx import HttpxRetryPredicate
        >>> predicate = HttpxRetryPredicate(status_forcelist=(503,))
        >>> request = httpx.Request("GET", "https://api.example.com")
        >>> response = httpx.Response(503, request=request)
        >>> predicate(httpx.HTTPStatusError("unavailable", request=request, response=response))
        True

        ```
    """

    def __init__(self, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES) -> None:
        self.status_forcelist = tuple(status_forcelist)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(status_forcelist={self.status_forcelist})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpxRetryPredicate):
            return NotImplemented
        return self.status_forcelist == other.status_forcelist

    def __hash__(self) -> int:
        return hash(self.status_forcelist)

    def __call__(self, exception: Exception) -> bool:
        if isinstance(exception, httpx.HTTPStatusError):
            status_code = exception.response.status_code
            if status_code in self.status_forcelist:
                return True
            logger.debug(f"HTTP status {status_code} is not retryable")
            return False
        return isinstance(exception, httpx.TransportError)


def httpx_policy(
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES, **options: Any
) -> Policy:
    """Create a policy retrying transient httpx failures.

    Args:
        status_forcelist: HTTP status codes that trigger a retry.
        **options: Other policy fields.

    Returns:
        A policy whose ``retry_if`` is an ``HttpxRetryPredicate``.
    """
    return Policy(retry_if=HttpxRetryPredicate(status_forcelist), **options)
