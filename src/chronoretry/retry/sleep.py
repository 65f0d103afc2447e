r"""Suspension primitives used between two attempts.

The executors suspend through an injected sleep function: ``time.sleep``
blocks the calling thread, ``asyncio.sleep`` yields to the event loop. The
robust wrappers below give both the same contract:

- a delay <= 0 does not suspend at all;
- interruptions (``KeyboardInterrupt``, ``asyncio.CancelledError``, and any
  other ``BaseException`` that is not an ``Exception``) propagate at once;
- any other error raised while waiting is logged and swallowed, and the
  next attempt proceeds as if the wait completed.
"""

from __future__ import annotations

__all__ = ["robust_sleep", "robust_sleep_async"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger: logging.Logger = logging.getLogger(__name__)


def robust_sleep(sleep: Callable[[float], None], delay: float) -> None:
    """Block for ``delay`` seconds with the given sleep function.

    Args:
        sleep: The blocking sleep function, e.g. ``time.sleep``.
        delay: The delay in seconds.

    Example:
        ```pycon
        >>> import time
        >>> from chronoretry.retry.sleep import robust_sleep
        >>> robust_sleep(time.sleep, 0.0)  # Returns immediately
        >>> robust_sleep(time.sleep, 0.001)

        ```
    """
    if delay <= 0:
        return
    try:
        sleep(delay)
    except Exception:
        logger.debug(f"Sleep of {delay:.6f}s failed, proceeding with the next attempt", exc_info=True)


async def robust_sleep_async(sleep: Callable[[float], Awaitable[None]], delay: float) -> None:
    """Suspend the current coroutine for ``delay`` seconds.

    Args:
        sleep: The cooperative sleep function, e.g. ``asyncio.sleep``.
        delay: The delay in seconds.
    """
    if delay <= 0:
        return
    try:
        await sleep(delay)
    except Exception:
        logger.debug(f"Sleep of {delay:.6f}s failed, proceeding with the next attempt", exc_info=True)
