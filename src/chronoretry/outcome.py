r"""Terminal outcomes of a retry sequence.

Every retry sequence ends in exactly one of three outcomes and the engine
never retries past it:

- ``Success``: an attempt returned a value.
- ``Exhausted``: every allowed attempt failed with a retryable error.
- ``NonRetryable``: an attempt failed with an error that is not retryable.
"""

from __future__ import annotations

__all__ = ["Exhausted", "NonRetryable", "Outcome", "Success"]

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from chronoretry.exceptions import MaxRetriesExceededError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The operation returned a value.

    Attributes:
        value: The value returned by the successful attempt.
        attempts: The number of attempts made, including the successful one.
        total_delay: The sum of the delays requested between attempts (seconds).
    """

    value: T
    attempts: int
    total_delay: float = 0.0

    def unwrap(self) -> T:
        """Return the value of the successful attempt."""
        return self.value


@dataclass(frozen=True)
class Exhausted:
    """Every allowed attempt failed with a retryable error.

    Attributes:
        failure: The error raised by the last attempt.
        attempts: The number of attempts made.
        total_delay: The sum of the delays requested between attempts (seconds).
    """

    failure: Exception
    attempts: int
    total_delay: float = 0.0

    def unwrap(self) -> NoReturn:
        """Raise ``MaxRetriesExceededError`` chained to the last failure."""
        raise MaxRetriesExceededError(self.failure, self.attempts) from self.failure


@dataclass(frozen=True)
class NonRetryable:
    """An attempt failed with an error outside the retryable set.

    Attributes:
        failure: The error raised by the attempt.
        attempts: The number of attempts made.
        total_delay: The sum of the delays requested between attempts (seconds).
    """

    failure: Exception
    attempts: int
    total_delay: float = 0.0

    def unwrap(self) -> NoReturn:
        """Re-raise the failure unchanged."""
        raise self.failure


Outcome = Union[Success[Any], Exhausted, NonRetryable]
