r"""Unit tests for the asynchronous retry executor."""

from __future__ import annotations

import asyncio
import math
from unittest.mock import AsyncMock, Mock

import pytest

from chronoretry.exceptions import InvalidJitterFactorError, MaxRetriesExceededError
from chronoretry.outcome import Exhausted, NonRetryable, Success
from chronoretry.policy import Policy
from chronoretry.retry import AsyncRetryExecutor
from chronoretry.testing import AsyncRecordingSleeper


def make_flaky(failures: int, error: Exception | None = None, result: str = "ok") -> AsyncMock:
    """Create a coroutine function failing ``failures`` times, then returning ``result``."""
    error = error if error is not None else ConnectionError("transient")
    return AsyncMock(side_effect=[error] * failures + [result])


def test_async_retry_executor_creation() -> None:
    """Test AsyncRetryExecutor initialization."""
    policy = Policy(max_attempts=4)
    executor = AsyncRetryExecutor(policy)
    assert executor.policy is policy
    assert executor.sleep is asyncio.sleep


@pytest.mark.asyncio
async def test_async_retry_executor_successful_call() -> None:
    """Test a call that succeeds on the first attempt."""
    operation = AsyncMock(return_value="ok")
    assert await AsyncRetryExecutor(Policy()).call(operation) == "ok"
    operation.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_fails_twice_then_succeeds() -> None:
    """Test that the operation is awaited until it succeeds."""
    operation = make_flaky(2)
    sleeper = AsyncRecordingSleeper()
    executor = AsyncRetryExecutor(Policy(max_attempts=3), sleep=sleeper)
    assert await executor.call(operation) == "ok"
    assert operation.await_count == 3
    assert len(sleeper.delays) == 2


@pytest.mark.asyncio
async def test_async_retry_executor_always_fails() -> None:
    """Test that exhausting attempts raises MaxRetriesExceededError."""
    operation = AsyncMock(side_effect=RuntimeError("Always fails"))
    executor = AsyncRetryExecutor(Policy(max_attempts=2), sleep=AsyncRecordingSleeper())
    with pytest.raises(MaxRetriesExceededError) as exc_info:
        await executor.call(operation)
    assert exc_info.value.attempts == 2
    assert str(exc_info.value.original_exception) == "Always fails"
    assert operation.await_count == 2


@pytest.mark.asyncio
async def test_async_retry_executor_non_retryable_failure() -> None:
    """Test that a non-retryable failure propagates after one call."""
    error = ValueError("bad input")
    operation = AsyncMock(side_effect=error)
    policy = Policy(max_attempts=5, retryable_exceptions=(ConnectionError,))
    with pytest.raises(ValueError, match=r"bad input") as exc_info:
        await AsyncRetryExecutor(policy).call(operation)
    assert exc_info.value is error
    operation.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_sleeps_between_attempts() -> None:
    """Test the delays requested between attempts."""
    sleeper = AsyncRecordingSleeper()
    policy = Policy(strategy="fibonacci", max_attempts=5, base_delay=1.0, jitter_factor=0.0)
    outcome = await AsyncRetryExecutor(policy, sleep=sleeper).run(
        AsyncMock(side_effect=ConnectionError())
    )
    assert sleeper.delays == [1.0, 1.0, 2.0, 3.0]
    assert isinstance(outcome, Exhausted)
    assert outcome.total_delay == 7.0


@pytest.mark.asyncio
async def test_async_retry_executor_zero_delay_does_not_suspend() -> None:
    """Test that zero delays never call the sleep function."""
    sleep = AsyncMock()
    executor = AsyncRetryExecutor(Policy(max_attempts=3, base_delay=0.0), sleep=sleep)
    assert await executor.call(make_flaky(2)) == "ok"
    sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_async_retry_executor_observers(mock_callback: Mock) -> None:
    """Test that observers are called with the same arguments as the sync executor."""
    on_retry = Mock()
    policy = Policy(
        max_attempts=3,
        base_delay=0.5,
        jitter_factor=0.0,
        on_retry=on_retry,
        on_success=mock_callback,
    )
    await AsyncRetryExecutor(policy, sleep=AsyncRecordingSleeper()).call(make_flaky(1))
    assert on_retry.call_args.args[1:] == (1, 0.5)
    mock_callback.assert_called_once_with("ok", 2)


@pytest.mark.asyncio
async def test_async_retry_executor_raising_on_failure() -> None:
    """Test that a raising on_failure does not hide MaxRetriesExceededError."""
    policy = Policy(
        max_attempts=2, base_delay=0.0, on_failure=Mock(side_effect=RuntimeError("observer bug"))
    )
    with pytest.raises(MaxRetriesExceededError):
        await AsyncRetryExecutor(policy).call(AsyncMock(side_effect=ConnectionError()))


@pytest.mark.asyncio
async def test_async_retry_executor_nan_jitter_factor() -> None:
    """Test that a NaN jitter factor is reported at the first delay."""
    executor = AsyncRetryExecutor(Policy(jitter_factor=math.nan))
    with pytest.raises(InvalidJitterFactorError):
        await executor.call(AsyncMock(side_effect=ConnectionError()))


@pytest.mark.asyncio
async def test_async_retry_executor_cancelled_during_sleep() -> None:
    """Test that cancelling the task while it waits stops the retries."""
    operation = AsyncMock(side_effect=ConnectionError())
    executor = AsyncRetryExecutor(Policy(max_attempts=5, base_delay=60.0, jitter_factor=0.0))
    task = asyncio.create_task(executor.call(operation))
    await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    operation.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_cancelled_error_from_sleep() -> None:
    """Test that a CancelledError raised by the sleep function propagates."""
    operation = AsyncMock(side_effect=ConnectionError())
    executor = AsyncRetryExecutor(
        Policy(max_attempts=5, base_delay=0.1), sleep=AsyncMock(side_effect=asyncio.CancelledError)
    )
    with pytest.raises(asyncio.CancelledError):
        await executor.call(operation)
    operation.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_run_outcomes() -> None:
    """Test the outcomes returned by run."""
    policy = Policy(max_attempts=3, base_delay=0.0, retryable_exceptions=(ConnectionError,))
    executor = AsyncRetryExecutor(policy)
    assert await executor.run(make_flaky(1)) == Success(value="ok", attempts=2)
    error = KeyError("missing")
    assert await executor.run(AsyncMock(side_effect=error)) == NonRetryable(
        failure=error, attempts=1
    )


@pytest.mark.asyncio
async def test_async_retry_executor_concurrent_calls() -> None:
    """Test that concurrent calls on one executor are independent."""
    executor = AsyncRetryExecutor(Policy(max_attempts=4, base_delay=0.0))
    outcomes = await asyncio.gather(
        executor.run(make_flaky(3, result="a")), executor.run(make_flaky(1, result="b"))
    )
    assert [(outcome.value, outcome.attempts) for outcome in outcomes] == [("a", 4), ("b", 2)]
