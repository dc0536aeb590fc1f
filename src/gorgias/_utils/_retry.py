"""Retry policy: which failures are retried and how long to wait between attempts."""

import logging
import random
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from tenacity import AsyncRetrying, RetryCallState, Retrying, stop_after_attempt

from .._config import RetryConfig
from ..models.errors import ErrorCode, GorgiasAPIError, GorgiasError, RateLimitError

T = TypeVar("T")

Logger = Union[logging.Logger, logging.LoggerAdapter]

_JITTER_RATIO = 0.3


def calculate_backoff(
    attempt: int, config: RetryConfig, error: Optional[BaseException] = None
) -> float:
    """Delay in milliseconds to wait after failed attempt number ``attempt``.

    A ``Retry-After`` hint on a rate limit error wins over the computed delay.
    Otherwise the delay grows as ``base * 2^(attempt - 1)`` plus up to 30%
    additive jitter. Both are capped at ``config.max_delay_ms``.
    """
    if isinstance(error, RateLimitError) and error.retry_after_ms:
        return min(error.retry_after_ms, config.max_delay_ms)

    exponential_delay = config.base_delay_ms * 2 ** (attempt - 1)
    jitter = random.uniform(0, _JITTER_RATIO * exponential_delay)
    return min(exponential_delay + jitter, config.max_delay_ms)


def should_retry(error: BaseException, config: RetryConfig, attempt: int) -> bool:
    """Whether the failure of attempt number ``attempt`` deserves another try."""
    if attempt >= config.max_attempts:
        return False

    if not isinstance(error, GorgiasError):
        return False

    if isinstance(error, RateLimitError):
        return True

    if isinstance(error, GorgiasAPIError):
        return error.status_code in config.retryable_statuses

    return error.code == ErrorCode.NETWORK_ERROR


def _retrying_kwargs(
    config: RetryConfig, logger: Optional[Logger], trace_id: Optional[str]
) -> dict[str, Any]:
    log = logger or logging.getLogger("gorgias")

    def retry_predicate(retry_state: RetryCallState) -> bool:
        outcome = retry_state.outcome
        if outcome is None or not outcome.failed:
            return False
        return should_retry(outcome.exception(), config, retry_state.attempt_number)

    def wait(retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        return calculate_backoff(retry_state.attempt_number, config, error) / 1000

    def before_sleep(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        log.debug(
            "Retrying request",
            extra={
                "trace_id": trace_id,
                "attempt": retry_state.attempt_number,
                "max_attempts": config.max_attempts,
                "delay_ms": round(delay * 1000),
                "error_code": error.code.value
                if isinstance(error, GorgiasError)
                else "UNKNOWN",
            },
        )

    return {
        "stop": stop_after_attempt(config.max_attempts),
        "retry": retry_predicate,
        "wait": wait,
        "before_sleep": before_sleep,
        "reraise": True,
    }


def with_retry(
    operation: Callable[[], T],
    config: RetryConfig,
    logger: Optional[Logger] = None,
    trace_id: Optional[str] = None,
    *,
    sleep: Optional[Callable[[float], None]] = None,
) -> T:
    """Run ``operation`` until it succeeds or the retry policy gives up.

    Attempts are strictly sequential. When the policy gives up, the error of
    the last attempt is raised as is.

    Args:
        operation: Zero-argument callable performing one attempt.
        config: Retry policy.
        logger: Receives a debug record before each backoff sleep.
        trace_id: Added to the log records.
        sleep: Replaces ``time.sleep``; takes seconds.
    """
    kwargs = _retrying_kwargs(config, logger, trace_id)
    if sleep is not None:
        kwargs["sleep"] = sleep
    return Retrying(**kwargs)(operation)


async def with_retry_async(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig,
    logger: Optional[Logger] = None,
    trace_id: Optional[str] = None,
    *,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> T:
    """Async version of :func:`with_retry`. ``sleep`` replaces ``asyncio.sleep``.

    ``operation`` may be any callable returning an awaitable (a coroutine
    function, a ``functools.partial`` of one or a lambda).
    """
    kwargs = _retrying_kwargs(config, logger, trace_id)
    if sleep is not None:
        kwargs["sleep"] = sleep

    # AsyncRetrying only awaits coroutine functions
    async def attempt() -> T:
        return await operation()

    return await AsyncRetrying(**kwargs)(attempt)
