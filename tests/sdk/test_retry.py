import logging
from functools import partial
from typing import List

import pytest

from gorgias._config import RetryConfig
from gorgias._utils._retry import (
    calculate_backoff,
    should_retry,
    with_retry,
    with_retry_async,
)
from gorgias.models.errors import (
    AuthenticationError,
    GorgiasAPIError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestContext,
    RequestTimeoutError,
    ValidationError,
)

CTX = RequestContext(method="GET", path="/tickets")


def api_error(status: int) -> GorgiasAPIError:
    return GorgiasAPIError.from_response(status, {}, CTX)


class TestCalculateBackoff:
    @pytest.mark.parametrize(
        "attempt, low, high",
        [(1, 1000, 1300), (2, 2000, 2600), (3, 4000, 5200)],
    )
    def test_exponential_with_additive_jitter(
        self, attempt: int, low: float, high: float
    ) -> None:
        config = RetryConfig()

        for _ in range(50):
            delay = calculate_backoff(attempt, config)
            assert low <= delay <= high

    def test_capped_at_max_delay(self) -> None:
        config = RetryConfig(base_delay_ms=1000, max_delay_ms=5000)

        assert calculate_backoff(10, config) == 5000

    def test_retry_after_hint_wins(self) -> None:
        error = RateLimitError("slow down", CTX, retry_after_ms=7000)

        assert calculate_backoff(1, RetryConfig(), error) == 7000

    def test_retry_after_hint_is_capped(self) -> None:
        error = RateLimitError("slow down", CTX, retry_after_ms=120_000)

        assert calculate_backoff(1, RetryConfig(), error) == 30000

    def test_zero_hint_falls_back_to_exponential(self) -> None:
        error = RateLimitError("slow down", CTX, retry_after_ms=0)

        assert 1000 <= calculate_backoff(1, RetryConfig(), error) <= 1300


class TestShouldRetry:
    @pytest.mark.parametrize("status", [429, 502, 503, 504])
    def test_retryable_statuses(self, status: int) -> None:
        assert should_retry(api_error(status), RetryConfig(), 1)

    @pytest.mark.parametrize("status", [400, 422, 500])
    def test_other_statuses(self, status: int) -> None:
        assert not should_retry(api_error(status), RetryConfig(), 1)

    def test_auth_and_not_found_are_final(self) -> None:
        assert not should_retry(AuthenticationError("no", 401, CTX), RetryConfig(), 1)
        assert not should_retry(NotFoundError("gone", CTX), RetryConfig(), 1)

    def test_rate_limit_always_retryable(self) -> None:
        config = RetryConfig(retryable_statuses=frozenset({503}))

        assert should_retry(RateLimitError("slow", CTX), config, 1)

    def test_network_error_retryable(self) -> None:
        assert should_retry(NetworkError("reset"), RetryConfig(), 1)

    def test_timeout_not_retryable(self) -> None:
        assert not should_retry(RequestTimeoutError(100), RetryConfig(), 1)

    def test_validation_error_not_retryable(self) -> None:
        error = ValidationError("id", "positive", "bad id")

        assert not should_retry(error, RetryConfig(), 1)

    def test_foreign_errors_not_retryable(self) -> None:
        assert not should_retry(RuntimeError("bug"), RetryConfig(), 1)

    def test_last_attempt_never_retried(self) -> None:
        config = RetryConfig(max_attempts=3)

        assert should_retry(NetworkError("x"), config, 2)
        assert not should_retry(NetworkError("x"), config, 3)


class TestWithRetry:
    def test_returns_first_success(self) -> None:
        sleeps: List[float] = []

        result = with_retry(lambda: "ok", RetryConfig(), sleep=sleeps.append)

        assert result == "ok"
        assert sleeps == []

    def test_surfaces_last_error_after_exhaustion(self) -> None:
        calls: List[int] = []
        sleeps: List[float] = []
        errors = [api_error(503), api_error(503), api_error(502)]

        def operation() -> str:
            calls.append(1)
            raise errors[len(calls) - 1]

        with pytest.raises(GorgiasAPIError) as exc_info:
            with_retry(operation, RetryConfig(), sleep=sleeps.append)

        assert len(calls) == 3
        assert len(sleeps) == 2
        assert exc_info.value is errors[2]

    def test_non_retryable_error_raised_immediately(self) -> None:
        calls: List[int] = []

        def operation() -> str:
            calls.append(1)
            raise NotFoundError("missing", CTX)

        with pytest.raises(NotFoundError):
            with_retry(operation, RetryConfig(), sleep=lambda _: None)

        assert len(calls) == 1

    def test_recovers_after_transient_failure(self) -> None:
        outcomes: List[object] = [NetworkError("reset"), "done"]

        def operation() -> object:
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        assert with_retry(operation, RetryConfig(), sleep=lambda _: None) == "done"

    def test_sleeps_for_retry_after_hint(self) -> None:
        sleeps: List[float] = []
        outcomes: List[object] = [
            RateLimitError("slow", CTX, retry_after_ms=2500),
            "done",
        ]

        def operation() -> object:
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        with_retry(operation, RetryConfig(), sleep=sleeps.append)

        assert sleeps == [2.5]

    def test_single_attempt_config(self) -> None:
        calls: List[int] = []

        def operation() -> str:
            calls.append(1)
            raise NetworkError("down")

        with pytest.raises(NetworkError):
            with_retry(operation, RetryConfig(max_attempts=1), sleep=lambda _: None)

        assert len(calls) == 1

    def test_logs_each_retry(self, caplog: pytest.LogCaptureFixture) -> None:
        outcomes: List[object] = [NetworkError("reset"), NetworkError("reset"), "ok"]

        def operation() -> object:
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        with caplog.at_level(logging.DEBUG, logger="gorgias"):
            with_retry(
                operation,
                RetryConfig(base_delay_ms=0),
                trace_id="trace-9",
                sleep=lambda _: None,
            )

        records = [r for r in caplog.records if r.getMessage() == "Retrying request"]
        assert [r.attempt for r in records] == [1, 2]  # type: ignore[attr-defined]
        assert records[0].max_attempts == 3  # type: ignore[attr-defined]
        assert records[0].error_code == "NETWORK_ERROR"  # type: ignore[attr-defined]
        assert records[0].trace_id == "trace-9"  # type: ignore[attr-defined]


class TestWithRetryAsync:
    @pytest.mark.asyncio
    async def test_retries_until_exhausted(self) -> None:
        calls: List[int] = []
        sleeps: List[float] = []

        async def operation() -> str:
            calls.append(1)
            raise api_error(504)

        async def sleep(seconds: float) -> None:
            sleeps.append(seconds)

        with pytest.raises(GorgiasAPIError):
            await with_retry_async(operation, RetryConfig(), sleep=sleep)

        assert len(calls) == 3
        assert len(sleeps) == 2

    @pytest.mark.asyncio
    async def test_returns_value(self) -> None:
        async def operation() -> int:
            return 7

        assert await with_retry_async(operation, RetryConfig()) == 7

    @pytest.mark.asyncio
    async def test_partial_of_coroutine_function(self) -> None:
        calls: List[str] = []

        async def fetch(path: str) -> str:
            calls.append(path)
            if len(calls) == 1:
                raise NetworkError("connection reset")
            return f"ok:{path}"

        async def sleep(seconds: float) -> None:
            pass

        result = await with_retry_async(
            partial(fetch, "tickets"), RetryConfig(), sleep=sleep
        )

        assert result == "ok:tickets"
        assert calls == ["tickets", "tickets"]

    @pytest.mark.asyncio
    async def test_lambda_returning_coroutine(self) -> None:
        async def fetch() -> str:
            raise api_error(401)

        with pytest.raises(AuthenticationError):
            await with_retry_async(lambda: fetch(), RetryConfig())


class TestRetryConfigMerge:
    def test_none_keeps_config(self) -> None:
        config = RetryConfig()

        assert config.merge(None) is config

    def test_mapping_overrides_fields(self) -> None:
        merged = RetryConfig().merge({"max_attempts": 5})

        assert merged.max_attempts == 5
        assert merged.base_delay_ms == 1000

    def test_config_override_only_uses_explicit_fields(self) -> None:
        base = RetryConfig(max_attempts=6)
        merged = base.merge(RetryConfig(base_delay_ms=10))

        assert merged.max_attempts == 6
        assert merged.base_delay_ms == 10

    def test_invalid_override_rejected(self) -> None:
        with pytest.raises(ValueError):
            RetryConfig().merge({"max_attempts": 0})
