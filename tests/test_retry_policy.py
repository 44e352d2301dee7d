import logging

import pytest

from authuser.shared.infrastructure.external_apis.retry_policy import RetryPolicy


def fast_policy(**kwargs) -> RetryPolicy:
    return RetryPolicy(wait_multiplier=0, wait_min=0, wait_max=0, **kwargs)


class Flaky:
    """Fails ``failures`` times, then returns ``value``."""

    def __init__(self, failures, value="ok", error=ConnectionError):
        self.failures = failures
        self.value = value
        self.error = error
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error(f"failure {self.calls}")
        return self.value


async def test_success_on_first_attempt():
    operation = Flaky(failures=0)

    result = await fast_policy().execute(operation)

    assert result.ok
    assert result.value == "ok"
    assert result.attempts == 1


async def test_recovers_within_budget():
    operation = Flaky(failures=2)

    result = await fast_policy(max_attempts=3).execute(operation)

    assert result.ok
    assert result.attempts == 3
    assert operation.calls == 3


async def test_gives_up_after_max_attempts():
    operation = Flaky(failures=10)

    result = await fast_policy(max_attempts=4).execute(operation)

    assert not result.ok
    assert isinstance(result.error, ConnectionError)
    assert result.attempts == 4
    assert operation.calls == 4


async def test_non_retryable_error_stops_immediately():
    operation = Flaky(failures=10, error=ValueError)
    policy = fast_policy(max_attempts=5, is_retryable=lambda exc: not isinstance(exc, ValueError))

    result = await policy.execute(operation)

    assert isinstance(result.error, ValueError)
    assert operation.calls == 1


def test_rejects_empty_budget():
    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=0)


async def test_retry_warning_names_the_policy_and_attempt(caplog):
    operation = Flaky(failures=1)
    policy = fast_policy(max_attempts=3, name="course-service")

    with caplog.at_level(logging.WARNING, logger="authuser.shared.infrastructure.external_apis.retry_policy"):
        result = await policy.execute(operation)

    assert result.ok
    messages = [record.getMessage() for record in caplog.records]
    assert any("course-service attempt 1/3 failed" in message for message in messages)
    assert not any("<unknown>" in message for message in messages)
