# 📄 File: authuser/shared/infrastructure/external_apis/retry_policy.py

# 🧭 Purpose (Layman Explanation):
# Decides how many times we try calling another service again when it fails, how long
# we wait between tries, and which kinds of failures are worth trying again at all.

# 🧪 Purpose (Technical Summary):
# Explicit retry policy object built on tenacity's AsyncRetrying. Instead of raising,
# execute() returns a RetryResult carrying either the value or the last error plus the
# number of attempts made, so callers pick their own fallback.

# 🔗 Dependencies:
# - tenacity: Retry loop, stop and backoff strategies

# 🔄 Connected Modules / Calls From:
# Used by: course service client (authuser.modules.user_management.infrastructure.external)

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from authuser.shared.config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _always_retry(exc: BaseException) -> bool:
    return True


@dataclass
class RetryResult(Generic[T]):
    """Outcome of a retried operation."""

    value: Optional[T] = None
    error: Optional[BaseException] = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class RetryPolicy:
    """
    Bounded retry with exponential backoff.

    Attributes:
        max_attempts: Total number of calls, first one included
        wait_multiplier: Exponential backoff multiplier (seconds)
        wait_min: Lower bound for a single wait (seconds)
        wait_max: Upper bound for a single wait (seconds)
        is_retryable: Predicate deciding whether an error warrants another attempt
    """

    def __init__(
        self,
        max_attempts: int = 3,
        wait_multiplier: float = 0.5,
        wait_min: float = 0.5,
        wait_max: float = 5.0,
        is_retryable: Optional[Callable[[BaseException], bool]] = None,
        name: str = "operation",
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.max_attempts = max_attempts
        self.wait_multiplier = wait_multiplier
        self.wait_min = wait_min
        self.wait_max = wait_max
        self.is_retryable = is_retryable or _always_retry
        self.name = name

    @classmethod
    def for_course_service(
        cls,
        settings: Settings,
        is_retryable: Optional[Callable[[BaseException], bool]] = None,
    ) -> "RetryPolicy":
        """Build the policy from the COURSE_RETRY_* settings."""
        return cls(
            max_attempts=settings.COURSE_RETRY_MAX_ATTEMPTS,
            wait_multiplier=settings.COURSE_RETRY_WAIT_MULTIPLIER,
            wait_min=settings.COURSE_RETRY_WAIT_MIN,
            wait_max=settings.COURSE_RETRY_WAIT_MAX,
            is_retryable=is_retryable,
            name="course-service",
        )

    def _log_before_sleep(self, retry_state: RetryCallState) -> None:
        wait = retry_state.next_action.sleep if retry_state.next_action else 0
        outcome = retry_state.outcome
        error = outcome.exception() if outcome is not None else None
        logger.warning(
            f"{self.name} attempt {retry_state.attempt_number}/{self.max_attempts} failed, "
            f"retrying in {wait:.2f}s: {error}"
        )

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(
                multiplier=self.wait_multiplier,
                min=self.wait_min,
                max=self.wait_max,
            ),
            retry=retry_if_exception(self.is_retryable),
            before_sleep=self._log_before_sleep,
            reraise=True,
        )

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> RetryResult[T]:
        """
        Run ``operation`` until it succeeds, fails with a non-retryable
        error, or the attempt budget is spent.

        Returns:
            RetryResult with ``value`` on success, ``error`` otherwise
        """
        attempts = 0
        try:
            async for attempt in self._retrying():
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    value = await operation()
        except Exception as e:
            logger.warning(f"{self.name} failed after {attempts} attempt(s): {e}")
            return RetryResult(error=e, attempts=attempts)

        return RetryResult(value=value, attempts=attempts)
