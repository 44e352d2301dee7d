# 📄 File: authuser/modules/user_management/infrastructure/external/course_client.py
# 🧭 Purpose (Layman Explanation):
# Asks the course service which courses a user is enrolled in. If the course service is
# down or keeps failing, we simply answer "no courses" instead of breaking the request.
# 🧪 Purpose (Technical Summary):
# Course service client: GET {COURSE_SERVICE_URL}/courses?userId=..&page=..&size=..&sort=..
# through the shared aiohttp APIClient, retried by RetryPolicy (transport errors and 5xx
# only). A failed RetryResult maps to a logged, empty Page[CourseSummary]. Never raises.
# 🔗 Dependencies:
# shared.infrastructure.external_apis (APIClient, RetryPolicy), pydantic, CourseSummary
# 🔄 Connected Modules / Calls From:
# users API (GET /users/{userId}/courses), authuser.main (lifecycle)

import uuid
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from authuser.shared.config.settings import Settings
from authuser.shared.core.exceptions import ExternalServiceError
from authuser.shared.core.pagination import Page, PageRequest
from authuser.shared.infrastructure.external_apis.api_client import APIClient, is_retryable_error
from authuser.shared.infrastructure.external_apis.retry_policy import RetryPolicy
from authuser.shared.utils.logging import get_logger

from ...domain.models.course import CourseSummary

logger = get_logger(__name__)

COURSES_ENDPOINT = "courses"


class CourseClient:
    """
    Client for the course service.

    "No courses" and "course service unreachable" look the same to callers:
    both return an empty page.
    """

    def __init__(self, api_client: APIClient, retry_policy: Optional[RetryPolicy] = None):
        self.api_client = api_client
        self.retry_policy = retry_policy or RetryPolicy(
            is_retryable=is_retryable_error, name="course-service"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CourseClient":
        api_client = APIClient(
            base_url=settings.COURSE_SERVICE_URL,
            service_name="course-service",
            timeout=settings.COURSE_HTTP_TIMEOUT,
        )
        return cls(api_client, RetryPolicy.for_course_service(settings, is_retryable_error))

    async def initialize(self) -> None:
        await self.api_client.initialize()

    async def close(self) -> None:
        await self.api_client.close()

    @staticmethod
    def build_params(user_id: uuid.UUID, page_request: PageRequest) -> dict:
        return {
            "userId": str(user_id),
            "page": page_request.page,
            "size": page_request.size,
            "sort": page_request.sort,
        }

    async def _fetch_page(self, user_id: uuid.UUID, page_request: PageRequest) -> Page[CourseSummary]:
        body = await self.api_client.get_json(
            COURSES_ENDPOINT, params=self.build_params(user_id, page_request)
        )
        try:
            return Page[CourseSummary].model_validate(body)
        except PydanticValidationError as e:
            raise ExternalServiceError(
                f"Unexpected course page payload: {e.error_count()} validation error(s)",
                service_name=self.api_client.service_name,
            ) from e

    async def get_all_courses_by_user(
        self,
        user_id: uuid.UUID,
        page_request: Optional[PageRequest] = None,
    ) -> Page[CourseSummary]:
        """
        Fetch one page of the courses a user is enrolled in.

        Args:
            user_id: User whose courses are listed
            page_request: Page index, size and sort, defaults to the first page of 10

        Returns:
            Remote page, or an empty page when the lookup failed
        """
        page_request = page_request or PageRequest(sort="courseId,asc")
        logger.info(
            f"Requesting courses for user {user_id}: "
            f"{self.api_client.build_url(COURSES_ENDPOINT)} {self.build_params(user_id, page_request)}"
        )

        result = await self.retry_policy.execute(lambda: self._fetch_page(user_id, page_request))

        if not result.ok:
            logger.error(
                f"❌ Course lookup for user {user_id} failed after {result.attempts} attempt(s), "
                f"returning empty page: {result.error}"
            )
            return Page[CourseSummary].empty_page(page_request)

        logger.debug(f"Received {result.value.number_of_elements} course(s) for user {user_id}")
        return result.value
