# 📄 File: authuser/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A small HTTP client that knows how to talk to other services of the platform,
# handling timeouts and telling apart "try again later" failures from "your request is wrong" ones.

# 🧪 Purpose (Technical Summary):
# Generic async JSON client on a shared aiohttp ClientSession with a total timeout.
# Every failure surfaces as ExternalServiceError whose ``retryable`` flag marks
# transport errors and 5xx responses; retrying itself is left to RetryPolicy.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client

# 🔄 Connected Modules / Calls From:
# Used by: course service client, authuser.main (lifecycle)

import asyncio
import time
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from authuser.shared.core.exceptions import ExternalServiceError
from authuser.shared.utils.logging import get_logger

logger = get_logger(__name__)


def is_retryable_error(exc: BaseException) -> bool:
    """Retry transport failures and remote 5xx responses only."""
    if isinstance(exc, ExternalServiceError):
        return exc.retryable
    return isinstance(exc, (aiohttp.ClientError, asyncio.TimeoutError))


class APIClient:
    """
    Generic async HTTP client for internal service integrations.

    Features:
    - Shared connection pool per client
    - Total request timeout
    - Status code classification (retryable / not retryable)
    - Request logging
    """

    def __init__(
        self,
        base_url: str,
        service_name: str,
        timeout: float = 5.0,
        session: Optional[ClientSession] = None,
    ):
        self.base_url = base_url.rstrip('/') + '/'
        self.service_name = service_name
        self.timeout = timeout
        self.session: Optional[ClientSession] = session
        self._owns_session = session is None

    async def initialize(self):
        """Open the client session."""
        if self.session is not None and not self.session.closed:
            return

        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            connector=aiohttp.TCPConnector(limit=10, limit_per_host=5),
            headers=self._get_default_headers(),
        )
        self._owns_session = True
        logger.info(f"API client initialized for {self.service_name}")

    async def close(self):
        """Close the client session if this client opened it."""
        if self.session is not None and self._owns_session and not self.session.closed:
            await self.session.close()
            logger.info(f"API client closed for {self.service_name}")
        self.session = None

    def _get_default_headers(self) -> Dict[str, str]:
        return {
            'User-Agent': f'authuser/1.0 ({self.service_name}-client)',
            'Accept': 'application/json',
        }

    def build_url(self, endpoint: str) -> str:
        return urljoin(self.base_url, endpoint.lstrip('/'))

    async def get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Issue a single GET request and decode the JSON body.

        Raises:
            ExternalServiceError: On transport failure, non-2xx status or
                an undecodable body
        """
        if self.session is None or self.session.closed:
            await self.initialize()

        url = self.build_url(endpoint)
        start_time = time.time()

        try:
            async with self.session.get(url, params=params) as response:
                await self._handle_response_status(response)
                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise ExternalServiceError(
                        f"Malformed response from {self.service_name}: {e}",
                        service_name=self.service_name,
                        remote_status=response.status,
                    )

                logger.debug(
                    f"{self.service_name} request successful: "
                    f"GET {response.url} - {response.status} - {time.time() - start_time:.2f}s"
                )
                return data

        except ExternalServiceError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise self._transform_exception(e, url)

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Map non-2xx status codes to ExternalServiceError."""
        if 200 <= response.status < 300:
            return

        response_text = await response.text()
        if 500 <= response.status < 600:
            raise ExternalServiceError(
                f"Server error for {self.service_name} ({response.status}): {response_text}",
                service_name=self.service_name,
                remote_status=response.status,
                retryable=True,
            )
        raise ExternalServiceError(
            f"Client error for {self.service_name} ({response.status}): {response_text}",
            service_name=self.service_name,
            remote_status=response.status,
        )

    def _transform_exception(self, exception: Exception, url: str) -> ExternalServiceError:
        """Wrap transport-level exceptions, keeping them retryable."""
        if isinstance(exception, asyncio.TimeoutError):
            message = f"Timeout for {self.service_name}: GET {url}"
        else:
            message = f"Client error for {self.service_name}: {exception}"
        return ExternalServiceError(message, service_name=self.service_name, retryable=True)
