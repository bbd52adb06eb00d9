# 📄 File: plantscan/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# This file creates the HTTP client that knows how to talk to the outside services
# (the plant identifier, the care database, the encyclopedia) and how to report their failures.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client with status-code to exception mapping, timing logs
# and per-client statistics. Every call is a single attempt: no retries, no
# response caching, no client-side rate limiting.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - plantscan.shared.core.exceptions: External API exception hierarchy

# 🔄 Connected Modules / Calls From:
# Used by: Plant.id client, Perenual client, Wikipedia client, geolocation probe

import asyncio
import time
from datetime import datetime
from typing import Any, Dict, Optional, Union

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from plantscan.shared.core.exceptions import (
    APIAuthenticationError,
    APITimeoutError,
    ExternalAPIError,
)
from plantscan.shared.utils.logging import get_logger

logger = get_logger(__name__)


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Lazily created, reusable aiohttp session
    - Optional API key header
    - Consistent error mapping to ``ExternalAPIError`` subclasses
    - Request timing logs and counters
    """

    def __init__(
        self,
        base_url: str,
        api_name: str,
        api_key: Optional[str] = None,
        api_key_header: Optional[str] = None,
        timeout: float = 30,
        session: Optional[ClientSession] = None,
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/')
        self.api_name = api_name
        self.api_key = api_key
        self.api_key_header = api_key_header
        self.timeout = timeout

        self.session: Optional[ClientSession] = session
        self._owns_session = session is None

        # Performance tracking
        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0,
            'last_request_time': None,
        }

    async def initialize(self):
        """Initialize the client session."""
        if self.session is not None and not self.session.closed:
            return

        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers(),
        )
        self._owns_session = True
        logger.info(f"API client initialized for {self.api_name}")

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        headers = {
            'User-Agent': f'PlantScan/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
        }

        if self.api_key and self.api_key_header:
            headers[self.api_key_header] = self.api_key

        return headers

    def _build_url(self, endpoint: str) -> str:
        endpoint = endpoint.lstrip('/')
        if not endpoint:
            return self.base_url
        return f"{self.base_url}/{endpoint}"

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[Union[Dict, str, bytes]] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """Make a single HTTP request and return the decoded JSON body."""
        if self.session is None or self.session.closed:
            await self.initialize()

        url = self._build_url(endpoint)

        request_headers = self._get_default_headers()
        if headers:
            request_headers.update(headers)

        request_kwargs = {
            'method': method,
            'url': url,
            'headers': request_headers
        }

        if params:
            # aiohttp refuses None values in query strings
            request_kwargs['params'] = {k: v for k, v in params.items() if v is not None}

        if data is not None:
            if isinstance(data, dict):
                request_kwargs['json'] = data
            else:
                request_kwargs['data'] = data

        if timeout:
            request_kwargs['timeout'] = ClientTimeout(total=timeout)

        start_time = time.time()
        status_code = None

        try:
            async with self.session.request(**request_kwargs) as response:
                status_code = response.status
                response_time = time.time() - start_time
                self._record_timing(response_time)

                await self._handle_response_status(response)

                try:
                    response_data = await response.json(content_type=None)
                except ValueError as e:
                    raise ExternalAPIError(
                        f"Invalid JSON from {self.api_name}: {e}",
                        api_name=self.api_name,
                        api_status_code=status_code,
                    )

                self.stats['successful_requests'] += 1
                logger.performance.log_external_api_call(
                    self.api_name, url, method, status_code, response_time * 1000, True
                )
                return response_data

        except Exception as e:
            if status_code is None:
                self.stats['total_requests'] += 1
            self.stats['failed_requests'] += 1
            logger.performance.log_external_api_call(
                self.api_name, url, method, status_code,
                (time.time() - start_time) * 1000, False,
                extra={'error_type': type(e).__name__, 'error': str(e)}
            )
            raise self._transform_exception(e, timeout)

    def _record_timing(self, response_time: float):
        self.stats['total_requests'] += 1
        self.stats['last_request_time'] = datetime.utcnow().isoformat()

        if self.stats['average_response_time'] == 0:
            self.stats['average_response_time'] = response_time
        else:
            self.stats['average_response_time'] = (
                self.stats['average_response_time'] * 0.7 + response_time * 0.3
            )

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Handle HTTP response status codes."""
        if 200 <= response.status < 300:
            return
        elif response.status in (401, 403):
            raise APIAuthenticationError(self.api_name, api_status_code=response.status)

        response_text = await response.text()
        if 400 <= response.status < 500:
            raise ExternalAPIError(
                f"Client error for {self.api_name} ({response.status}): {response_text}",
                api_name=self.api_name,
                api_status_code=response.status,
            )
        elif 500 <= response.status < 600:
            raise ExternalAPIError(
                f"Server error for {self.api_name} ({response.status}): {response_text}",
                api_name=self.api_name,
                api_status_code=response.status,
            )
        else:
            raise ExternalAPIError(
                f"Unexpected status code for {self.api_name}: {response.status}",
                api_name=self.api_name,
                api_status_code=response.status,
            )

    def _transform_exception(self, exception: Exception, timeout: Optional[float] = None) -> Exception:
        """Transform transport exceptions to API exceptions."""
        if isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(self.api_name, timeout or self.timeout)
        elif isinstance(exception, aiohttp.ClientError):
            return ExternalAPIError(
                f"Connection error for {self.api_name}: {exception}",
                api_name=self.api_name,
            )
        else:
            return exception

    async def get(
        self,
        endpoint: str = '',
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """Make GET request."""
        return await self._make_request('GET', endpoint, params, None, headers, timeout)

    async def post(
        self,
        endpoint: str = '',
        data: Optional[Union[Dict, str, bytes]] = None,
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """Make POST request."""
        return await self._make_request('POST', endpoint, params, data, headers, timeout)

    def get_stats(self) -> Dict[str, Any]:
        """Get client performance statistics."""
        return {
            **self.stats,
            'api_name': self.api_name,
            'error_rate': (
                self.stats['failed_requests'] / max(self.stats['total_requests'], 1)
            ) * 100,
        }

    async def close(self):
        """Close the client session and cleanup resources."""
        if self.session and self._owns_session:
            await self.session.close()
        self.session = None

        logger.info(f"API client closed for {self.api_name}")


# Factory function for creating API clients
def create_api_client(
    api_name: str,
    base_url: str,
    api_key: Optional[str] = None,
    **kwargs
) -> APIClient:
    """Factory function to create configured API client."""
    return APIClient(
        base_url=base_url,
        api_name=api_name,
        api_key=api_key,
        **kwargs
    )
