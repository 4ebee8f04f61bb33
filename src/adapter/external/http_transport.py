"""httpx implementation of JsonTransport.

Configuration (environment):
    DICTIONARY_API_TIMEOUT_SECONDS: per-request timeout (default 5.0)
    DICTIONARY_API_MAX_ATTEMPTS: attempts for timeouts/connect errors (default 1)
"""

import logging
import os
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.model.errors import MalformedResponseError, TransportError

logger = logging.getLogger(__name__)

API_TIMEOUT_SECONDS = float(os.getenv("DICTIONARY_API_TIMEOUT_SECONDS", "5.0"))
API_MAX_ATTEMPTS = int(os.getenv("DICTIONARY_API_MAX_ATTEMPTS", "1"))

# The provider answers unknown words with 404 and a JSON error object.
_PASSTHROUGH_STATUS_CODES = frozenset({404})


class HttpxJsonTransport:
    """Fetches JSON documents with one httpx.AsyncClient per request."""

    def __init__(
        self,
        timeout: float = API_TIMEOUT_SECONDS,
        max_attempts: int = API_MAX_ATTEMPTS,
    ):
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)

    async def get_json(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises:
            TransportError: Network failure or unexpected HTTP status.
            MalformedResponseError: Body is not valid JSON.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await self._fetch_with_retry(client, url)

                if response.status_code not in _PASSTHROUGH_STATUS_CODES:
                    response.raise_for_status()

                try:
                    data = response.json()
                except ValueError as e:
                    logger.warning(
                        "Dictionary API returned a non-JSON body",
                        extra={"url": url, "status_code": response.status_code},
                    )
                    raise MalformedResponseError(f"Response from {url} is not valid JSON") from e

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Dictionary API HTTP error",
                extra={"url": url, "status_code": e.response.status_code},
            )
            raise TransportError(
                url, f"HTTP {e.response.status_code}", status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.warning(
                "Dictionary API request error",
                extra={"url": url, "error_type": type(e).__name__},
            )
            raise TransportError(url, type(e).__name__) from e

        logger.debug(
            "Dictionary API fetch complete",
            extra={"url": url, "status_code": response.status_code},
        )
        return data

    async def _fetch_with_retry(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        """Fetch URL, retrying timeouts and connect errors up to max_attempts."""
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=4),
            reraise=True,
        ):
            with attempt:
                response = await client.get(url)
        return response
