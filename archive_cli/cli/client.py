"""
HTTP Client for the Internet Archive search service.

Provides an async HTTP client for the /search/v1 endpoints.
Every failure is translated into ServiceError or TransportError.
"""

from typing import Any

import httpx

from archive_cli import __version__
from archive_cli.core.config import DEFAULT_BASE_URL, ConfigStore
from archive_cli.core.exceptions import ServiceError, TransportError
from archive_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

ORGANIC_ENDPOINT = "/search/v1/organic"
SCRAPE_ENDPOINT = "/search/v1/scrape"
FIELDS_ENDPOINT = "/search/v1/fields"


def _query_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop unset options; send booleans the way the service expects them."""
    cleaned: dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned


def _service_error_message(response: httpx.Response) -> str | None:
    """Extract the `error` field of a structured error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


def _describe(error: Exception) -> str:
    """First line of an exception message, or its type when the message is empty."""
    lines = str(error).strip().splitlines()
    return lines[0] if lines else type(error).__name__


class ArchiveClient:
    """
    HTTP client for the search service.

    Features:
    - Base URL from the injected configuration, falling back to the default
    - One attempt per call, no retries
    - Structured logging of requests/responses
    - Errors normalized to ServiceError / TransportError

    Usage:
        async with ArchiveClient(config=ConfigStore()) as client:
            data = await client.search_organic("grateful dead", size=10)
    """

    def __init__(
        self,
        config: ConfigStore | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            config: Configuration handle. Its baseUrl is used when base_url is None.
            base_url: Explicit service base URL.
            transport: Custom httpx transport (tests use httpx.MockTransport).
        """
        if base_url is None and config is not None:
            base_url = config.get("baseUrl")
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ArchiveClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"User-Agent": f"archive-cli/{__version__}"},
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET an endpoint and return the decoded JSON body unchanged.

        Args:
            endpoint: Endpoint path (e.g., /search/v1/organic)
            params: Query string parameters

        Returns:
            Decoded JSON payload

        Raises:
            ServiceError: The service returned an error status with an `error` field
            TransportError: Any other failure
        """
        log_with_source(logger, "cli", "debug", "API request", endpoint=endpoint, params=params)

        try:
            client = await self._get_client()
            response = await client.get(endpoint, params=_query_params(params))

            log_with_source(
                logger,
                "cli",
                "debug",
                "API response",
                endpoint=endpoint,
                status_code=response.status_code,
            )

            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            log_with_source(
                logger,
                "cli",
                "debug",
                "API request failed",
                endpoint=endpoint,
                status_code=e.response.status_code,
            )
            message = _service_error_message(e.response)
            if message is not None:
                raise ServiceError(
                    f"API Error: {message}", status_code=e.response.status_code,
                ) from e
            raise TransportError(
                f"Request failed: {e.response.status_code} {e.response.reason_phrase}",
            ) from e

        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # ValueError covers undecodable JSON bodies
            log_with_source(
                logger,
                "cli",
                "debug",
                "API request failed",
                endpoint=endpoint,
                error=str(e),
            )
            raise TransportError(f"Request failed: {_describe(e)}") from e

    async def search_organic(self, query: str, **options: Any) -> Any:
        """Relevance-ranked search."""
        return await self.request(ORGANIC_ENDPOINT, {"q": query, **options})

    async def search_scrape(self, query: str, **options: Any) -> Any:
        """Search with cursor-based pagination for large result sets."""
        return await self.request(SCRAPE_ENDPOINT, {"q": query, **options})

    async def get_fields(self) -> Any:
        """List available metadata fields."""
        return await self.request(FIELDS_ENDPOINT)

    async def get_count(self, query: str) -> Any:
        """Total hit count for a query, via the scrape endpoint."""
        return await self.request(SCRAPE_ENDPOINT, {"q": query, "total_only": True})
