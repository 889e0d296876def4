"""Shared request pipeline for every backend call.

Hey future me - this is the ONE place where requests are built and responses are
judged. Both AuthClient and ChatClient go through RequestPipeline.request(), so auth
injection and error shapes are identical everywhere. Don't add a second httpx call
path somewhere else "just for this one endpoint" - you'll lose the bearer header or
get raw httpx exceptions leaking to callers.

Usage:
    async with RequestPipeline(settings.api, token_store) as pipeline:
        conversations = await pipeline.request("GET", "/conversations")
"""

import logging
from typing import Any

import httpx

from expertchat.config.settings import ApiSettings
from expertchat.domain.exceptions import HttpError, InvalidResponseError, NetworkError
from expertchat.domain.ports import ISessionTokenStore
from expertchat.infrastructure.observability.logging import get_correlation_id

logger = logging.getLogger(__name__)


def extract_error_message(response: httpx.Response) -> str:
    """Build the message for a failed response.

    Precedence: ``error`` field, then ``errors`` list joined with ", ",
    then a generic message with the status code. An unparsable body also
    gets the generic message.
    """
    fallback = f"Request failed with status {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        return fallback

    if not isinstance(payload, dict):
        return fallback

    error = payload.get("error")
    if error:
        return str(error)

    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        joined = ", ".join("" if item is None else str(item) for item in errors)
        if joined:
            return joined

    return fallback


class RequestPipeline:
    """Builds, sends and normalizes every HTTP call to the backend."""

    NO_CONTENT = 204

    # Hey future me, like the other integration clients we DON'T create httpx.AsyncClient in
    # __init__ - it's lazy-loaded in _get_client() so construction works outside a running loop.
    def __init__(self, settings: ApiSettings, token_store: ISessionTokenStore) -> None:
        """
        Initialize the pipeline.

        Args:
            settings: Backend API settings (base URL, timeout, retry count)
            token_store: Session token holder read on every call
        """
        self.settings = settings
        self.token_store = token_store
        self._client: httpx.AsyncClient | None = None

    # Listen up: the client instance is also our cookie jar. Set-Cookie from the backend is kept
    # for the life of this client and sent on every later call, next to the bearer header. Both
    # auth mechanisms are live at once - that's how the backend expects it.
    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.timeout),
                headers={"Accept": "application/json"},
            )
            logger.debug(
                "HTTP client created (base_url=%s, timeout=%.1fs, retry_attempts=%d not applied)",
                self.settings.base_url,
                self.settings.timeout,
                self.settings.retry_attempts,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_url(self, path: str) -> str:
        """Compose the full address from the base URL and a path."""
        return f"{self.settings.base_url}{path}"

    def build_headers(self, headers: dict[str, str] | None = None) -> httpx.Headers:
        """Build outgoing headers from defaults, session token and caller overrides.

        The token is read here, so a call uses whatever token is stored when its
        headers are built - not when the caller first awaited it. Header names are
        case-insensitive, so a caller's "authorization" replaces our "Authorization".
        """
        merged = httpx.Headers({"Content-Type": "application/json"})

        token = self.token_store.get()
        if token:
            merged["Authorization"] = f"Bearer {token}"

        correlation_id = get_correlation_id()
        if correlation_id:
            merged["X-Correlation-ID"] = correlation_id

        if headers:
            merged.update(headers)
        return merged

    # Yo future me, THIS is the core. Order matters:
    # 1. transport errors -> NetworkError (no response at all)
    # 2. non-2xx -> HttpError with the backend's message
    # 3. 204 or void call -> None, body never parsed
    # 4. JSON body, trusted as-is
    # There is NO retry here even though settings.retry_attempts exists. Claims and sends
    # aren't idempotent. Don't bolt a retry loop on without reading ApiSettings first.
    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
        expect_body: bool = True,
    ) -> Any:
        """
        Send a request to the backend and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path appended to the base URL (leading slash included)
            json: Optional JSON-serializable request body
            headers: Extra headers; these win over defaults on key collision
            expect_body: False for void calls - the body is ignored

        Returns:
            Decoded JSON body, or None for 204 responses and void calls

        Raises:
            NetworkError: If no response was obtained
            HttpError: If the backend answered with a non-success status
            InvalidResponseError: If a success body is not valid JSON
        """
        url = self.build_url(path)
        request_headers = self.build_headers(headers)
        client = await self._get_client()

        try:
            response = await client.request(
                method, url, json=json, headers=request_headers
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise NetworkError(str(e) or e.__class__.__name__) from e

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if not response.is_success:
            message = extract_error_message(response)
            logger.warning(
                "%s %s returned %d: %s", method, path, response.status_code, message
            )
            raise HttpError(response.status_code, message)

        if response.status_code == self.NO_CONTENT or not expect_body:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"{method} {path} returned a body that is not valid JSON"
            ) from e

    async def __aenter__(self) -> "RequestPipeline":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
