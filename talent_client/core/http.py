"""
HTTP transport for the recruiting backend.

Every call is a single best-effort attempt: one request, one JSON body,
one normalised error. There is no retry, no timeout override and no
cancellation hook; the injected ``httpx.AsyncClient`` decides those.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import httpx
import structlog

from talent_client.core.exceptions import ApiError

logger = structlog.get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "API request failed"

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class ApiTransport:
    """
    Thin wrapper issuing requests against the backend base URL and
    unwrapping the ``{success, data, error}`` response envelope.

    The transport does not own the HTTP client. Whoever passes it in is
    responsible for closing it.

    Example:
        async with httpx.AsyncClient() as http_client:
            transport = ApiTransport("http://localhost:5001/api", http_client)
            envelope = await transport.request("/jobs")
            jobs = envelope.get("data") or []
    """

    def __init__(self, base_url: str, http_client: httpx.AsyncClient):
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        fallback_error: str = DEFAULT_ERROR_MESSAGE,
    ) -> Dict[str, Any]:
        """
        Send one JSON request and return the parsed envelope unchanged.

        Args:
            endpoint: Path below the base URL, e.g. "/applications/42/reject"
            method: HTTP verb
            json: Request body, serialised as JSON
            params: Query-string parameters
            headers: Extra headers, applied over the JSON defaults
            fallback_error: Message used when the backend gives no ``error``

        Returns:
            The response envelope as a dict

        Raises:
            ApiError: The backend answered with a non-2xx status
            httpx.HTTPError: The request never got a response
            ValueError: A 2xx response carried a body that is not JSON
        """
        return await self._send(
            endpoint,
            method,
            fallback_error,
            json=json,
            params=params,
            headers={**JSON_HEADERS, **(headers or {})},
        )

    async def upload(
        self,
        endpoint: str,
        files: Dict[str, Any],
        data: Optional[Dict[str, Any]] = None,
        fallback_error: str = DEFAULT_ERROR_MESSAGE,
    ) -> Dict[str, Any]:
        """
        POST a multipart form.

        No Content-Type is set here so that httpx can add the multipart
        boundary itself.
        """
        return await self._send(
            endpoint,
            "POST",
            fallback_error,
            files=files,
            data=data,
            headers={"Accept": "application/json"},
        )

    async def get_raw(
        self,
        endpoint: str,
        fallback_error: str = DEFAULT_ERROR_MESSAGE,
    ) -> Dict[str, Any]:
        """GET without JSON content negotiation headers."""
        return await self._send(endpoint, "GET", fallback_error)

    async def _send(
        self,
        endpoint: str,
        method: str,
        fallback_error: str,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        try:
            response = await self.http_client.request(
                method, self.url_for(endpoint), **kwargs
            )
            return self._unwrap(response, endpoint, fallback_error)
        except ApiError as e:
            logger.error(
                "api_request_failed",
                endpoint=endpoint,
                method=method,
                status_code=e.status_code,
                error=e.message,
            )
            raise
        except Exception as e:
            logger.error(
                "api_request_failed",
                endpoint=endpoint,
                method=method,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    @staticmethod
    def _unwrap(
        response: httpx.Response,
        endpoint: str,
        fallback_error: str,
    ) -> Dict[str, Any]:
        if response.is_success:
            # Malformed JSON on a success status surfaces as a raw decode error
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = None

        message = body.get("error") if isinstance(body, dict) else None
        raise ApiError(
            message or fallback_error,
            status_code=response.status_code,
            endpoint=endpoint,
            payload=body,
        )
