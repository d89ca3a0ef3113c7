"""
Default transport implementation based on httpx.
"""
import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ..settings import TransportSettings, load_settings
from ..types import ApiResponse

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[fetch-lifecycle]"
QUERY_METHODS = ("GET", "HEAD", "DELETE", "TRACE")
JSON_METHODS = ("POST", "PUT", "PATCH")


def format_body(body: Any) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    if isinstance(body, (bytes, bytearray)):
        return f"<binary data: {len(body)} bytes>"
    if isinstance(body, str):
        if len(body) > 5000:
            return body[:5000] + "... (truncated)"
        return body
    if isinstance(body, Mapping):
        try:
            return json.dumps(dict(body), indent=2)
        except (TypeError, ValueError):
            return str(body)
    return str(body)


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, ValueError):
        return response.text


class HttpTransport:
    """
    Transport wrapping httpx.AsyncClient.
    """
    def __init__(
        self,
        settings: Optional[TransportSettings] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or load_settings()
        self._client: Optional[httpx.AsyncClient] = httpx_client

        # Flag to track if we own the client (created it)
        self._own_client = self._client is None

    @property
    def settings(self) -> TransportSettings:
        return self._settings

    async def connect(self) -> None:
        """Initialize the client if needed."""
        if self._client:
            return

        self._client = httpx.AsyncClient(
            base_url=self._settings.base_url,
            timeout=httpx.Timeout(self._settings.timeout),
            headers=self._settings.headers,
            follow_redirects=self._settings.follow_redirects,
        )

    async def close(self) -> None:
        """Close the client if we own it."""
        if self._own_client and self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpTransport":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_request_kwargs(self, method: str, body: Mapping[str, Any]) -> Dict[str, Any]:
        if method == "FORM_DATA":
            return {"method": "POST", "data": dict(body)}
        if method in JSON_METHODS:
            return {"method": method, "json": dict(body)}
        if method in QUERY_METHODS:
            return {"method": method, "params": dict(body) or None}
        raise ValueError(f"Unsupported HTTP method: {method}")

    async def __call__(
        self,
        path: str,
        method: str,
        body: Mapping[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> ApiResponse:
        """Execute a request and settle it into an ApiResponse."""
        if not self._client:
            await self.connect()

        assert self._client is not None

        kwargs = self._build_request_kwargs(method, body or {})

        logger.debug(f"{LOG_PREFIX} Request: {kwargs['method']} {path}")
        logger.debug(f"{LOG_PREFIX} Body: {format_body(body)}")

        try:
            response = await self._client.request(
                url=path,
                headers=headers,
                **kwargs,
            )
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {e}")
            raise e

        data = _parse_body(response)

        if response.is_success:
            return ApiResponse(
                result=data,
                error=None,
                is_ok=True,
                status=response.status_code,
                response=response,
            )

        return ApiResponse(
            result=None,
            error=data or response.reason_phrase,
            is_ok=False,
            status=response.status_code,
            response=response,
        )
