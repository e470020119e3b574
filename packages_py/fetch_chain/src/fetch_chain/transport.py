"""
Default transport primitive based on httpx.
"""
import logging
from typing import Any, Dict, Optional, Union

import httpx

from .config import DefaultSerializer, LOG_PREFIX
from .types import RequestOptions, Serializer

logger = logging.getLogger(__name__)

# Keys of RequestOptions forwarded to httpx besides method/headers
_FORWARDED_OPTIONS = ("params", "cookies", "follow_redirects")


def _format_body(body: Any) -> str:
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
    return f"<{type(body).__name__}>"


def _header_value(value: Any) -> Union[str, bytes]:
    if isinstance(value, (str, bytes)):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FetchResponse:
    """Response returned by the httpx transport."""

    def __init__(self, response: httpx.Response, serializer: Optional[Serializer] = None):
        self._response = response
        self._serializer = serializer or DefaultSerializer()

    @property
    def ok(self) -> bool:
        """True for a 2xx status."""
        return self._response.is_success

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._response.headers)

    @property
    def url(self) -> str:
        return str(self._response.url)

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def raw(self) -> httpx.Response:
        return self._response

    async def json(self) -> Any:
        """Parse the body. Malformed payloads raise."""
        return self._serializer.deserialize(self._response.text)

    def __repr__(self) -> str:
        return f"<FetchResponse [{self.status}] {self.url}>"


class HttpxTransport:
    """
    Transport primitive wrapping httpx.AsyncClient.

    An injected client is used as is and left open. Without one, a
    short-lived client is opened for each call.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        serializer: Optional[Serializer] = None,
    ):
        self._client = client
        self._serializer: Serializer = serializer or DefaultSerializer()

    def encode_body(self, body: Any) -> Optional[Union[str, bytes]]:
        """Raw str/bytes pass through, everything else is serialized."""
        if body is None:
            return None
        if isinstance(body, (str, bytes, bytearray)):
            return bytes(body) if isinstance(body, bytearray) else body
        return self._serializer.serialize(body)

    def build_request_kwargs(self, options: RequestOptions, body: Any) -> Dict[str, Any]:
        headers = {
            key: _header_value(value)
            for key, value in (options.get("headers") or {}).items()
        }
        kwargs: Dict[str, Any] = {
            "headers": headers,
            "content": self.encode_body(body),
            "follow_redirects": True,
        }
        for key in _FORWARDED_OPTIONS:
            if key in options:
                kwargs[key] = options[key]

        ignored = [
            key for key in options
            if key not in ("method", "headers") and key not in _FORWARDED_OPTIONS
        ]
        if ignored:
            logger.debug(f"{LOG_PREFIX} Ignoring unsupported options: {ignored}")
        return kwargs

    async def __call__(
        self, url: str, options: RequestOptions, body: Any = None
    ) -> FetchResponse:
        method = options.get("method", "GET")
        kwargs = self.build_request_kwargs(options, body)

        logger.debug(f"{LOG_PREFIX} Request: {method} {url}")
        logger.debug(f"{LOG_PREFIX} Body: {_format_body(kwargs['content'])}")

        try:
            if self._client is not None:
                response = await self._client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {e}")
            raise e

        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {url}")
        return FetchResponse(response, self._serializer)


# Module-level default transport
fetch = HttpxTransport()
