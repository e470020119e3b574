"""
Chainable request builder.

Parameters are accumulated through chained calls and nothing touches the
network until ``run`` or ``run_json`` is awaited.

    response = await (
        RequestBuilder.POST("/items")
        .header({"X-Trace": "1"})
        .header(get_auth_header)
        .data({"name": "item1"})
        .run_json()
    )
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from .config import DEFAULT_CONTENT_TYPE, LOG_PREFIX, FetchSettings, get_settings
from .headers import resolve_headers
from .types import HeaderSource, HttpMethod, RequestOptions, TransportResponse
from .url import resolve_url

logger = logging.getLogger(__name__)


class RequestBuilder:
    """Fluent builder for a single HTTP call."""

    def __init__(
        self,
        method: HttpMethod,
        path: str,
        opts: Optional[RequestOptions] = None,
        headers: Optional[Union[HeaderSource, Sequence[HeaderSource]]] = None,
        *,
        settings: Optional[FetchSettings] = None,
    ):
        """Low level constructor. The factory classmethods are usually nicer.

        ``headers`` takes one header source or a list/tuple of them.
        ``settings`` defaults to the process-wide settings.
        """
        self._method = method
        self._path = path
        self._opts: RequestOptions = opts if opts is not None else {}
        self._data: Any = None
        self._settings = settings

        if headers is None:
            self._headers: List[HeaderSource] = []
        elif isinstance(headers, (list, tuple)):
            self._headers = list(headers)
        else:
            self._headers = [headers]

    @classmethod
    def _METHODS_WO_DATA(cls, method: HttpMethod, path: str) -> "RequestBuilder":
        """Builder for a method without an entity body (e.g. GET)."""
        return cls(method, path)

    @classmethod
    def _METHODS_WITH_DATA(cls, method: HttpMethod, path: str) -> "RequestBuilder":
        """Builder for a method with a JSON entity body (e.g. POST).

        The JSON content type is the first header source, so later sources
        can override it.
        """
        return cls(method, path, headers={"Content-Type": DEFAULT_CONTENT_TYPE})

    @classmethod
    def GET(cls, path: str) -> "RequestBuilder":
        return cls._METHODS_WO_DATA("GET", path)

    @classmethod
    def HEAD(cls, path: str) -> "RequestBuilder":
        return cls._METHODS_WO_DATA("HEAD", path)

    @classmethod
    def OPTIONS(cls, path: str) -> "RequestBuilder":
        return cls._METHODS_WO_DATA("OPTIONS", path)

    @classmethod
    def DEL(cls, path: str) -> "RequestBuilder":
        return cls._METHODS_WO_DATA("DELETE", path)

    @classmethod
    def POST(cls, path: str) -> "RequestBuilder":
        return cls._METHODS_WITH_DATA("POST", path)

    @classmethod
    def PUT(cls, path: str) -> "RequestBuilder":
        return cls._METHODS_WITH_DATA("PUT", path)

    @classmethod
    def PATCH(cls, path: str) -> "RequestBuilder":
        return cls._METHODS_WITH_DATA("PATCH", path)

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def path(self) -> str:
        return self._path

    def options(self, opts: RequestOptions) -> "RequestBuilder":
        """Set the options passed to the transport.

        Replaces any previously set options. A ``headers`` key here overrides
        every header added through ``header`` since the overlay is shallow.
        """
        self._opts = opts
        return self

    def header(self, source: HeaderSource) -> "RequestBuilder":
        """Add a header source.

        Accepts a mapping, a function returning one, or an async function
        returning one. Functions are called right before the request is sent.
        Can be called repeatedly; later sources win on key collisions.
        """
        self._headers.append(source)
        return self

    def data(self, data: Any) -> "RequestBuilder":
        """Set the request body."""
        self._data = data
        return self

    async def run(self) -> TransportResponse:
        """Resolve headers and URL, then make the call."""
        settings = self._settings if self._settings is not None else get_settings()

        url = resolve_url(self._path, settings.base_url)
        headers: Dict[str, Any] = await resolve_headers(self._headers)

        # Options are spread last, shallow: a "headers" key replaces all headers
        request_options: RequestOptions = {
            "method": self._method,
            "headers": headers,
            **self._opts,
        }

        logger.debug(f"{LOG_PREFIX} Dispatching {self._method} {url}")
        transport = settings.get_transport()
        return await transport(url, request_options, self._data)

    async def run_json(self) -> Dict[str, Any]:
        """Make the call and return the parsed JSON body with ok/status added.

        ``ok`` and ``status`` come from the response but are set before the
        body is spread, so a body carrying either key wins. A JSON ``null``
        body adds nothing.
        """
        response = await self.run()
        parsed = await response.json()
        return {
            "ok": response.ok,
            "status": response.status,
            **(parsed if parsed is not None else {}),
        }

    runJSON = run_json

    def __repr__(self) -> str:
        return f"<RequestBuilder {self._method} {self._path}>"
