"""
Core type definitions for fetch-chain.
"""
from typing import Any, Awaitable, Callable, Dict, Literal, Mapping, Protocol, TypedDict, Union, runtime_checkable

# HTTP Methods
HttpMethod = Literal["HEAD", "OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"]

# A header source is a plain mapping, or a zero-argument callable returning a
# mapping (sync) or an awaitable of one (async).
HeaderMapping = Mapping[str, Any]
HeaderFactory = Callable[[], Union[HeaderMapping, Awaitable[HeaderMapping]]]
HeaderSource = Union[HeaderMapping, HeaderFactory]


class RequestOptions(TypedDict, total=False):
    """Options handed to the transport primitive."""
    method: HttpMethod
    headers: Dict[str, Any]
    params: Dict[str, Any]  # Query parameters
    cookies: Dict[str, str]
    follow_redirects: bool


@runtime_checkable
class TransportResponse(Protocol):
    """What the core needs from a transport response."""
    ok: bool
    status: int

    async def json(self) -> Any: ...


class Transport(Protocol):
    """Transport primitive: performs the actual network call."""

    def __call__(
        self, url: str, options: RequestOptions, body: Any = None
    ) -> Awaitable[TransportResponse]: ...


@runtime_checkable
class Serializer(Protocol):
    """Protocol for serialization."""
    def serialize(self, data: Any) -> str: ...
    def deserialize(self, data: str) -> Any: ...
