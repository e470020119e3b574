"""
Functional, curried alternative to RequestBuilder.

    api = curried_fetch("https://api.example.com")
    get_user = api("/user")(lambda: {"headers": {"Authorization": token()}})
    response = await get_user()

Options may be a function so values such as short-lived tokens are generated
right before the call instead of when the call is partially applied.
"""
from typing import Any, Awaitable, Callable, Optional, Union

from .config import get_settings
from .types import RequestOptions, TransportResponse

OptionsFactory = Callable[[], RequestOptions]


def curried_fetch(base_url: str):
    def with_path(path: str):
        def with_options(opts: Optional[Union[RequestOptions, OptionsFactory]] = None):
            def with_body(body: Any = None) -> Awaitable[TransportResponse]:
                resolved = opts() if callable(opts) else (opts if opts is not None else {})
                transport = get_settings().get_transport()
                return transport(base_url + path, resolved, body)
            return with_body
        return with_options
    return with_path
