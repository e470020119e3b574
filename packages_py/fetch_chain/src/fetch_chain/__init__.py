"""
Fetch Chain - chainable, deferred HTTP request builder
"""

__version__ = "0.1.0"

from .config import FetchSettings, DefaultSerializer, get_settings, set_base_url, load_settings, reload_settings
from .types import HttpMethod, HeaderSource, RequestOptions, Transport, TransportResponse
from .url import has_scheme, resolve_url
from .headers import resolve_header_source, resolve_headers, merge_headers
from .builder import RequestBuilder
from .curried import curried_fetch
from .transport import HttpxTransport, FetchResponse, fetch

__all__ = [
    "FetchSettings", "DefaultSerializer", "get_settings", "set_base_url", "load_settings", "reload_settings",
    "HttpMethod", "HeaderSource", "RequestOptions", "Transport", "TransportResponse",
    "has_scheme", "resolve_url",
    "resolve_header_source", "resolve_headers", "merge_headers",
    "RequestBuilder",
    "curried_fetch",
    "HttpxTransport", "FetchResponse", "fetch",
]
