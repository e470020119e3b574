"""
URL resolution against the base URL.
"""
import re

# Matches anywhere in the path, any case
_SCHEME_PATTERN = re.compile(r"https://|http://", re.IGNORECASE)


def has_scheme(path: str) -> bool:
    """Check if path contains an http(s) scheme identifier."""
    return _SCHEME_PATTERN.search(path) is not None


def resolve_url(path: str, base_url: str) -> str:
    """Resolve the target URL for a request.

    A path containing a scheme is treated as a full URL and returned as is.
    Anything else is appended to base_url with plain concatenation; callers
    own the slashes.
    """
    if has_scheme(path):
        return path
    return base_url + path
