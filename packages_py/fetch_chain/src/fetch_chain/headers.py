"""
Header source resolution and merging.
"""
import asyncio
import inspect
import logging
from typing import Any, Dict, Iterable, List, Sequence

from .config import LOG_PREFIX
from .types import HeaderMapping, HeaderSource

logger = logging.getLogger(__name__)


async def resolve_header_source(source: HeaderSource) -> HeaderMapping:
    """Resolve a single header source to a mapping.

    Callables are invoked with no arguments; if they return an awaitable it is
    awaited. Anything else is returned as is.
    """
    if not callable(source):
        return source

    result = source()
    if inspect.isawaitable(result):
        result = await result
    return result


def merge_headers(mappings: Iterable[HeaderMapping]) -> Dict[str, Any]:
    """Shallow left fold: later mappings overwrite earlier keys. None adds nothing."""
    merged: Dict[str, Any] = {}
    for item in mappings:
        if item is None:
            continue
        merged.update(item)
    return merged


async def resolve_headers(sources: Sequence[HeaderSource]) -> Dict[str, Any]:
    """Resolve all header sources concurrently, then merge in insertion order.

    Every source is scheduled before any is awaited. One failing source fails
    the whole resolution.
    """
    resolved: List[HeaderMapping] = await asyncio.gather(
        *(resolve_header_source(source) for source in sources)
    )
    merged = merge_headers(resolved)
    logger.debug(
        f"{LOG_PREFIX} Resolved {len(sources)} header source(s): {list(merged)}"
    )
    return merged
