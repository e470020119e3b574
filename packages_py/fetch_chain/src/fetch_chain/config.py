"""
Process-wide configuration for fetch-chain.

Every builder reads ``settings.base_url`` when it runs, not when it is
constructed, so changing the base URL affects calls that have not run yet.
Writes are not synchronized with in-flight calls.
"""
import json
import logging
import os
from typing import Any, Optional

from pydantic import BaseModel

from .types import Transport

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[fetch-chain]"
BASE_URL_ENV = "FETCH_CHAIN_BASE_URL"
DEFAULT_CONTENT_TYPE = "application/json"


class DefaultSerializer:
    """Default JSON serializer."""
    def serialize(self, data: Any) -> str:
        return json.dumps(data)

    def deserialize(self, data: str) -> Any:
        return json.loads(data)


class FetchSettings(BaseModel):
    """Process-scoped settings shared by all builders."""
    model_config = {"arbitrary_types_allowed": True}

    # Stored verbatim. Resolution is plain concatenation, so no slash trimming.
    base_url: str = ""

    # Overrides the default httpx transport when set
    transport: Optional[Any] = None

    def get_transport(self) -> Transport:
        if self.transport is not None:
            return self.transport
        from .transport import fetch
        return fetch


def load_settings() -> FetchSettings:
    """Build settings from the environment."""
    base_url = os.getenv(BASE_URL_ENV, "")
    if base_url:
        logger.debug(f"{LOG_PREFIX} base_url loaded from {BASE_URL_ENV}")
    return FetchSettings(base_url=base_url)


settings = load_settings()


def get_settings() -> FetchSettings:
    return settings


def reload_settings() -> FetchSettings:
    """Re-read the environment into the shared settings."""
    settings.base_url = load_settings().base_url
    return settings


def set_base_url(base_url: str) -> None:
    """Set the base URL used by every builder that runs after this call."""
    settings.base_url = base_url
    logger.debug(f"{LOG_PREFIX} base_url set to {base_url!r}")
