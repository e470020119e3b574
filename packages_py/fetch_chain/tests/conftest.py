"""
Shared fixtures for fetch-chain tests.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from fetch_chain.config import settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Restore the process-wide settings after each test."""
    monkeypatch.setattr(settings, "base_url", "")
    monkeypatch.setattr(settings, "transport", None)
    return settings


def make_response(status=200, body=None, ok=None):
    """Minimal object satisfying the transport response contract."""
    return SimpleNamespace(
        ok=(200 <= status <= 299) if ok is None else ok,
        status=status,
        json=AsyncMock(return_value={} if body is None else body),
    )


@pytest.fixture
def fake_transport(isolated_settings, monkeypatch):
    """Instrumented transport installed as the process-wide transport."""
    transport = AsyncMock(return_value=make_response())
    monkeypatch.setattr(isolated_settings, "transport", transport)
    return transport


@pytest.fixture
def response_factory():
    return make_response
