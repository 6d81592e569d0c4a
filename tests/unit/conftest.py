"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from redis_tui_core.diagnostics import DiagnosticChannel
from redis_tui_core.models.config import ConnectionConfig
from tests.mocks.mock_client import FakeKeyspaceClient, make_pages
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> SimpleNamespace:
    """Return stand-in Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def config() -> ConnectionConfig:
    """Return a default ConnectionConfig."""
    return ConnectionConfig()


@pytest.fixture
def diagnostics() -> DiagnosticChannel:
    """Return an empty diagnostic channel."""
    return DiagnosticChannel()


@pytest.fixture
def three_page_client() -> FakeKeyspaceClient:
    """Return a fake whose keyspace takes three SCAN pages."""
    return FakeKeyspaceClient(make_pages(3))
