"""Pytest configuration and shared fixtures.

Fixtures provide the mock collaborators most dispatcher tests need:
- a command, a response and a handler returning that response
- a resolver returning the handler
- an event publisher
- a logger (MagicMock, so no structlog configuration leaks into tests)

Container singletons are cleared around every test so environment patches
in one test never leak into another.
"""

from unittest.mock import MagicMock

import pytest

from command_dispatcher.core.config import get_settings
from command_dispatcher.core.container import (
    get_command_dispatcher,
    get_event_publisher,
    get_handler_registry,
    get_logger,
)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests wiring real in-memory adapters together"
    )


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset every lru_cache singleton before and after each test."""
    caches = (
        get_settings,
        get_logger,
        get_event_publisher,
        get_handler_registry,
        get_command_dispatcher,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def command():
    """Opaque command object."""
    return MagicMock(name="command")


@pytest.fixture
def response():
    """Response double; get_events() is configured per test."""
    return MagicMock(name="response")


@pytest.fixture
def handler(response):
    """Handler double returning the response fixture."""
    return MagicMock(name="handler", return_value=response)


@pytest.fixture
def resolver(handler):
    """Resolver double returning the handler fixture."""
    resolver = MagicMock(name="resolver")
    resolver.resolve.return_value = handler
    return resolver


@pytest.fixture
def event_publisher():
    """Event publisher double."""
    return MagicMock(name="event_publisher")
