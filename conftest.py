"""Workspace-level pytest configuration and fixtures."""

import pytest

from mini_service_utils.logging import reset_logger
from mini_service_utils.transports import TransportRegistry


@pytest.fixture(autouse=True, scope="function")
def isolate_transport_registry():
    """Preserve and restore TransportRegistry state for each test.

    TransportRegistry is a singleton with mutable global state, so tests
    that register or clear transports would otherwise leak into each other.
    """
    saved_state = TransportRegistry.snapshot_state()

    yield

    TransportRegistry.restore_state(saved_state)


@pytest.fixture(autouse=True, scope="function")
def isolate_logger():
    """Start every test without a cached package logger."""
    reset_logger()

    yield

    reset_logger()
