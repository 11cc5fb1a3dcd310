"""Transport registry.

Provides a singleton registry with entry point discovery for transport plugins.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from importlib.metadata import entry_points
from typing import Any, TypedDict

from mini_service_utils.errors import (
    TransportAlreadyRegisteredError,
    TransportNotFoundError,
)

logger = logging.getLogger(__name__)

TRANSPORT_ENTRY_POINT_GROUP = "mini_service.transports"


class TransportRegistryState(TypedDict):
    """State snapshot for TransportRegistry (used for test isolation)."""

    registry: dict[str, Any]
    discovered: bool


class TransportRegistry:
    """Singleton registry for transport implementations.

    Transports are registered explicitly at startup, or discovered from the
    ``mini_service.transports`` entry point group. Names are case-insensitive
    and stored lowercased, matching the lowercased transport type.
    """

    _instance: TransportRegistry | None = None
    _registry: dict[str, Any]
    _discovered: bool

    def __new__(cls, *args: Any, **kwargs: Any) -> TransportRegistry:  # noqa: ANN401
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registry = {}
            cls._instance._discovered = False
        return cls._instance

    def discover(self) -> None:
        """Discover and register transports from entry points.

        Entry points whose target cannot be imported are skipped, and so are
        names that were already registered explicitly.
        """
        if self._discovered:
            return

        for ep in entry_points(group=TRANSPORT_ENTRY_POINT_GROUP):
            if ep.name.lower() in self._registry:
                continue
            try:
                self.register(ep.name, ep.load())
            except ImportError:
                logger.debug("Skipping transport %s: cannot import", ep.name)

        self._discovered = True

    def register(self, name: str, transport: Any) -> None:  # noqa: ANN401
        """Register a transport implementation.

        Args:
            name: Transport type (e.g. 'http', 'socket-io')
            transport: Transport implementation (module, class or factory)

        Raises:
            TransportAlreadyRegisteredError: If the name is already registered

        """
        name = name.lower()
        if name in self._registry:
            raise TransportAlreadyRegisteredError(
                f"Transport '{name}' is already registered"
            )
        self._registry[name] = transport

    def get(self, name: str) -> Any:  # noqa: ANN401
        """Get a transport by name, discovering plugins on first use.

        Args:
            name: Transport type

        Returns:
            The registered transport implementation

        Raises:
            TransportNotFoundError: If the transport is not registered

        """
        self.discover()
        name = name.lower()
        if name not in self._registry:
            raise TransportNotFoundError(
                f"Transport '{name}' not registered. "
                f"Available: {self.list_transports()}"
            )
        return self._registry[name]

    def list_transports(self) -> list[str]:
        """List all registered transport names."""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a transport is registered."""
        return name.lower() in self._registry

    def clear(self) -> None:
        """Clear all registered transports (for testing)."""
        self._registry.clear()
        self._discovered = False

    @classmethod
    def snapshot_state(cls) -> TransportRegistryState:
        """Capture current state for later restoration (test isolation)."""
        instance = cls()
        return {
            "registry": instance._registry.copy(),
            "discovered": instance._discovered,
        }

    @classmethod
    def restore_state(cls, state: TransportRegistryState) -> None:
        """Restore state from a previously captured snapshot."""
        instance = cls()
        instance._registry = state["registry"].copy()
        instance._discovered = state["discovered"]


def module_resolver(package: str) -> Callable[[str], Any]:
    """Build a resolver loading transports from ``<package>.transports.<type>``.

    Args:
        package: Dotted name of the package holding a ``transports`` subpackage

    Returns:
        Resolver importing the transport module for a given type

    """

    def resolve(transport_type: str) -> Any:  # noqa: ANN401
        module_name = transport_type.replace("-", "_")
        return importlib.import_module(f"{package}.transports.{module_name}")

    return resolve
