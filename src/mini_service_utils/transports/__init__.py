"""Transport plugin loading."""

from mini_service_utils.transports.loader import (
    ServiceOptions,
    TransportOptions,
    load_transport,
)
from mini_service_utils.transports.registry import (
    TRANSPORT_ENTRY_POINT_GROUP,
    TransportRegistry,
    TransportRegistryState,
    module_resolver,
)

__all__ = [
    "TRANSPORT_ENTRY_POINT_GROUP",
    "ServiceOptions",
    "TransportOptions",
    "TransportRegistry",
    "TransportRegistryState",
    "load_transport",
    "module_resolver",
]
