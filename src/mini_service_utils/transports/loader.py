"""Validation of service options and transport loading."""

from collections.abc import Callable
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mini_service_utils.errors import TransportLoadError
from mini_service_utils.transports.registry import TransportRegistry

_REQUIRED_LOGGER_METHODS = ("debug", "info")


class TransportOptions(BaseModel):
    """Transport section of the service options."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(pattern=r"^[\w-]+$", description="Transport type")

    @field_validator("type", mode="before")
    @classmethod
    def lowercase_type(cls, v: Any) -> Any:  # noqa: ANN401
        """Normalise the transport type to lowercase."""
        return v.lower() if isinstance(v, str) else v


class ServiceOptions(BaseModel):
    """Expected schema for global options, with logger and transport type."""

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    transport: TransportOptions
    logger: Any

    @field_validator("logger")
    @classmethod
    def validate_logger(cls, v: Any) -> Any:  # noqa: ANN401
        """Check the logger exposes the methods the framework calls."""
        missing = [
            method
            for method in _REQUIRED_LOGGER_METHODS
            if not callable(getattr(v, method, None))
        ]
        if missing:
            raise ValueError(f"logger must provide methods: {', '.join(missing)}")
        return v

    @classmethod
    def from_properties(cls, properties: dict[str, Any] | Self) -> Self:
        """Create options from a properties dictionary with validation.

        Raises:
            ValidationError: If properties are invalid or missing required fields

        """
        if isinstance(properties, cls):
            return properties
        return cls.model_validate(properties)


def load_transport(
    options: dict[str, Any] | ServiceOptions,
    resolver: Callable[[str], Any] | None = None,
) -> Any:  # noqa: ANN401
    """Validate incoming options and synchronously load a transport.

    Args:
        options: Service options holding ``transport.type`` and ``logger``
        resolver: Resolves a transport type to its implementation. Defaults
            to the TransportRegistry.

    Returns:
        The loaded transport

    Raises:
        ValidationError: If options are invalid
        TransportLoadError: If the transport cannot be resolved

    """
    config = ServiceOptions.from_properties(options)
    transport_type = config.transport.type
    resolve = resolver if resolver is not None else TransportRegistry().get

    config.logger.debug(f"Load transport {transport_type}")
    try:
        return resolve(transport_type)
    except Exception as e:
        raise TransportLoadError(
            f"Cannot load transport {transport_type}: {e}"
        ) from e
