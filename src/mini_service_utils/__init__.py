"""Utilities for mini-service and mini-client.

Static parameter extraction for JavaScript API functions, API group
extraction, validation error enrichment, and transport loading.
"""

from mini_service_utils.errors import (
    FieldIssue,
    GroupDefinitionError,
    LoggingError,
    MiniServiceError,
    NoGroupsDefinedError,
    ProtocolError,
    TransportAlreadyRegisteredError,
    TransportLoadError,
    TransportNotFoundError,
    UnsupportedSyntaxError,
    ValidationFailedError,
    wrap_error,
)
from mini_service_utils.groups import (
    GROUP_SCHEMA,
    ApiGroup,
    GroupSet,
    extract_groups,
    extract_validate,
    is_api,
)
from mini_service_utils.logging import PACKAGE_NAME, get_logger, reset_logger
from mini_service_utils.signature import (
    FunctionSignature,
    extract_params,
    extract_signature,
)
from mini_service_utils.transports import (
    ServiceOptions,
    TransportRegistry,
    load_transport,
    module_resolver,
)
from mini_service_utils.validation import (
    SchemaValidator,
    Validator,
    array_to_obj,
    as_validator,
    describe_error,
    enrich_error,
    validate_params,
    validate_result,
)

# HTTP header carrying the CRC-32 checksum of the exposed API descriptions.
CHECKSUM_HEADER = "x-service-crc"

__all__ = [
    "CHECKSUM_HEADER",
    "PACKAGE_NAME",
    # Signatures
    "FunctionSignature",
    "extract_params",
    "extract_signature",
    # Groups
    "GROUP_SCHEMA",
    "ApiGroup",
    "GroupSet",
    "extract_groups",
    "extract_validate",
    "is_api",
    # Validation
    "SchemaValidator",
    "Validator",
    "array_to_obj",
    "as_validator",
    "describe_error",
    "enrich_error",
    "validate_params",
    "validate_result",
    # Transports
    "ServiceOptions",
    "TransportRegistry",
    "load_transport",
    "module_resolver",
    # Logging
    "get_logger",
    "reset_logger",
    # Errors
    "FieldIssue",
    "GroupDefinitionError",
    "LoggingError",
    "MiniServiceError",
    "NoGroupsDefinedError",
    "ProtocolError",
    "TransportAlreadyRegisteredError",
    "TransportLoadError",
    "TransportNotFoundError",
    "UnsupportedSyntaxError",
    "ValidationFailedError",
    "wrap_error",
]
