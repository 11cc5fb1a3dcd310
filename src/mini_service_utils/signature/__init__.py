"""Static signature extraction for JavaScript functions."""

from mini_service_utils.signature.extractor import extract_params, extract_signature
from mini_service_utils.signature.models import (
    DefaultedParameter,
    FunctionSignature,
    NamedParameter,
    Parameter,
    RestParameter,
    StructuredParameter,
)

__all__ = [
    "extract_params",
    "extract_signature",
    # Models
    "DefaultedParameter",
    "FunctionSignature",
    "NamedParameter",
    "Parameter",
    "RestParameter",
    "StructuredParameter",
]
