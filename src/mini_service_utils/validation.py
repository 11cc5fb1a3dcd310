"""Validation of API parameters and results.

This module provides:
- Validator: narrow protocol the enrichment logic depends on
- SchemaValidator: pydantic-backed Validator for models and type expressions
- enrich_error: turns a validation failure into a ProtocolError for an API
- validate_params / validate_result: validate and enrich in one call
- array_to_obj: maps positional values onto declared parameter names
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, TypeAdapter, ValidationError

from mini_service_utils.errors import (
    FieldIssue,
    ProtocolError,
    ValidationFailedError,
    wrap_error,
)

INPUT_ERROR_STATUS = 400
OUTPUT_ERROR_STATUS = 512
BAD_RESPONSE_LABEL = "Bad Response"


@runtime_checkable
class Validator(Protocol):
    """Validates a value, returning the failure instead of raising it."""

    def validate(self, value: Any) -> ValidationFailedError | None:  # noqa: ANN401
        """Return None when the value is valid, the failure otherwise."""
        ...


class SchemaValidator:
    """Validator backed by a pydantic TypeAdapter.

    Accepts anything pydantic can build an adapter for: BaseModel
    subclasses, dataclasses, TypedDicts, or type expressions such as
    ``list[int]`` or ``Annotated[str, Field(min_length=1)]``.
    """

    def __init__(self, schema: Any) -> None:  # noqa: ANN401
        """Initialise the validator for a schema."""
        self.schema = schema
        self._adapter: TypeAdapter[Any] = TypeAdapter(schema)

    def validate(self, value: Any) -> ValidationFailedError | None:  # noqa: ANN401
        """Validate a value against the schema."""
        try:
            self._adapter.validate_python(value)
        except ValidationError as e:
            return failure_from_validation_error(e)
        return None


def as_validator(schema: Any) -> Validator:  # noqa: ANN401
    """Adapt a schema into a Validator.

    Classes are always wrapped, even though BaseModel exposes a legacy
    ``validate`` classmethod. A pydantic model instance stands for its model.
    """
    if isinstance(schema, BaseModel):
        return SchemaValidator(type(schema))
    if isinstance(schema, type):
        return SchemaValidator(schema)
    if isinstance(schema, Validator):
        return schema
    return SchemaValidator(schema)


def failure_from_validation_error(error: ValidationError) -> ValidationFailedError:
    """Convert a pydantic ValidationError into a ValidationFailedError."""
    details = [
        FieldIssue(
            path=".".join(str(part) for part in item["loc"]) or "value",
            kind=item["type"],
            message=item["msg"],
        )
        for item in error.errors()
    ]
    return ValidationFailedError(_format_issues(details), details)


def _format_issues(details: Sequence[FieldIssue]) -> str:
    return "; ".join(f"{issue.path}: {issue.message}" for issue in details)


def describe_error(err: BaseException) -> str:
    """Return a human readable message for an error.

    pydantic errors are summarised as ``path: message`` pairs; any other
    error is described by its own message.
    """
    if isinstance(err, ValidationError):
        return failure_from_validation_error(err).args[0]
    return str(err)


def _field_issues(err: BaseException) -> list[FieldIssue]:
    if isinstance(err, ValidationError):
        return failure_from_validation_error(err).details
    if isinstance(err, ValidationFailedError):
        return err.details
    return []


def enrich_error(
    err: BaseException | None,
    api_id: str,
    for_input: bool = True,
) -> ProtocolError | None:
    """Enrich a validation error for a given API with a friendly message.

    When enriching validation error for:
    - input parameters, a 400 (Bad Request) error is returned
    - returned results, a 512 (Bad Response) error is returned

    Args:
        err: Validation error, or None
        api_id: API id used in the error message
        for_input: True for input parameters, False for returned results

    Returns:
        The enriched error, or None when err was None

    """
    if err is None:
        return None

    subject = "parameters" if for_input else "response"
    message = f"Incorrect {subject} for API {api_id}: {describe_error(err)}"
    error = wrap_error(
        err,
        INPUT_ERROR_STATUS if for_input else OUTPUT_ERROR_STATUS,
        message=message,
    )
    issues = _field_issues(err)
    if issues:
        error.data = issues
    if not for_input:
        error.payload["error"] = BAD_RESPONSE_LABEL
    return error


def validate_params(
    params: Mapping[Any, Any],
    schema: Any,  # noqa: ANN401
    api_id: str,
    expected_count: int,
) -> ProtocolError | None:
    """Validate the parameters received by an API.

    Args:
        params: Received parameters, keyed by parameter name
        schema: Schema or Validator for the parameters
        api_id: API id used in error messages
        expected_count: Number of declared parameters

    Returns:
        A 400 ProtocolError, or None when the parameters are valid

    """
    if len(params) > expected_count:
        return wrap_error(
            ValidationFailedError(
                f"API {api_id} must contain at most {expected_count} parameters"
            ),
            INPUT_ERROR_STATUS,
        )
    return enrich_error(as_validator(schema).validate(params), api_id)


def validate_result(
    result: Any,  # noqa: ANN401
    schema: Any,  # noqa: ANN401
    api_id: str,
) -> ProtocolError | None:
    """Validate the value returned by an API.

    Returns:
        A 512 ProtocolError, or None when the result is valid

    """
    return enrich_error(as_validator(schema).validate(result), api_id, for_input=False)


def array_to_obj(values: Sequence[Any], properties: Sequence[str]) -> dict[Any, Any]:
    """Map positional values onto property names.

    Values beyond the known properties are kept, keyed by their index.
    Properties without a value are left out, so schemas see them as missing.

    Args:
        values: Positional values (e.g. call arguments)
        properties: Property names (e.g. extracted parameter names)

    Returns:
        Mapping of property names (or indices) to values

    """
    obj: dict[Any, Any] = {}
    for i, prop in enumerate(properties):
        if i < len(values):
            obj[prop] = values[i]
    for i in range(len(properties), len(values)):
        obj[i] = values[i]
    return obj
