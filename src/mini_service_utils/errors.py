"""Error classes for mini-service-utils.

This module provides:
- MiniServiceError: Base exception class for all package errors
- UnsupportedSyntaxError: Parameter extraction failed on a function's source
- GroupDefinitionError, NoGroupsDefinedError: API group extraction exceptions
- ValidationFailedError: A value was rejected by an API schema
- ProtocolError: Error decorated with a status code and transport payload
- TransportLoadError, TransportNotFoundError, TransportAlreadyRegisteredError:
  Transport loading exceptions
- LoggingError: Logging configuration exception
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


class MiniServiceError(Exception):
    """Base exception for all mini-service-utils errors."""

    pass


class UnsupportedSyntaxError(MiniServiceError):
    """Raised when a function's source cannot be classified."""

    pass


class GroupDefinitionError(MiniServiceError):
    """Raised when a groups list contains an invalid API group."""

    def __init__(self, message: str, position: int | None = None) -> None:
        """Initialise with the index of the first offending group."""
        super().__init__(message)
        self.position = position


class NoGroupsDefinedError(MiniServiceError):
    """Raised when options define neither a group nor a groups list."""

    pass


@dataclass(frozen=True)
class FieldIssue:
    """A single offending field reported by a schema validator."""

    path: str
    kind: str
    message: str


class ValidationFailedError(MiniServiceError):
    """Raised (or returned) when a value does not satisfy its schema."""

    def __init__(self, message: str, details: list[FieldIssue] | None = None) -> None:
        """Initialise with a readable message and per-field details."""
        super().__init__(message)
        self.details = details or []


class TransportLoadError(MiniServiceError):
    """Raised when a named transport cannot be resolved."""

    pass


class TransportNotFoundError(MiniServiceError):
    """Raised when a requested transport is not registered."""

    pass


class TransportAlreadyRegisteredError(MiniServiceError):
    """Raised when attempting to register a transport name twice."""

    pass


class LoggingError(MiniServiceError):
    """Raised for logging configuration errors."""

    pass


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown"


class ProtocolError(MiniServiceError):
    """Error decorated with an HTTP-like status code and a transport payload.

    The payload mirrors what a transport sends over the wire:
    ``{"statusCode": ..., "error": ..., "message": ...}``.
    """

    is_protocol_error = True

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        data: Any = None,  # noqa: ANN401
    ) -> None:
        """Initialise the error and build its payload.

        Args:
            message: Human readable error message
            status_code: HTTP-like status code (4xx or 5xx)
            data: Optional extra data attached to the error, such as the
                per-field issues of a validation failure

        """
        super().__init__(message)
        self.data = data
        self.reformat(message, status_code)

    @property
    def message(self) -> str:
        """Return the current error message."""
        return self.args[0] if self.args else ""

    def reformat(self, message: str, status_code: int) -> None:
        """Reset message, status code and payload."""
        self.args = (message,)
        self.status_code = status_code
        self.payload: dict[str, Any] = {
            "statusCode": status_code,
            "error": _reason_phrase(status_code),
            "message": message,
        }


def wrap_error(
    err: BaseException,
    status_code: int,
    message: str | None = None,
) -> ProtocolError:
    """Wrap an error into a ProtocolError carrying a status code.

    An existing ProtocolError is updated in place, overriding any status code
    and payload from an earlier wrapping. Any other exception becomes the
    cause of a new ProtocolError.

    Args:
        err: Error to wrap
        status_code: Status code for the wrapped error
        message: Replacement message (defaults to the error's own message)

    Returns:
        The wrapped error

    """
    if isinstance(err, ProtocolError):
        err.reformat(message if message is not None else err.message, status_code)
        return err

    wrapped = ProtocolError(
        message if message is not None else str(err), status_code=status_code
    )
    wrapped.__cause__ = err
    return wrapped
