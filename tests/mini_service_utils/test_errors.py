"""Tests for protocol errors."""

from mini_service_utils.errors import MiniServiceError, ProtocolError, wrap_error


class TestProtocolError:
    """Tests for ProtocolError."""

    def test_payload(self) -> None:
        """Test that the payload mirrors status and message."""
        error = ProtocolError("missing", status_code=404)

        assert error.is_protocol_error
        assert isinstance(error, MiniServiceError)
        assert error.payload == {
            "statusCode": 404,
            "error": "Not Found",
            "message": "missing",
        }
        assert str(error) == "missing"

    def test_unknown_status_code(self) -> None:
        """Test that non-standard status codes get a generic label."""
        assert ProtocolError("odd", status_code=512).payload["error"] == "Unknown"


class TestWrapError:
    """Tests for wrap_error."""

    def test_wraps_plain_error(self) -> None:
        """Test that plain errors are wrapped and chained."""
        cause = ValueError("bad value")

        error = wrap_error(cause, 400)

        assert error.status_code == 400
        assert error.message == "bad value"
        assert error.__cause__ is cause

    def test_rewraps_protocol_error_in_place(self) -> None:
        """Test that protocol errors are updated rather than nested."""
        original = ProtocolError("conflict", status_code=409)

        error = wrap_error(original, 400, message="changed")

        assert error is original
        assert error.status_code == 400
        assert error.payload["error"] == "Bad Request"
        assert str(error) == "changed"
