"""Unit tests for the exceptions module.

Tests all exception classes defined in pterolink.exceptions.
"""

import pytest

from pterolink.exceptions import (
    ConfigurationError,
    EntityNotLoadedError,
    NetworkError,
    NotFoundError,
    PteroError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
)


class TestPteroError:
    """Tests for the base PteroError exception."""

    def test_can_be_caught_as_exception(self):
        with pytest.raises(Exception):  # noqa: B017
            raise PteroError("test error")

    def test_defaults(self):
        error = PteroError("boom")

        assert str(error) == "boom"
        assert error.code == "PTERO_ERROR"
        assert error.status_code is None
        assert error.errors == []

    def test_to_dict(self):
        error = PteroError("boom", code="SERVER_ERROR", status_code=500)

        assert error.to_dict() == {
            "name": "PteroError",
            "message": "boom",
            "code": "SERVER_ERROR",
            "status_code": 500,
            "errors": [],
        }


class TestValidationError:
    def test_formats_field_errors(self):
        error = ValidationError("Invalid", [{"field": "email", "detail": "taken"}])

        assert error.code == "VALIDATION_ERROR"
        assert error.status_code == 400
        assert error.errors == [{"code": "VALIDATION_ERROR", "detail": "email: taken"}]

    def test_missing_field_name(self):
        error = ValidationError("Invalid", [{"detail": "bad"}])

        assert error.errors[0]["detail"] == "unknown: bad"

    def test_subclasses(self):
        assert issubclass(ConfigurationError, ValidationError)
        assert isinstance(EntityNotLoadedError("Server"), ValidationError)


class TestEntityNotLoadedError:
    def test_message_and_resource(self):
        error = EntityNotLoadedError("Node")

        assert error.message == "Node has not been loaded"
        assert error.resource == "Node"


class TestUnauthorizedError:
    def test_defaults(self):
        error = UnauthorizedError()

        assert error.message == "Unauthorized access"
        assert error.code == "UNAUTHORIZED"
        assert error.status_code == 401

    def test_forbidden_status(self):
        assert UnauthorizedError("nope", status_code=403).status_code == 403


class TestNotFoundError:
    def test_default_message(self):
        error = NotFoundError("User", 5)

        assert error.message == "User with ID 5 not found"
        assert error.resource == "User"
        assert error.resource_id == 5
        assert error.status_code == 404

    def test_custom_message(self):
        assert NotFoundError("User", 5, "gone").message == "gone"


class TestRateLimitError:
    def test_retry_after(self):
        error = RateLimitError(30)

        assert error.retry_after == 30
        assert error.code == "RATE_LIMIT"
        assert error.status_code == 429
        assert "30 seconds" in error.message


class TestNetworkError:
    def test_no_status(self):
        error = NetworkError("down")

        assert error.code == "NETWORK_ERROR"
        assert error.status_code is None

    def test_custom_code(self):
        assert NetworkError("down", code="NO_RESPONSE").code == "NO_RESPONSE"


@pytest.mark.parametrize(
    "error",
    [
        ValidationError("x"),
        UnauthorizedError(),
        NotFoundError("User", 1),
        RateLimitError(1),
        NetworkError("x"),
    ],
)
def test_all_are_ptero_errors(error):
    assert isinstance(error, PteroError)
