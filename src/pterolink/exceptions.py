# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the pterolink library.

Every error a caller can observe from a client, a collection manager or an
entity is a PteroError. Callers are expected to branch on the concrete kind:

    try:
        user = await client.users.create(data)
    except ValidationError as e:
        for problem in e.errors:
            print(problem["detail"])
    except RateLimitError as e:
        await asyncio.sleep(e.retry_after)
"""

from typing import Any


class PteroError(Exception):
    """Base exception for all pterolink errors.

    Attributes:
        message: Human readable description.
        code: Stable machine readable error code (e.g. "NOT_FOUND").
        status_code: HTTP status of the panel response, if one was received.
        errors: Field or detail level problems reported by the panel.
        response: Raw response body for errors that do not map to a known kind.
    """

    def __init__(
        self,
        message: str,
        code: str = "PTERO_ERROR",
        status_code: int | None = None,
        errors: list[dict[str, str]] | None = None,
        response: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.errors = errors or []
        self.response = response

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for logging or API responses."""
        return {
            "name": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "errors": self.errors,
        }


class ValidationError(PteroError):
    """Raised when input is rejected, remotely (400/422) or locally.

    Local precondition failures (empty update payload, entity without an id)
    are raised before any request is sent.

    Attributes:
        errors: One dict per problem with ``code`` and ``detail`` keys, where
            ``detail`` is formatted as ``"<field>: <detail>"``.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, str]] | None = None,
    ):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            status_code=400,
            errors=[
                {
                    "code": "VALIDATION_ERROR",
                    "detail": f"{err.get('field', 'unknown')}: {err.get('detail', '')}",
                }
                for err in (errors or [])
            ],
        )


class ConfigurationError(ValidationError):
    """Raised when a client is constructed with invalid configuration."""

    pass


class EntityNotLoadedError(ValidationError):
    """Raised when an entity is read or mutated before it holds attributes.

    Attributes:
        resource: Kind of the entity (e.g. "Server").
    """

    def __init__(self, resource: str):
        super().__init__(f"{resource} has not been loaded")
        self.resource = resource


class UnauthorizedError(PteroError):
    """Raised on 401/403: the key was rejected or lacks permission."""

    def __init__(self, message: str = "Unauthorized access", status_code: int = 401):
        super().__init__(message, code="UNAUTHORIZED", status_code=status_code)


class NotFoundError(PteroError):
    """Raised when a referenced resource does not exist on the panel.

    Attributes:
        resource: Kind of the missing resource.
        resource_id: Identifier that was looked up.
    """

    def __init__(
        self,
        resource: str,
        resource_id: str | int,
        message: str | None = None,
    ):
        super().__init__(
            message or f"{resource} with ID {resource_id} not found",
            code="NOT_FOUND",
            status_code=404,
        )
        self.resource = resource
        self.resource_id = resource_id


class RateLimitError(PteroError):
    """Raised when the panel itself answered 429.

    This is unrelated to the client-side request queues; it means the queue
    rate is higher than what the panel accepts.

    Attributes:
        retry_after: Seconds the panel asked the caller to wait.

    Example:
        try:
            await servers.create(data)
        except RateLimitError as e:
            await asyncio.sleep(e.retry_after)
    """

    def __init__(self, retry_after: int):
        super().__init__(
            f"Rate limit exceeded. Try again in {retry_after} seconds",
            code="RATE_LIMIT",
            status_code=429,
        )
        self.retry_after = retry_after


class NetworkError(PteroError):
    """Raised when no response was received (DNS, TLS, connect, timeout)."""

    def __init__(self, message: str, code: str = "NETWORK_ERROR"):
        super().__init__(message, code=code, status_code=None)


__all__ = [
    "ConfigurationError",
    "EntityNotLoadedError",
    "NetworkError",
    "NotFoundError",
    "PteroError",
    "RateLimitError",
    "UnauthorizedError",
    "ValidationError",
]
