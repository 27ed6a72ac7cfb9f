# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Translation of transport failures into the public exception hierarchy.

translate_api_error() is a pure function: it takes the failure raised by a
transport plus a small context record and returns the matching PteroError.
It is applied exactly once, in BaseClient.request, and the resulting error is
propagated unchanged through managers, queues and entities.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .exceptions import (
    NetworkError,
    NotFoundError,
    PteroError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
)
from .transport.base import HttpStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 60


@dataclass(frozen=True)
class ErrorContext:
    """
    What the failing request was about.

    Attributes:
        resource: Resource kind, e.g. "Server"
        identifier: Id, uuid or query the request targeted
        action: Description used in messages, e.g. "deleting server"
    """

    resource: str | None = None
    identifier: str | int | None = None
    action: str | None = None


def translate_api_error(
    error: BaseException, context: ErrorContext | None = None
) -> PteroError:
    """
    Map a transport failure to a PteroError.

    Args:
        error: Exception raised by the transport
        context: Optional description of the request

    Returns:
        The PteroError to raise. PteroErrors are returned unchanged.
    """
    context = context or ErrorContext()
    action = context.action or "making request"

    if isinstance(error, PteroError):
        return error

    if isinstance(error, TransportError):
        return NetworkError(
            f"No response received from server while {action}",
            code="NO_RESPONSE",
        )

    if not isinstance(error, HttpStatusError):
        return NetworkError(f"A network error occurred while {action}")

    status = error.status
    data = error.data if isinstance(error.data, dict) else {}
    message = _extract_message(data)

    if status in (400, 422):
        default = "Invalid request" if status == 400 else "Validation failed"
        return ValidationError(message or default, _extract_field_errors(data))

    if status == 401:
        return UnauthorizedError(message or "Authentication failed", status_code=401)

    if status == 403:
        return UnauthorizedError(
            message or "You do not have permission to perform this action",
            status_code=403,
        )

    if status == 404:
        resource = context.resource or "Resource"
        identifier = context.identifier if context.identifier is not None else "unknown"
        suffix = f" while {context.action}" if context.action else ""
        return NotFoundError(
            resource,
            identifier,
            f"{resource} with ID {identifier} not found{suffix}",
        )

    if status == 429:
        retry_after = _parse_retry_after(error.headers.get("retry-after"))
        logger.warning(f"Panel rate limited request while {action}: retry in {retry_after}s")
        return RateLimitError(retry_after)

    if status == 500:
        return PteroError(
            message or "Internal server error", code="SERVER_ERROR", status_code=500
        )

    return PteroError(
        message or f"Unknown error occurred ({status})",
        code="UNKNOWN_ERROR",
        status_code=status,
        response=error.data,
    )


def _extract_message(data: dict[str, Any]) -> str | None:
    """Pull a message from either ``{"message": ...}`` or the panel's ``errors`` list."""
    message = data.get("message")
    if message:
        return str(message)
    errors = data.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        detail = errors[0].get("detail")
        if detail:
            return str(detail)
    return None


def _extract_field_errors(data: dict[str, Any]) -> list[dict[str, str]]:
    errors = data.get("errors")
    if not isinstance(errors, list):
        return []
    result = []
    for err in errors:
        if not isinstance(err, dict):
            continue
        meta = err.get("meta") if isinstance(err.get("meta"), dict) else {}
        result.append(
            {
                "field": str(err.get("field") or meta.get("source_field") or "unknown"),
                "detail": str(err.get("detail") or err.get("message") or "Validation failed"),
            }
        )
    return result


def _parse_retry_after(value: str | None) -> int:
    if value is None:
        return DEFAULT_RETRY_AFTER
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER
    return parsed if parsed > 0 else DEFAULT_RETRY_AFTER


__all__ = ["DEFAULT_RETRY_AFTER", "ErrorContext", "translate_api_error"]
