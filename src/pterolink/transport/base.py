# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Transport level types.

These types describe what crossed the wire. They are deliberately separate
from the public exception hierarchy: a transport only reports *that* a
response was non-2xx or that no response arrived, and the client translates
that once into a PteroError (see pterolink.error_handling).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


@dataclass(frozen=True)
class HttpResponse:
    """
    A decoded panel response.

    Attributes:
        status: HTTP status code
        data: Decoded JSON body (None for empty bodies)
        headers: Response headers, lower-cased keys
    """

    status: int
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)


class HttpStatusError(Exception):
    """The panel answered with a non-2xx status."""

    def __init__(
        self,
        status: int,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ):
        super().__init__(f"HTTP {status}")
        self.status = status
        self.data = data
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}


class TransportError(Exception):
    """No response was received at all."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


__all__ = [
    "HTTP_METHODS",
    "HttpResponse",
    "HttpStatusError",
    "TransportError",
]
