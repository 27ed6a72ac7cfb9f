# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the HTTP transport used by the clients."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..transport.base import HttpResponse


@runtime_checkable
class HttpTransport(Protocol):
    """
    Minimal protocol for executing one panel request.

    Paths are relative to the scope root (``/api/application`` or
    ``/api/client``). Implementations attach authentication themselves.

    Implementations must raise HttpStatusError for non-2xx responses and
    TransportError when no response was received, so the two can be told
    apart by the error translation.
    """

    async def request(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str | int] | None = None,
    ) -> HttpResponse:
        """Execute a request and return the decoded response."""
        ...

    async def close(self) -> None:
        """Release any underlying connections."""
        ...
