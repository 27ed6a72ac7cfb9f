# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Servers visible to the key owner (``/api/client``). All calls are direct."""

from __future__ import annotations

import builtins
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Literal

from ..error_handling import ErrorContext
from ..exceptions import ValidationError
from ..models.account import ClientServerAttributes
from ..models.base import extract_attributes, extract_items
from ..resources.base import include_params

if TYPE_CHECKING:
    from ..client.base import BaseClient

PowerSignal = Literal["start", "stop", "restart", "kill"]
POWER_SIGNALS: frozenset[str] = frozenset({"start", "stop", "restart", "kill"})


class ClientServers:
    """Server listing, details and power control for the key owner."""

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    async def list(
        self,
        include: Iterable[str] | None = None,
        page: int | None = None,
    ) -> builtins.list[ClientServerAttributes]:
        params = include_params(include)
        if page is not None:
            params["page"] = page
        data = await self._client.request(
            "GET",
            "/",
            params=params,
            context=ErrorContext("Server", None, "listing servers"),
        )
        return [ClientServerAttributes.model_validate(item) for item in extract_items(data)]

    async def permissions(self) -> dict[str, Any]:
        """Permission definitions known to the panel (``GET /permissions``)."""
        data = await self._client.request(
            "GET", "/permissions", context=ErrorContext(action="fetching permissions")
        )
        return extract_attributes(data)

    async def get(
        self, identifier: str, include: Iterable[str] | None = None
    ) -> ClientServerAttributes:
        data = await self._client.request(
            "GET",
            f"/servers/{identifier}",
            params=include_params(include),
            context=ErrorContext("Server", identifier, "fetching server"),
        )
        return ClientServerAttributes.model_validate(extract_attributes(data))

    async def power(self, identifier: str, signal: PowerSignal) -> None:
        """
        Send a power signal.

        Raises:
            ValidationError: If ``signal`` is unknown, before any request
        """
        if signal not in POWER_SIGNALS:
            raise ValidationError(
                f"Invalid power signal '{signal}'",
                [{"field": "signal", "detail": "must be start, stop, restart or kill"}],
            )
        await self._client.request(
            "POST",
            f"/servers/{identifier}/power",
            body={"signal": signal},
            context=ErrorContext("Server", identifier, f"sending {signal} signal"),
        )

    async def start(self, identifier: str) -> None:
        await self.power(identifier, "start")

    async def stop(self, identifier: str) -> None:
        await self.power(identifier, "stop")

    async def restart(self, identifier: str) -> None:
        await self.power(identifier, "restart")

    async def kill(self, identifier: str) -> None:
        await self.power(identifier, "kill")


__all__ = ["POWER_SIGNALS", "ClientServers", "PowerSignal"]
