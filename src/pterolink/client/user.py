# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
UserClient: key-owner access through ``/api/client``.

Example:
    async with UserClient(ClientConfig(panel_url=url, api_key="ptlc_...")) as client:
        for server in await client.servers.list():
            await client.servers.restart(server.identifier)
"""

from typing import Any

from ..config import ClientConfig
from ..observability.collector import MetricsCollector
from ..protocols.transport import HttpTransport
from ..user.account import Account
from ..user.servers import ClientServers
from .base import BaseClient


class UserClient(BaseClient):
    """
    Client for a client (``ptlc_``) API key.

    Attributes:
        servers: Servers visible to the key owner
        account: Account settings
    """

    health_path = "/account"

    def __init__(
        self,
        config: ClientConfig,
        transport: HttpTransport | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        super().__init__(config, transport, scope="client", metrics=metrics)
        self.servers = ClientServers(self)
        self.account = Account(self)

    @classmethod
    def from_credentials(cls, panel_url: str, api_key: str, **options: Any) -> "UserClient":
        """Build a client from a panel URL and key; ``options`` go to ClientConfig."""
        return cls(ClientConfig(panel_url=panel_url, api_key=api_key, **options))


__all__ = ["UserClient"]
