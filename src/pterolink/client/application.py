# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
ApplicationClient: administrative access through ``/api/application``.

Example:
    config = ClientConfig(panel_url="https://panel.example.com", api_key="ptla_...")
    async with ApplicationClient(config) as client:
        user = await client.users.create(
            {"email": "a@example.com", "username": "a", "first_name": "A", "last_name": "B"}
        )
        servers = (await client.servers.filter()).suspended().get()
"""

import asyncio
from typing import Any

from ..config import ClientConfig
from ..observability.collector import MetricsCollector
from ..protocols.transport import HttpTransport
from ..queue import RateLimitedQueue
from ..resources.locations import Locations
from ..resources.nests import Nests
from ..resources.nodes import Nodes
from ..resources.servers import Servers
from ..resources.users import Users
from .base import BaseClient


class ApplicationClient(BaseClient):
    """
    Client for an application (``ptla_``) API key.

    Attributes:
        users, servers, nodes, nests: Collections with rate-limited writes
        locations: Locations, written directly
    """

    health_path = "/locations"

    def __init__(
        self,
        config: ClientConfig,
        transport: HttpTransport | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        super().__init__(config, transport, scope="application", metrics=metrics)
        self.users = Users(self)
        self.servers = Servers(self)
        self.nodes = Nodes(self)
        self.nests = Nests(self)
        self.locations = Locations(self)

    @classmethod
    def from_credentials(
        cls, panel_url: str, api_key: str, **options: Any
    ) -> "ApplicationClient":
        """Build a client from a panel URL and key; ``options`` go to ClientConfig."""
        return cls(ClientConfig(panel_url=panel_url, api_key=api_key, **options))

    def queues(self) -> list[RateLimitedQueue[Any]]:
        """Queues of every collection, including the egg managers created so far."""
        queues = [
            self.users.queue,
            self.servers.queue,
            self.nodes.queue,
            self.nests.queue,
        ]
        queues.extend(eggs.queue for eggs in self.nests.egg_managers())
        return queues

    async def wait_idle(self) -> None:
        """Wait until every collection queue has drained."""
        await asyncio.gather(*(queue.join() for queue in self.queues()))

    def _health_metadata(self) -> dict[str, Any]:
        return {"queues": {queue.name: queue.get_metrics() for queue in self.queues()}}


__all__ = ["ApplicationClient"]
