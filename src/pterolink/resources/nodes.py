# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Nodes collection (``/nodes``) and per-node allocations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models.base import Payload, to_payload
from ..models.nodes import AllocatedResources, AllocationAttributes, NodeAttributes
from .base import CollectionManager, Entity, Identifier, ResourceManager


class Allocation(Entity[AllocationAttributes]):
    """An ip:port pair on a node."""

    resource = "Allocation"
    attributes_model = AllocationAttributes

    def __init__(
        self,
        client: Any,
        attributes: AllocationAttributes | Mapping[str, Any] | None = None,
        node_id: Identifier | None = None,
    ) -> None:
        super().__init__(client, attributes)
        self.node_id = node_id

    def _path(self, entity_id: Identifier) -> str:
        return f"/nodes/{self.node_id}/allocations/{entity_id}"

    @property
    def address(self) -> str:
        return f"{self.attributes.ip}:{self.attributes.port}"

    @property
    def is_assigned(self) -> bool:
        return self.attributes.assigned


class NodeAllocations(ResourceManager[Allocation]):
    """Allocations of one node. All calls are direct."""

    collection = "allocations"
    resource = "Allocation"
    entity_class = Allocation

    def __init__(self, client: Any, node_id: Identifier) -> None:
        super().__init__(client)
        self.node_id = node_id

    @property
    def base_path(self) -> str:
        return f"/nodes/{self.node_id}/allocations"

    def _wrap(self, attributes: Mapping[str, Any]) -> Allocation:
        return Allocation(self._client, attributes, node_id=self.node_id)

    async def create(self, data: Payload) -> None:
        """Create allocations; the panel answers 204 without a body."""
        await self._client.request(
            "POST",
            self.base_path,
            body=to_payload(data),
            context=self._context("creating allocations", self.node_id),
        )

    async def delete(self, allocation_id: Identifier) -> None:
        await self._client.request(
            "DELETE",
            self._item_path(allocation_id),
            context=self._context("deleting allocation", allocation_id),
        )


class Node(Entity[NodeAttributes]):
    """A Wings node."""

    resource = "Node"
    attributes_model = NodeAttributes

    def _path(self, entity_id: Identifier) -> str:
        return f"/nodes/{entity_id}"

    @property
    def name(self) -> str:
        return self.attributes.name

    @property
    def description(self) -> str | None:
        return self.attributes.description

    @property
    def fqdn(self) -> str:
        return self.attributes.fqdn

    @property
    def scheme(self) -> str:
        return self.attributes.scheme

    @property
    def is_behind_proxy(self) -> bool:
        return self.attributes.behind_proxy

    @property
    def memory(self) -> int:
        return self.attributes.memory

    @property
    def disk(self) -> int:
        return self.attributes.disk

    @property
    def allocated_resources(self) -> AllocatedResources | None:
        """Memory and disk already handed out to servers; only present when the panel sends it."""
        return self.attributes.allocated_resources

    @property
    def is_public(self) -> bool:
        return self.attributes.public

    @property
    def is_in_maintenance_mode(self) -> bool:
        return self.attributes.maintenance_mode

    @property
    def location_id(self) -> int | None:
        return self.attributes.location_id

    @property
    def connection_url(self) -> str:
        return f"{self.attributes.scheme}://{self.attributes.fqdn}:{self.attributes.daemon_listen}"

    @property
    def allocations(self) -> NodeAllocations:
        return NodeAllocations(self._client, self._require_id())

    async def configuration(self) -> dict[str, Any]:
        """Wings configuration (``config.yml`` contents) for this node."""
        entity_id = self._require_id()
        data = await self._client.request(
            "GET",
            f"{self._path(entity_id)}/configuration",
            context=self._context("fetching node configuration"),
        )
        return dict(data or {})


class Nodes(CollectionManager[Node]):
    """Application nodes."""

    collection = "nodes"
    resource = "Node"
    entity_class = Node

    def allocations(self, node_id: Identifier) -> NodeAllocations:
        return NodeAllocations(self._client, node_id)


__all__ = ["Allocation", "Node", "NodeAllocations", "Nodes"]
