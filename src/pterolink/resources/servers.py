# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Servers collection (``/servers``) and its database sub-resource."""

from __future__ import annotations

import builtins
from collections.abc import Iterable

from typing_extensions import Self

from ..models.base import Payload, extract_attributes, extract_items, to_payload
from ..models.servers import DatabaseAttributes, ServerAttributes
from .base import (
    CollectionManager,
    Entity,
    Identifier,
    include_params,
    require_update_fields,
)
from .filters import ServerFilter


class Server(Entity[ServerAttributes]):
    """
    A server, as seen by the application API.

    ``suspend()`` and ``unsuspend()`` flip the local ``suspended`` flag when
    their own response arrives; when both are in flight the response that
    arrives last decides the final value.
    """

    resource = "Server"
    attributes_model = ServerAttributes

    def _path(self, entity_id: Identifier) -> str:
        return f"/servers/{entity_id}"

    # === Accessors ===

    @property
    def name(self) -> str:
        return self.attributes.name

    @property
    def identifier(self) -> str:
        return self.attributes.identifier

    @property
    def uuid(self) -> str:
        return self.attributes.uuid

    @property
    def is_suspended(self) -> bool:
        return self.attributes.suspended

    @property
    def owner_id(self) -> int | None:
        return self.attributes.user

    @property
    def node_id(self) -> int | None:
        return self.attributes.node

    @property
    def docker_image(self) -> str:
        return self.attributes.container.image

    # === Updates ===

    async def _patch(self, suffix: str, data: Payload, action: str) -> Self:
        entity_id = self._require_id()
        payload = require_update_fields(data)
        response = await self._client.request(
            "PATCH",
            f"{self._path(entity_id)}/{suffix}",
            body=payload,
            context=self._context(action),
        )
        self._replace(extract_attributes(response))
        return self

    async def update(self, data: Payload) -> Self:
        """Alias for update_details(); servers have no plain PATCH endpoint."""
        return await self.update_details(data)

    async def update_details(self, data: Payload) -> Self:
        return await self._patch("details", data, "updating server details")

    async def update_build(self, data: Payload) -> Self:
        return await self._patch("build", data, "updating server build")

    async def update_startup(self, data: Payload) -> Self:
        return await self._patch("startup", data, "updating server startup")

    # === Lifecycle ===

    async def _post_action(self, action: str) -> None:
        entity_id = self._require_id()
        await self._client.request(
            "POST",
            f"{self._path(entity_id)}/{action}",
            context=self._context(f"{action} server"),
        )

    async def suspend(self) -> None:
        await self._post_action("suspend")
        self._set_local(suspended=True)

    async def unsuspend(self) -> None:
        await self._post_action("unsuspend")
        self._set_local(suspended=False)

    async def reinstall(self) -> None:
        await self._post_action("reinstall")

    async def delete(self, force: bool = False) -> None:
        """Delete the server; ``force`` skips the daemon-side cleanup."""
        entity_id = self._require_id()
        path = self._path(entity_id) + ("/force" if force else "")
        await self._client.request(
            "DELETE", path, context=self._context("deleting server")
        )
        self._mark_unloaded()

    # === Databases ===

    def _database_path(self, database_id: Identifier | None = None) -> str:
        path = f"{self._path(self._require_id())}/databases"
        return f"{path}/{database_id}" if database_id is not None else path

    async def databases(self) -> builtins.list[DatabaseAttributes]:
        data = await self._client.request(
            "GET", self._database_path(), context=self._context("listing databases")
        )
        return [DatabaseAttributes.model_validate(item) for item in extract_items(data)]

    async def get_database(self, database_id: Identifier) -> DatabaseAttributes:
        data = await self._client.request(
            "GET",
            self._database_path(database_id),
            context=self._context("fetching database"),
        )
        return DatabaseAttributes.model_validate(extract_attributes(data))

    async def create_database(self, data: Payload) -> DatabaseAttributes:
        response = await self._client.request(
            "POST",
            self._database_path(),
            body=to_payload(data),
            context=self._context("creating database"),
        )
        return DatabaseAttributes.model_validate(extract_attributes(response))

    async def reset_database_password(self, database_id: Identifier) -> None:
        await self._client.request(
            "POST",
            f"{self._database_path(database_id)}/reset-password",
            context=self._context("resetting database password"),
        )

    async def delete_database(self, database_id: Identifier) -> None:
        await self._client.request(
            "DELETE",
            self._database_path(database_id),
            context=self._context("deleting database"),
        )


class Servers(CollectionManager[Server]):
    """Application servers."""

    collection = "servers"
    resource = "Server"
    entity_class = Server

    async def get_external(
        self, external_id: str, include: Iterable[str] | None = None
    ) -> Server:
        """Fetch a server by its external id."""
        data = await self._client.request(
            "GET",
            f"{self.base_path}/external/{external_id}",
            params=include_params(include),
            context=self._context("fetching server by external id", external_id),
        )
        return self._wrap(extract_attributes(data))

    async def filter(self, include: Iterable[str] | None = None) -> ServerFilter:
        """Fetch every server and return a Filter over the snapshot."""
        return ServerFilter(await self.list_all(include))


__all__ = ["Server", "Servers"]
