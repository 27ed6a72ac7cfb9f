# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Locations collection (``/locations``). Writes are direct, not queued."""

from __future__ import annotations

from ..models.base import Payload, extract_attributes, to_payload
from ..models.locations import LocationAttributes
from .base import Entity, Identifier, ResourceManager, require_update_fields


class Location(Entity[LocationAttributes]):
    resource = "Location"
    attributes_model = LocationAttributes

    def _path(self, entity_id: Identifier) -> str:
        return f"/locations/{entity_id}"

    @property
    def short(self) -> str:
        return self.attributes.short

    @property
    def long(self) -> str | None:
        return self.attributes.long

    def __str__(self) -> str:
        if not self.is_loaded:
            return "Location(unloaded)"
        if self.attributes.long:
            return f"{self.attributes.short} ({self.attributes.long})"
        return self.attributes.short


class Locations(ResourceManager[Location]):
    """Application locations."""

    collection = "locations"
    resource = "Location"
    entity_class = Location

    async def create(self, data: Payload) -> Location:
        response = await self._client.request(
            "POST",
            self.base_path,
            body=to_payload(data),
            context=self._context("creating location"),
        )
        return self._wrap(extract_attributes(response))

    async def update(self, location_id: Identifier, data: Payload) -> Location:
        payload = require_update_fields(data)
        response = await self._client.request(
            "PATCH",
            self._item_path(location_id),
            body=payload,
            context=self._context("updating location", location_id),
        )
        return self._wrap(extract_attributes(response))

    async def delete(self, location_id: Identifier) -> None:
        await self._client.request(
            "DELETE",
            self._item_path(location_id),
            context=self._context("deleting location", location_id),
        )


__all__ = ["Location", "Locations"]
