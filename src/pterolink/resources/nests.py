# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Nests collection (``/nests``) and the eggs of each nest."""

from __future__ import annotations

import builtins
from collections.abc import Mapping
from typing import Any

from ..models.base import extract_attributes
from ..models.nests import EggAttributes, EggVariableAttributes, NestAttributes
from .base import CollectionManager, Entity, Identifier


def _relationship_items(attributes: Any, name: str) -> builtins.list[dict[str, Any]]:
    relationships = attributes.relationships or {}
    block = relationships.get(name) or {}
    return [
        dict(item["attributes"])
        for item in block.get("data") or []
        if isinstance(item, Mapping) and isinstance(item.get("attributes"), Mapping)
    ]


class Egg(Entity[EggAttributes]):
    """An egg (server template) belonging to a nest."""

    resource = "Egg"
    attributes_model = EggAttributes

    def __init__(
        self,
        client: Any,
        nest_id: Identifier,
        attributes: EggAttributes | Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(client, attributes)
        self.nest_id = nest_id

    def _path(self, entity_id: Identifier) -> str:
        return f"/nests/{self.nest_id}/eggs/{entity_id}"

    @property
    def name(self) -> str:
        return self.attributes.name

    @property
    def description(self) -> str | None:
        return self.attributes.description

    @property
    def docker_image(self) -> str:
        return self.attributes.docker_image

    @property
    def docker_images(self) -> dict[str, str]:
        return dict(self.attributes.docker_images)

    @property
    def startup(self) -> str:
        return self.attributes.startup

    async def get_variables(self) -> builtins.list[EggVariableAttributes]:
        """
        Environment variables of the egg.

        Uses the ``variables`` relationship when it was included, otherwise
        refetches the egg with ``include=variables``.
        """
        items = _relationship_items(self.attributes, "variables")
        if not items:
            data = await self._client.request(
                "GET",
                self._path(self._require_id()),
                params={"include": "variables"},
                context=self._context("fetching egg variables"),
            )
            self._replace(extract_attributes(data))
            items = _relationship_items(self.attributes, "variables")
        return [EggVariableAttributes.model_validate(item) for item in items]


class Eggs(CollectionManager[Egg]):
    """Eggs of one nest."""

    collection = "eggs"
    resource = "Egg"
    entity_class = Egg

    def __init__(
        self,
        client: Any,
        nest_id: Identifier,
        rate_per_second: float | None = None,
    ) -> None:
        self.nest_id = nest_id
        super().__init__(client, rate_per_second)

    @property
    def queue_name(self) -> str:
        return f"eggs:{self.nest_id}"

    @property
    def base_path(self) -> str:
        return f"/nests/{self.nest_id}/eggs"

    def _wrap(self, attributes: Mapping[str, Any]) -> Egg:
        return Egg(self._client, self.nest_id, attributes)


class Nest(Entity[NestAttributes]):
    """A nest: a group of eggs."""

    resource = "Nest"
    attributes_model = NestAttributes

    def _path(self, entity_id: Identifier) -> str:
        return f"/nests/{entity_id}"

    @property
    def name(self) -> str:
        return self.attributes.name

    @property
    def author(self) -> str:
        return self.attributes.author

    @property
    def description(self) -> str | None:
        return self.attributes.description

    @property
    def eggs(self) -> Eggs:
        """Eggs manager scoped to this nest, shared with ``client.nests.eggs``."""
        return self._client.nests.eggs(self._require_id())

    def get_eggs(self) -> builtins.list[Egg]:
        """Eggs from the ``eggs`` relationship; empty unless it was included."""
        nest_id = self._require_id()
        return [
            Egg(self._client, nest_id, item)
            for item in _relationship_items(self.attributes, "eggs")
        ]


class Nests(CollectionManager[Nest]):
    """Application nests."""

    collection = "nests"
    resource = "Nest"
    entity_class = Nest

    def __init__(self, client: Any, rate_per_second: float | None = None) -> None:
        super().__init__(client, rate_per_second)
        self._eggs: dict[Identifier, Eggs] = {}

    def eggs(self, nest_id: Identifier) -> Eggs:
        """Eggs manager of a nest; one manager (and queue) per nest id."""
        if nest_id not in self._eggs:
            self._eggs[nest_id] = Eggs(self._client, nest_id)
        return self._eggs[nest_id]

    def egg_managers(self) -> builtins.list[Eggs]:
        """Egg managers created so far, in creation order."""
        return list(self._eggs.values())


__all__ = ["Egg", "Eggs", "Nest", "Nests"]
