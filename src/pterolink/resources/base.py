# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Entity wrappers and collection managers.

Entity:
    Typed view over one panel record. Its state is either Unloaded or
    Loaded(attributes); accessors read the snapshot and never do I/O. Verbs
    (refresh, update, delete, ...) call the client directly, without going
    through a queue, and replace the snapshot wholesale on success.

ResourceManager / CollectionManager:
    Per-collection facade. Reads (list, get, iterate) go straight to the
    client. CollectionManager additionally owns one RateLimitedQueue and
    routes create and delete through it.
"""

from __future__ import annotations

import asyncio
import builtins
import logging
from collections.abc import AsyncIterator, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, Union

from typing_extensions import Self

from ..error_handling import ErrorContext
from ..exceptions import ConfigurationError, EntityNotLoadedError, ValidationError
from ..models.base import (
    Pagination,
    PanelModel,
    Payload,
    extract_attributes,
    extract_items,
    extract_pagination,
    to_payload,
)
from ..queue import RateLimitedQueue

if TYPE_CHECKING:
    from ..client.base import BaseClient

logger = logging.getLogger(__name__)

AttrsT = TypeVar("AttrsT", bound=PanelModel)
EntityT = TypeVar("EntityT", bound="Entity[Any]")

Identifier = Union[int, str]


@dataclass(frozen=True)
class Unloaded:
    """Entity has no attributes: never fetched, or deleted."""


@dataclass(frozen=True)
class Loaded(Generic[AttrsT]):
    """Entity holds the last attributes received from the panel."""

    attributes: AttrsT


UNLOADED = Unloaded()

EntityState = Union[Unloaded, Loaded[AttrsT]]


def include_params(include: Iterable[str] | None) -> dict[str, Any]:
    """Query parameters for an ``include`` list (``?include=a,b``)."""
    if not include:
        return {}
    return {"include": ",".join(include)}


def require_update_fields(data: Payload) -> dict[str, Any]:
    """
    Normalize an update payload and reject an empty one.

    Raises:
        ValidationError: If no field would be sent
    """
    payload = to_payload(data)
    if not payload:
        raise ValidationError("No update fields provided")
    return payload


class Entity(Generic[AttrsT]):
    """
    Base class for entity wrappers.

    Subclasses set ``resource`` (display name used in errors),
    ``attributes_model`` and implement ``_path()``.
    """

    resource: ClassVar[str] = "Resource"
    attributes_model: ClassVar[type[PanelModel]] = PanelModel

    def __init__(
        self,
        client: BaseClient,
        attributes: AttrsT | Mapping[str, Any] | None = None,
    ) -> None:
        self._client = client
        self._state: EntityState[AttrsT] = UNLOADED
        if attributes is not None:
            self._replace(attributes)

    # === State ===

    @property
    def state(self) -> EntityState[AttrsT]:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return isinstance(self._state, Loaded)

    @property
    def attributes(self) -> AttrsT:
        """
        Last fetched attributes.

        Raises:
            EntityNotLoadedError: If the entity is Unloaded
        """
        if isinstance(self._state, Loaded):
            return self._state.attributes
        raise EntityNotLoadedError(self.resource)

    @property
    def id(self) -> int | None:
        if isinstance(self._state, Loaded):
            return getattr(self._state.attributes, "id", None)
        return None

    def _replace(self, attributes: AttrsT | Mapping[str, Any]) -> None:
        if isinstance(attributes, Mapping):
            attributes = self.attributes_model.model_validate(dict(attributes))  # type: ignore[assignment]
        self._state = Loaded(attributes)  # type: ignore[arg-type]

    def _set_local(self, **fields: Any) -> None:
        """Swap in a copy of the snapshot with some fields changed."""
        self._state = Loaded(self.attributes.model_copy(update=fields))

    def _mark_unloaded(self) -> None:
        self._state = UNLOADED

    def _require_id(self) -> int:
        """
        Id of the record, checked before any request is made.

        Raises:
            ValidationError: If the entity has no known id
        """
        entity_id = self.id
        if entity_id is None:
            raise ValidationError(
                f"{self.resource} has no id",
                [{"field": "id", "detail": "required"}],
            )
        return entity_id

    def _context(self, action: str) -> ErrorContext:
        return ErrorContext(resource=self.resource, identifier=self.id, action=action)

    # === Paths ===

    def _path(self, entity_id: Identifier) -> str:
        raise NotImplementedError

    # === Verbs ===

    async def fetch(self, entity_id: Identifier, include: Iterable[str] | None = None) -> Self:
        """Load this entity by id, replacing any current state."""
        data = await self._client.request(
            "GET",
            self._path(entity_id),
            params=include_params(include),
            context=ErrorContext(self.resource, entity_id, f"fetching {self.resource.lower()}"),
        )
        self._replace(extract_attributes(data))
        return self

    async def refresh(self, include: Iterable[str] | None = None) -> Self:
        """Refetch the record from the panel."""
        return await self.fetch(self._require_id(), include)

    async def update(self, data: Payload) -> Self:
        """
        PATCH the record and replace the snapshot with the response.

        Raises:
            ValidationError: If the entity has no id or ``data`` is empty,
                before any request is sent
        """
        entity_id = self._require_id()
        payload = require_update_fields(data)
        response = await self._client.request(
            "PATCH",
            self._path(entity_id),
            body=payload,
            context=self._context(f"updating {self.resource.lower()}"),
        )
        self._replace(extract_attributes(response))
        return self

    async def delete(self) -> None:
        """Delete the record; the entity becomes Unloaded."""
        entity_id = self._require_id()
        await self._client.request(
            "DELETE",
            self._path(entity_id),
            context=self._context(f"deleting {self.resource.lower()}"),
        )
        self._mark_unloaded()

    def to_dict(self) -> dict[str, Any] | None:
        if isinstance(self._state, Loaded):
            return self._state.attributes.model_dump(by_alias=True, mode="json")
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state  # type: ignore[attr-defined]

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        if isinstance(self._state, Loaded):
            return f"{type(self).__name__}(id={self.id})"
        return f"{type(self).__name__}(unloaded)"


class ResourceManager(Generic[EntityT]):
    """
    Direct (unqueued) access to one collection.

    Subclasses set ``collection``, ``resource`` and ``entity_class``.
    """

    collection: ClassVar[str] = ""
    resource: ClassVar[str] = "Resource"
    entity_class: ClassVar[type[Entity[Any]]] = Entity

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    @property
    def base_path(self) -> str:
        return f"/{self.collection}"

    def _item_path(self, entity_id: Identifier) -> str:
        return f"{self.base_path}/{entity_id}"

    def _wrap(self, attributes: Mapping[str, Any]) -> EntityT:
        return self.entity_class(self._client, attributes)  # type: ignore[return-value]

    def _context(self, action: str, identifier: Identifier | None = None) -> ErrorContext:
        return ErrorContext(resource=self.resource, identifier=identifier, action=action)

    async def list_page(
        self,
        include: Iterable[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> tuple[builtins.list[EntityT], Pagination | None]:
        """One page of the collection together with its pagination block."""
        query = include_params(include)
        if page is not None:
            query["page"] = page
        if per_page is not None:
            query["per_page"] = per_page
        if params:
            query.update(params)

        data = await self._client.request(
            "GET",
            self.base_path,
            params=query,
            context=self._context(f"listing {self.collection}"),
        )
        return [self._wrap(item) for item in extract_items(data)], extract_pagination(data)

    async def list(
        self,
        include: Iterable[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> builtins.list[EntityT]:
        """One page of the collection (the first page by default)."""
        items, _ = await self.list_page(include, page, per_page)
        return items

    async def iterate(
        self,
        include: Iterable[str] | None = None,
        per_page: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> AsyncIterator[EntityT]:
        """Yield every entity of the collection, fetching pages lazily."""
        page = 1
        while True:
            items, pagination = await self.list_page(include, page, per_page, params)
            for item in items:
                yield item
            if pagination is None or not pagination.has_next:
                return
            page += 1

    async def list_all(
        self,
        include: Iterable[str] | None = None,
        per_page: int | None = None,
    ) -> builtins.list[EntityT]:
        return [item async for item in self.iterate(include, per_page)]

    async def get(self, entity_id: Identifier, include: Iterable[str] | None = None) -> EntityT:
        data = await self._client.request(
            "GET",
            self._item_path(entity_id),
            params=include_params(include),
            context=self._context(f"fetching {self.resource.lower()}", entity_id),
        )
        return self._wrap(extract_attributes(data))


class CollectionManager(ResourceManager[EntityT]):
    """
    Collection whose create and delete calls are rate limited.

    ``create`` and ``delete`` are plain methods returning an asyncio.Future:
    the operation is appended to the queue at call time, so call order is
    dispatch order. They must be called with a running event loop.
    """

    def __init__(self, client: BaseClient, rate_per_second: float | None = None) -> None:
        super().__init__(client)
        if rate_per_second is None:
            rate = client.config.rate_for(self.collection)
        elif rate_per_second <= 0:
            raise ConfigurationError(
                f"Rate for queue '{self.queue_name}' must be positive"
            )
        else:
            rate = rate_per_second
        self._queue: RateLimitedQueue[Any] = RateLimitedQueue(
            rate, name=self.queue_name, metrics=client.metrics
        )

    @property
    def queue_name(self) -> str:
        return self.collection

    @property
    def queue(self) -> RateLimitedQueue[Any]:
        return self._queue

    def create(self, data: Payload) -> asyncio.Future[EntityT]:
        """Queue a create call; the future resolves to the new entity."""
        payload = to_payload(data)
        return self._queue.enqueue(lambda: self._create_now(payload))

    async def _create_now(self, payload: dict[str, Any]) -> EntityT:
        response = await self._client.request(
            "POST",
            self.base_path,
            body=payload,
            context=self._context(f"creating {self.resource.lower()}"),
        )
        return self._wrap(extract_attributes(response))

    def delete(self, entity_id: Identifier) -> asyncio.Future[None]:
        """Queue a delete call."""
        return self._queue.enqueue(lambda: self._delete_now(entity_id))

    async def _delete_now(self, entity_id: Identifier) -> None:
        await self._client.request(
            "DELETE",
            self._item_path(entity_id),
            context=self._context(f"deleting {self.resource.lower()}", entity_id),
        )

    async def bulk_create(
        self,
        items: Iterable[Payload],
        return_exceptions: bool = False,
    ) -> builtins.list[Any]:
        """
        Create every item through the queue.

        Results are in input order. By default the call fails on the first
        rejected create (the remaining creates still run); with
        ``return_exceptions=True`` each failure is returned in place.
        """
        futures = [self.create(item) for item in items]
        logger.debug(f"Queued {len(futures)} creates on {self.queue_name}")
        return list(await asyncio.gather(*futures, return_exceptions=return_exceptions))

    async def bulk_delete(
        self,
        ids: Iterable[Identifier],
        return_exceptions: bool = False,
    ) -> builtins.list[Any]:
        """Delete every id through the queue; same failure contract as bulk_create."""
        futures = [self.delete(entity_id) for entity_id in ids]
        logger.debug(f"Queued {len(futures)} deletes on {self.queue_name}")
        return list(await asyncio.gather(*futures, return_exceptions=return_exceptions))


__all__ = [
    "UNLOADED",
    "CollectionManager",
    "Entity",
    "EntityState",
    "Identifier",
    "Loaded",
    "ResourceManager",
    "Unloaded",
    "include_params",
    "require_update_fields",
]
