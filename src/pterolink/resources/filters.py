# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
In-memory filtering of fetched entities.

A Filter copies the entities it is given at construction and narrows its own
working list; changing the source list afterwards has no effect. Every
narrowing method returns the same Filter so calls can be chained, and the
terminal methods read the result:

    admins = (
        UserFilter(users)
        .root_admins()
        .contains("email", "@example.com")
        .sort("username")
        .limit(10)
        .get()
    )

No method performs I/O.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from datetime import datetime, timezone
from typing import Any, Generic, Literal, TypeVar

from ..exceptions import ValidationError
from ..models.base import attribute_value
from .base import Entity

EntityT = TypeVar("EntityT", bound=Entity[Any])
FilterT = TypeVar("FilterT", bound="Filter[Any]")

SortOrder = Literal["asc", "desc"]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Filter(Generic[EntityT]):
    """Chainable, synchronous view over a snapshot of entities."""

    def __init__(self, entities: Iterable[EntityT]) -> None:
        self._source: tuple[EntityT, ...] = tuple(entities)
        self._items: list[EntityT] = list(self._source)

    def _value(self, entity: EntityT, field: str) -> Any:
        return attribute_value(entity.attributes, field)

    def _keep(self: FilterT, predicate: Callable[[Any], bool]) -> FilterT:
        self._items = [item for item in self._items if predicate(item)]
        return self

    # === Narrowing ===

    def where(self: FilterT, field: str, value: Any) -> FilterT:
        """Keep entities whose ``field`` equals ``value``."""
        return self._keep(lambda e: self._value(e, field) == value)

    def where_not(self: FilterT, field: str, value: Any) -> FilterT:
        return self._keep(lambda e: self._value(e, field) != value)

    def contains(self: FilterT, field: str, value: str) -> FilterT:
        """Case-insensitive substring match. A None field never matches."""
        needle = value.lower()

        def matches(entity: Any) -> bool:
            current = self._value(entity, field)
            if current is None:
                return False
            return needle in str(current).lower()

        return self._keep(matches)

    def created_before(self: FilterT, moment: datetime) -> FilterT:
        """Keep entities created strictly before ``moment`` (naive means UTC)."""
        moment = _as_utc(moment)

        def matches(entity: Any) -> bool:
            created = self._value(entity, "created_at")
            return created is not None and _as_utc(created) < moment

        return self._keep(matches)

    def created_after(self: FilterT, moment: datetime) -> FilterT:
        moment = _as_utc(moment)

        def matches(entity: Any) -> bool:
            created = self._value(entity, "created_at")
            return created is not None and _as_utc(created) > moment

        return self._keep(matches)

    def sort(self: FilterT, field: str, order: SortOrder = "asc") -> FilterT:
        """
        Stable sort on ``field``. None values sort first ascending and last
        descending.

        Raises:
            ValidationError: If ``order`` is not "asc" or "desc"
        """
        if order not in ("asc", "desc"):
            raise ValidationError(
                f"Invalid sort order '{order}'",
                [{"field": "order", "detail": "must be 'asc' or 'desc'"}],
            )

        def key(entity: Any) -> tuple[bool, Any]:
            current = self._value(entity, field)
            return (current is not None, current)

        # sorted(reverse=True) keeps equal keys in their original order
        self._items = sorted(self._items, key=key, reverse=(order == "desc"))
        return self

    def limit(self: FilterT, count: int) -> FilterT:
        if count < 0:
            raise ValidationError("limit must not be negative")
        self._items = self._items[:count]
        return self

    def offset(self: FilterT, count: int) -> FilterT:
        if count < 0:
            raise ValidationError("offset must not be negative")
        self._items = self._items[count:]
        return self

    # === Terminal reads ===

    def get(self) -> list[EntityT]:
        return list(self._items)

    def first(self) -> EntityT | None:
        return self._items[0] if self._items else None

    def last(self) -> EntityT | None:
        return self._items[-1] if self._items else None

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[EntityT]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(matched={len(self._items)}, source={len(self._source)})"


class UserFilter(Filter[Any]):
    """Filter over User entities."""

    def root_admins(self) -> UserFilter:
        return self.where("root_admin", True)

    def normal_users(self) -> UserFilter:
        return self.where("root_admin", False)

    def with_2fa(self) -> UserFilter:
        return self.where("2fa", True)

    def without_2fa(self) -> UserFilter:
        return self.where("2fa", False)


class ServerFilter(Filter[Any]):
    """Filter over Server entities."""

    def suspended(self) -> ServerFilter:
        return self.where("suspended", True)

    def not_suspended(self) -> ServerFilter:
        return self.where("suspended", False)

    def by_user(self, user_id: int) -> ServerFilter:
        return self.where("user", user_id)

    def by_node(self, node_id: int) -> ServerFilter:
        return self.where("node", node_id)

    def by_nest(self, nest_id: int) -> ServerFilter:
        return self.where("nest", nest_id)

    def by_egg(self, egg_id: int) -> ServerFilter:
        return self.where("egg", egg_id)


__all__ = ["Filter", "ServerFilter", "SortOrder", "UserFilter"]
