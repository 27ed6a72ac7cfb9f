# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Users collection (``/users``)."""

from __future__ import annotations

import builtins
from collections.abc import Iterable

from ..models.base import extract_attributes, extract_items
from ..models.users import UserAttributes
from .base import CollectionManager, Entity, Identifier, include_params
from .filters import UserFilter


class User(Entity[UserAttributes]):
    """A panel user."""

    resource = "User"
    attributes_model = UserAttributes

    def _path(self, entity_id: Identifier) -> str:
        return f"/users/{entity_id}"

    @property
    def username(self) -> str:
        return self.attributes.username

    @property
    def email(self) -> str:
        return self.attributes.email

    @property
    def full_name(self) -> str:
        return f"{self.attributes.first_name} {self.attributes.last_name}".strip()

    @property
    def is_root_admin(self) -> bool:
        return self.attributes.root_admin

    @property
    def has_2fa(self) -> bool:
        return self.attributes.two_factor

    @property
    def external_id(self) -> str | None:
        return self.attributes.external_id


class Users(CollectionManager[User]):
    """
    Application users.

    Example:
        future = client.users.create({"email": ..., "username": ..., ...})
        user = await future
    """

    collection = "users"
    resource = "User"
    entity_class = User

    async def get_external(
        self, external_id: str, include: Iterable[str] | None = None
    ) -> User:
        """Fetch a user by its external id."""
        data = await self._client.request(
            "GET",
            f"{self.base_path}/external/{external_id}",
            params=include_params(include),
            context=self._context("fetching user by external id", external_id),
        )
        return self._wrap(extract_attributes(data))

    async def search(self, query: str, field: str = "email") -> builtins.list[User]:
        """Server-side search using ``filter[<field>]`` (email, uuid, username, external_id)."""
        data = await self._client.request(
            "GET",
            self.base_path,
            params={f"filter[{field}]": query},
            context=self._context("searching users", query),
        )
        return [self._wrap(item) for item in extract_items(data)]

    async def filter(self, include: Iterable[str] | None = None) -> UserFilter:
        """Fetch every user and return a Filter over the snapshot."""
        return UserFilter(await self.list_all(include))


__all__ = ["User", "Users"]
