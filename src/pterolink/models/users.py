# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""User records and payloads."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import PanelModel, PayloadModel


class UserAttributes(PanelModel):
    """A panel user. The wire field ``2fa`` is exposed as ``two_factor``."""

    id: int
    external_id: str | None = None
    uuid: str = ""
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    language: str = "en"
    root_admin: bool = False
    two_factor: bool = Field(default=False, alias="2fa")
    created_at: datetime | None = None
    updated_at: datetime | None = None
    relationships: dict[str, Any] | None = None


class CreateUserData(PayloadModel):
    email: str
    username: str
    first_name: str
    last_name: str
    password: str | None = None
    root_admin: bool | None = None
    language: str | None = None
    external_id: str | None = None


class UpdateUserData(PayloadModel):
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    password: str | None = None
    root_admin: bool | None = None
    language: str | None = None
    external_id: str | None = None


__all__ = ["CreateUserData", "UpdateUserData", "UserAttributes"]
