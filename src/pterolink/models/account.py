# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Records returned by the client (``/api/client``) scope."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import PanelModel


class ClientServerAttributes(PanelModel):
    """A server as seen by its owner or a subuser."""

    identifier: str
    uuid: str = ""
    internal_id: int | None = None
    name: str = ""
    node: str = ""
    description: str | None = None
    server_owner: bool = False
    is_suspended: bool = False
    is_installing: bool = False
    status: str | None = None
    limits: dict[str, Any] = Field(default_factory=dict)
    feature_limits: dict[str, Any] = Field(default_factory=dict)
    sftp_details: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Any] | None = None


class AccountAttributes(PanelModel):
    id: int
    admin: bool = False
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    language: str = "en"


class ApiKeyAttributes(PanelModel):
    identifier: str
    description: str = ""
    allowed_ips: list[str] = Field(default_factory=list)
    last_used_at: datetime | None = None
    created_at: datetime | None = None


class TwoFactorDetails(PanelModel):
    """Setup data returned by ``GET /account/two-factor``."""

    image_url_data: str = ""
    secret: str | None = None


__all__ = [
    "AccountAttributes",
    "ApiKeyAttributes",
    "ClientServerAttributes",
    "TwoFactorDetails",
]
