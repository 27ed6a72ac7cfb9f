# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Server records and payloads (application scope)."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import PanelModel, PayloadModel


class ServerLimits(PanelModel):
    memory: int = 0
    swap: int = 0
    disk: int = 0
    io: int = 500
    cpu: int = 0
    threads: int | str | None = None


class FeatureLimits(PanelModel):
    databases: int = 0
    allocations: int = 0
    backups: int = 0


class ServerContainer(PanelModel):
    startup_command: str = ""
    image: str = ""
    installed: bool | int = False
    environment: dict[str, Any] = Field(default_factory=dict)


class ServerAttributes(PanelModel):
    """
    A server as seen by the application API.

    ``user``, ``node``, ``allocation``, ``nest`` and ``egg`` are ids of the
    related records.
    """

    id: int
    external_id: str | None = None
    uuid: str = ""
    identifier: str = ""
    name: str = ""
    description: str | None = None
    suspended: bool = False
    limits: ServerLimits = Field(default_factory=ServerLimits)
    feature_limits: FeatureLimits = Field(default_factory=FeatureLimits)
    user: int | None = None
    node: int | None = None
    allocation: int | None = None
    nest: int | None = None
    egg: int | None = None
    container: ServerContainer = Field(default_factory=ServerContainer)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    relationships: dict[str, Any] | None = None


class DatabaseAttributes(PanelModel):
    id: int
    server: int | None = None
    host: int | None = None
    database: str = ""
    username: str = ""
    remote: str = "%"
    max_connections: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateServerData(PayloadModel):
    """
    Body of ``POST /servers``.

    ``allocation`` is either ``{"default": <id>}`` or ``deploy`` is used to
    let the panel pick one.
    """

    name: str
    user: int
    egg: int
    docker_image: str
    startup: str
    environment: dict[str, Any] = Field(default_factory=dict)
    limits: dict[str, Any]
    feature_limits: dict[str, Any]
    allocation: dict[str, Any] | None = None
    deploy: dict[str, Any] | None = None
    external_id: str | None = None
    description: str | None = None
    skip_scripts: bool | None = None
    start_on_completion: bool | None = None


class UpdateServerDetailsData(PayloadModel):
    name: str | None = None
    user: int | None = None
    external_id: str | None = None
    description: str | None = None


class UpdateServerBuildData(PayloadModel):
    allocation: int | None = None
    memory: int | None = None
    swap: int | None = None
    disk: int | None = None
    io: int | None = None
    cpu: int | None = None
    threads: int | str | None = None
    feature_limits: dict[str, Any] | None = None
    add_allocations: list[int] | None = None
    remove_allocations: list[int] | None = None
    oom_disabled: bool | None = None


class UpdateServerStartupData(PayloadModel):
    startup: str | None = None
    environment: dict[str, Any] | None = None
    egg: int | None = None
    image: str | None = None
    skip_scripts: bool | None = None


class CreateDatabaseData(PayloadModel):
    database: str
    remote: str = "%"
    host: int | None = None


__all__ = [
    "CreateDatabaseData",
    "CreateServerData",
    "DatabaseAttributes",
    "FeatureLimits",
    "ServerAttributes",
    "ServerContainer",
    "ServerLimits",
    "UpdateServerBuildData",
    "UpdateServerDetailsData",
    "UpdateServerStartupData",
]
