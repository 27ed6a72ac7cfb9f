# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Node and allocation records and payloads."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import PanelModel, PayloadModel


class AllocatedResources(PanelModel):
    memory: int = 0
    disk: int = 0


class NodeAttributes(PanelModel):
    id: int
    uuid: str = ""
    public: bool = True
    name: str = ""
    description: str | None = None
    location_id: int | None = None
    fqdn: str = ""
    scheme: str = "https"
    behind_proxy: bool = False
    maintenance_mode: bool = False
    memory: int = 0
    memory_overallocate: int = 0
    disk: int = 0
    disk_overallocate: int = 0
    upload_size: int = 100
    daemon_listen: int = 8080
    daemon_sftp: int = 2022
    daemon_base: str = "/var/lib/pterodactyl/volumes"
    allocated_resources: AllocatedResources | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    relationships: dict[str, Any] | None = None


class AllocationAttributes(PanelModel):
    id: int
    ip: str = ""
    alias: str | None = None
    port: int = 0
    notes: str | None = None
    assigned: bool = False


class CreateNodeData(PayloadModel):
    name: str
    location_id: int
    fqdn: str
    memory: int
    disk: int
    scheme: str | None = None
    behind_proxy: bool | None = None
    public: bool | None = None
    memory_overallocate: int | None = None
    disk_overallocate: int | None = None
    upload_size: int | None = None
    daemon_sftp: int | None = None
    daemon_listen: int | None = None
    daemon_base: str | None = None
    description: str | None = None


class UpdateNodeData(PayloadModel):
    name: str | None = None
    location_id: int | None = None
    fqdn: str | None = None
    scheme: str | None = None
    behind_proxy: bool | None = None
    maintenance_mode: bool | None = None
    public: bool | None = None
    memory: int | None = None
    memory_overallocate: int | None = None
    disk: int | None = None
    disk_overallocate: int | None = None
    upload_size: int | None = None
    daemon_sftp: int | None = None
    daemon_listen: int | None = None
    daemon_base: str | None = None
    description: str | None = None


class CreateAllocationData(PayloadModel):
    """Body of ``POST /nodes/{id}/allocations``; ports may be ranges like ``"25565-25570"``."""

    ip: str
    ports: list[str] = Field(default_factory=list)
    alias: str | None = None


__all__ = [
    "AllocatedResources",
    "AllocationAttributes",
    "CreateAllocationData",
    "CreateNodeData",
    "NodeAttributes",
    "UpdateNodeData",
]
