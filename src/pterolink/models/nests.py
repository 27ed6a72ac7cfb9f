# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Nest, egg and egg variable records and payloads."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import PanelModel, PayloadModel


class NestAttributes(PanelModel):
    id: int
    uuid: str = ""
    author: str = ""
    name: str = ""
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    relationships: dict[str, Any] | None = None


class EggAttributes(PanelModel):
    id: int
    uuid: str = ""
    name: str = ""
    nest: int | None = None
    author: str = ""
    description: str | None = None
    docker_image: str = ""
    docker_images: dict[str, str] = Field(default_factory=dict)
    config: dict[str, Any] = Field(default_factory=dict)
    startup: str = ""
    script: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    relationships: dict[str, Any] | None = None


class EggVariableAttributes(PanelModel):
    id: int
    egg_id: int | None = None
    name: str = ""
    description: str = ""
    env_variable: str = ""
    default_value: str = ""
    user_viewable: bool = False
    user_editable: bool = False
    rules: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateNestData(PayloadModel):
    name: str
    description: str | None = None


class UpdateNestData(PayloadModel):
    name: str | None = None
    description: str | None = None


class CreateEggData(PayloadModel):
    name: str
    nest: int | None = None
    description: str | None = None
    docker_image: str | None = None
    docker_images: dict[str, str] | None = None
    config: dict[str, Any] | None = None
    startup: str | None = None
    script: dict[str, Any] | None = None


class UpdateEggData(PayloadModel):
    name: str | None = None
    description: str | None = None
    docker_image: str | None = None
    docker_images: dict[str, str] | None = None
    config: dict[str, Any] | None = None
    startup: str | None = None
    script: dict[str, Any] | None = None


__all__ = [
    "CreateEggData",
    "CreateNestData",
    "EggAttributes",
    "EggVariableAttributes",
    "NestAttributes",
    "UpdateEggData",
    "UpdateNestData",
]
