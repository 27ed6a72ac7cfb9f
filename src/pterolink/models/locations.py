# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Location records and payloads."""

from datetime import datetime
from typing import Any

from .base import PanelModel, PayloadModel


class LocationAttributes(PanelModel):
    """A location: ``short`` is the code (e.g. "NYC"), ``long`` its description."""

    id: int
    short: str = ""
    long: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    relationships: dict[str, Any] | None = None


class CreateLocationData(PayloadModel):
    short: str
    long: str | None = None


class UpdateLocationData(PayloadModel):
    short: str | None = None
    long: str | None = None


__all__ = ["CreateLocationData", "LocationAttributes", "UpdateLocationData"]
