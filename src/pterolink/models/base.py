# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base models for panel records and request payloads.

Panel records are frozen pydantic models: an entity replaces its attribute
snapshot wholesale after a mutating call instead of patching fields. Unknown
fields sent by newer panel versions are kept as extras.
"""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ValidationError


class PanelModel(BaseModel):
    """Immutable record returned by the panel."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class PayloadModel(BaseModel):
    """
    Request body for create/update calls.

    No semantic validation happens here; the panel rejects bad input and the
    rejection surfaces as a ValidationError.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Dump the fields that were given a value, using wire names."""
        return self.model_dump(by_alias=True, exclude_none=True)


Payload = Union[PayloadModel, Mapping[str, Any]]


def to_payload(data: Payload) -> dict[str, Any]:
    """Normalize a payload model or plain mapping into a request body."""
    if isinstance(data, PayloadModel):
        return data.to_payload()
    return dict(data)


class Pagination(PanelModel):
    """Pagination block of a list response (``meta.pagination``)."""

    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 1
    total_pages: int = 1
    links: dict[str, Any] = Field(default_factory=dict)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def extract_attributes(data: Any) -> dict[str, Any]:
    """Attributes of a single-object response (``{"object", "attributes"}``)."""
    if isinstance(data, Mapping) and isinstance(data.get("attributes"), Mapping):
        return dict(data["attributes"])
    raise ValidationError(
        "Unexpected response shape: missing attributes",
        [{"field": "attributes", "detail": "missing"}],
    )


def extract_items(data: Any) -> list[dict[str, Any]]:
    """Attributes of every object in a list response."""
    if not isinstance(data, Mapping):
        return []
    return [extract_attributes(item) for item in data.get("data") or []]


def extract_pagination(data: Any) -> Pagination | None:
    if not isinstance(data, Mapping):
        return None
    meta = data.get("meta")
    if isinstance(meta, Mapping) and isinstance(meta.get("pagination"), Mapping):
        return Pagination.model_validate(meta["pagination"])
    return None


def attribute_value(model: BaseModel, field: str) -> Any:
    """
    Read a field from a record by name, wire alias or extra key.

    Dotted paths descend into nested models and mappings, e.g.
    ``attribute_value(server, "limits.memory")``.

    Raises:
        ValidationError: If the field does not exist on the record
    """
    current: Any = model
    for part in field.split("."):
        current = _lookup(current, part, field)
    return current


def _lookup(obj: Any, name: str, full_path: str) -> Any:
    if isinstance(obj, BaseModel):
        fields = type(obj).model_fields
        if name in fields:
            return getattr(obj, name)
        for attr_name, info in fields.items():
            if info.alias == name:
                return getattr(obj, attr_name)
        extra = obj.model_extra or {}
        if name in extra:
            return extra[name]
    elif isinstance(obj, Mapping) and name in obj:
        return obj[name]

    raise ValidationError(
        f"Unknown field '{full_path}'",
        [{"field": full_path, "detail": "unknown field"}],
    )


__all__ = [
    "PanelModel",
    "Pagination",
    "Payload",
    "PayloadModel",
    "attribute_value",
    "extract_attributes",
    "extract_items",
    "extract_pagination",
    "to_payload",
]
