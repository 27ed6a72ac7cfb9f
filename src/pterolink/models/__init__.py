# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Typed records and payloads for the panel API.

Records (``*Attributes``) are frozen pydantic models built from responses.
Payloads (``Create*Data`` / ``Update*Data``) are optional typed request
bodies; every method accepting one also accepts a plain mapping.
"""

from .account import (
    AccountAttributes,
    ApiKeyAttributes,
    ClientServerAttributes,
    TwoFactorDetails,
)
from .base import (
    Pagination,
    PanelModel,
    Payload,
    PayloadModel,
    attribute_value,
    extract_attributes,
    extract_items,
    extract_pagination,
    to_payload,
)
from .locations import CreateLocationData, LocationAttributes, UpdateLocationData
from .nests import (
    CreateEggData,
    CreateNestData,
    EggAttributes,
    EggVariableAttributes,
    NestAttributes,
    UpdateEggData,
    UpdateNestData,
)
from .nodes import (
    AllocatedResources,
    AllocationAttributes,
    CreateAllocationData,
    CreateNodeData,
    NodeAttributes,
    UpdateNodeData,
)
from .servers import (
    CreateDatabaseData,
    CreateServerData,
    DatabaseAttributes,
    FeatureLimits,
    ServerAttributes,
    ServerContainer,
    ServerLimits,
    UpdateServerBuildData,
    UpdateServerDetailsData,
    UpdateServerStartupData,
)
from .users import CreateUserData, UpdateUserData, UserAttributes

__all__ = [
    "AccountAttributes",
    "AllocatedResources",
    "AllocationAttributes",
    "ApiKeyAttributes",
    "ClientServerAttributes",
    "CreateAllocationData",
    "CreateDatabaseData",
    "CreateEggData",
    "CreateLocationData",
    "CreateNestData",
    "CreateNodeData",
    "CreateServerData",
    "CreateUserData",
    "DatabaseAttributes",
    "EggAttributes",
    "EggVariableAttributes",
    "FeatureLimits",
    "LocationAttributes",
    "NestAttributes",
    "NodeAttributes",
    "Pagination",
    "PanelModel",
    "Payload",
    "PayloadModel",
    "ServerAttributes",
    "ServerContainer",
    "ServerLimits",
    "TwoFactorDetails",
    "UpdateEggData",
    "UpdateLocationData",
    "UpdateNestData",
    "UpdateNodeData",
    "UpdateServerBuildData",
    "UpdateServerDetailsData",
    "UpdateServerStartupData",
    "UpdateUserData",
    "UserAttributes",
    "attribute_value",
    "extract_attributes",
    "extract_items",
    "extract_pagination",
    "to_payload",
]
