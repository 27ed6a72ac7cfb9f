# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Application-scope resources: entity wrappers, collection managers and filters.

Classes:
    Entity, Unloaded, Loaded: Entity base class and its state variants.
    ResourceManager: Direct (unqueued) collection access.
    CollectionManager: Collection with rate-limited create/delete.
    Users, Servers, Nodes, Nests, Eggs, Locations: Concrete collections.
    Filter, UserFilter, ServerFilter: In-memory snapshot filtering.
"""

from .base import (
    UNLOADED,
    CollectionManager,
    Entity,
    EntityState,
    Identifier,
    Loaded,
    ResourceManager,
    Unloaded,
)
from .filters import Filter, ServerFilter, UserFilter
from .locations import Location, Locations
from .nests import Egg, Eggs, Nest, Nests
from .nodes import Allocation, Node, NodeAllocations, Nodes
from .servers import Server, Servers
from .users import User, Users

__all__ = [
    "UNLOADED",
    "Allocation",
    "CollectionManager",
    "Egg",
    "Eggs",
    "Entity",
    "EntityState",
    "Filter",
    "Identifier",
    "Loaded",
    "Location",
    "Locations",
    "Nest",
    "Nests",
    "Node",
    "NodeAllocations",
    "Nodes",
    "ResourceManager",
    "Server",
    "ServerFilter",
    "Servers",
    "Unloaded",
    "User",
    "UserFilter",
    "Users",
]
