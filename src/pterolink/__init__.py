# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""pterolink - Typed async client for the Pterodactyl panel API.

This library wraps the panel's application (``/api/application``) and client
(``/api/client``) REST APIs with typed records, entity wrappers and
per-collection request queues.

Key Features:
    - Application and user clients over httpx
    - Frozen pydantic records for every resource
    - Rate-limited, strictly ordered create/delete per collection
    - Chainable in-memory filters over fetched users and servers
    - One exception hierarchy, translated once at the transport boundary

Quick Start:
    >>> from pterolink import ApplicationClient, ClientConfig
    >>>
    >>> config = ClientConfig(panel_url="https://panel.example.com", api_key="ptla_...")
    >>> async with ApplicationClient(config) as client:
    ...     users = await client.users.bulk_create(new_users)
    ...     admins = (await client.users.filter()).root_admins().get()

Main Exports:
    - ApplicationClient, UserClient: Panel clients
    - ClientConfig: Configuration options
    - RateLimitedQueue: FIFO time-spaced dispatch queue
    - PteroError and subclasses: Error taxonomy

Version: 1.0.0
"""

__version__ = "1.0.0"

from .client import ApplicationClient, BaseClient, HealthStatus, UserClient
from .config import ClientConfig
from .error_handling import ErrorContext, translate_api_error
from .exceptions import (
    ConfigurationError,
    EntityNotLoadedError,
    NetworkError,
    NotFoundError,
    PteroError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
)
from .protocols import HttpTransport
from .queue import RateLimitedQueue
from .resources import (
    Egg,
    Eggs,
    Filter,
    Loaded,
    Location,
    Locations,
    Nest,
    Nests,
    Node,
    Nodes,
    Server,
    ServerFilter,
    Servers,
    Unloaded,
    User,
    UserFilter,
    Users,
)
from .transport import HttpResponse, HttpxTransport

__all__ = [
    "ApplicationClient",
    "BaseClient",
    "ClientConfig",
    "ConfigurationError",
    "Egg",
    "Eggs",
    "EntityNotLoadedError",
    "ErrorContext",
    "Filter",
    "HealthStatus",
    "HttpResponse",
    "HttpTransport",
    "HttpxTransport",
    "Loaded",
    "Location",
    "Locations",
    "Nest",
    "Nests",
    "NetworkError",
    "Node",
    "Nodes",
    "NotFoundError",
    "PteroError",
    "RateLimitError",
    "RateLimitedQueue",
    "Server",
    "ServerFilter",
    "Servers",
    "UnauthorizedError",
    "Unloaded",
    "User",
    "UserClient",
    "UserFilter",
    "Users",
    "ValidationError",
    "__version__",
    "translate_api_error",
]
