# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Panel clients.

Classes:
    BaseClient: Shared request path and error translation.
    ApplicationClient: ``/api/application`` (administrative) client.
    UserClient: ``/api/client`` (key owner) client.
    HealthStatus: Result of a health check.
"""

from .application import ApplicationClient
from .base import BaseClient, HealthStatus
from .user import UserClient

__all__ = ["ApplicationClient", "BaseClient", "HealthStatus", "UserClient"]
