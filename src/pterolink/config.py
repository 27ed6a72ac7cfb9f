# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client Configuration for pterolink

This module provides the configuration shared by the application and the
user client: panel location, credentials, transport settings and the rates
of the per-collection request queues.
"""

from dataclasses import dataclass, field
from urllib.parse import urlparse

from .exceptions import ConfigurationError

COLLECTION_NAMES = frozenset({"users", "servers", "nodes", "nests", "eggs"})
"""Collections that own a rate-limited request queue."""


@dataclass
class ClientConfig:
    """
    Configuration for a panel client.

    Example:
        config = ClientConfig(
            panel_url="https://panel.example.com",
            api_key="ptla_...",
            collection_rates={"servers": 2.0},
        )
    """

    # === Panel ===

    panel_url: str
    """Base URL of the panel, without the ``/api/...`` suffix."""

    api_key: str
    """Application (``ptla_``) or client (``ptlc_``) API key."""

    # === Transport ===

    timeout: float = 30.0
    """Request timeout in seconds."""

    user_agent: str = "pterolink"
    """User-Agent header sent with every request."""

    verify_ssl: bool = True
    """Verify the panel's TLS certificate."""

    # === Request Queues ===

    rate_per_second: float = 5.0
    """Default dispatch rate of every collection queue."""

    collection_rates: dict[str, float] = field(default_factory=dict)
    """Per-collection overrides keyed by collection name."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        parsed = urlparse(self.panel_url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                "panel_url must be an absolute http(s) URL",
                [{"field": "panel_url", "detail": "invalid URL"}],
            )
        self.panel_url = self.panel_url.rstrip("/")

        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError(
                "api_key must not be empty",
                [{"field": "api_key", "detail": "required"}],
            )
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.rate_per_second <= 0:
            raise ConfigurationError("rate_per_second must be positive")

        for name, rate in self.collection_rates.items():
            if name not in COLLECTION_NAMES:
                raise ConfigurationError(
                    f"Unknown collection '{name}' in collection_rates",
                    [{"field": "collection_rates", "detail": name}],
                )
            if rate <= 0:
                raise ConfigurationError(f"Rate for collection '{name}' must be positive")

    def rate_for(self, collection: str) -> float:
        """Dispatch rate for a collection's queue."""
        return self.collection_rates.get(collection, self.rate_per_second)

    def api_url(self, scope: str) -> str:
        """Root URL of an API scope (``application`` or ``client``)."""
        return f"{self.panel_url}/api/{scope}"


__all__ = ["COLLECTION_NAMES", "ClientConfig"]
