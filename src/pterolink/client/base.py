# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
BaseClient: the shared request path of the application and user clients.

Every request made by a manager or an entity goes through
BaseClient.request(), which is the single place where transport failures are
translated into the PteroError hierarchy.
"""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from typing_extensions import Self

from ..config import ClientConfig
from ..error_handling import ErrorContext, translate_api_error
from ..exceptions import PteroError
from ..observability.collector import MetricsCollector, get_metrics_collector
from ..observability.constants import API_ERRORS_TOTAL, API_REQUESTS_TOTAL
from ..protocols.transport import HttpTransport
from ..transport.base import HTTP_METHODS
from ..transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)


@dataclass
class HealthStatus:
    """
    Result of BaseClient.health_check().

    Attributes:
        healthy: Whether the panel answered the probe successfully
        scope: API scope probed ("application" or "client")
        latency: Round trip of the probe in seconds
        error: PteroError code and message when unhealthy
        metadata: Additional information (queue statistics)
    """

    healthy: bool
    scope: str
    latency: float | None = None
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class BaseClient:
    """
    Owns the transport of one API scope.

    Args:
        config: Client configuration
        transport: Transport to use; defaults to an HttpxTransport for the scope
        scope: API scope, "application" or "client"
        metrics: Metrics collector; defaults to the global collector
    """

    health_path: str = "/"

    def __init__(
        self,
        config: ClientConfig,
        transport: HttpTransport | None = None,
        scope: str = "application",
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.config = config
        self.scope = scope
        self.metrics = metrics if metrics is not None else get_metrics_collector()
        self._transport: HttpTransport = transport or HttpxTransport(
            config.api_url(scope),
            config.api_key,
            timeout=config.timeout,
            user_agent=config.user_agent,
            verify_ssl=config.verify_ssl,
        )
        self._closed = False

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    async def request(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        context: ErrorContext | None = None,
    ) -> Any:
        """
        Send one request and return the decoded response body.

        Raises:
            PteroError: Any failure, already translated
            ValueError: If ``method`` is not supported
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        logger.debug(f"{method} {path} ({self.scope})")
        self.metrics.inc_counter(
            API_REQUESTS_TOTAL, labels={"method": method, "scope": self.scope}
        )

        try:
            response = await self._transport.request(method, path, body=body, params=params)
        except Exception as e:
            error = translate_api_error(e, context)
            self.metrics.inc_counter(API_ERRORS_TOTAL, labels={"code": error.code})
            logger.debug(f"{method} {path} failed: {error.code} {error.message}")
            raise error from e

        return response.data

    async def health_check(self) -> HealthStatus:
        """
        Probe the panel with a cheap GET.

        Never raises for panel failures; they are reported in the result.
        """
        start = time.perf_counter()
        try:
            await self.request(
                "GET",
                self.health_path,
                params={"per_page": 1},
                context=ErrorContext(action="checking panel health"),
            )
        except PteroError as e:
            logger.warning(f"Health check failed for {self.scope} API: {e.code}")
            return HealthStatus(
                healthy=False,
                scope=self.scope,
                latency=time.perf_counter() - start,
                error=f"{e.code}: {e.message}",
                metadata=self._health_metadata(),
            )

        return HealthStatus(
            healthy=True,
            scope=self.scope,
            latency=time.perf_counter() - start,
            metadata=self._health_metadata(),
        )

    def _health_metadata(self) -> dict[str, Any]:
        return {}

    async def close(self) -> None:
        """Close the transport. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self._transport.close()
        logger.debug(f"{self.__class__.__name__} closed")

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()

    def to_dict(self) -> dict[str, Any]:
        """Non-secret description of the client."""
        return {
            "panel_url": self.config.panel_url,
            "scope": self.scope,
            "timeout": self.config.timeout,
            "rate_per_second": self.config.rate_per_second,
            "closed": self._closed,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(panel_url={self.config.panel_url!r}, "
            f"scope={self.scope!r})"
        )


__all__ = ["BaseClient", "HealthStatus"]
