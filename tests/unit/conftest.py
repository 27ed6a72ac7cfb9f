"""
Shared fixtures for pterolink unit tests.

FakeTransport stands in for the panel: it records every request together
with the event-loop time at which it started, and replays scripted
responses or errors per (method, path).
"""

import asyncio
from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Any

import pytest

from pterolink.client import ApplicationClient, UserClient
from pterolink.config import ClientConfig
from pterolink.observability import MetricsCollector, reset_metrics_collector
from pterolink.transport import HttpResponse, HttpStatusError

# ============================================================================
# Fake transport
# ============================================================================


@dataclass
class RecordedCall:
    method: str
    path: str
    body: Any
    params: dict[str, Any]
    started_at: float


@dataclass
class Scripted:
    status: int = 200
    data: Any = None
    error: BaseException | None = None
    delay: float = 0.0
    headers: dict[str, str] = field(default_factory=dict)


class FakeTransport:
    """
    In-memory HttpTransport.

    Scripts queued for a route are consumed in order; the last one is reused
    once the others are gone. Unscripted routes answer 200 with ``default``.
    """

    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self.default: Any = {}
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False
        self._routes: dict[tuple[str, str], deque[Scripted]] = defaultdict(deque)

    def add(
        self,
        method: str,
        path: str,
        data: Any = None,
        status: int = 200,
        error: BaseException | None = None,
        delay: float = 0.0,
        headers: dict[str, str] | None = None,
    ) -> "FakeTransport":
        self._routes[(method, path)].append(
            Scripted(status, data, error, delay, headers or {})
        )
        return self

    def fail(self, method: str, path: str, status: int, data: Any = None, **kwargs: Any):
        """Script an HTTP error response."""
        headers = kwargs.pop("headers", None)
        return self.add(
            method, path, error=HttpStatusError(status, data, headers), **kwargs
        )

    def _next(self, method: str, path: str) -> Scripted:
        scripts = self._routes.get((method, path))
        if not scripts:
            return Scripted(data=self.default)
        if len(scripts) > 1:
            return scripts.popleft()
        return scripts[0]

    async def request(self, method, path, body=None, params=None) -> HttpResponse:
        loop = asyncio.get_running_loop()
        self.calls.append(
            RecordedCall(method, path, body, dict(params or {}), loop.time())
        )
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            script = self._next(method, path)
            if script.delay:
                await asyncio.sleep(script.delay)
            if script.error is not None:
                raise script.error
            return HttpResponse(script.status, script.data, script.headers)
        finally:
            self.in_flight -= 1

    async def close(self) -> None:
        self.closed = True

    def calls_to(self, method: str, path: str) -> list[RecordedCall]:
        return [c for c in self.calls if c.method == method and c.path == path]


# ============================================================================
# Response bodies
# ============================================================================


class Payloads:
    """Builders for panel response bodies."""

    @staticmethod
    def item(obj: str, **attributes: Any) -> dict[str, Any]:
        return {"object": obj, "attributes": attributes}

    @staticmethod
    def listing(
        obj: str,
        items: list[dict[str, Any]],
        current_page: int = 1,
        total_pages: int = 1,
    ) -> dict[str, Any]:
        return {
            "object": "list",
            "data": [{"object": obj, "attributes": attrs} for attrs in items],
            "meta": {
                "pagination": {
                    "total": len(items),
                    "count": len(items),
                    "per_page": 50,
                    "current_page": current_page,
                    "total_pages": total_pages,
                    "links": {},
                }
            },
        }

    @staticmethod
    def user(user_id: int = 1, **overrides: Any) -> dict[str, Any]:
        attrs = {
            "id": user_id,
            "external_id": None,
            "uuid": f"uuid-{user_id}",
            "username": f"user{user_id}",
            "email": f"user{user_id}@example.com",
            "first_name": "Test",
            "last_name": "User",
            "language": "en",
            "root_admin": False,
            "2fa": False,
            "created_at": "2024-01-01T00:00:00+00:00",
            "updated_at": "2024-01-01T00:00:00+00:00",
        }
        attrs.update(overrides)
        return attrs

    @staticmethod
    def server(server_id: int = 1, **overrides: Any) -> dict[str, Any]:
        attrs = {
            "id": server_id,
            "external_id": None,
            "uuid": f"uuid-{server_id}",
            "identifier": f"srv{server_id}",
            "name": f"Server {server_id}",
            "description": "",
            "suspended": False,
            "limits": {"memory": 1024, "swap": 0, "disk": 5120, "io": 500, "cpu": 100, "threads": None},
            "feature_limits": {"databases": 1, "allocations": 1, "backups": 1},
            "user": 1,
            "node": 1,
            "allocation": 1,
            "nest": 1,
            "egg": 1,
            "container": {
                "startup_command": "java -jar server.jar",
                "image": "ghcr.io/pterodactyl/yolks:java_17",
                "installed": True,
                "environment": {},
            },
            "created_at": "2024-01-01T00:00:00+00:00",
            "updated_at": "2024-01-01T00:00:00+00:00",
        }
        attrs.update(overrides)
        return attrs

    @staticmethod
    def node(node_id: int = 1, **overrides: Any) -> dict[str, Any]:
        attrs = {
            "id": node_id,
            "uuid": f"uuid-{node_id}",
            "public": True,
            "name": f"node{node_id}",
            "description": None,
            "location_id": 1,
            "fqdn": f"node{node_id}.example.com",
            "scheme": "https",
            "behind_proxy": False,
            "maintenance_mode": False,
            "memory": 8192,
            "memory_overallocate": 0,
            "disk": 102400,
            "disk_overallocate": 0,
            "upload_size": 100,
            "daemon_listen": 8080,
            "daemon_sftp": 2022,
            "daemon_base": "/var/lib/pterodactyl/volumes",
        }
        attrs.update(overrides)
        return attrs


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_global_metrics():
    """Keep the global metrics collector from leaking between tests."""
    reset_metrics_collector()
    yield
    reset_metrics_collector()


@pytest.fixture
def payloads():
    return Payloads


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def config():
    return ClientConfig(panel_url="https://panel.example.com", api_key="ptla_test")


@pytest.fixture
def fast_config():
    """Queues fast enough that tests do not wait on the interval."""
    return ClientConfig(
        panel_url="https://panel.example.com",
        api_key="ptla_test",
        rate_per_second=1000.0,
    )


@pytest.fixture
def app_client(fast_config, fake_transport, metrics):
    return ApplicationClient(fast_config, transport=fake_transport, metrics=metrics)


@pytest.fixture
def user_client(fake_transport, metrics):
    config = ClientConfig(panel_url="https://panel.example.com", api_key="ptlc_test")
    return UserClient(config, transport=fake_transport, metrics=metrics)
