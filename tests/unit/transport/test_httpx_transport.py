"""
Unit tests for HttpxTransport using httpx.MockTransport.
"""

import json

import httpx
import pytest

from pterolink.protocols import HttpTransport
from pterolink.transport import HttpStatusError, HttpxTransport, TransportError

BASE_URL = "https://panel.example.com/api/application"


def make_transport(handler) -> HttpxTransport:
    return HttpxTransport(
        BASE_URL, "ptla_secret", timeout=5.0, transport=httpx.MockTransport(handler)
    )


class TestRequests:
    @pytest.mark.asyncio
    async def test_get_with_params_and_headers(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["accept"] = request.headers["Accept"]
            return httpx.Response(200, json={"object": "list", "data": []})

        transport = make_transport(handler)
        response = await transport.request("GET", "/users", params={"page": 2})
        await transport.close()

        assert response.status == 200
        assert response.data == {"object": "list", "data": []}
        assert seen["url"] == f"{BASE_URL}/users?page=2"
        assert seen["auth"] == "Bearer ptla_secret"
        assert seen["accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_json_body(self):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"object": "user", "attributes": {"id": 1}})

        transport = make_transport(handler)
        response = await transport.request("post", "/users", body={"email": "a@example.com"})

        assert response.status == 201
        assert bodies == [{"email": "a@example.com"}]

    @pytest.mark.asyncio
    async def test_empty_body_decodes_to_none(self):
        transport = make_transport(lambda request: httpx.Response(204))

        response = await transport.request("DELETE", "/users/1")

        assert response.status == 204
        assert response.data is None

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        transport = make_transport(lambda request: httpx.Response(200, text="pong"))

        response = await transport.request("GET", "/")

        assert response.data == {"message": "pong"}

    @pytest.mark.asyncio
    async def test_unsupported_method(self):
        transport = make_transport(lambda request: httpx.Response(200))

        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            await transport.request("TRACE", "/")


class TestErrors:
    @pytest.mark.asyncio
    async def test_status_error_carries_body_and_headers(self):
        transport = make_transport(
            lambda request: httpx.Response(
                429, json={"errors": []}, headers={"Retry-After": "5"}
            )
        )

        with pytest.raises(HttpStatusError) as exc_info:
            await transport.request("GET", "/users")

        assert exc_info.value.status == 429
        assert exc_info.value.data == {"errors": []}
        assert exc_info.value.headers["retry-after"] == "5"

    @pytest.mark.asyncio
    async def test_connect_error_becomes_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        transport = make_transport(handler)

        with pytest.raises(TransportError) as exc_info:
            await transport.request("GET", "/users")

        assert isinstance(exc_info.value.cause, httpx.ConnectError)


class TestLifecycle:
    def test_satisfies_protocol(self):
        assert isinstance(make_transport(lambda r: httpx.Response(200)), HttpTransport)

    @pytest.mark.asyncio
    async def test_client_recreated_after_close(self):
        transport = make_transport(lambda request: httpx.Response(200, json={}))

        await transport.request("GET", "/")
        await transport.close()
        response = await transport.request("GET", "/")

        assert response.status == 200
        await transport.close()
