"""Tests for podcache.http.client - JSON HTTP client and error mapping."""

from __future__ import annotations

import json

import httpx
import pytest

from podcache.core.exceptions import ConfigurationError, TransportError, ValidationError
from podcache.http.client import HttpClient, http_client

# =============================================================================
# Test Fixtures
# =============================================================================


def make_client(handler) -> HttpClient:
    """Client whose requests are answered by ``handler``."""
    return HttpClient("http://server.test/app", transport=httpx.MockTransport(handler))


# =============================================================================
# Creation Tests
# =============================================================================


class TestHttpClientCreation:
    """Tests for HttpClient instantiation."""

    def test_base_url_gets_trailing_slash(self) -> None:
        assert HttpClient("http://server.test/app").base_url == "http://server.test/app/"

    def test_empty_base_url_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            HttpClient("")

    def test_default_headers(self) -> None:
        client = HttpClient("http://server.test/", user_agent="test/1.0", headers={"X-A": "1"})

        assert client.headers["User-Agent"] == "test/1.0"
        assert client.headers["Accept"] == "application/json"
        assert client.headers["X-A"] == "1"

    async def test_context_manager_closes(self) -> None:
        client = make_client(lambda request: httpx.Response(200, json=[]))
        async with client:
            assert client._client is not None
        assert client._client is None


# =============================================================================
# Request Tests
# =============================================================================


class TestHttpClientRequests:
    """Tests for successful requests."""

    async def test_get_json_resolves_relative_path(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"name": "n1"}])

        async with make_client(handler) as client:
            data = await client.get_json("feed")

        assert data == [{"name": "n1"}]
        assert str(seen[0].url) == "http://server.test/app/feed"
        assert seen[0].method == "GET"

    async def test_post_json_sends_body(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with make_client(handler) as client:
            data = await client.post_json("feed", {"name": "n1", "url": "http://x"})

        assert data == {"ok": True}
        assert seen[0].headers["content-type"] == "application/json"
        assert json.loads(seen[0].content) == {"name": "n1", "url": "http://x"}

    async def test_put_json_accepts_empty_body(self) -> None:
        async with make_client(lambda request: httpx.Response(200)) as client:
            response = await client.put_json("feed/n1", {"name": "n1"})
        assert response.status_code == 200

    async def test_http_client_helper(self) -> None:
        async with http_client(
            "http://server.test/", transport=httpx.MockTransport(lambda r: httpx.Response(200, json=1))
        ) as client:
            assert await client.get_json("x") == 1


# =============================================================================
# Error Mapping Tests
# =============================================================================


class TestHttpClientErrors:
    """Tests for mapping failures onto podcache errors."""

    async def test_client_error_with_message_is_validation_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"message": "name already exists"})

        async with make_client(handler) as client:
            with pytest.raises(ValidationError) as info:
                await client.post_json("feed", {"name": "n1", "url": "x"})

        assert info.value.message == "name already exists"
        assert info.value.status_code == 400

    async def test_client_error_without_message_is_transport_error(self) -> None:
        async with make_client(lambda request: httpx.Response(404, text="nope")) as client:
            with pytest.raises(TransportError) as info:
                await client.get_json("feed")
        assert info.value.status_code == 404

    async def test_server_error_with_message_is_validation_error(self) -> None:
        """The server reports rejected input as HTTP 500 with a message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "name already exists"})

        async with make_client(handler) as client:
            with pytest.raises(ValidationError) as info:
                await client.post_json("feed", {"name": "n1", "url": "x"})

        assert info.value.message == "name already exists"
        assert info.value.status_code == 500

    async def test_server_error_without_message_is_transport_error(self) -> None:
        async with make_client(lambda request: httpx.Response(502, text="bad gateway")) as client:
            with pytest.raises(TransportError) as info:
                await client.get_json("feed")

        assert info.value.message == "HTTP 502"
        assert info.value.status_code == 502

    async def test_connection_error_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(TransportError) as info:
                await client.get_json("feed")

        assert info.value.message == "connection refused"

    async def test_timeout_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        async with make_client(handler) as client:
            with pytest.raises(TransportError, match="timeout"):
                await client.get_json("feed")

    async def test_invalid_json_is_transport_error(self) -> None:
        async with make_client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(TransportError, match="Invalid JSON"):
                await client.get_json("feed")

    async def test_no_retry(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503)

        async with make_client(handler) as client:
            with pytest.raises(TransportError):
                await client.get_json("feed")

        assert len(calls) == 1
