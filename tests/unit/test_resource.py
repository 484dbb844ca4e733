"""Tests for podcache.resource - FeedResource against a fake REST server."""

from __future__ import annotations

import json

import httpx
import pytest

from podcache.core.exceptions import TransportError, ValidationError
from podcache.http.client import HttpClient
from podcache.models.feed import Feed, FeedDraft
from podcache.resource import FeedResource

# =============================================================================
# Test Fixtures
# =============================================================================


class FakeFeedServer:
    """Minimal stand-in for the ``feed`` collection endpoints."""

    def __init__(self, feeds: list[dict] | None = None) -> None:
        self.feeds: dict[str, dict] = {f["name"]: f for f in feeds or []}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/feed" and request.method == "GET":
            return httpx.Response(200, json=list(self.feeds.values()))

        if path == "/feed" and request.method == "POST":
            body = json.loads(request.content)
            if body["name"] in self.feeds:
                return httpx.Response(400, json={"message": "name already exists"})
            feed = {**body, "contentType": "rss", "markedForDeletion": False}
            self.feeds[body["name"]] = feed
            return httpx.Response(200, json=feed)

        if path.startswith("/feed/") and request.method == "PUT":
            name = request.url.path.removeprefix("/feed/")
            body = json.loads(request.content)
            if not body["url"].startswith("http"):
                return httpx.Response(400, json={"message": "malformed URL"})
            self.feeds[name] = {**body, "name": name}
            return httpx.Response(200)

        return httpx.Response(404)


@pytest.fixture
def server() -> FakeFeedServer:
    return FakeFeedServer(
        [{"name": "n1", "url": "http://a", "contentType": "rss", "markedForDeletion": False}]
    )


@pytest.fixture
async def resource(server: FakeFeedServer) -> FeedResource:
    client = HttpClient("http://server.test/", transport=httpx.MockTransport(server))
    yield FeedResource(client)
    await client.close()


# =============================================================================
# List Tests
# =============================================================================


class TestFeedResourceList:
    """Tests for GET feed."""

    async def test_list_parses_feeds(self, resource: FeedResource) -> None:
        feeds = await resource.list()

        assert [f.name for f in feeds] == ["n1"]
        assert feeds[0].content_type == "rss"

    async def test_list_rejects_non_array(self) -> None:
        client = HttpClient(
            "http://server.test/",
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"feeds": []})),
        )
        with pytest.raises(TransportError, match="Expected a list"):
            await FeedResource(client).list()
        await client.close()

    async def test_list_rejects_malformed_feed(self) -> None:
        client = HttpClient(
            "http://server.test/",
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[{"url": "x"}])),
        )
        with pytest.raises(TransportError, match="Malformed feed"):
            await FeedResource(client).list()
        await client.close()


# =============================================================================
# Create Tests
# =============================================================================


class TestFeedResourceCreate:
    """Tests for POST feed."""

    async def test_create_returns_stored_feed(
        self, resource: FeedResource, server: FakeFeedServer
    ) -> None:
        feed = await resource.create(FeedDraft(name="n2", url="http://x"))

        assert feed == Feed(name="n2", url="http://x", content_type="rss")
        assert json.loads(server.requests[-1].content) == {"name": "n2", "url": "http://x"}

    async def test_create_duplicate_raises_validation_error(self, resource: FeedResource) -> None:
        with pytest.raises(ValidationError, match="name already exists"):
            await resource.create(FeedDraft(name="n1", url="http://x"))


# =============================================================================
# Update Tests
# =============================================================================


class TestFeedResourceUpdate:
    """Tests for PUT feed/<name>."""

    async def test_update_sends_full_feed(
        self, resource: FeedResource, server: FakeFeedServer
    ) -> None:
        patch = Feed(name="n1", url="http://b", content_type="atom", marked_for_deletion=True)

        await resource.update("n1", patch)

        request = server.requests[-1]
        assert request.method == "PUT"
        assert json.loads(request.content)["markedForDeletion"] is True
        assert server.feeds["n1"]["url"] == "http://b"

    async def test_update_quotes_name(self, resource: FeedResource, server: FakeFeedServer) -> None:
        await resource.update("my feed", Feed(name="my feed", url="http://b"))
        assert server.requests[-1].url.raw_path == b"/feed/my%20feed"

    async def test_list_then_update_keeps_name_whitespace(
        self, resource: FeedResource, server: FakeFeedServer
    ) -> None:
        server.feeds[" n2 "] = {"name": " n2 ", "url": "http://c", "contentType": "rss"}
        feed = next(f for f in await resource.list() if f.name.strip() == "n2")

        await resource.update(feed.name, feed.model_copy(update={"url": "http://d"}))

        assert server.requests[-1].url.raw_path == b"/feed/%20n2%20"
        assert json.loads(server.requests[-1].content)["name"] == " n2 "

    async def test_update_rejected(self, resource: FeedResource) -> None:
        with pytest.raises(ValidationError, match="malformed URL"):
            await resource.update("n1", Feed(name="n1", url="ftp-ish"))


# =============================================================================
# Content URL Tests
# =============================================================================


class TestContentUrl:
    """Tests for building subscription URLs."""

    def test_content_url(self) -> None:
        resource = FeedResource(HttpClient("http://server.test/app"))
        assert resource.content_url("n1") == "http://server.test/app/content/n1"

    def test_custom_content_path(self) -> None:
        resource = FeedResource(HttpClient("http://server.test/"), content_path="/files/")
        assert resource.content_url("a/b") == "http://server.test/files/a%2Fb"
