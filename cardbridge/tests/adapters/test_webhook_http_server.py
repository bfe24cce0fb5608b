"""Tests for the webhook HTTP server adapter."""

import pytest
from aiohttp import test_utils

from cardbridge.adapters.webhook.http_server import WebhookHTTPServer, make_webhook_app
from cardbridge.core.diagnostics import DiagnosticLogger
from cardbridge.core.dispatcher import RequestDispatcher
from cardbridge.tests.fakes import (
    FakeDiagnosticLogPort,
    FakeRelayPort,
    FakeTaskSpawner,
)


@pytest.fixture
def relay() -> FakeRelayPort:
    return FakeRelayPort()


@pytest.fixture
def spawner():
    spawner = FakeTaskSpawner()
    yield spawner
    spawner.discard()


@pytest.fixture
def sink() -> FakeDiagnosticLogPort:
    return FakeDiagnosticLogPort()


@pytest.fixture
def dispatcher(relay, spawner, sink) -> RequestDispatcher:
    return RequestDispatcher(
        relay=relay, spawner=spawner, diagnostics=DiagnosticLogger(sink)
    )


@pytest.fixture
async def client(dispatcher):
    """Serve the webhook app on an ephemeral port."""
    app = make_webhook_app(dispatcher, "/sentry")
    async with test_utils.TestClient(test_utils.TestServer(app)) as client:
        yield client


class TestWebhookRequests:
    @pytest.mark.asyncio
    async def test_valid_webhook_is_acknowledged(self, client, spawner, relay) -> None:
        resp = await client.post(
            "/sentry",
            json={"message": "err", "url": "http://x", "event": {"title": "Oops"}},
        )

        assert resp.status == 200
        assert await resp.text() == "ok"
        assert len(spawner.spawned) == 1

        await spawner.run_all()
        assert relay.payloads[0]["event"]["title"] == "Oops"

    @pytest.mark.asyncio
    async def test_get_is_rejected(self, client, spawner) -> None:
        resp = await client.get("/sentry")

        assert resp.status == 405
        assert await resp.text() == ""
        assert spawner.spawned == []

    @pytest.mark.asyncio
    async def test_wrong_content_type_is_rejected(self, client, spawner) -> None:
        resp = await client.post(
            "/sentry", data=b'{"url": "http://x"}', headers={"Content-Type": "text/plain"}
        )

        assert resp.status == 405
        assert spawner.spawned == []

    @pytest.mark.asyncio
    async def test_malformed_json_is_rejected(self, client, spawner, sink) -> None:
        resp = await client.post(
            "/sentry",
            data=b"invalid json {",
            headers={"Content-Type": "application/json"},
        )

        assert resp.status == 405
        assert await resp.text() == ""
        assert spawner.spawned == []
        assert len(sink.messages) == 2

    @pytest.mark.asyncio
    async def test_health_check(self, client) -> None:
        resp = await client.get("/health")

        assert resp.status == 200
        assert await resp.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_unknown_path_is_404(self, client) -> None:
        resp = await client.post("/elsewhere", json={})
        assert resp.status == 404


class TestWebhookHTTPServerInitialization:
    def test_defaults(self, dispatcher) -> None:
        server = WebhookHTTPServer(dispatcher=dispatcher)
        assert server.host == "0.0.0.0"
        assert server.port == 8080
        assert server.path == "/"

    def test_port_configuration(self, dispatcher) -> None:
        server = WebhookHTTPServer(dispatcher=dispatcher, port=7777, path="/hook")
        assert server.port == 7777
        assert server.path == "/hook"

    @pytest.mark.asyncio
    async def test_stop_without_start_is_safe(self, dispatcher) -> None:
        await WebhookHTTPServer(dispatcher=dispatcher).stop()

    def test_path_without_leading_slash(self, dispatcher) -> None:
        app = make_webhook_app(dispatcher, "hook")
        paths = {r.resource.canonical for r in app.router.routes()}
        assert "/hook" in paths
