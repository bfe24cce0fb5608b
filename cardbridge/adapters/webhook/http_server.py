"""HTTP server adapter for the inbound monitoring webhook.

Provides an aiohttp application that forwards every request on the
webhook path to the RequestDispatcher and turns its DispatchResponse into
an HTTP response. Method and content-type checks live in the dispatcher,
so the route accepts any method.
"""

import logging

from aiohttp import web

from cardbridge.core.dispatcher import RequestDispatcher

logger = logging.getLogger(__name__)


def make_webhook_app(dispatcher: RequestDispatcher, path: str = "/") -> web.Application:
    """Build the aiohttp application serving the webhook and health check.

    Args:
        dispatcher: Dispatcher deciding the answer for each request.
        path: Route receiving monitoring webhooks.

    Returns:
        A configured aiohttp Application.
    """
    if not path.startswith("/"):
        path = f"/{path}"

    async def handle_webhook(request: web.Request) -> web.Response:
        body = await request.read()
        result = await dispatcher.dispatch(
            request.method,
            request.headers.get("Content-Type"),
            body,
        )
        logger.debug(
            f"HTTP {request.remote}: {request.method} {request.path} -> {result.status}"
        )
        if result.body:
            return web.Response(status=result.status, text=result.body)
        return web.Response(status=result.status)

    async def handle_health(request: web.Request) -> web.Response:
        return web.json_response({"status": "healthy"})

    app = web.Application()
    app.router.add_get("/health", handle_health)
    app.router.add_route("*", path, handle_webhook)
    return app


class WebhookHTTPServer:
    """Webhook HTTP server adapter.

    Serves the monitoring webhook endpoint until stopped.
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        host: str = "0.0.0.0",
        port: int = 8080,
        path: str = "/",
    ):
        """Initialize the HTTP server.

        Args:
            dispatcher: RequestDispatcher instance to handle requests.
            host: Host to listen on (default 0.0.0.0).
            port: Port to listen on (default 8080).
            path: Route receiving monitoring webhooks (default /).
        """
        self.dispatcher = dispatcher
        self.host = host
        self.port = port
        self.path = path
        self._runner: web.AppRunner | None = None

    async def start(self) -> None:
        """Start accepting requests."""
        logger.info(f"Starting webhook HTTP server on {self.host}:{self.port}{self.path}")
        app = make_webhook_app(self.dispatcher, self.path)
        self._runner = web.AppRunner(app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        logger.info("Webhook HTTP server started")

    async def stop(self) -> None:
        """Stop accepting requests. Background work is not awaited here."""
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
        logger.info("Webhook HTTP server stopped")
