"""Composition root for the cardbridge relay.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Webhook server lifecycle
"""

import asyncio
import logging
import signal
import sys
from dataclasses import dataclass
from http.cookiejar import CookieJar, DefaultCookiePolicy

import httpx

from cardbridge.adapters.logsink.http import HttpDiagnosticLog
from cardbridge.adapters.notification.lark import LarkWebhookNotifier
from cardbridge.adapters.scheduler.background import BackgroundTaskSpawner
from cardbridge.adapters.ticketing.zhiwei import ZhiweiTicketAdapter
from cardbridge.adapters.webhook.http_server import WebhookHTTPServer
from cardbridge.config import Settings, load_card_template, load_settings
from cardbridge.core.cards import CardCreator
from cardbridge.core.diagnostics import DiagnosticLogger
from cardbridge.core.dispatcher import RequestDispatcher
from cardbridge.core.notifier import Notifier
from cardbridge.core.session import SessionProvider
from cardbridge.core.workflow import RelayWorkflow


def configure_logging(log_level: str, log_format: str, debug: bool = False) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
        debug: Force DEBUG level regardless of log_level.
    """
    level = logging.DEBUG if debug else getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_http_client(
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the outbound HTTP client shared by all adapters.

    The client's cookie jar refuses every cookie. Each workflow passes
    its own session explicitly, so a login's Set-Cookie must never be
    replayed on another workflow's requests.

    Args:
        timeout: Timeout for outbound calls; None means no timeout.
        transport: Optional transport override (tests use MockTransport).
    """
    jar = CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))
    return httpx.AsyncClient(timeout=timeout, cookies=jar, transport=transport)


@dataclass
class Application:
    """Everything bootstrap wires together, kept for shutdown."""

    client: httpx.AsyncClient
    spawner: BackgroundTaskSpawner
    dispatcher: RequestDispatcher
    server: WebhookHTTPServer


def build_application(
    settings: Settings, client: httpx.AsyncClient | None = None
) -> Application:
    """Instantiate adapters and core services from settings.

    Args:
        settings: Loaded application settings.
        client: Optional HTTP client to use for every outbound call,
            normally made by build_http_client.

    Returns:
        The wired Application (server not started).
    """
    if client is None:
        client = build_http_client(timeout=settings.outbound_timeout_seconds)

    # Adapters
    sink = HttpDiagnosticLog(endpoint_url=settings.log_sink_url, client=client)
    tickets = ZhiweiTicketAdapter(
        domain=settings.zhiwei_domain,
        username=settings.zhiwei_username,
        password=settings.zhiwei_password,
        view_id=settings.zhiwei_view_id,
        client=client,
    )
    chat = LarkWebhookNotifier(webhook_url=settings.lark_webhook_url, client=client)
    spawner = BackgroundTaskSpawner()

    # Core services
    diagnostics = DiagnosticLogger(sink)
    notifier = Notifier(
        chat=chat,
        diagnostics=diagnostics,
        ticket_domain=tickets.domain,
    )
    cards = CardCreator(
        tickets=tickets,
        notifier=notifier,
        diagnostics=diagnostics,
        template=load_card_template(settings.card_template_path),
        default_name=settings.default_card_name,
    )
    workflow = RelayWorkflow(
        sessions=SessionProvider(tickets=tickets, diagnostics=diagnostics),
        cards=cards,
        diagnostics=diagnostics,
    )
    dispatcher = RequestDispatcher(
        relay=workflow,
        spawner=spawner,
        diagnostics=diagnostics,
        invalid_json_status=settings.invalid_json_status,
    )

    server = WebhookHTTPServer(
        dispatcher=dispatcher,
        host=settings.webhook_host,
        port=settings.webhook_port,
        path=settings.webhook_path,
    )
    return Application(
        client=client, spawner=spawner, dispatcher=dispatcher, server=server
    )


async def shutdown(app: Application) -> None:
    """Stop accepting requests, let background relays finish, close clients."""
    await app.server.stop()
    await app.spawner.drain()
    await app.client.aclose()


def _install_signal_handlers(stop_event: asyncio.Event) -> None:
    """Set the stop event on SIGINT/SIGTERM where the platform allows it."""
    logger = logging.getLogger(__name__)
    try:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, stop_event.set)
    except NotImplementedError:
        # Signal handlers not available on Windows
        logger.debug("Signal handlers not available on this platform")


async def bootstrap() -> None:
    """Load configuration, wire adapters, and serve webhooks until signalled.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and core services
    4. Serve until SIGINT/SIGTERM
    5. Drain background relays and release resources
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format, settings.debug)
    logger = logging.getLogger(__name__)
    logger.info("Loading cardbridge relay...")

    app = build_application(settings)

    stop_event = asyncio.Event()
    _install_signal_handlers(stop_event)

    try:
        await app.server.start()
        await stop_event.wait()
        logger.info("Shutdown signal received")
    finally:
        await shutdown(app)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
