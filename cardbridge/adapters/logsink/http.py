"""HTTP diagnostic sink adapter.

Implements DiagnosticLogPort by posting each message as a raw text body
to a collection endpoint. No retry, batching or backpressure.
"""

import logging

import httpx

from cardbridge.core.ports import DiagnosticLogPort

logger = logging.getLogger(__name__)


class HttpDiagnosticLog(DiagnosticLogPort):
    """Posts diagnostic messages to a remote collection endpoint."""

    def __init__(self, endpoint_url: str, client: httpx.AsyncClient):
        """Initialize the sink.

        Args:
            endpoint_url: Collection endpoint receiving the text bodies.
            client: Shared HTTP client; the caller owns its lifecycle.
        """
        self.endpoint_url = endpoint_url
        self.client = client

    async def send(self, message: str) -> None:
        """Post the message. Network errors propagate to the caller."""
        logger.debug(f"diagnostic: {message}")
        await self.client.post(
            self.endpoint_url,
            content=message.encode("utf-8"),
            headers={"content-type": "text/plain;charset=UTF-8"},
        )
