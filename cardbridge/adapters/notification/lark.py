"""Lark chat-bot notification adapter.

Implements ChatNotificationPort by posting JSON to a Lark custom-bot
webhook URL.
"""

import json
import logging
from typing import Any

import httpx

from cardbridge.core.errors import NotificationError
from cardbridge.core.ports import ChatNotificationPort

logger = logging.getLogger(__name__)


class LarkWebhookNotifier(ChatNotificationPort):
    """Posts notifications to a Lark bot webhook."""

    def __init__(self, webhook_url: str, client: httpx.AsyncClient):
        """Initialize the notifier.

        Args:
            webhook_url: Lark bot webhook receiving the notification.
            client: Shared HTTP client; the caller owns its lifecycle.
        """
        self.webhook_url = webhook_url
        self.client = client

    async def send(self, body: dict[str, Any]) -> None:
        response = await self.client.post(
            self.webhook_url,
            content=json.dumps(body, ensure_ascii=False).encode("utf-8"),
            headers={"content-type": "application/json"},
        )
        if not response.is_success:
            logger.error(
                f"Lark webhook rejected notification: {response.status_code}",
                extra={"response": response.text[:500]},
            )
            raise NotificationError("send to lark sentry bot error")
