"""Fake ChatNotificationPort implementation for testing."""

from typing import Any

from cardbridge.core.errors import NotificationError
from cardbridge.core.ports import ChatNotificationPort


class FakeChatNotificationPort(ChatNotificationPort):
    """In-memory chat webhook.

    Captures all notifications sent through this port for test assertions.
    """

    def __init__(self) -> None:
        """Initialize with empty notification history."""
        self.sent_bodies: list[dict[str, Any]] = []
        self.send_call_count = 0
        self.should_fail: bool = False

    async def send(self, body: dict[str, Any]) -> None:
        self.send_call_count += 1

        if self.should_fail:
            raise NotificationError("send to lark sentry bot error")

        self.sent_bodies.append(body)

    def get_last_body(self) -> dict[str, Any] | None:
        """Get the most recent notification body, if any."""
        if self.sent_bodies:
            return self.sent_bodies[-1]
        return None
