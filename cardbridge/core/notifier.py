"""Notifier.

Forwards the original monitoring payload to the chat-bot webhook,
rewritten so the title carries the card code and the url points at the
created card.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .diagnostics import DiagnosticLogger
from .models import CreatedTicket, InboundEvent, NotificationResult, as_text
from .ports import ChatNotificationPort

logger = logging.getLogger(__name__)

SHARE_LINK_TEMPLATE = "{domain}/#/?viewId=whole&vuId={card_id}"


def build_share_link(domain: str, card_id: str) -> str:
    """Return the link a human follows to open a card."""
    return SHARE_LINK_TEMPLATE.format(domain=domain, card_id=card_id)


def build_notification_body(
    ticket: CreatedTicket, event: InboundEvent, share_link: str
) -> dict[str, Any]:
    """Return a copy of the inbound payload that references the card.

    The nested event title gets a "#<code> " prefix when it is present;
    a missing title is left missing. A title that is not a string is
    prefixed in its JSON form. The top-level url is always replaced.
    """
    body = event.to_dict()

    nested = body.get("event")
    if isinstance(nested, Mapping) and "title" in nested:
        nested = dict(nested)
        nested["title"] = f"#{ticket.code} {as_text(nested['title'])}"
        body["event"] = nested

    body["url"] = share_link
    return body


class Notifier:
    """Sends the rewritten payload to the chat bot."""

    def __init__(
        self,
        chat: ChatNotificationPort,
        diagnostics: DiagnosticLogger,
        ticket_domain: str,
    ):
        self.chat = chat
        self.diagnostics = diagnostics
        self.ticket_domain = ticket_domain

    async def notify(
        self, ticket: CreatedTicket, event: InboundEvent
    ) -> NotificationResult:
        """Post the notification. Failures are logged and returned, never raised."""
        body: dict[str, Any] | None = None
        try:
            body = build_notification_body(
                ticket, event, build_share_link(self.ticket_domain, ticket.id)
            )
            await self.chat.send(body)
        except Exception as e:
            logger.warning(
                f"Chat notification failed: {e}",
                extra={"card_id": ticket.id, "card_code": ticket.code},
            )
            await self.diagnostics.emit(f"send to lark error: {e}")
            return NotificationResult(body=body, error=str(e))

        logger.info(
            "Chat notification sent",
            extra={"card_id": ticket.id, "card_code": ticket.code},
        )
        return NotificationResult(body=body)
