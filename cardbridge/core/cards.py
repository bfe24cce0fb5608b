"""Card creator.

Turns an inbound error event into a ticket-system card and, once the card
exists, hands it to the notifier.
"""

import asyncio
import logging
from collections.abc import Mapping
from html import escape
from typing import Any

from .diagnostics import DiagnosticLogger
from .models import (
    CreatedTicket,
    InboundEvent,
    NotificationResult,
    TicketPayload,
    TicketResult,
    as_text,
    is_blank,
)
from .notifier import Notifier
from .ports import TicketSystemPort

logger = logging.getLogger(__name__)

DEFAULT_CARD_NAME = "sentry report error"


def build_description_html(url: Any) -> str:
    """Embed the event url as a clickable link."""
    text = escape("" if url is None else str(url))
    return f'<p>sentry: <a href="{text}">{text}</a></p>'


def build_ticket_payload(
    template: Mapping[str, Any],
    event: InboundEvent,
    default_name: str = DEFAULT_CARD_NAME,
) -> TicketPayload:
    """Merge per-event fields over the card template.

    The card name is the event title, or default_name when the title is
    None, an empty string or an empty collection.
    """
    name = default_name if is_blank(event.title) else as_text(event.title)

    return TicketPayload(
        name=name,
        desc=event.url,
        desc_html=build_description_html(event.url),
        template=template,
    )


class CardCreator:
    """Creates one card per inbound event."""

    def __init__(
        self,
        tickets: TicketSystemPort,
        notifier: Notifier,
        diagnostics: DiagnosticLogger,
        template: Mapping[str, Any] | None = None,
        default_name: str = DEFAULT_CARD_NAME,
    ):
        """Initialize the card creator.

        Args:
            tickets: Ticket system adapter used to submit cards.
            notifier: Notifier run after a card is created.
            diagnostics: Best-effort diagnostic sink.
            template: Static card fields every submission starts from.
            default_name: Card name used when the event has no title.
        """
        if not default_name:
            raise ValueError("default_name must be a non-empty string")
        self.tickets = tickets
        self.notifier = notifier
        self.diagnostics = diagnostics
        self.template = dict(template or {})
        self.default_name = default_name

    async def create(self, payload: Any, session: str) -> TicketResult:
        """Create a card for the payload, then notify.

        Any failure before the card exists ends the run for this event:
        it is logged and returned, and no notification is sent.
        """
        ticket_payload: TicketPayload | None = None
        try:
            event = InboundEvent.from_payload(payload)
            ticket_payload = build_ticket_payload(
                self.template, event, self.default_name
            )
            body = ticket_payload.to_dict()

            await self.diagnostics.emit_json(
                {"message": "create card", "payload": body, "sentryBody": payload}
            )

            response = await self.tickets.create_card(body, session)
            ticket = CreatedTicket.from_response(response)
        except Exception as e:
            logger.warning(f"Card creation failed: {e}")
            await self.diagnostics.emit(f"create card error: {e}")
            return TicketResult(payload=ticket_payload, error=str(e))

        logger.info(
            f"Created card #{ticket.code}",
            extra={"card_id": ticket.id, "card_code": ticket.code},
        )

        # Settle both; neither outcome affects the other.
        _, notified = await asyncio.gather(
            self.diagnostics.emit_json(
                {"message": "card detail", "cardInfo": ticket.to_dict()}
            ),
            self.notifier.notify(ticket, event),
            return_exceptions=True,
        )
        if isinstance(notified, BaseException):
            logger.error(f"Notifier raised unexpectedly: {notified}")
            notified = NotificationResult(error=str(notified))

        return TicketResult(
            payload=ticket_payload, ticket=ticket, notification=notified
        )
