"""Exceptions raised at the boundaries of the relay workflow.

Core stages catch these (and anything else an adapter raises) at their
own boundary and turn them into stage results; nothing here is ever
surfaced to the webhook caller.
"""


class RelayError(Exception):
    """Base class for relay failures."""


class PayloadShapeError(RelayError):
    """The inbound payload cannot be read as an error event."""


class TicketCreationError(RelayError):
    """The ticket system refused or failed to create a card."""


class NotificationError(RelayError):
    """The chat-bot webhook did not accept the notification."""


__all__ = [
    "NotificationError",
    "PayloadShapeError",
    "RelayError",
    "TicketCreationError",
]
