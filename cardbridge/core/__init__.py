"""Core domain logic for the cardbridge relay.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import (
    NotificationError,
    PayloadShapeError,
    RelayError,
    TicketCreationError,
)
from .models import (
    CreatedTicket,
    DispatchResponse,
    InboundEvent,
    LoginResponse,
    NotificationResult,
    SessionResult,
    TicketPayload,
    TicketResult,
    WorkflowResult,
)

__all__ = [
    "CreatedTicket",
    "DispatchResponse",
    "InboundEvent",
    "LoginResponse",
    "NotificationError",
    "NotificationResult",
    "PayloadShapeError",
    "RelayError",
    "SessionResult",
    "TicketCreationError",
    "TicketPayload",
    "TicketResult",
    "WorkflowResult",
]
