"""Port interfaces for the cardbridge relay.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - DiagnosticLogPort: Best-effort remote text log
   - TicketSystemPort: Log in and create cards
   - ChatNotificationPort: Post to the chat-bot webhook
   - TaskSpawnerPort: Run work detached from the request

2. **Driving Ports** (adapters/external systems call into core)
   - RelayPort: Entry point for one background workflow run
"""

from abc import ABC, abstractmethod
from collections.abc import Coroutine
from typing import Any

from .models import LoginResponse, WorkflowResult


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class DiagnosticLogPort(ABC):
    """Port for the remote diagnostic sink.

    The sink receives plain text messages. It is fire-and-forget from
    the workflow's point of view, but implementations do not swallow
    their own failures: callers decide whether to absorb them.
    """

    @abstractmethod
    async def send(self, message: str) -> None:
        """Deliver one text message to the sink.

        Raises:
            Exception: If the sink is unreachable.
        """


class TicketSystemPort(ABC):
    """Port for the ticket-tracking system.

    Implementations must not retry and must not interpret the login
    status: the core decides what a login response means.
    """

    @abstractmethod
    async def login(self) -> LoginResponse:
        """Authenticate with the configured static credentials.

        Returns:
            The response status and its set-cookie header (None if absent).

        Raises:
            Exception: On network failure. A non-2xx status is not an error.
        """

    @abstractmethod
    async def create_card(
        self, payload: dict[str, Any], session: str
    ) -> Any:
        """Submit a card and return the decoded JSON response body.

        Args:
            payload: Card body, already merged over the template.
            session: Session cookie string, possibly empty.

        Raises:
            TicketCreationError: If the ticket system answers non-2xx.
            Exception: On network or decode failure.
        """


class ChatNotificationPort(ABC):
    """Port for the chat-bot webhook that announces created cards."""

    @abstractmethod
    async def send(self, body: dict[str, Any]) -> None:
        """Post a JSON body to the chat-bot webhook.

        Raises:
            NotificationError: If the webhook answers non-2xx.
            Exception: On network failure.
        """


class TaskSpawnerPort(ABC):
    """Port for scheduling work that outlives the current request.

    The hosting runtime must keep running until every spawned task has
    finished. Spawned tasks are never cancelled.
    """

    @abstractmethod
    def spawn(self, coro: Coroutine[Any, Any, Any], name: str | None = None) -> None:
        """Schedule a coroutine without waiting for it."""


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class RelayPort(ABC):
    """Port for running the relay workflow for one inbound payload.

    Implementations live in the core (workflow.py). The dispatcher
    spawns this in the background after acknowledging the webhook.
    """

    @abstractmethod
    async def run(self, payload: Any) -> WorkflowResult:
        """Run session → card → notification for one payload.

        Stage failures are reported through the returned result and the
        diagnostic log; this method does not raise for them.
        """
