"""Relay workflow: session → card → notification for one inbound payload."""

import logging
from typing import Any

from .cards import CardCreator
from .diagnostics import DiagnosticLogger
from .models import WorkflowResult
from .ports import RelayPort
from .session import SessionProvider

logger = logging.getLogger(__name__)


class RelayWorkflow(RelayPort):
    """Runs the three relay stages strictly in sequence.

    Each stage absorbs its own failures, so a run always completes with a
    WorkflowResult describing what happened.
    """

    def __init__(
        self,
        sessions: SessionProvider,
        cards: CardCreator,
        diagnostics: DiagnosticLogger,
    ):
        self.sessions = sessions
        self.cards = cards
        self.diagnostics = diagnostics

    async def run(self, payload: Any) -> WorkflowResult:
        await self.diagnostics.emit("worker work flow start")

        session = await self.sessions.acquire()
        ticket = await self.cards.create(payload, session.token)

        result = WorkflowResult(session=session, ticket=ticket)
        logger.info(
            "Relay workflow finished",
            extra={
                "session_ok": session.ok,
                "card_created": ticket.ok,
                "notified": result.notification.ok,
            },
        )
        return result
