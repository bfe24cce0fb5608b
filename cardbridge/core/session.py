"""Session provider.

Logs in to the ticket system and hands back whatever session cookie it
returned. Login problems degrade to an empty session rather than
stopping the workflow.
"""

import logging

from .diagnostics import DiagnosticLogger
from .models import SessionResult
from .ports import TicketSystemPort

logger = logging.getLogger(__name__)


class SessionProvider:
    """Obtains a fresh ticket-system session for each workflow run."""

    def __init__(self, tickets: TicketSystemPort, diagnostics: DiagnosticLogger):
        self.tickets = tickets
        self.diagnostics = diagnostics

    async def acquire(self) -> SessionResult:
        """Log in and return the session cookie.

        The login status is only reported, never checked: a failed login
        that still sets a cookie yields that cookie.

        Returns:
            SessionResult whose token is "" when login raised or no
            set-cookie header came back.
        """
        try:
            response = await self.tickets.login()
        except Exception as e:
            logger.warning(f"Ticket system login failed: {e}")
            await self.diagnostics.emit(str(e))
            return SessionResult(token="", error=str(e))

        await self.diagnostics.emit(f"login result, {response.status_code}")
        logger.info(
            "Ticket system login completed",
            extra={
                "status_code": response.status_code,
                "has_cookie": bool(response.set_cookie),
            },
        )
        return SessionResult(
            token=response.set_cookie or "",
            status_code=response.status_code,
        )
