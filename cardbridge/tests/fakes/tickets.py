"""Fake TicketSystemPort implementation for testing."""

from typing import Any

from cardbridge.core.errors import TicketCreationError
from cardbridge.core.models import LoginResponse
from cardbridge.core.ports import TicketSystemPort


class FakeTicketSystemPort(TicketSystemPort):
    """In-memory ticket system.

    Returns canned login and card responses and records every card
    submission with the session it was sent with.
    """

    def __init__(self) -> None:
        """Initialize with a successful login and a card C7/X42."""
        self.login_response = LoginResponse(status_code=200, set_cookie="JSESSIONID=abc")
        self.card_response: Any = {"resultValue": {"id": "X42", "code": "C7"}}
        self.login_call_count = 0
        self.created_cards: list[tuple[dict[str, Any], str]] = []
        self.login_error: Exception | None = None
        self.create_error: Exception | None = None

    async def login(self) -> LoginResponse:
        self.login_call_count += 1
        if self.login_error is not None:
            raise self.login_error
        return self.login_response

    async def create_card(self, payload: dict[str, Any], session: str) -> Any:
        self.created_cards.append((payload, session))
        if self.create_error is not None:
            raise self.create_error
        return self.card_response

    def fail_login(self, error: Exception | None = None) -> None:
        """Make login raise."""
        self.login_error = error or ConnectionError("login unreachable")

    def reject_cards(self, reason: str = "Internal Server Error") -> None:
        """Make card creation fail the way a non-ok response does."""
        self.create_error = TicketCreationError(f"failed to create card: {reason}")

    def get_last_card(self) -> tuple[dict[str, Any], str] | None:
        """Get the most recent card submission, if any."""
        if self.created_cards:
            return self.created_cards[-1]
        return None
