"""Zhiwei ticket system adapter.

Implements TicketSystemPort against the Zhiwei REST API: a credential
login that answers with a session cookie, and card creation inside a
fixed board view.
"""

import json
import logging
from typing import Any

import httpx

from cardbridge.core.errors import TicketCreationError
from cardbridge.core.models import LoginResponse
from cardbridge.core.ports import TicketSystemPort

logger = logging.getLogger(__name__)

LOGIN_HEADERS = {
    "accept": "application/json",
    "code": "",
    "content-type": "application/json;charset=UTF-8",
    "flag": "json",
}


class ZhiweiTicketAdapter(TicketSystemPort):
    """Logs in to Zhiwei and creates cards in one view."""

    def __init__(
        self,
        domain: str,
        username: str,
        password: str,
        view_id: str,
        client: httpx.AsyncClient,
    ):
        """Initialize the Zhiwei adapter.

        Args:
            domain: Base URL of the Zhiwei deployment (e.g. https://tkb.example.com).
            username: Login user name.
            password: Login password.
            view_id: Board view that receives new cards.
            client: Shared HTTP client; the caller owns its lifecycle.
        """
        self.domain = domain.rstrip("/")
        self.username = username
        self.password = password
        self.view_id = view_id
        self.client = client

    @property
    def login_url(self) -> str:
        return f"{self.domain}/login"

    @property
    def create_card_url(self) -> str:
        return f"{self.domain}/api/v1/view/{self.view_id}/vu"

    async def login(self) -> LoginResponse:
        """Post the configured credentials and report the outcome."""
        response = await self.client.post(
            self.login_url,
            content=json.dumps(
                {"username": self.username, "password": self.password}
            ),
            headers=LOGIN_HEADERS,
        )
        return LoginResponse(
            status_code=response.status_code,
            set_cookie=response.headers.get("set-cookie"),
        )

    async def create_card(self, payload: dict[str, Any], session: str) -> Any:
        """Create a card and return the decoded response body."""
        response = await self.client.post(
            self.create_card_url,
            content=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            headers={
                "accept": "application/json",
                "content-type": "application/json",
                "Cookie": session,
            },
        )
        if not response.is_success:
            logger.error(
                f"Failed to create card: {response.status_code}",
                extra={"response": response.text[:500]},
            )
            raise TicketCreationError(
                f"failed to create card: {response.reason_phrase}"
            )
        return response.json()
