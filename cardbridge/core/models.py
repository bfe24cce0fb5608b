"""Domain models for the cardbridge relay.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import PayloadShapeError


def is_blank(value: Any) -> bool:
    """Return True for None, empty strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def as_text(value: Any) -> str:
    """Render a JSON value as text: strings verbatim, anything else as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


@dataclass(frozen=True)
class InboundEvent:
    """An error event delivered by the monitoring webhook.

    The payload shape is assumed rather than enforced: every field is
    optional and absence is represented as None. The raw mapping is kept
    so the notifier can forward everything the source sent.
    """

    message: str | None
    url: str | None
    title: Any
    raw: Mapping[str, Any] | MappingProxyType[str, Any]  # converted to proxy in __post_init__

    def __post_init__(self) -> None:
        """Convert raw dict to read-only proxy."""
        if isinstance(self.raw, dict):
            object.__setattr__(self, "raw", MappingProxyType(self.raw))

    @classmethod
    def from_payload(cls, payload: Any) -> "InboundEvent":
        """Build an event from a decoded JSON payload.

        Raises:
            PayloadShapeError: If the payload is not a JSON object.
        """
        if not isinstance(payload, Mapping):
            raise PayloadShapeError(
                f"expected a JSON object, got {type(payload).__name__}"
            )

        event = payload.get("event")
        title = event.get("title") if isinstance(event, Mapping) else None

        return cls(
            message=payload.get("message"),
            url=payload.get("url"),
            title=title,
            raw=dict(payload),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a deep, mutable copy of the raw payload."""
        return copy.deepcopy(dict(self.raw))


@dataclass(frozen=True)
class TicketPayload:
    """Card body submitted to the ticket system.

    Invariant: name is never empty.
    """

    name: str
    desc: str | None
    desc_html: str
    template: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate payload invariants on creation."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("name must be a non-empty string")

    def to_dict(self) -> dict[str, Any]:
        """Merge per-request fields over the template.

        desc is left out, even over a template value, when the event had
        no url.
        """
        body = copy.deepcopy(dict(self.template))
        body["name"] = self.name
        body["desc"] = self.desc
        if self.desc is None:
            del body["desc"]
        body["descHtml"] = self.desc_html
        return body


@dataclass(frozen=True)
class CreatedTicket:
    """A card created in the ticket system."""

    id: str  # internal id, used for the share link
    code: str  # display code, e.g. "C7"

    @classmethod
    def from_response(cls, data: Any) -> "CreatedTicket":
        """Extract the created card from a ticket-system response body.

        Raises:
            ValueError: If the response lacks resultValue.id or resultValue.code.
        """
        result = data.get("resultValue") if isinstance(data, Mapping) else None
        if not isinstance(result, Mapping):
            raise ValueError("response has no resultValue object")
        if result.get("id") is None or result.get("code") is None:
            raise ValueError("resultValue is missing id or code")
        return cls(id=str(result["id"]), code=str(result["code"]))

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "code": self.code}


@dataclass(frozen=True)
class LoginResponse:
    """What the session provider needs from a login call."""

    status_code: int
    set_cookie: str | None


@dataclass(frozen=True)
class SessionResult:
    """Outcome of the session stage.

    An empty token means authentication failed or was unavailable; the
    workflow carries on with it regardless.
    """

    token: str
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of the notification stage."""

    body: Mapping[str, Any] | None = None
    error: str | None = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return not self.skipped and self.error is None


@dataclass(frozen=True)
class TicketResult:
    """Outcome of the card creation stage, including the notification it triggers."""

    payload: TicketPayload | None = None
    ticket: CreatedTicket | None = None
    error: str | None = None
    notification: NotificationResult = field(
        default_factory=lambda: NotificationResult(skipped=True)
    )

    @property
    def ok(self) -> bool:
        return self.ticket is not None and self.error is None


@dataclass(frozen=True)
class WorkflowResult:
    """Summary of one background workflow run."""

    session: SessionResult
    ticket: TicketResult

    @property
    def notification(self) -> NotificationResult:
        return self.ticket.notification


@dataclass(frozen=True)
class DispatchResponse:
    """Immediate answer to the inbound webhook request."""

    status: int
    body: str = ""
    accepted: bool = False
