"""Request dispatcher.

Decides how to answer an inbound webhook and, when the request is
acceptable, hands the payload to the relay workflow in the background.
The dispatcher knows nothing about the HTTP framework in front of it; the
web adapter passes in the method, content type and raw body.
"""

import json
import logging

from .diagnostics import DiagnosticLogger
from .models import DispatchResponse
from .ports import RelayPort, TaskSpawnerPort

logger = logging.getLogger(__name__)

ACCEPTED_METHOD = "POST"
JSON_CONTENT_TYPE = "application/json"
REJECTED_STATUS = 405


class RequestDispatcher:
    """Validates webhook requests and spawns the relay workflow."""

    def __init__(
        self,
        relay: RelayPort,
        spawner: TaskSpawnerPort,
        diagnostics: DiagnosticLogger,
        invalid_json_status: int = REJECTED_STATUS,
    ):
        """Initialize the dispatcher.

        Args:
            relay: Workflow run for each accepted payload.
            spawner: Runs the workflow detached from the request.
            diagnostics: Best-effort diagnostic sink.
            invalid_json_status: Status returned when the body is not JSON.
                Defaults to the same 405 used for rejected requests.
        """
        self.relay = relay
        self.spawner = spawner
        self.diagnostics = diagnostics
        self.invalid_json_status = invalid_json_status

    @staticmethod
    def is_acceptable(method: str, content_type: str | None) -> bool:
        """POST with a content type containing the literal application/json."""
        return method == ACCEPTED_METHOD and JSON_CONTENT_TYPE in (content_type or "")

    async def dispatch(
        self, method: str, content_type: str | None, body: bytes | str
    ) -> DispatchResponse:
        """Answer one inbound request.

        Returns:
            200 "ok" once the workflow is spawned; an empty-bodied 405 for
            any other method or content type; invalid_json_status when the
            body does not decode.
        """
        await self.diagnostics.emit("request coming")

        if not self.is_acceptable(method, content_type):
            logger.info(
                "Rejected webhook request",
                extra={"method": method, "content_type": content_type},
            )
            return DispatchResponse(status=REJECTED_STATUS)

        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.warning(f"Webhook body is not valid JSON: {e}")
            await self.diagnostics.emit(str(e))
            return DispatchResponse(status=self.invalid_json_status)

        self.spawner.spawn(self.relay.run(payload), name="relay-workflow")
        return DispatchResponse(status=200, body="ok", accepted=True)
