"""Best-effort wrapper around the diagnostic sink."""

import json
import logging
from typing import Any

from .ports import DiagnosticLogPort

logger = logging.getLogger(__name__)


class DiagnosticLogger:
    """Sends messages to the diagnostic sink without letting it fail the caller.

    The sink port itself propagates network errors; this wrapper is the
    place where they are absorbed and recorded locally instead.
    """

    def __init__(self, sink: DiagnosticLogPort):
        self.sink = sink

    async def emit(self, message: str) -> bool:
        """Send a text message. Returns False if the sink failed."""
        try:
            await self.sink.send(message)
            return True
        except Exception as e:
            logger.warning(
                f"Diagnostic sink unavailable: {e}",
                extra={"diagnostic_message": message[:200]},
            )
            return False

    async def emit_json(self, document: dict[str, Any]) -> bool:
        """Serialize a document and send it as text."""
        return await self.emit(json.dumps(document, ensure_ascii=False, default=str))
