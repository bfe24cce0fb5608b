"""Fake DiagnosticLogPort implementation for testing."""

from cardbridge.core.ports import DiagnosticLogPort


class FakeDiagnosticLogPort(DiagnosticLogPort):
    """In-memory diagnostic sink.

    Captures every message for assertions and can be told to fail.
    """

    def __init__(self) -> None:
        """Initialize with empty message history."""
        self.messages: list[str] = []
        self.send_call_count = 0
        self.should_fail: bool = False
        self.fail_message: str = "Sink unreachable"

    async def send(self, message: str) -> None:
        self.send_call_count += 1

        if self.should_fail:
            raise ConnectionError(self.fail_message)

        self.messages.append(message)

    def set_should_fail(self, should_fail: bool, message: str = "Sink unreachable") -> None:
        """Configure the sink to fail on subsequent sends."""
        self.should_fail = should_fail
        self.fail_message = message

    def contains(self, fragment: str) -> bool:
        """Whether any captured message contains the fragment."""
        return any(fragment in m for m in self.messages)
