"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeDiagnosticLogPort: Captured diagnostic messages
- FakeTicketSystemPort: Canned login and card responses
- FakeChatNotificationPort: Captured notifications for assertion
- FakeTaskSpawner: Captured (or immediately run) background work
- FakeRelayPort: Captured workflow payloads
"""

from .chat import FakeChatNotificationPort
from .diagnostics import FakeDiagnosticLogPort
from .relay import FakeRelayPort, FakeTaskSpawner
from .tickets import FakeTicketSystemPort

__all__ = [
    "FakeChatNotificationPort",
    "FakeDiagnosticLogPort",
    "FakeRelayPort",
    "FakeTaskSpawner",
    "FakeTicketSystemPort",
]
