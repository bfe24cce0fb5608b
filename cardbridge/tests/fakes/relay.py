"""Fake RelayPort and TaskSpawnerPort implementations for testing."""

from collections.abc import Coroutine
from typing import Any

from cardbridge.core.models import SessionResult, TicketResult, WorkflowResult
from cardbridge.core.ports import RelayPort, TaskSpawnerPort


class FakeRelayPort(RelayPort):
    """Records payloads instead of relaying them."""

    def __init__(self) -> None:
        self.payloads: list[Any] = []

    async def run(self, payload: Any) -> WorkflowResult:
        self.payloads.append(payload)
        return WorkflowResult(
            session=SessionResult(token=""),
            ticket=TicketResult(error="not relayed"),
        )


class FakeTaskSpawner(TaskSpawnerPort):
    """Holds spawned coroutines until the test runs them.

    Nothing executes at spawn time, which lets tests observe that the
    dispatcher answers before any background work happens.
    """

    def __init__(self) -> None:
        self.spawned: list[tuple[Coroutine[Any, Any, Any], str | None]] = []

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str | None = None) -> None:
        self.spawned.append((coro, name))

    async def run_all(self) -> list[Any]:
        """Await every held coroutine in spawn order."""
        results = []
        while self.spawned:
            coro, _ = self.spawned.pop(0)
            results.append(await coro)
        return results

    def discard(self) -> None:
        """Close held coroutines without running them."""
        for coro, _ in self.spawned:
            coro.close()
        self.spawned.clear()
