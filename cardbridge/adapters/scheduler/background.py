"""Background task spawner adapter.

Implements TaskSpawnerPort on the running asyncio loop. Spawned tasks
are tracked until they finish so the process can wait for them on
shutdown instead of dropping in-flight relays.
"""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from cardbridge.core.ports import TaskSpawnerPort

logger = logging.getLogger(__name__)


class BackgroundTaskSpawner(TaskSpawnerPort):
    """Runs coroutines detached from the request that spawned them."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()
        self.spawned_count = 0

    @property
    def pending(self) -> int:
        """Number of spawned tasks that have not finished yet."""
        return len(self._tasks)

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str | None = None) -> None:
        """Schedule the coroutine on the running loop.

        Must be called from within the event loop.
        """
        self.spawned_count += 1
        task = asyncio.create_task(coro, name=name)
        # Strong reference; the loop only keeps weak ones.
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning(f"Background task {task.get_name()} was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                f"Background task {task.get_name()} failed: {exc}",
                exc_info=exc,
            )

    async def drain(self) -> None:
        """Wait until every spawned task, including ones spawned meanwhile, finishes."""
        while self._tasks:
            logger.info(f"Waiting for {len(self._tasks)} background task(s) to finish")
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
