"""RemappingCache — resolves remappings once and shares the result."""

from __future__ import annotations

import asyncio
from types import MappingProxyType

from forge_remap.infrastructure.logger import logger
from forge_remap.remappings.parser import parse_remappings
from forge_remap.remappings.source import RemappingSource
from forge_remap.remappings.types import Remappings


class RemappingCache:
    """Get-or-compute cell for the remapping table.

    The slot is empty until the first request, then holds the resolving task.
    Callers arriving while it is pending await the same task, so the source
    runs once. The cell is never cleared; with `cache_failures=False` a failed
    resolution empties the slot and the next request tries again.

    Not thread-safe: use from a single event loop.
    """

    def __init__(self, source: RemappingSource | None = None, cache_failures: bool = True) -> None:
        self._source = source or RemappingSource()
        self._cache_failures = cache_failures
        self._slot: asyncio.Task[Remappings] | None = None

    @property
    def is_resolved(self) -> bool:
        return self._slot is not None and self._slot.done()

    async def get_remappings(self) -> Remappings:
        if self._slot is None:
            self._slot = asyncio.create_task(self._resolve())
            if not self._cache_failures:
                self._slot.add_done_callback(self._forget_failure)

        # Cancelling one caller must not cancel the shared resolution
        return await asyncio.shield(self._slot)

    async def _resolve(self) -> Remappings:
        text = await self._source.read()
        remappings = parse_remappings(text)
        logger.info("Resolved remappings", count=len(remappings))
        return MappingProxyType(remappings)

    def _forget_failure(self, task: asyncio.Task[Remappings]) -> None:
        if task.cancelled() or task.exception() is not None:
            if self._slot is task:
                self._slot = None
