"""
Per-event in-process lock registry

Bookings for the same event are admitted one at a time; bookings for different
events never share a lock. Locks are created on first use and dropped as soon as
no task holds or waits on them, so the map only ever contains events with
in-flight bookings.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from src.platform.logging.loguru_io import Logger


class EventLockRegistry:
    def __init__(self) -> None:
        self._locks: dict[int, asyncio.Lock] = {}
        self._refcounts: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._locks

    def waiters(self, *, event_id: int) -> int:
        """Tasks holding or queued on the event's lock."""
        return self._refcounts.get(event_id, 0)

    @asynccontextmanager
    async def hold(self, *, event_id: int) -> AsyncIterator[None]:
        # No await between lookup and refcount bump: both happen in one step of the loop
        lock = self._locks.get(event_id)
        if lock is None:
            lock = self._locks[event_id] = asyncio.Lock()
        self._refcounts[event_id] = self._refcounts.get(event_id, 0) + 1

        if lock.locked():
            Logger.base.debug(
                f'⏳ [LOCK] event={event_id} busy, queued behind {self._refcounts[event_id] - 1}'
            )
        try:
            async with lock:
                yield
        finally:
            self._release(event_id)

    def _release(self, event_id: int) -> None:
        remaining = self._refcounts[event_id] - 1
        if remaining:
            self._refcounts[event_id] = remaining
            return
        del self._refcounts[event_id]
        del self._locks[event_id]
