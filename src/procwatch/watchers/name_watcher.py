"""Watch every process sharing a name, fanning out one pid watcher per match."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import FrozenSet, Optional, Set

from ..console import console_out
from ..errors import ProcessQueryError
from ..progress import IndicatorFactory, ProgressIndicator
from .pid_watcher import DEFAULT_POLL_INTERVAL_SECONDS, PidWatcher
from .process_table import ProcessLookup, ProcessTable
from .types import WatchResult

logger = logging.getLogger(__name__)


class NameWatcher:
    """Re-resolves matching pids every poll until none are left.

    Each newly seen pid gets a silent ``PidWatcher`` running as a detached
    task. Task handles are kept only until the task finishes; a pid is not
    given a second watcher while its first one is still running.
    """

    def __init__(
        self,
        *,
        lookup: Optional[ProcessLookup] = None,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        indicator_factory: Optional[IndicatorFactory] = None,
        pid_watcher: Optional[PidWatcher] = None,
    ) -> None:
        self._lookup = lookup or ProcessTable()
        self._poll_interval_seconds = poll_interval_seconds
        self._indicator_factory = indicator_factory or ProgressIndicator
        self._pid_watcher = pid_watcher or PidWatcher(
            lookup=self._lookup, poll_interval_seconds=poll_interval_seconds
        )
        self._tasks: Set[asyncio.Task] = set()
        self._watched_pids: Set[int] = set()

    @property
    def watched_pids(self) -> FrozenSet[int]:
        return frozenset(self._watched_pids)

    @property
    def pending_tasks(self) -> FrozenSet[asyncio.Task]:
        return frozenset(self._tasks)

    def spawn_pid_watcher(self, pid: int) -> asyncio.Task:
        """Start a silent watcher for ``pid`` and return its detached task."""
        task = asyncio.create_task(self._pid_watcher.watch(pid, silent=True), name=f"pid-watcher-{pid}")
        self._tasks.add(task)
        self._watched_pids.add(pid)
        task.add_done_callback(partial(self._on_pid_watcher_done, pid))
        return task

    def _on_pid_watcher_done(self, pid: int, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        self._watched_pids.discard(pid)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Watcher for PID %s failed", pid, exc_info=exc)

    async def watch(self, name: str) -> WatchResult:
        indicator = self._indicator_factory(f"Monitoring processes named: {name}")
        indicator.start()
        try:
            result = await self._poll_until_gone(name)
        finally:
            indicator.stop()

        if result.is_error:
            console_out("\nError retrieving process list.")
        else:
            console_out(f"\nAll processes named '{name}' have terminated.")
        return result

    async def _poll_until_gone(self, name: str) -> WatchResult:
        polls = 0
        spawned = 0
        while True:
            polls += 1
            try:
                pids = await asyncio.to_thread(self._lookup.pids_by_name, name)
            except ProcessQueryError as exc:
                logger.error("Error retrieving process list: %s", exc)
                return WatchResult.error(str(exc), polls=polls, spawned_watchers=spawned)

            if not pids:
                return WatchResult.terminated(polls=polls, spawned_watchers=spawned)

            for pid in pids:
                if pid in self._watched_pids:
                    continue
                self.spawn_pid_watcher(pid)
                spawned += 1

            await asyncio.sleep(self._poll_interval_seconds)


__all__ = ["NameWatcher"]
