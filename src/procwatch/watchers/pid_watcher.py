"""Poll the process table until a single pid disappears."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ..console import console_out
from ..errors import ProcessQueryError
from ..progress import IndicatorFactory, ProgressIndicator, SilentIndicator
from .process_table import ProcessLookup, ProcessTable
from .types import WatchResult

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 1.0


class PidWatcher:
    """Watches one pid on a fixed interval and reports once it is gone."""

    def __init__(
        self,
        *,
        lookup: Optional[ProcessLookup] = None,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        indicator_factory: Optional[IndicatorFactory] = None,
    ) -> None:
        self._lookup = lookup or ProcessTable()
        self._poll_interval_seconds = poll_interval_seconds
        self._indicator_factory = indicator_factory or ProgressIndicator

    async def watch(self, pid: int, silent: bool = False) -> WatchResult:
        """Block until ``pid`` is no longer listed by the OS.

        A failed lookup counts as termination, so a transient query error
        produces a (possibly false) terminated report.
        """
        if silent:
            indicator = SilentIndicator()
        else:
            indicator = self._indicator_factory(f"Monitoring PID: {pid}")

        polls = 0
        indicator.start()
        try:
            while True:
                polls += 1
                if not await self._is_alive(pid):
                    break
                await asyncio.sleep(self._poll_interval_seconds)
        finally:
            indicator.stop()

        console_out(f"Process with PID {pid} has terminated.")
        logger.debug("PID %s gone after %d poll(s)", pid, polls)
        return WatchResult.terminated(polls=polls)

    async def _is_alive(self, pid: int) -> bool:
        try:
            return await asyncio.to_thread(self._lookup.pid_exists, pid)
        except ProcessQueryError as exc:
            logger.debug("Treating PID %s as terminated: %s", pid, exc)
            return False


__all__ = ["PidWatcher", "DEFAULT_POLL_INTERVAL_SECONDS"]
