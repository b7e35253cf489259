"""Fakes standing in for the process table, spinner and notifier."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Sequence, Tuple, Union


class FakeProcessTable:
    """In-memory process table for watcher tests.

    ``alive`` maps a pid to how many more liveness checks answer True; a
    negative count means the pid never goes away. ``name_results`` is consumed
    one entry per name lookup; an exception entry is raised instead of returned.
    """

    def __init__(
        self,
        alive: Dict[int, int] | None = None,
        name_results: Sequence[Union[List[int], Exception]] = (),
    ) -> None:
        self.alive = dict(alive or {})
        self.name_results = list(name_results)
        self.pid_queries: List[int] = []
        self.name_queries: List[str] = []

    def pid_exists(self, pid: int) -> bool:
        self.pid_queries.append(pid)
        remaining = self.alive.get(pid, 0)
        if isinstance(remaining, Exception):
            raise remaining
        if remaining == 0:
            return False
        if remaining > 0:
            self.alive[pid] = remaining - 1
        return True

    def pids_by_name(self, pattern: str) -> List[int]:
        self.name_queries.append(pattern)
        if not self.name_results:
            return []
        result = self.name_results.pop(0)
        if isinstance(result, Exception):
            raise result
        return list(result)


class BlockingPidWatcher:
    """Pid watcher stand-in whose watches finish only once ``release`` is called."""

    def __init__(self, *, error: Exception | None = None) -> None:
        self.calls: List[Tuple[int, bool]] = []
        self._error = error
        self._released = asyncio.Event()

    def release(self) -> None:
        self._released.set()

    async def watch(self, pid: int, silent: bool = False):
        self.calls.append((pid, silent))
        if self._error is not None:
            raise self._error
        await self._released.wait()


class RecordingIndicator:
    def __init__(self, label: str) -> None:
        self.label = label
        self.starts = 0
        self.stops = 0

    def start(self) -> None:
        self.starts += 1

    def stop(self) -> None:
        self.stops += 1


class RecordingIndicatorFactory:
    def __init__(self) -> None:
        self.created: List[RecordingIndicator] = []

    def __call__(self, label: str) -> RecordingIndicator:
        indicator = RecordingIndicator(label)
        self.created.append(indicator)
        return indicator


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[str] = []

    async def notify(self, message: str) -> None:
        self.messages.append(message)
