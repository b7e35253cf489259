"""Sequence start notification, watch, and end notification for one target."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .errors import CommandSpawnError
from .progress import IndicatorFactory
from .watchers import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    ByCommand,
    ByName,
    ByPid,
    CommandRunner,
    NameWatcher,
    PidWatcher,
    ProcessLookup,
    WatchResult,
    WatchTarget,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WATCH_ERROR = 1
EXIT_SPAWN_FAILED = 127
_SIGNAL_EXIT_BASE = 128


class Notifier(Protocol):
    async def notify(self, message: str) -> None:
        ...


def exit_code_for(result: WatchResult) -> int:
    """Map a command result onto a process exit code, mirroring the child."""
    if result.is_error:
        return EXIT_WATCH_ERROR
    if result.exit_code is None:
        return EXIT_OK
    if result.exit_code < 0:
        return _SIGNAL_EXIT_BASE - result.exit_code
    return result.exit_code


class WatchOrchestrator:
    """Runs one watch and brackets it with two notifications.

    Each notification is awaited before the next step, so "started" is
    always delivered (or given up on) before "finished" is sent.
    """

    def __init__(
        self,
        notifier: Notifier,
        *,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        lookup: Optional[ProcessLookup] = None,
        indicator_factory: Optional[IndicatorFactory] = None,
        pid_watcher: Optional[PidWatcher] = None,
        name_watcher: Optional[NameWatcher] = None,
        command_runner: Optional[CommandRunner] = None,
    ) -> None:
        self._notifier = notifier
        self._pid_watcher = pid_watcher or PidWatcher(
            lookup=lookup,
            poll_interval_seconds=poll_interval_seconds,
            indicator_factory=indicator_factory,
        )
        self._name_watcher = name_watcher or NameWatcher(
            lookup=lookup,
            poll_interval_seconds=poll_interval_seconds,
            indicator_factory=indicator_factory,
        )
        self._command_runner = command_runner or CommandRunner()

    async def run(self, target: WatchTarget) -> int:
        """Watch ``target`` to completion and return the exit code for the CLI."""
        if isinstance(target, ByPid):
            return await self._watch_pid(target.pid)
        if isinstance(target, ByName):
            return await self._watch_name(target.name)
        if isinstance(target, ByCommand):
            return await self._run_command(target.command)
        raise TypeError(f"Unsupported watch target: {target!r}")

    async def _watch_pid(self, pid: int) -> int:
        await self._notifier.notify(f"Starting to monitor PID: {pid}")
        await self._pid_watcher.watch(pid)
        await self._notifier.notify(f"Process {pid} has finished.")
        return EXIT_OK

    async def _watch_name(self, name: str) -> int:
        await self._notifier.notify(f"Monitoring processes named: {name}")
        result = await self._name_watcher.watch(name)
        if result.is_error:
            await self._notifier.notify(f"Stopped monitoring processes '{name}': {result.reason}")
            return EXIT_WATCH_ERROR
        await self._notifier.notify(f"Processes '{name}' have finished.")
        return EXIT_OK

    async def _run_command(self, command: str) -> int:
        # Spawn first so a failed spawn never announces a start.
        try:
            handle = await self._command_runner.spawn(command)
        except CommandSpawnError as exc:
            logger.error("%s", exc)
            return EXIT_SPAWN_FAILED

        await self._notifier.notify(f"Starting command: '{command}'")
        result = await self._command_runner.wait(handle)
        if result.success:
            await self._notifier.notify(f"Command '{command}' has finished.")
        elif result.is_error:
            await self._notifier.notify(f"Command '{command}' could not be awaited: {result.reason}")
        else:
            await self._notifier.notify(f"Command '{command}' has finished with exit code {result.exit_code}.")
        return exit_code_for(result)


__all__ = [
    "EXIT_OK",
    "EXIT_SPAWN_FAILED",
    "EXIT_WATCH_ERROR",
    "Notifier",
    "WatchOrchestrator",
    "exit_code_for",
]
