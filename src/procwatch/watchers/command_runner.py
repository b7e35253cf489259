"""Spawn a shell command and wait for it to exit."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ..console import console_err, console_out
from ..errors import CommandSpawnError
from .types import WatchResult

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "/bin/sh"


@dataclass
class CommandHandle:
    command: str
    process: asyncio.subprocess.Process

    @property
    def pid(self) -> int:
        return self.process.pid


class CommandRunner:
    """Runs commands through ``<shell> -c`` with stdout and stderr discarded."""

    def __init__(self, *, shell: str = DEFAULT_SHELL) -> None:
        self._shell = shell

    async def spawn(self, command: str) -> CommandHandle:
        """Start ``command`` and report its pid.

        Raises:
            CommandSpawnError: When the shell cannot be executed.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                self._shell,
                "-c",
                command,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as exc:
            raise CommandSpawnError.for_command(command, str(exc)) from exc

        console_out(f"Started command '{command}', PID: {process.pid}")
        return CommandHandle(command=command, process=process)

    async def wait(self, handle: CommandHandle) -> WatchResult:
        """Wait for the child to exit and classify its exit status."""
        try:
            exit_code = await handle.process.wait()
        except OSError as exc:
            logger.error("Error waiting for process to finish: %s", exc)
            return WatchResult.error(str(exc))

        logger.debug("Command %r exited with %s", handle.command, exit_code)
        result = WatchResult.from_exit_code(exit_code)
        if result.success:
            console_out("Process finished successfully.")
        else:
            console_err("Process finished with an error.")
        return result

    async def run(self, command: str) -> WatchResult:
        handle = await self.spawn(command)
        return await self.wait(handle)


__all__ = ["CommandHandle", "CommandRunner", "DEFAULT_SHELL"]
