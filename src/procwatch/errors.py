from __future__ import annotations

"""Exception hierarchy for process watching and notification delivery."""


class ProcwatchError(RuntimeError):
    """Base exception for procwatch failures."""


class ProcessQueryError(ProcwatchError):
    """Raised when the process table lookup cannot be executed."""

    @classmethod
    def lookup_failed(cls, query: str, reason: str = "") -> "ProcessQueryError":
        msg = f"Process lookup failed for {query}"
        if reason:
            msg += f": {reason}"
        return cls(msg)


class CommandSpawnError(ProcwatchError):
    """Raised when a shell command cannot be started."""

    @classmethod
    def for_command(cls, command: str, reason: str = "") -> "CommandSpawnError":
        msg = f"Failed to execute command {command!r}"
        if reason:
            msg += f": {reason}"
        return cls(msg)


class NotificationError(ProcwatchError):
    """Raised by the Telegram transport when a message is not accepted."""


__all__ = [
    "ProcwatchError",
    "ProcessQueryError",
    "CommandSpawnError",
    "NotificationError",
]
