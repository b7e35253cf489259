from __future__ import annotations

"""Watch targets and outcomes shared by every watcher."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class ByPid:
    pid: int

    def __post_init__(self) -> None:
        if self.pid <= 0:
            raise ValueError(f"pid must be a positive integer (got {self.pid})")


@dataclass(frozen=True)
class ByName:
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("process name must not be empty")


@dataclass(frozen=True)
class ByCommand:
    command: str

    def __post_init__(self) -> None:
        if not self.command.strip():
            raise ValueError("command must not be empty")


WatchTarget = Union[ByPid, ByName, ByCommand]


class WatchOutcome(Enum):
    """Terminal state of a watch."""

    TERMINATED = "terminated"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


@dataclass(frozen=True)
class WatchResult:
    """What a watcher reports once its loop is over."""

    outcome: WatchOutcome
    reason: Optional[str] = None
    exit_code: Optional[int] = None
    polls: int = 0
    spawned_watchers: int = 0

    @property
    def is_error(self) -> bool:
        return self.outcome is WatchOutcome.ERROR

    @property
    def success(self) -> bool:
        return self.outcome in (WatchOutcome.TERMINATED, WatchOutcome.SUCCESS)

    @classmethod
    def terminated(cls, *, polls: int, spawned_watchers: int = 0) -> "WatchResult":
        return cls(WatchOutcome.TERMINATED, polls=polls, spawned_watchers=spawned_watchers)

    @classmethod
    def error(cls, reason: str, *, polls: int = 0, spawned_watchers: int = 0) -> "WatchResult":
        return cls(WatchOutcome.ERROR, reason=reason, polls=polls, spawned_watchers=spawned_watchers)

    @classmethod
    def from_exit_code(cls, exit_code: int) -> "WatchResult":
        outcome = WatchOutcome.SUCCESS if exit_code == 0 else WatchOutcome.FAILURE
        return cls(outcome, exit_code=exit_code)


__all__ = [
    "ByPid",
    "ByName",
    "ByCommand",
    "WatchTarget",
    "WatchOutcome",
    "WatchResult",
]
