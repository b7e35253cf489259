"""Watch strategies for pids, process names and spawned commands."""

from .command_runner import CommandHandle, CommandRunner
from .name_watcher import NameWatcher
from .pid_watcher import DEFAULT_POLL_INTERVAL_SECONDS, PidWatcher
from .process_table import ProcessLookup, ProcessTable
from .types import ByCommand, ByName, ByPid, WatchOutcome, WatchResult, WatchTarget

__all__ = [
    "ByCommand",
    "ByName",
    "ByPid",
    "CommandHandle",
    "CommandRunner",
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "NameWatcher",
    "PidWatcher",
    "ProcessLookup",
    "ProcessTable",
    "WatchOutcome",
    "WatchResult",
    "WatchTarget",
]
