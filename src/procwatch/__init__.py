"""Watch processes by pid, name or command and report to Telegram."""

from .notifier import TelegramNotifier
from .orchestrator import WatchOrchestrator
from .watchers import ByCommand, ByName, ByPid, CommandRunner, NameWatcher, PidWatcher, WatchResult

__version__ = "0.1.0"

__all__ = [
    "ByCommand",
    "ByName",
    "ByPid",
    "CommandRunner",
    "NameWatcher",
    "PidWatcher",
    "TelegramNotifier",
    "WatchOrchestrator",
    "WatchResult",
    "__version__",
]
