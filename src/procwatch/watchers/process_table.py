"""Process table queries backing the pid and name watchers."""

from __future__ import annotations

import logging
import os
import re
from typing import List, Protocol

import psutil

from ..errors import ProcessQueryError

logger = logging.getLogger(__name__)


class ProcessLookup(Protocol):
    def pid_exists(self, pid: int) -> bool:
        ...

    def pids_by_name(self, pattern: str) -> List[int]:
        ...


class ProcessTable:
    """psutil-backed equivalent of ``ps -p <pid>`` and ``pgrep <pattern>``."""

    def pid_exists(self, pid: int) -> bool:
        """Return whether the OS still lists ``pid`` (zombies included).

        Raises:
            ProcessQueryError: When the process table cannot be read.
        """
        try:
            return psutil.pid_exists(pid)
        except (psutil.Error, OSError) as exc:
            raise ProcessQueryError.lookup_failed(f"pid {pid}", str(exc)) from exc

    def pids_by_name(self, pattern: str) -> List[int]:
        """Return the sorted pids whose process name matches ``pattern``.

        The pattern is a regular expression searched anywhere in the name, as
        pgrep does. The calling process is never reported.

        Raises:
            ProcessQueryError: When the pattern is invalid or the process table
                cannot be enumerated.
        """
        try:
            matcher = re.compile(pattern)
        except re.error as exc:
            raise ProcessQueryError.lookup_failed(f"name {pattern!r}", f"invalid pattern ({exc})") from exc

        own_pid = os.getpid()
        matches: List[int] = []
        try:
            for proc in psutil.process_iter(["pid", "name"]):
                try:
                    pid = proc.info["pid"]
                    name = proc.info.get("name") or ""
                except (psutil.NoSuchProcess, psutil.AccessDenied):
                    continue
                if pid != own_pid and matcher.search(name):
                    matches.append(pid)
        except (psutil.Error, OSError) as exc:
            raise ProcessQueryError.lookup_failed(f"name {pattern!r}", str(exc)) from exc

        logger.debug("Resolved %d pid(s) for name %r", len(matches), pattern)
        return sorted(matches)


__all__ = ["ProcessLookup", "ProcessTable"]
