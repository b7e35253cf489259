"""Terminal progress spinner shown while a watch is running."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from rich.console import Console
from rich.status import Status
from rich.text import Text

SPINNER_NAME = "moon"


class Indicator(Protocol):
    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


IndicatorFactory = Callable[[str], Indicator]


class ProgressIndicator:
    """Spinner labelled with the watch target; ``stop`` is idempotent."""

    def __init__(self, label: str, *, console: Optional[Console] = None) -> None:
        self.label = label
        self._console = console or Console(stderr=True)
        self._status: Optional[Status] = None
        self._stopped = False

    @property
    def running(self) -> bool:
        return self._status is not None and not self._stopped

    def start(self) -> None:
        if self._status is not None or self._stopped:
            return
        self._status = self._console.status(Text(self.label), spinner=SPINNER_NAME)
        self._status.start()

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        if self._status is not None:
            self._status.stop()


class SilentIndicator:
    """Indicator that draws nothing, used by fan-out sub-watchers."""

    def __init__(self, label: str = "") -> None:
        self.label = label

    def start(self) -> None:
        return None

    def stop(self) -> None:
        return None


__all__ = ["Indicator", "IndicatorFactory", "ProgressIndicator", "SilentIndicator"]
