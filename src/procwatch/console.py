"""Plain status lines for the operator's terminal."""

from __future__ import annotations

import sys


def console_out(message: str) -> None:
    print(message, flush=True)


def console_err(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


__all__ = ["console_out", "console_err"]
