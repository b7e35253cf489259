"""Command line entry point: ``procwatch {pid,name,exec} ...``."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional, Sequence

from .config import ConfigurationError, NotifierConfig, env_positive_float, env_str
from .console import console_err
from .logging_config import setup_logging
from .notifier import TelegramNotifier
from .orchestrator import WatchOrchestrator
from .watchers import DEFAULT_POLL_INTERVAL_SECONDS, ByCommand, ByName, ByPid, WatchTarget

logger = logging.getLogger(__name__)

POLL_INTERVAL_ENV = "PROCWATCH_POLL_INTERVAL_SECONDS"
LOG_DIR_ENV = "PROCWATCH_LOG_DIR"

EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    return value


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {raw!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {raw!r}")
    return value


def _non_empty(raw: str) -> str:
    if not raw.strip():
        raise argparse.ArgumentTypeError("value must not be empty")
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="procwatch",
        description="Monitor processes by PID, name, or execute commands.",
    )
    parser.add_argument(
        "--poll-interval",
        type=_positive_float,
        default=None,
        metavar="SECONDS",
        help=f"Seconds between liveness checks (default: ${POLL_INTERVAL_ENV} or {DEFAULT_POLL_INTERVAL_SECONDS})",
    )
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default="INFO", help="Console log level")

    subparsers = parser.add_subparsers(dest="mode", required=True, metavar="{pid,name,exec}")

    pid_parser = subparsers.add_parser("pid", help="Monitor a process by PID")
    pid_parser.add_argument("pid", type=_positive_int)

    name_parser = subparsers.add_parser("name", help="Monitor a process by name")
    name_parser.add_argument("process_name", type=_non_empty)

    exec_parser = subparsers.add_parser("exec", help="Execute a command and monitor it")
    exec_parser.add_argument("command", type=_non_empty)

    return parser


def target_from_args(args: argparse.Namespace) -> WatchTarget:
    if args.mode == "pid":
        return ByPid(args.pid)
    if args.mode == "name":
        return ByName(args.process_name)
    return ByCommand(args.command)


def _resolve_poll_interval(args: argparse.Namespace) -> float:
    if args.poll_interval is not None:
        return args.poll_interval
    return env_positive_float(POLL_INTERVAL_ENV, DEFAULT_POLL_INTERVAL_SECONDS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level, env_str(LOG_DIR_ENV))
        config = NotifierConfig.from_env()
        poll_interval = _resolve_poll_interval(args)
    except (ConfigurationError, OSError) as exc:
        console_err(f"Configuration error: {exc}")
        return EXIT_USAGE

    target = target_from_args(args)
    orchestrator = WatchOrchestrator(TelegramNotifier(config), poll_interval_seconds=poll_interval)
    logger.debug("Watching %r every %ss", target, poll_interval)
    try:
        return asyncio.run(orchestrator.run(target))
    except KeyboardInterrupt:
        console_err("\nInterrupted.")
        return EXIT_INTERRUPTED


__all__ = ["build_parser", "main", "target_from_args"]
