"""Telegram transport used by the notifier."""

from .telegram_client import TelegramClient

__all__ = ["TelegramClient"]
