"""Best-effort Telegram notifications for watch lifecycle events."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from .alerting import TelegramClient
from .config import NotifierConfig
from .errors import NotificationError

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Sends one message per call to the configured chat.

    Delivery failures are logged and swallowed so a broken network never
    interrupts a watch. There is no retry, batching or deduplication.
    """

    def __init__(self, config: NotifierConfig, *, client: Optional[TelegramClient] = None) -> None:
        self._chat_id = config.chat_id
        self._client = client or TelegramClient(config.bot_token, timeout_seconds=config.timeout_seconds)

    async def notify(self, message: str) -> None:
        try:
            await self._deliver(message)
        except asyncio.TimeoutError:
            logger.error("Failed to send Telegram message: request timed out")
        except (aiohttp.ClientError, OSError, NotificationError) as exc:
            logger.error("Failed to send Telegram message: %s", exc)

    async def _deliver(self, message: str) -> None:
        success, error_text = await self._client.send_message(self._chat_id, message)
        if not success:
            raise NotificationError(f"Telegram rejected message: {error_text or 'unknown error'}")
        logger.debug("Telegram message sent to %s", self._chat_id)


__all__ = ["TelegramNotifier"]
