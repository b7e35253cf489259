from __future__ import annotations

"""Minimal Telegram API adapter used for watch notifications."""

from typing import Optional, Tuple

import aiohttp

# HTTP status code
_HTTP_OK = 200

TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramClient:
    """Convenience wrapper around the Telegram Bot ``sendMessage`` endpoint."""

    def __init__(self, token: str, *, timeout_seconds: float) -> None:
        self._base_url = f"{TELEGRAM_API_URL}/bot{token}"
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> aiohttp.ClientTimeout:
        return self._timeout

    async def send_message(self, chat_id: str, message: str) -> Tuple[bool, Optional[str]]:
        """Send a text message to a single chat id as a form-encoded POST."""

        form = {"chat_id": chat_id, "text": message}
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.post(f"{self._base_url}/sendMessage", data=form) as response:
                if response.status == _HTTP_OK:
                    return True, None
                return False, await response.text()
