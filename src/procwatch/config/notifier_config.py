"""Notification destination settings, resolved once at startup."""

from __future__ import annotations

from dataclasses import dataclass, field

from .runtime import env_positive_float, env_str

BOT_TOKEN_ENV = "BOT_TOKEN"
CHAT_ID_ENV = "CHAT_ID"
NOTIFY_TIMEOUT_ENV = "PROCWATCH_NOTIFY_TIMEOUT_SECONDS"

DEFAULT_NOTIFY_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class NotifierConfig:
    """Telegram destination for every notification of one run."""

    bot_token: str = field(repr=False)
    chat_id: str
    timeout_seconds: float = DEFAULT_NOTIFY_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "NotifierConfig":
        """Build the config from the environment.

        Raises:
            ConfigurationError: When ``BOT_TOKEN`` or ``CHAT_ID`` is missing, or the
                timeout override is not a positive number.
        """
        bot_token = env_str(BOT_TOKEN_ENV, required=True)
        chat_id = env_str(CHAT_ID_ENV, required=True)
        timeout_seconds = env_positive_float(NOTIFY_TIMEOUT_ENV, DEFAULT_NOTIFY_TIMEOUT_SECONDS)
        return cls(bot_token=bot_token, chat_id=chat_id, timeout_seconds=timeout_seconds)


__all__ = ["NotifierConfig", "BOT_TOKEN_ENV", "CHAT_ID_ENV", "NOTIFY_TIMEOUT_ENV"]
