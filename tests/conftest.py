"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from procwatch.config import runtime
from tests.helpers.watch_fakes import RecordingIndicatorFactory, RecordingNotifier

_WATCHED_ENV_VARS = (
    "BOT_TOKEN",
    "CHAT_ID",
    "PROCWATCH_POLL_INTERVAL_SECONDS",
    "PROCWATCH_NOTIFY_TIMEOUT_SECONDS",
    "PROCWATCH_LOG_DIR",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep real environment variables and .env files out of every test."""
    for name in _WATCHED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime.reset_default_values()
    yield
    runtime.reset_default_values()


@pytest.fixture
def indicator_factory() -> RecordingIndicatorFactory:
    return RecordingIndicatorFactory()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
