"""Tests for NotifierConfig."""

import pytest

from procwatch.config import ConfigurationError, NotifierConfig


def test_from_env_reads_credentials(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    monkeypatch.setenv("CHAT_ID", "-1001")

    config = NotifierConfig.from_env()

    assert config.bot_token == "123:abc"
    assert config.chat_id == "-1001"
    assert config.timeout_seconds == 10.0


def test_from_env_timeout_override(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    monkeypatch.setenv("CHAT_ID", "-1001")
    monkeypatch.setenv("PROCWATCH_NOTIFY_TIMEOUT_SECONDS", "2.5")

    assert NotifierConfig.from_env().timeout_seconds == 2.5


@pytest.mark.parametrize("missing", ["BOT_TOKEN", "CHAT_ID"])
def test_from_env_missing_credential_is_fatal(monkeypatch, missing):
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    monkeypatch.setenv("CHAT_ID", "-1001")
    monkeypatch.delenv(missing)

    with pytest.raises(ConfigurationError, match=missing):
        NotifierConfig.from_env()


def test_repr_hides_token():
    config = NotifierConfig(bot_token="secret-token", chat_id="42")

    assert "secret-token" not in repr(config)
