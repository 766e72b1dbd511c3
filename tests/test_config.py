import logging

import pytest

from telehook.__main__ import load_script, setup_logging
from telehook.config import Settings


@pytest.fixture
def env(monkeypatch):
    for name in (
        "BOT_TOKEN",
        "API_BASE_URL",
        "REQUEST_TIMEOUT",
        "BOT_MODE",
        "BOT_SCRIPT",
        "WEBHOOK_HOST",
        "WEBHOOK_PORT",
        "WEBHOOK_SECRET",
        "POLL_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(env):
    settings = Settings.from_env()

    assert settings.bot_token == ""
    assert settings.api_base_url == "https://api.telegram.org"
    assert settings.request_timeout == 30
    assert settings.mode == "webhook"
    assert settings.bot_script == "telehook.handlers:handle"
    assert settings.webhook_port == 8080
    assert settings.webhook_secret is None
    assert settings.poll_timeout == 25


def test_values_from_environment(env):
    env.setenv("BOT_TOKEN", "123:ABC")
    env.setenv("BOT_MODE", "Polling")
    env.setenv("WEBHOOK_PORT", "9000")
    env.setenv("WEBHOOK_SECRET", "s")

    settings = Settings.from_env()
    settings.validate()

    assert settings.bot_token == "123:ABC"
    assert settings.mode == "polling"
    assert settings.webhook_port == 9000
    assert settings.webhook_secret == "s"


def test_validate_requires_token(env):
    with pytest.raises(RuntimeError, match="BOT_TOKEN"):
        Settings.from_env().validate()


def test_validate_rejects_unknown_mode(env):
    env.setenv("BOT_TOKEN", "t")
    env.setenv("BOT_MODE", "smoke-signals")

    with pytest.raises(RuntimeError, match="BOT_MODE"):
        Settings.from_env().validate()


def test_bad_integer(env):
    env.setenv("WEBHOOK_PORT", "eighty")

    with pytest.raises(RuntimeError, match="WEBHOOK_PORT"):
        Settings.from_env()


def test_load_script():
    from telehook.handlers import handle

    assert load_script("telehook.handlers:handle") is handle
    with pytest.raises(RuntimeError):
        load_script("telehook.handlers:missing")


def test_setup_logging_returns_package_logger():
    assert setup_logging("debug").name == "telehook"
    assert isinstance(setup_logging("nonsense"), logging.Logger)
