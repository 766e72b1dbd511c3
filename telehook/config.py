"""
Runtime settings for the telehook entry point.

Values come from the environment; a ``.env`` file in the working directory is
loaded first.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from telehook.constants import DEFAULT_API_BASE_URL

load_dotenv()

MODES = ("webhook", "polling")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class Settings:
    """Bot runtime configuration."""

    bot_token: str = field(default_factory=lambda: os.getenv("BOT_TOKEN", ""))
    api_base_url: str = field(
        default_factory=lambda: os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL)
    )
    request_timeout: int = field(default_factory=lambda: _env_int("REQUEST_TIMEOUT", 30))

    # Transport
    mode: str = field(default_factory=lambda: os.getenv("BOT_MODE", "webhook").lower())
    bot_script: str = field(
        default_factory=lambda: os.getenv("BOT_SCRIPT", "telehook.handlers:handle")
    )
    webhook_host: str = field(default_factory=lambda: os.getenv("WEBHOOK_HOST", "0.0.0.0"))
    webhook_port: int = field(default_factory=lambda: _env_int("WEBHOOK_PORT", 8080))
    webhook_secret: Optional[str] = field(default_factory=lambda: os.getenv("WEBHOOK_SECRET") or None)
    poll_timeout: int = field(default_factory=lambda: _env_int("POLL_TIMEOUT", 25))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()

    def validate(self) -> None:
        """
        Check required settings.

        Raises
        ------
        RuntimeError
            If the token is missing or the mode is unknown.
        """
        if not self.bot_token:
            raise RuntimeError("BOT_TOKEN env var is required (export BOT_TOKEN=...)")
        if self.mode not in MODES:
            raise RuntimeError(f"BOT_MODE must be one of {', '.join(MODES)}, got {self.mode!r}")
        if ":" not in self.bot_script:
            raise RuntimeError(f"BOT_SCRIPT must look like 'package.module:function', got {self.bot_script!r}")
