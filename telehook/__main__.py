import importlib
import logging
from typing import Any, Callable

from telehook.config import Settings
from telehook.dispatcher import TeleBot
from telehook.long_polling import start_long_polling
from telehook.telegram_client import TelegramClient
from telehook.webhook import serve_webhook


def setup_logging(level_name: str = "INFO") -> logging.Logger:
    """
    Configure root logger for the bot.

    Parameters
    ----------
    level_name : str
        DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown names fall back to INFO.

    Returns
    -------
    logging.Logger
        Configured logger instance for the bot.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("telehook")


def load_script(path: str) -> Callable[[TeleBot], Any]:
    """
    Import a bot script given as ``"package.module:function"``.

    Importing the module also runs its extension registrations.
    """
    module_name, _, attr = path.partition(":")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError:
        raise RuntimeError(f"{module_name} has no attribute {attr!r}") from None


def main() -> None:
    """Entry point: env → logging → bot script → webhook server or long polling."""
    settings = Settings.from_env()
    logger = setup_logging(settings.log_level)
    settings.validate()

    script = load_script(settings.bot_script)
    client = TelegramClient(
        settings.bot_token,
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
    )

    logger.info("Bot initialized with script %s, mode=%s", settings.bot_script, settings.mode)
    if settings.mode == "polling":
        # long-poll timeout must fit inside the HTTP timeout
        client.timeout = max(settings.request_timeout, settings.poll_timeout + 5)
        start_long_polling(client, script, timeout=settings.poll_timeout)
    else:
        serve_webhook(
            settings.webhook_host,
            settings.webhook_port,
            client,
            script,
            secret=settings.webhook_secret,
        )


if __name__ == "__main__":
    main()
