# telehook/long_polling.py
from typing import Any, Callable, Dict, List, Optional
import logging

from telehook.dispatcher import TeleBot
from telehook.extensions import ExtensionRegistry
from telehook.telegram_client import TelegramClient

logger = logging.getLogger("telehook.long_polling")


def poll_once(
    client: TelegramClient,
    script: Callable[[TeleBot], Any],
    offset: Optional[int] = None,
    timeout: int = 25,
    extensions: Optional[ExtensionRegistry] = None,
) -> Optional[int]:
    """
    Fetch one batch of updates and run the bot script on each.

    Parameters
    ----------
    client : TelegramClient
        Bot API client.
    script : callable
        Bot script, called with a fresh TeleBot per update.
    offset : int, optional
        ``update_id`` of the first update to fetch.
    timeout : int
        Long-poll timeout in seconds passed to getUpdates.
    extensions : ExtensionRegistry, optional
        Extension table for the per-update bots.

    Returns
    -------
    int or None
        Offset to use for the next call.
    """
    poller = TeleBot(client=client, extensions=extensions)
    updates: List[Dict[str, Any]] = poller.invoke(
        "getUpdates", {"offset": offset, "timeout": timeout}
    ) or []

    for update in updates:
        update_id = update.get("update_id")
        logger.debug("Received update_id=%s", update_id)

        try:
            script(TeleBot(update=update, client=client, extensions=extensions))
        except Exception as exc:
            logger.exception(
                "Error while handling update_id=%s: %r", update_id, exc
            )

        if update_id is not None:
            offset = update_id + 1

    return offset


def start_long_polling(
    client: TelegramClient,
    script: Callable[[TeleBot], Any],
    timeout: int = 25,
) -> None:
    """
    Long-polling loop: fetch updates from Telegram and run the bot script.

    Meant for local development; production bots receive updates through
    the webhook server.
    """
    logger.info("Entering long-polling loop")

    next_update_offset: Optional[int] = None

    while True:
        try:
            next_update_offset = poll_once(client, script, next_update_offset, timeout)
        except Exception as exc:
            logger.exception("getUpdates failed: %r", exc)
