from typing import Any

from telehook.dispatcher import TeleBot
from telehook.extensions import ExtensionRegistry


def reply(bot: TeleBot, text: str, **params: Any) -> Any:
    """
    Send ``text`` to the chat the current update came from.

    Button presses are acknowledged first so the client stops showing the
    loading spinner.
    """
    if bot.has_callback_query:
        bot.answerCallbackQuery({"callback_query_id": bot.callback_query["id"]})
    return bot.sendMessage({"chat_id": bot.chat["id"], "text": text, **params})


def install(registry: ExtensionRegistry) -> None:
    registry.register("reply", reply)
