from telehook.dispatcher import TeleBot
from telehook.extensions import extensions
from telehook.handlers import echo, reply, start_help, unknown

reply.install(extensions)


def handle(bot: TeleBot) -> None:
    """Example bot script: menu commands, /echo, then the catch-all."""
    bot.set_defaults("sendMessage", {"parse_mode": "HTML"})

    start_help.register(bot)
    echo.register(bot)
    unknown.register(bot)
