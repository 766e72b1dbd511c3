import html

from telehook.dispatcher import TeleBot

USAGE = "Usage: /echo <i>text</i>"


def register(bot: TeleBot) -> None:
    def echo(text: str) -> None:
        if not text.strip():
            bot.reply(USAGE)
            return
        bot.reply(html.escape(text))

    bot.listen("/echo", lambda: bot.reply(USAGE))
    bot.listen("/echo %p", echo)
