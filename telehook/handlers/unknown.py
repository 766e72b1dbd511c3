from telehook.dispatcher import TeleBot


def register(bot: TeleBot) -> None:
    """
    Catch-all for anything earlier handlers did not take.

    Must be registered last: ``%p`` matches every text, button data included.
    """

    def unknown(_text: str) -> None:
        if bot.has_callback_query:
            bot.reply("Unknown button. Open the menu with /start.")
        else:
            bot.reply("Unknown command. Send /start to open the menu.")

    bot.listen("%p", unknown)
