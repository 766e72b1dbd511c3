from telehook.dispatcher import TeleBot
from telehook.services.keyboards import MENU_ABOUT, MENU_HELP, MENU_MAIN, back_to_menu_keyboard, main_menu_keyboard

HELP_TEXT = (
    "<b>📘 Commands</b>\n\n"
    "<b>/start</b> - main menu\n"
    "<b>/help</b> - this message\n"
    "<b>/echo</b> <i>text</i> - repeat <i>text</i> back\n"
)

ABOUT_TEXT = "Minimal webhook bot built on <b>telehook</b>."


def register(bot: TeleBot) -> None:
    """
    Handle /start, /help and /about. /start renders the main inline menu,
    whose buttons send the other two commands as callback data.
    """
    bot.listen(MENU_MAIN, lambda: bot.reply("Main menu:", reply_markup=main_menu_keyboard()))
    bot.listen(MENU_HELP, lambda: bot.reply(HELP_TEXT, reply_markup=back_to_menu_keyboard()))
    bot.listen(MENU_ABOUT, lambda: bot.reply(ABOUT_TEXT, reply_markup=back_to_menu_keyboard()))
