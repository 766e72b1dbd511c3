from typing import Dict, List, Sequence, Tuple

MENU_HELP = "/help"
MENU_ABOUT = "/about"
MENU_MAIN = "/start"


def inline_keyboard(rows: Sequence[Sequence[Tuple[str, str]]]) -> Dict[str, List[List[Dict[str, str]]]]:
    """
    Build an inline keyboard reply_markup.

    Parameters
    ----------
    rows : sequence of sequence of (text, callback_data)
        Button rows, top to bottom.

    Returns
    -------
    dict
        ``{"inline_keyboard": [[{"text": ..., "callback_data": ...}, ...], ...]}``
    """
    return {
        "inline_keyboard": [
            [{"text": text, "callback_data": data} for text, data in row]
            for row in rows
        ]
    }


def main_menu_keyboard() -> dict:
    return inline_keyboard(
        [
            [("ℹ️ Help", MENU_HELP), ("🤖 About", MENU_ABOUT)],
        ]
    )


def back_to_menu_keyboard() -> dict:
    return inline_keyboard([[("🏠 Main menu", MENU_MAIN)]])
