DEFAULT_API_BASE_URL = "https://api.telegram.org"

# Applies to every Bot API method.
WILDCARD = "*"

PLACEHOLDERS = {
    "%d": r"(\d+)",
    "%s": r"(\S+)",
    "%c": r"(\S)",
    "%p": r"(.*)",
}

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"

API_METHODS = frozenset(
    {
        "getUpdates",
        "setWebhook",
        "deleteWebhook",
        "getWebhookInfo",
        "getMe",
        "logOut",
        "close",
        "sendMessage",
        "forwardMessage",
        "copyMessage",
        "sendPhoto",
        "sendAudio",
        "sendDocument",
        "sendVideo",
        "sendAnimation",
        "sendVoice",
        "sendVideoNote",
        "sendMediaGroup",
        "sendLocation",
        "sendVenue",
        "sendContact",
        "sendPoll",
        "sendDice",
        "sendSticker",
        "sendChatAction",
        "getUserProfilePhotos",
        "getFile",
        "kickChatMember",
        "banChatMember",
        "unbanChatMember",
        "restrictChatMember",
        "promoteChatMember",
        "exportChatInviteLink",
        "setChatPhoto",
        "deleteChatPhoto",
        "setChatTitle",
        "setChatDescription",
        "pinChatMessage",
        "unpinChatMessage",
        "unpinAllChatMessages",
        "leaveChat",
        "getChat",
        "getChatAdministrators",
        "getChatMembersCount",
        "getChatMemberCount",
        "getChatMember",
        "answerCallbackQuery",
        "setMyCommands",
        "getMyCommands",
        "editMessageText",
        "editMessageCaption",
        "editMessageMedia",
        "editMessageReplyMarkup",
        "stopPoll",
        "deleteMessage",
        "answerInlineQuery",
    }
)
