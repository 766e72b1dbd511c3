from telehook.dispatcher import TeleBot
from telehook.errors import PropertyNotFoundError, RemoteCallError, TeleBotError
from telehook.extensions import ExtensionRegistry, extensions
from telehook.pattern import compile_pattern, is_exact_match, match
from telehook.telegram_client import InputFile, TelegramClient
from telehook.update import Update

__all__ = [
    "ExtensionRegistry",
    "InputFile",
    "PropertyNotFoundError",
    "RemoteCallError",
    "TeleBot",
    "TeleBotError",
    "TelegramClient",
    "Update",
    "compile_pattern",
    "extensions",
    "is_exact_match",
    "match",
]
