# telehook/dispatcher.py
import functools
import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from telehook import pattern
from telehook.constants import API_METHODS, WILDCARD
from telehook.errors import PropertyNotFoundError, RemoteCallError
from telehook.extensions import ExtensionRegistry, extensions as shared_extensions
from telehook.telegram_client import TelegramClient
from telehook.update import Update

logger = logging.getLogger("telehook.dispatcher")


def is_method_name(name: str) -> bool:
    """Known Bot API method, or a camelCase name that looks like one."""
    if name in API_METHODS:
        return True
    return name[:1].islower() and any(ch.isupper() for ch in name)


class TeleBot:
    """
    Routes one inbound update to command handlers and proxies Bot API calls.

    A TeleBot holds exactly one update for its whole life; build a fresh
    instance per incoming request::

        bot = TeleBot(token, update)
        bot.set_defaults("sendMessage", {"parse_mode": "HTML"})

        bot.listen("/start", lambda: bot.sendMessage({"chat_id": bot.chat["id"], "text": "Hi"}))
        bot.listen("/greet %s", lambda name: bot.sendMessage(chat_id=bot.chat["id"], text=f"Hi {name}"))

    Unknown camelCase attributes resolve to Bot API methods (``bot.sendPhoto``,
    ``bot.getMe``...), other unknown attributes to raw update fields.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        update: Union[Update, Mapping[str, Any], str, bytes, None] = None,
        *,
        client: Optional[TelegramClient] = None,
        extensions: Optional[ExtensionRegistry] = None,
    ) -> None:
        """
        Parameters
        ----------
        token : str, optional
            Bot token from @BotFather. Required unless ``client`` is given.
        update : Update, mapping, str or bytes, optional
            Inbound update (parsed or raw JSON body). Empty when omitted,
            which is enough for outbound-only scripts.
        client : TelegramClient, optional
            Transport for Bot API calls. Built from ``token`` when omitted.
        extensions : ExtensionRegistry, optional
            Extension table. Defaults to the process-wide registry.
        """
        if client is None:
            client = TelegramClient(token)
        self.client = client
        self.update = Update.coerce(update)
        self.extensions = shared_extensions if extensions is None else extensions
        self.default_parameters: Dict[str, Dict[str, Any]] = {}
        self.handled = False
        self.stopped = False

    @classmethod
    def extend(cls, name: str, handler: Optional[Callable[..., Any]] = None):
        """Register an extension in the process-wide registry."""
        return shared_extensions.register(name, handler)

    # update access

    @property
    def has_callback_query(self) -> bool:
        return self.update.has_callback_query

    @property
    def message(self) -> Optional[Mapping[str, Any]]:
        return self.update.active_message

    @property
    def chat(self) -> Optional[Mapping[str, Any]]:
        return self.update.chat

    @property
    def user(self) -> Optional[Mapping[str, Any]]:
        return self.update.user

    def field(self, name: str) -> Any:
        return self.update.field(name)

    # routing

    def listen(self, command: str, handler: Callable[..., Any], then_stop: bool = True) -> bool:
        """
        Run ``handler`` if the update's text matches ``command``.

        Text is the callback data for button presses and the message text
        otherwise. Updates without text never match.

        Parameters
        ----------
        command : str
            Command specifier, e.g. ``"/start"`` or ``"/add %d %p"``.
        handler : callable
            Called with no arguments on an exact match, or with the captured
            placeholder values (strings) on a pattern match.
        then_stop : bool
            When the handler runs, skip every later ``listen`` call for this
            update.

        Returns
        -------
        bool
            True if the handler was called.
        """
        if self.stopped:
            return False

        text = self.update.text
        if text is None:
            return False

        if pattern.is_exact_match(text, command):
            params = []
        else:
            params = pattern.match(text, command)
            if params is None:
                return False

        logger.debug("Update %s routed to %r params=%s", self.update.update_id, command, params)
        handler(*params)

        self.handled = True
        if then_stop:
            self.stopped = True
        return True

    # default parameters

    def set_defaults(self, method: Union[str, Iterable[str]], params: Mapping[str, Any]) -> None:
        """
        Set default parameters for Bot API methods.

        Parameters
        ----------
        method : str or iterable of str
            Method name, several method names, or ``'*'`` for every method.
        params : mapping
            Parameters merged into each call; explicit call arguments win.
        """
        if isinstance(method, str):
            self.default_parameters[method] = dict(params)
            return

        for single_method in method:
            self.set_defaults(single_method, params)

    def _get_defaults(self, method: str) -> Dict[str, Any]:
        defaults = dict(self.default_parameters.get(WILDCARD, {}))
        defaults.update(self.default_parameters.get(method, {}))
        return defaults

    # dynamic calls

    def invoke(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call an extension or a Bot API method by name.

        Extensions receive this bot first and every argument unchanged.
        Bot API methods take one optional mapping of parameters and/or keyword
        arguments, merged over the defaults for ``name``.

        Returns
        -------
        Any
            Extension return value, or the ``result`` of the Bot API response.

        Raises
        ------
        RemoteCallError
            If the Bot API answers ``ok == false``.
        TypeError
            If a Bot API method gets anything but a single mapping.
        """
        if self.extensions.has(name):
            logger.debug("Call %s handled by extension", name)
            return self.extensions.get(name)(self, *args, **kwargs)

        if len(args) > 1 or (args and not isinstance(args[0], Mapping)):
            raise TypeError(f"{name}() takes a single mapping of parameters")

        params = self._get_defaults(name)
        if args:
            params.update(args[0])
        params.update(kwargs)

        response = self.client.post(name, params)

        if not response.get("ok", False):
            desc = response.get("description", "no description")
            logger.error("Telegram API error for %s: %s", name, desc)
            raise RemoteCallError(
                desc,
                method=name,
                error_code=response.get("error_code"),
                payload=response,
            )

        return response.get("result")

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        update = self.__dict__.get("update")
        if update is not None and update.has(name):
            return update.field(name)

        registry = self.__dict__.get("extensions")
        if (registry is not None and registry.has(name)) or is_method_name(name):
            return functools.partial(self.invoke, name)

        raise PropertyNotFoundError(name)
