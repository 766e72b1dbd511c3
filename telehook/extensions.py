import logging
import threading
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger("telehook.extensions")

Extension = Callable[..., Any]


class ExtensionRegistry:
    """
    Name → handler table consulted before any Bot API call.

    An extension is called as ``handler(bot, *args, **kwargs)`` where ``bot``
    is the :class:`~telehook.dispatcher.TeleBot` that received the call, so it
    can read the update or call other methods.

    Register everything at startup, before the first update is dispatched.
    Entries are never removed.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Extension] = {}
        self._lock = threading.Lock()

    def register(self, name: str, handler: Optional[Extension] = None):
        """
        Register ``handler`` under ``name``.

        Without ``handler`` returns a decorator::

            @registry.register("greet")
            def greet(bot, name):
                ...

        Parameters
        ----------
        name : str
            Method name to intercept.
        handler : callable, optional
            Extension callable.
        """
        if handler is None:
            def decorator(func: Extension) -> Extension:
                self.register(name, func)
                return func

            return decorator

        with self._lock:
            if name in self._handlers:
                logger.warning("Extension %s replaced", name)
            self._handlers[name] = handler
        logger.debug("Extension registered: %s", name)
        return handler

    def has(self, name: str) -> bool:
        return name in self._handlers

    def get(self, name: str) -> Extension:
        return self._handlers[name]

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


# Shared by every TeleBot created without an explicit registry.
extensions = ExtensionRegistry()
