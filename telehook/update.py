import json
import dataclasses
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from telehook.errors import PropertyNotFoundError


@dataclasses.dataclass(frozen=True)
class Update:
    """
    One inbound Telegram update, decoded once and never modified.

    Only the fields the router cares about get typed accessors; everything
    else is reachable through :meth:`field`. Nested objects are read-only
    mappings and arrays are tuples.
    """

    raw: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", freeze(self.raw))

    @classmethod
    def from_json(cls, body: Union[str, bytes, bytearray]) -> "Update":
        """
        Decode a webhook request body.

        Parameters
        ----------
        body : str or bytes
            JSON document sent by Telegram.

        Returns
        -------
        Update
            Parsed update.

        Raises
        ------
        ValueError
            If the body is not JSON or not a JSON object.
        """
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        data = json.loads(body)
        if not isinstance(data, dict):
            raise ValueError(f"update must be a JSON object, got {type(data).__name__}")
        return cls(data)

    @classmethod
    def coerce(cls, source: Union["Update", Mapping[str, Any], str, bytes, None]) -> "Update":
        if source is None:
            return cls()
        if isinstance(source, Update):
            return source
        if isinstance(source, (str, bytes, bytearray)):
            return cls.from_json(source)
        return cls(source)

    @property
    def update_id(self) -> Optional[int]:
        return self.raw.get("update_id")

    @property
    def message(self) -> Optional[Mapping[str, Any]]:
        return _object(self.raw.get("message"), "message")

    @property
    def callback_query(self) -> Optional[Mapping[str, Any]]:
        return _object(self.raw.get("callback_query"), "callback_query")

    @property
    def has_callback_query(self) -> bool:
        return self.raw.get("callback_query") is not None

    @property
    def active_message(self) -> Optional[Mapping[str, Any]]:
        """Callback query's message if there is one, else the update's own message."""
        if self.has_callback_query:
            return _object(self.callback_query.get("message"), "callback_query.message")
        return self.message

    @property
    def text(self) -> Optional[str]:
        """
        Text used for command routing: callback data for button presses,
        message text otherwise. None when the update carries neither.
        """
        if self.has_callback_query:
            return self.callback_query.get("data")
        if self.message is None:
            return None
        return self.message.get("text")

    @property
    def chat(self) -> Optional[Mapping[str, Any]]:
        message = self.active_message
        if message is None:
            return None
        return _object(message.get("chat"), "message.chat")

    @property
    def user(self) -> Optional[Mapping[str, Any]]:
        if self.has_callback_query:
            return _object(self.callback_query.get("from"), "callback_query.from")
        if self.message is None:
            return None
        return _object(self.message.get("from"), "message.from")

    def has(self, name: str) -> bool:
        return name in self.raw

    def field(self, name: str) -> Any:
        """
        Return a raw top-level field of the update.

        Raises
        ------
        PropertyNotFoundError
            If the update has no field called ``name``.
        """
        if name not in self.raw:
            raise PropertyNotFoundError(name)
        return self.raw[name]


def freeze(value: Any) -> Any:
    """Deep read-only copy of a decoded JSON tree: objects become mapping proxies, arrays tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def _object(value: Any, path: str) -> Optional[Mapping[str, Any]]:
    # TypeError, not AttributeError: TeleBot.__getattr__ would hide it
    if value is None or isinstance(value, Mapping):
        return value
    raise TypeError(f"update field {path} must be an object, got {type(value).__name__}")
