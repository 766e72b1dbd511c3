from typing import Any, Optional


class TeleBotError(RuntimeError):
    """Base class for errors raised by telehook."""


class RemoteCallError(TeleBotError):
    """
    Bot API reported a failed call (``ok == false``).

    Attributes
    ----------
    description : str
        Human-readable text returned by the server.
    method : str or None
        Bot API method that failed.
    error_code : int or None
        Numeric code from the response envelope, when present.
    """

    def __init__(
        self,
        description: str,
        method: Optional[str] = None,
        error_code: Optional[int] = None,
        payload: Optional[Any] = None,
    ) -> None:
        super().__init__(description)
        self.description = description
        self.method = method
        self.error_code = error_code
        self.payload = payload

    def __str__(self) -> str:
        if self.method:
            return f"{self.method} failed: {self.description}"
        return self.description


class PropertyNotFoundError(TeleBotError, AttributeError):
    """Field is neither an alias nor present in the update."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Property {name} doesn't exist!")
        self.name = name
