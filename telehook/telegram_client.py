import json
import logging
import secrets
import urllib.request
from typing import Any, Dict, Mapping, NamedTuple, Optional
from urllib.error import HTTPError

from telehook.constants import DEFAULT_API_BASE_URL
from telehook.errors import RemoteCallError

logger = logging.getLogger("telehook.telegram")


class InputFile(NamedTuple):
    """File to upload with multipart/form-data (e.g. ``document`` of sendDocument)."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


def _plain(value: Any) -> Any:
    # update fields come back as mapping proxies, json only knows dict
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _form_value(value: Any) -> str:
    if isinstance(value, (Mapping, list, tuple)):
        # reply_markup and friends must be JSON strings inside a form
        return json.dumps(value, ensure_ascii=False, default=_plain)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_multipart(params: Mapping[str, Any], boundary: str) -> bytes:
    """
    Build a multipart/form-data body.

    Parameters
    ----------
    params : mapping
        Request parameters. :class:`InputFile` values become file parts,
        ``None`` values are skipped, everything else becomes a form field.
    boundary : str
        Multipart boundary.

    Returns
    -------
    bytes
        Encoded request body.
    """
    body = bytearray()

    for name, value in params.items():
        if value is None or isinstance(value, InputFile):
            continue
        body.extend(f"--{boundary}\r\n".encode("utf-8"))
        body.extend(f'Content-Disposition: form-data; name="{name}"\r\n\r\n'.encode("utf-8"))
        body.extend(_form_value(value).encode("utf-8"))
        body.extend(b"\r\n")

    for name, value in params.items():
        if not isinstance(value, InputFile):
            continue
        body.extend(f"--{boundary}\r\n".encode("utf-8"))
        body.extend((f'Content-Disposition: form-data; name="{name}"; ' f'filename="{value.filename}"\r\n').encode("utf-8"))
        body.extend(f"Content-Type: {value.content_type}\r\n\r\n".encode("utf-8"))
        body.extend(value.content)
        body.extend(b"\r\n")

    body.extend(f"--{boundary}--\r\n".encode("utf-8"))
    return bytes(body)


class TelegramClient:
    """
    Thin HTTP client for the Telegram Bot API.

    Every method is a POST to ``{base_url}/bot{token}/{method}``. The client
    only moves bytes: it returns the decoded response envelope and leaves the
    ``ok`` check to the caller.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: Optional[float] = 30,
    ) -> None:
        if not token:
            raise RuntimeError("Bot token is required (export BOT_TOKEN=...)")
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def method_url(self, method: str) -> str:
        return f"{self.base_url}/bot{self.token}/{method}"

    def post(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Call a Bot API method.

        Parameters
        ----------
        method : str
            Bot API method name (e.g. 'sendMessage', 'getMe').
        params : mapping, optional
            Method parameters. If any value is an :class:`InputFile` the
            request is sent as multipart/form-data, otherwise as JSON.

        Returns
        -------
        dict
            Response envelope: ``ok``, plus ``result`` or ``description``
            and ``error_code``.

        Raises
        ------
        RemoteCallError
            If the server answers with an HTTP error whose body is not a
            Bot API envelope.
        urllib.error.URLError
            On network failure.
        """
        params = dict(params or {})

        if any(isinstance(value, InputFile) for value in params.values()):
            boundary = "----telehook" + secrets.token_hex(16)
            data = encode_multipart(params, boundary)
            content_type = f"multipart/form-data; boundary={boundary}"
            logger.debug("Request %s (multipart) fields=%s", method, sorted(params))
        else:
            data = json.dumps(params, default=_plain).encode("utf-8")
            content_type = "application/json"
            logger.debug("Request %s params=%s", method, params)

        req = urllib.request.Request(
            url=self.method_url(method),
            data=data,
            headers={"Content-Type": content_type},
            method="POST",
        )

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                body = resp.read().decode("utf-8")
        except HTTPError as e:
            # Bot API errors come back as 4xx with a JSON envelope
            try:
                error_body = e.read().decode("utf-8", errors="ignore")
            except OSError:
                error_body = ""
            payload = self._decode(error_body)
            if payload is None:
                logger.error(
                    "HTTPError for %s: %s %s, body=%s",
                    method,
                    e.code,
                    e.reason,
                    error_body or "<no body>",
                )
                raise RemoteCallError(
                    f"HTTP {e.code} {e.reason}",
                    method=method,
                    error_code=e.code,
                ) from e
            return payload

        payload = self._decode(body)
        if payload is None:
            raise RemoteCallError("Response is not a Bot API envelope", method=method, payload=body)

        if payload.get("ok"):
            logger.debug("Response %s ok", method)
        return payload

    @staticmethod
    def _decode(body: str) -> Optional[Dict[str, Any]]:
        try:
            payload = json.loads(body)
        except ValueError:
            return None
        if not isinstance(payload, dict) or "ok" not in payload:
            return None
        return payload
