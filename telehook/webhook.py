# telehook/webhook.py
import hmac
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any, Callable, Optional, Union

from telehook.constants import SECRET_HEADER
from telehook.dispatcher import TeleBot
from telehook.extensions import ExtensionRegistry
from telehook.telegram_client import TelegramClient
from telehook.update import Update

logger = logging.getLogger("telehook.webhook")

BotScript = Callable[[TeleBot], Any]


def process_update(
    body: Union[Update, bytes, str],
    client: TelegramClient,
    script: BotScript,
    extensions: Optional[ExtensionRegistry] = None,
) -> TeleBot:
    """
    Run the bot script on a fresh TeleBot for one webhook update.

    Parameters
    ----------
    body : Update, bytes or str
        Raw request body, or an already decoded update.
    client : TelegramClient
        Shared Bot API client.
    script : callable
        Bot script; receives the TeleBot and registers its ``listen`` calls.
    extensions : ExtensionRegistry, optional
        Extension table, process-wide registry by default.

    Returns
    -------
    TeleBot
        The bot that handled the update.

    Raises
    ------
    ValueError
        If the body is not a JSON object.
    """
    update = Update.coerce(body)
    logger.debug("Received update_id=%s", update.update_id)

    bot = TeleBot(update=update, client=client, extensions=extensions)
    script(bot)

    logger.debug("Update %s handled=%s", update.update_id, bot.handled)
    return bot


def make_handler(
    client: TelegramClient,
    script: BotScript,
    secret: Optional[str] = None,
    extensions: Optional[ExtensionRegistry] = None,
):
    """Build a request handler class bound to the given client and script."""

    class WebhookHandler(BaseHTTPRequestHandler):
        def do_POST(self):
            if secret is not None:
                received = self.headers.get(SECRET_HEADER, "")
                if not hmac.compare_digest(received.encode("utf-8"), secret.encode("utf-8")):
                    logger.warning("Rejected update with bad secret from %s", self.client_address[0])
                    self._reply(403, b"forbidden")
                    return

            try:
                length = int(self.headers.get("Content-Length") or 0)
                update = Update.from_json(self.rfile.read(length))
            except ValueError as exc:
                logger.warning("Malformed update: %s", exc)
                self._reply(400, b"bad request")
                return

            try:
                process_update(update, client, script, extensions)
            except Exception as exc:
                # any non-2xx makes Telegram redeliver the update
                logger.exception("Error while handling update: %r", exc)

            self._reply(200, b"ok")

        def do_GET(self):
            self._reply(200, b"Bot is running!")

        def log_message(self, format, *args):
            logger.debug("%s - %s", self.address_string(), format % args)

        def _reply(self, status: int, body: bytes) -> None:
            self.send_response(status)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

    return WebhookHandler


def serve_webhook(
    host: str,
    port: int,
    client: TelegramClient,
    script: BotScript,
    secret: Optional[str] = None,
) -> None:
    """
    Serve webhook requests until interrupted.

    Requests are handled one at a time, each with its own TeleBot.
    """
    server = HTTPServer((host, port), make_handler(client, script, secret))
    logger.info("Listening for webhook updates on %s:%s", host, port)
    try:
        server.serve_forever()
    finally:
        server.server_close()
