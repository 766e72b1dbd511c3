import pytest

from telehook.errors import RemoteCallError
from telehook.long_polling import poll_once

from conftest import message_update


def test_poll_once_dispatches_each_update_and_advances_offset(client, registry):
    first = dict(message_update("/start"), update_id=20)
    second = dict(message_update("/help"), update_id=21)
    client.responses["getUpdates"] = {"ok": True, "result": [first, second]}
    seen = []

    def script(bot):
        bot.listen("/start", lambda: seen.append("start"))
        bot.listen("/help", lambda: seen.append("help"))

    offset = poll_once(client, script, offset=20, timeout=5, extensions=registry)

    assert offset == 22
    assert seen == ["start", "help"]
    assert client.calls[0] == {"method": "getUpdates", "params": {"offset": 20, "timeout": 5}}


def test_poll_once_keeps_going_after_script_error(client, registry):
    client.responses["getUpdates"] = {
        "ok": True,
        "result": [dict(message_update("/boom"), update_id=1), dict(message_update("/ok"), update_id=2)],
    }
    seen = []

    def script(bot):
        def boom():
            raise RuntimeError("boom")

        bot.listen("/boom", boom)
        bot.listen("/ok", lambda: seen.append("ok"))

    assert poll_once(client, script, extensions=registry) == 3
    assert seen == ["ok"]


def test_poll_once_without_updates_keeps_offset(client, registry):
    client.responses["getUpdates"] = {"ok": True, "result": []}

    assert poll_once(client, lambda bot: None, offset=7, extensions=registry) == 7


def test_poll_once_raises_on_api_error(client, registry):
    client.responses["getUpdates"] = {"ok": False, "description": "Conflict: webhook is active"}

    with pytest.raises(RemoteCallError, match="webhook is active"):
        poll_once(client, lambda bot: None, extensions=registry)
