from typing import Any, Dict, List, Optional

import pytest

from telehook.extensions import ExtensionRegistry


class FakeClient:
    """Records Bot API calls instead of sending them."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.responses: Dict[str, Dict[str, Any]] = {}

    def post(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.calls.append({"method": method, "params": dict(params or {})})
        return self.responses.get(method, {"ok": True, "result": {"message_id": len(self.calls)}})

    def methods(self) -> List[str]:
        return [call["method"] for call in self.calls]


def message_update(text: Optional[str] = "/start", chat_id: int = 100, user_id: int = 7) -> Dict[str, Any]:
    message: Dict[str, Any] = {
        "message_id": 1,
        "chat": {"id": chat_id, "type": "private"},
        "from": {"id": user_id, "first_name": "Ann"},
    }
    if text is not None:
        message["text"] = text
    return {"update_id": 10, "message": message}


def callback_update(data: Optional[str] = "/help", chat_id: int = 200, user_id: int = 8) -> Dict[str, Any]:
    callback: Dict[str, Any] = {
        "id": "cq-1",
        "from": {"id": user_id, "first_name": "Bob"},
        "message": {
            "message_id": 2,
            "chat": {"id": chat_id, "type": "private"},
            "from": {"id": 999, "is_bot": True},
            "text": "Main menu:",
        },
    }
    if data is not None:
        callback["data"] = data
    return {"update_id": 11, "callback_query": callback}


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def registry() -> ExtensionRegistry:
    return ExtensionRegistry()
