from __future__ import annotations

from typing import Any, Optional

from ..core.enums import Intent
from .client import MessengerClient
from .intents import classify_intent, reply_for


def first_messaging_event(payload: Any) -> Optional[dict]:
    """Return ``entry[0].messaging[0]`` or None when any level is missing."""
    entries = payload.get("entry") if isinstance(payload, dict) else None
    if not isinstance(entries, list) or not entries:
        return None
    messaging = entries[0].get("messaging") if isinstance(entries[0], dict) else None
    if not isinstance(messaging, list) or not messaging:
        return None
    event = messaging[0]
    return event if isinstance(event, dict) else None


class MessengerService:
    """Answers chat messages with canned replies.

    Replies are acknowledgments only: no record is opened or closed here.
    """

    def __init__(self, client: MessengerClient):
        self._client = client

    def handle_message(self, event: dict) -> Intent:
        sender_id = event["sender"]["id"]
        message = event["message"]
        text = message.get("text") if isinstance(message, dict) else None

        intent = classify_intent(text)
        self._client.send_text(sender_id, reply_for(intent))
        return intent
