from __future__ import annotations

from typing import Optional

from ..core.enums import Intent

HELP_TEXT = "Commands: time in | time out | today | week"

REPLIES = {
    Intent.TIME_IN: "✅ Time In recorded",
    Intent.TIME_OUT: "⏱ Time Out recorded",
    Intent.TODAY: "📊 Today’s report ready",
    Intent.WEEK: "📅 Weekly report ready",
}


def classify_intent(text: Optional[str]) -> Intent:
    """Exact, case-insensitive match of a chat message against the command set."""
    normalized = (text or "").lower()
    for intent in (Intent.TIME_IN, Intent.TIME_OUT, Intent.TODAY, Intent.WEEK):
        if normalized == intent.value:
            return intent
    return Intent.UNKNOWN


def reply_for(intent: Intent) -> str:
    return REPLIES.get(intent, HELP_TEXT)
