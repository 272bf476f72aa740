import pytest

from timekeeping.core.enums import Intent
from timekeeping.messenger.intents import HELP_TEXT, classify_intent, reply_for


@pytest.mark.parametrize(
    "text, expected",
    [
        ("time in", Intent.TIME_IN),
        ("Time In", Intent.TIME_IN),
        ("TIME OUT", Intent.TIME_OUT),
        ("today", Intent.TODAY),
        ("Week", Intent.WEEK),
        (" time in", Intent.UNKNOWN),
        ("timein", Intent.UNKNOWN),
        ("", Intent.UNKNOWN),
        (None, Intent.UNKNOWN),
    ],
)
def test_classify_intent_is_exact_and_case_insensitive(text, expected):
    assert classify_intent(text) is expected


def test_unknown_intent_replies_with_usage():
    assert reply_for(Intent.UNKNOWN) == HELP_TEXT
    assert reply_for(Intent.TIME_IN) == "✅ Time In recorded"
    assert reply_for(Intent.WEEK) == "📅 Weekly report ready"
