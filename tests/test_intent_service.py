import pytest
from data.replies import DEFAULT_REPLY, INTENT_REPLIES
from services.intent_service import classify, detect_intent

REPLIES = dict(INTENT_REPLIES)


@pytest.mark.parametrize("message,keyword", [
    ("When is the BEST TIME to go?", "best time"),
    ("Thinking about Kilimanjaro", "kilimanjaro"),
    ("budget tips", "budget"),
    ("Optimize my itinerary", "optimize"),
])
def test_keyword_replies(message, keyword):
    assert classify(message) == REPLIES[keyword]


def test_first_match_wins():
    assert classify("What's the best time and budget?") == REPLIES["best time"]
    assert classify("kilimanjaro on a budget") == REPLIES["kilimanjaro"]


def test_default_reply():
    assert classify("") == DEFAULT_REPLY
    assert classify("tell me about lions") == DEFAULT_REPLY
    assert detect_intent("tell me about lions") is None
