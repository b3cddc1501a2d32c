# Intent Service — keyword-based reply selection
# Lower-cases the message, walks the ordered keyword rules,
# and returns the reply bound to the first keyword found.

from typing import Optional
from data.replies import INTENT_REPLIES, DEFAULT_REPLY


def detect_intent(message: str) -> Optional[str]:
    """Return the first matching intent keyword, or None."""
    q = str(message or "").lower()
    for keyword, _ in INTENT_REPLIES:
        if keyword in q:
            return keyword
    return None


def classify(message: str) -> str:
    """Map free text to one canned Nyota reply. Total over all strings."""
    intent = detect_intent(message)
    if intent is None:
        return DEFAULT_REPLY
    return dict(INTENT_REPLIES)[intent]
