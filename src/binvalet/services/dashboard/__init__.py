"""Dashboard service helpers."""

from .conversations import Conversation, conversations, reply_to_message, search_messages
from .summary import DailySummary, daily_summary, local_today

__all__ = [
    "Conversation",
    "conversations",
    "reply_to_message",
    "search_messages",
    "DailySummary",
    "daily_summary",
    "local_today",
]
