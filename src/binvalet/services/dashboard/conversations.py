"""Message threads between staff and customers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from ...models.domain import Message
from ...persistence.memory import MemStorage
from ..errors import NotFoundError

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(slots=True)
class Conversation:
    customer_name: str
    customer_id: Optional[int]
    messages: list[Message]

    @property
    def unread_count(self) -> int:
        return sum(1 for message in self.messages if not message.is_read)

    @property
    def latest(self) -> Message:
        return self.messages[-1]


def _chronological(messages: Iterable[Message]) -> list[Message]:
    return sorted(messages, key=lambda message: (message.created_at or _EPOCH, message.id))


def search_messages(messages: Sequence[Message], term: Optional[str]) -> list[Message]:
    """Case-insensitive match on the customer name or the message text."""
    if not term:
        return list(messages)
    needle = term.lower()
    return [
        message
        for message in messages
        if needle in message.customer_name.lower() or needle in message.message.lower()
    ]


def conversations(messages: Sequence[Message]) -> list[Conversation]:
    """Group messages by customer name; threads with the most recent activity come first."""

    threads: dict[str, list[Message]] = {}
    for message in messages:
        threads.setdefault(message.customer_name, []).append(message)

    result = []
    for name, thread in threads.items():
        ordered = _chronological(thread)
        customer_id = next((message.customer_id for message in ordered if message.customer_id is not None), None)
        result.append(Conversation(customer_name=name, customer_id=customer_id, messages=ordered))
    result.sort(key=lambda convo: (convo.latest.created_at or _EPOCH, convo.latest.id), reverse=True)
    return result


def reply_to_message(storage: MemStorage, message_id: int, text: str) -> Message:
    """Send a staff reply to the customer of ``message_id`` and mark that message read."""

    original = storage.get_message(message_id)
    if original is None:
        raise NotFoundError("Message", message_id)
    if not original.is_read:
        storage.update_message(message_id, {"is_read": True})
    return storage.create_message(
        {
            "customer_id": original.customer_id,
            "customer_name": original.customer_name,
            "message": text,
            "is_read": True,
            "is_from_customer": False,
        }
    )
