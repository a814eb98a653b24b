"""Message request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .updates import PartialUpdate


class MessageCreate(BaseModel):
    customer_id: Optional[int] = None
    customer_name: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    is_read: bool = False
    is_from_customer: bool = True


class MessageUpdate(PartialUpdate):
    nullable_fields = frozenset({"customer_id"})

    customer_id: Optional[int] = None
    customer_name: Optional[str] = Field(None, min_length=1)
    message: Optional[str] = Field(None, min_length=1)
    is_read: Optional[bool] = None
    is_from_customer: Optional[bool] = None


class MessageReply(BaseModel):
    message: str = Field(..., min_length=1)


class MessageModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: Optional[int] = None
    customer_name: str
    message: str
    is_read: bool
    is_from_customer: bool
    created_at: Optional[datetime] = None


class ConversationModel(BaseModel):
    customer_name: str
    customer_id: Optional[int] = None
    unread_count: int
    latest: MessageModel
    messages: List[MessageModel]
