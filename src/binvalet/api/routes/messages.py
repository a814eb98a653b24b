"""Staff messaging endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ...persistence.memory import MemStorage
from ...schemas.messages import ConversationModel, MessageCreate, MessageModel, MessageReply, MessageUpdate
from ...services.dashboard import conversations, reply_to_message, search_messages
from ...services.errors import NotFoundError
from ..dependencies import get_storage

router = APIRouter(prefix="/messages", tags=["messages"])


def _not_found(message_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Message {message_id} not found")


@router.get("", response_model=List[MessageModel], status_code=status.HTTP_200_OK)
def list_messages(
    search: Optional[str] = Query(default=None, description="Match customer name or message text"),
    storage: MemStorage = Depends(get_storage),
) -> List[MessageModel]:
    return [MessageModel.model_validate(message) for message in search_messages(storage.list_messages(), search)]


@router.get("/conversations", response_model=List[ConversationModel], status_code=status.HTTP_200_OK)
def list_conversations(storage: MemStorage = Depends(get_storage)) -> List[ConversationModel]:
    return [
        ConversationModel(
            customer_name=convo.customer_name,
            customer_id=convo.customer_id,
            unread_count=convo.unread_count,
            latest=MessageModel.model_validate(convo.latest),
            messages=[MessageModel.model_validate(message) for message in convo.messages],
        )
        for convo in conversations(storage.list_messages())
    ]


@router.post("", response_model=MessageModel, status_code=status.HTTP_201_CREATED)
def create_message(payload: MessageCreate, storage: MemStorage = Depends(get_storage)) -> MessageModel:
    return MessageModel.model_validate(storage.create_message(payload.model_dump()))


@router.get("/{message_id}", response_model=MessageModel, status_code=status.HTTP_200_OK)
def get_message(message_id: int, storage: MemStorage = Depends(get_storage)) -> MessageModel:
    message = storage.get_message(message_id)
    if message is None:
        raise _not_found(message_id)
    return MessageModel.model_validate(message)


@router.api_route("/{message_id}", methods=["PUT", "PATCH"], response_model=MessageModel)
def update_message(
    message_id: int,
    payload: MessageUpdate,
    storage: MemStorage = Depends(get_storage),
) -> MessageModel:
    message = storage.update_message(message_id, payload.model_dump(exclude_unset=True))
    if message is None:
        raise _not_found(message_id)
    return MessageModel.model_validate(message)


@router.post("/{message_id}/reply", response_model=MessageModel, status_code=status.HTTP_201_CREATED)
def reply(message_id: int, payload: MessageReply, storage: MemStorage = Depends(get_storage)) -> MessageModel:
    try:
        return MessageModel.model_validate(reply_to_message(storage, message_id, payload.message))
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(message_id: int, storage: MemStorage = Depends(get_storage)) -> Response:
    if not storage.delete_message(message_id):
        raise _not_found(message_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
