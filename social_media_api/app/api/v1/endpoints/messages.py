"""
Message endpoints for API v1.

Single-message reads and deletes answer 200 with an empty body when
the message does not exist, not 404.  Existing clients depend on this.
"""

from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from social_media_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN
from social_media_api.app.schemas.message import Message, MessageCreate, MessageUpdate
from social_media_api.app.services.message_service import MessageService


# Ids beyond SQLite's 64-bit range are rejected with the other unparseable input.
MessageId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]

router = APIRouter()


@router.post("", response_model=Message)
async def create_message(message: MessageCreate):
    """Post a new message, or 400 if the text or author is invalid."""
    created = await MessageService.create_message(message)
    if created is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return created


@router.get("", response_model=List[Message])
async def list_messages() -> List[Message]:
    """List all messages."""
    return await MessageService.get_all_messages()


@router.get("/{message_id}", response_model=Message)
async def get_message(message_id: MessageId):
    msg = await MessageService.get_message_by_id(message_id)
    if msg is None:
        return Response(status_code=status.HTTP_200_OK)
    return msg


@router.delete("/{message_id}", response_model=Message)
async def delete_message(message_id: MessageId):
    """Delete a message and return it.  Empty 200 if it did not exist."""
    deleted = await MessageService.delete_message(message_id)
    if deleted is None:
        return Response(status_code=status.HTTP_200_OK)
    return deleted


@router.patch("/{message_id}", response_model=Message)
async def update_message(message_id: MessageId, body: MessageUpdate):
    """Replace the text of a message.

    Responds 400 if the new text is empty or 255 characters or longer,
    and also when the message does not exist.
    """
    updated = await MessageService.update_message(message_id, body)
    if updated is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return updated
