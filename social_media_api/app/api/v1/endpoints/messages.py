"""
Message endpoints for API v1.

A lookup or delete that finds nothing answers 200 with an empty body
rather than 404; clients tell absence apart by the body.
"""

from typing import List, Union

from fastapi import APIRouter, Response, status

from social_media_api.app.schemas.message import MessageCreate, MessageRead, MessageTextUpdate
from social_media_api.app.services.message_service import MessageService


router = APIRouter()


def _empty_ok() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post("", response_model=MessageRead)
async def post_message(message: MessageCreate) -> MessageRead:
    """Create a message on behalf of an existing account."""
    return await MessageService.post_message(
        message.posted_by, message.text, message.posted_at_epoch
    )


@router.get("", response_model=List[MessageRead])
async def list_messages() -> List[MessageRead]:
    """List all messages."""
    return await MessageService.list_messages()


@router.get("/{message_id}", response_model=MessageRead)
async def get_message(message_id: int) -> Union[MessageRead, Response]:
    """Return a message, or an empty 200 if there is none with that id."""
    msg = await MessageService.get_message(message_id)
    if msg is None:
        return _empty_ok()
    return msg


@router.delete("/{message_id}", response_model=MessageRead)
async def delete_message(message_id: int) -> Union[MessageRead, Response]:
    """Delete a message and return what was deleted, if anything."""
    msg = await MessageService.delete_message(message_id)
    if msg is None:
        return _empty_ok()
    return msg


@router.patch("/{message_id}", response_model=MessageRead)
async def update_message(message_id: int, body: MessageTextUpdate) -> MessageRead:
    """Replace the text of an existing message."""
    return await MessageService.update_message_text(message_id, body.text)
