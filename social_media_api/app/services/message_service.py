"""
Business logic for messages.

Posting and editing validate the author and the text before touching
the store.  Reads and deletes apply no rules: a missing message is a
normal outcome reported as ``None``, not an error.  Any account may
edit or delete any message.
"""

import logging
from typing import List, Optional

from social_media_api.app.core.errors import StoreError, ValidationFailed
from social_media_api.app.repositories.message_repository import MessageRepository
from social_media_api.app.schemas.message import MessageRead
from social_media_api.app.services.account_service import AccountService

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 255


def _validate_text(text: str) -> None:
    if not text.strip():
        raise ValidationFailed("Message text must not be blank")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationFailed(f"Message text must be at most {MAX_TEXT_LENGTH} characters")


class MessageService:
    """Service for posting, reading, editing and deleting messages."""

    @classmethod
    async def post_message(cls, posted_by: int, text: str, posted_at_epoch: int) -> MessageRead:
        """Store a new message.

        Raises ``ValidationFailed`` if ``posted_by`` is not an existing
        account, the text is blank or longer than ``MAX_TEXT_LENGTH``,
        or the store refuses the insert.
        """
        try:
            author = await AccountService.get_account(posted_by)
        except StoreError as e:
            raise ValidationFailed("Message could not be created") from e
        if author is None:
            logger.info("Message rejected: account %s does not exist", posted_by)
            raise ValidationFailed(f"Account {posted_by} does not exist")
        _validate_text(text)
        try:
            return MessageRepository.insert_message(posted_by, text, posted_at_epoch)
        except StoreError as e:
            raise ValidationFailed("Message could not be created") from e

    @classmethod
    async def list_messages(cls) -> List[MessageRead]:
        return MessageRepository.list_all_messages()

    @classmethod
    async def get_message(cls, message_id: int) -> Optional[MessageRead]:
        return MessageRepository.find_message_by_id(message_id)

    @classmethod
    async def delete_message(cls, message_id: int) -> Optional[MessageRead]:
        return MessageRepository.delete_message_by_id(message_id)

    @classmethod
    async def update_message_text(cls, message_id: int, text: str) -> MessageRead:
        """Replace the text of an existing message and return it.

        The update and the read-back are two separate statements.  If
        the message vanishes in between, the request is rejected the
        same way as an unknown id.
        """
        if MessageRepository.find_message_by_id(message_id) is None:
            logger.info("Update rejected: message %s does not exist", message_id)
            raise ValidationFailed(f"Message {message_id} does not exist")
        _validate_text(text)
        MessageRepository.update_message_text(message_id, text)
        updated = MessageRepository.find_message_by_id(message_id)
        if updated is None:
            raise ValidationFailed(f"Message {message_id} does not exist")
        return updated

    @classmethod
    async def list_messages_by_account(cls, account_id: int) -> List[MessageRead]:
        return MessageRepository.list_messages_by_account(account_id)
