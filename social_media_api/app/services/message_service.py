"""
Service layer for messages.

Validates message text and ownership before handing the work to
``MessageRepository``.  Every failure (bad input, unknown author,
missing message, storage error) is reported as ``None``; the HTTP
layer decides which status code that maps to.
"""

import logging
from typing import List, Optional

from ..repositories.message_repository import MessageRepository
from ..schemas.message import Message, MessageCreate, MessageUpdate
from .account_service import AccountService


# Messages must be strictly shorter than this.
MAX_MESSAGE_LENGTH = 255


def _valid_text(text: Optional[str]) -> bool:
    return bool(text) and len(text) < MAX_MESSAGE_LENGTH


class MessageService:
    """Service for posting, editing and removing messages."""

    repository = MessageRepository()

    @classmethod
    async def create_message(cls, data: MessageCreate) -> Optional[Message]:
        """Post a new message.

        The text must be non-empty and shorter than 255 characters and
        ``posted_by`` must be the id of an existing account.
        """
        logger = logging.getLogger(__name__)
        if not _valid_text(data.message_text):
            logger.warning("Rejected message from account %s: invalid text", data.posted_by)
            return None
        if data.posted_by is None or not await AccountService.account_id_exists(data.posted_by):
            logger.warning("Rejected message: account %s does not exist", data.posted_by)
            return None
        message = cls.repository.insert_message(data)
        if message is not None:
            logger.info("Account %d posted message %d", message.posted_by, message.message_id)
        return message

    @classmethod
    async def get_all_messages(cls) -> List[Message]:
        """Return all messages."""
        return cls.repository.get_all_messages()

    @classmethod
    async def get_message_by_id(cls, message_id: int) -> Optional[Message]:
        return cls.repository.get_message_by_id(message_id)

    @classmethod
    async def delete_message(cls, message_id: int) -> Optional[Message]:
        """Delete a message, returning it as it was before deletion.

        Deleting a message that does not exist is not an error; it
        simply returns ``None``.
        """
        deleted = cls.repository.delete_message_by_id(message_id)
        if deleted is not None:
            logging.getLogger(__name__).info("Deleted message %d", message_id)
        return deleted

    @classmethod
    async def update_message(cls, message_id: int, data: MessageUpdate) -> Optional[Message]:
        """Replace the text of a message.

        Only ``message_text`` is changed; the author and timestamp are
        kept.  Returns the updated message, or ``None`` if the new text
        is invalid or the message does not exist.
        """
        logger = logging.getLogger(__name__)
        if not _valid_text(data.message_text):
            logger.warning("Rejected update of message %d: invalid text", message_id)
            return None
        updated = cls.repository.update_message_text(message_id, data.message_text)
        if updated is not None:
            logger.info("Updated message %d", message_id)
        return updated

    @classmethod
    async def get_all_messages_from_user(cls, account_id: int) -> List[Message]:
        """Return the messages posted by one account.

        An account without messages, or an unknown account id, gives an
        empty list.
        """
        return cls.repository.get_all_messages_from_user(account_id)
