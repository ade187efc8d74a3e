"""
Data access layer for the ``message`` table.
"""

import logging
import sqlite3
from typing import List, Optional

from social_media_api.app.core.db import get_cursor
from social_media_api.app.schemas.message import Message, MessageCreate


logger = logging.getLogger(__name__)

_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


def _row_to_message(row: sqlite3.Row) -> Message:
    return Message(
        message_id=row["message_id"],
        posted_by=row["posted_by"],
        message_text=row["message_text"],
        time_posted_epoch=row["time_posted_epoch"] or 0,
    )


class MessageRepository:
    """Repository for CRUD operations on the message table.

    Lookups that find nothing and queries that fail both return
    ``None`` (single rows) or an empty list (listings); failures are
    logged with their traceback.
    """

    def insert_message(self, message: MessageCreate) -> Optional[Message]:
        """Insert a message and return it with its assigned id."""
        sql = "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)"
        time_posted_epoch = message.time_posted_epoch if message.time_posted_epoch is not None else 0
        try:
            with get_cursor() as cursor:
                cursor.execute(sql, (message.posted_by, message.message_text, time_posted_epoch))
                message_id = cursor.lastrowid
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to insert message for account %s", message.posted_by)
            return None
        return Message(
            message_id=message_id,
            posted_by=message.posted_by,
            message_text=message.message_text,
            time_posted_epoch=time_posted_epoch,
        )

    def get_all_messages(self) -> List[Message]:
        """Return every stored message in storage order."""
        try:
            with get_cursor() as cursor:
                rows = cursor.execute(f"SELECT {_COLUMNS} FROM message").fetchall()
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to list messages")
            return []
        return [_row_to_message(row) for row in rows]

    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        """Fetch a single message, or ``None`` if it does not exist."""
        try:
            with get_cursor() as cursor:
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                    (message_id,),
                ).fetchone()
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to fetch message %s", message_id)
            return None
        return _row_to_message(row) if row else None

    def delete_message_by_id(self, message_id: int) -> Optional[Message]:
        """Delete a message and return the row as it was before deletion.

        Returns ``None`` when the message does not exist or the delete
        did not affect any row.
        """
        deleted = self.get_message_by_id(message_id)
        if deleted is None:
            return None
        try:
            with get_cursor() as cursor:
                cursor.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
                affected = cursor.rowcount
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to delete message %s", message_id)
            return None
        return deleted if affected > 0 else None

    def update_message_text(self, message_id: int, message_text: str) -> Optional[Message]:
        """Overwrite the text of an existing message.

        Returns the row re-read after the update, or ``None`` if the
        message does not exist.
        """
        if self.get_message_by_id(message_id) is None:
            return None
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    "UPDATE message SET message_text = ? WHERE message_id = ?",
                    (message_text, message_id),
                )
                affected = cursor.rowcount
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to update message %s", message_id)
            return None
        if affected == 0:
            return None
        return self.get_message_by_id(message_id)

    def get_all_messages_from_user(self, account_id: int) -> List[Message]:
        """Return the messages posted by ``account_id`` (possibly none)."""
        try:
            with get_cursor() as cursor:
                rows = cursor.execute(
                    f"SELECT {_COLUMNS} FROM message WHERE posted_by = ?",
                    (account_id,),
                ).fetchall()
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to list messages of account %s", account_id)
            return []
        return [_row_to_message(row) for row in rows]
