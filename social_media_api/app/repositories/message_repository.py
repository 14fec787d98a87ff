"""
Message persistence.

All queries use parameterized statements.  Lists are returned in
ascending id order and are empty, never ``None``, when nothing
matches.  Deleting reads the row and removes it inside a single
transaction so the returned record is exactly the one deleted.
"""

import logging
import sqlite3
from typing import List, Optional

from social_media_api.app.core.db import fits_integer, get_cursor, transaction
from social_media_api.app.core.errors import StoreError
from social_media_api.app.schemas.message import MessageRead

logger = logging.getLogger(__name__)

_COLUMNS = "id, posted_by, text, posted_at_epoch"


class MessageRepository:
    """Gateway for the ``message`` table."""

    @classmethod
    def insert_message(cls, posted_by: int, text: str, posted_at_epoch: int) -> MessageRead:
        """Insert a message and return it with its generated id."""
        if not (fits_integer(posted_by) and fits_integer(posted_at_epoch)):
            raise StoreError("Message fields exceed the integer range of the store")
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    "INSERT INTO message (posted_by, text, posted_at_epoch) VALUES (?, ?, ?)",
                    (posted_by, text, posted_at_epoch),
                )
                message_id = cursor.lastrowid
        except sqlite3.Error as e:
            logger.exception("Failed to insert message for account %s", posted_by)
            raise StoreError("Failed to insert message", e) from e
        logger.info("Created message %s by account %s", message_id, posted_by)
        return MessageRead(
            id=message_id,
            posted_by=posted_by,
            text=text,
            posted_at_epoch=posted_at_epoch,
        )

    @classmethod
    def find_message_by_id(cls, message_id: int) -> Optional[MessageRead]:
        if not fits_integer(message_id):
            return None
        try:
            with get_cursor() as cursor:
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM message WHERE id = ?", (message_id,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.exception("Failed to fetch message %s", message_id)
            raise StoreError("Failed to fetch message", e) from e
        return cls._row_to_message(row) if row else None

    @classmethod
    def list_all_messages(cls) -> List[MessageRead]:
        return cls._fetch_all(f"SELECT {_COLUMNS} FROM message ORDER BY id", ())

    @classmethod
    def list_messages_by_account(cls, account_id: int) -> List[MessageRead]:
        if not fits_integer(account_id):
            return []
        return cls._fetch_all(
            f"SELECT {_COLUMNS} FROM message WHERE posted_by = ? ORDER BY id",
            (account_id,),
        )

    @classmethod
    def delete_message_by_id(cls, message_id: int) -> Optional[MessageRead]:
        """Delete a message and return the row as it was before deletion.

        Returns ``None`` if no message has the given id.
        """
        if not fits_integer(message_id):
            return None
        try:
            with transaction() as cursor:
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM message WHERE id = ?", (message_id,)
                ).fetchone()
                if not row:
                    return None
                cursor.execute("DELETE FROM message WHERE id = ?", (message_id,))
        except sqlite3.Error as e:
            logger.exception("Failed to delete message %s", message_id)
            raise StoreError("Failed to delete message", e) from e
        logger.info("Deleted message %s", message_id)
        return cls._row_to_message(row)

    @classmethod
    def update_message_text(cls, message_id: int, text: str) -> None:
        """Replace the text of a message.

        Matching no row is not an error; the caller decides whether the
        message had to exist.
        """
        if not fits_integer(message_id):
            return
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    "UPDATE message SET text = ? WHERE id = ?", (text, message_id)
                )
                updated = cursor.rowcount
        except sqlite3.Error as e:
            logger.exception("Failed to update message %s", message_id)
            raise StoreError("Failed to update message", e) from e
        logger.info("Updated text of message %s (%s row(s))", message_id, updated)

    @classmethod
    def _fetch_all(cls, sql: str, params: tuple) -> List[MessageRead]:
        try:
            with get_cursor() as cursor:
                rows = cursor.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            logger.exception("Failed to list messages")
            raise StoreError("Failed to list messages", e) from e
        return [cls._row_to_message(row) for row in rows]

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> MessageRead:
        return MessageRead(
            id=row["id"],
            posted_by=row["posted_by"],
            text=row["text"],
            posted_at_epoch=row["posted_at_epoch"],
        )
