"""
Account persistence.

Each call opens a connection, runs one parameterized statement and
closes the connection.  A missing row is reported as ``None``; a
failing statement raises ``StoreError``.
"""

import logging
import sqlite3
from typing import Optional

from social_media_api.app.core.db import fits_integer, get_cursor
from social_media_api.app.core.errors import DuplicateUsername, StoreError
from social_media_api.app.schemas.account import AccountRead

logger = logging.getLogger(__name__)


class AccountRepository:
    """Gateway for the ``account`` table."""

    @classmethod
    def insert_account(cls, username: str, password: str) -> AccountRead:
        """Insert a new account and return it with its generated id.

        Raises ``DuplicateUsername`` when the UNIQUE constraint on
        ``username`` rejects the row, ``StoreError`` on any other
        database failure.
        """
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    "INSERT INTO account (username, password) VALUES (?, ?)",
                    (username, password),
                )
                account_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            logger.warning("Username %r rejected by unique constraint", username)
            raise DuplicateUsername(f"Username {username!r} already exists", e) from e
        except sqlite3.Error as e:
            logger.exception("Failed to insert account %r", username)
            raise StoreError("Failed to insert account", e) from e
        logger.info("Created account %s (%s)", account_id, username)
        return AccountRead(id=account_id, username=username, password=password)

    @classmethod
    def find_account_by_id(cls, account_id: int) -> Optional[AccountRead]:
        if not fits_integer(account_id):
            return None
        return cls._fetch_one(
            "SELECT id, username, password FROM account WHERE id = ?", (account_id,)
        )

    @classmethod
    def find_account_by_username(cls, username: str) -> Optional[AccountRead]:
        return cls._fetch_one(
            "SELECT id, username, password FROM account WHERE username = ?", (username,)
        )

    @classmethod
    def _fetch_one(cls, sql: str, params: tuple) -> Optional[AccountRead]:
        try:
            with get_cursor() as cursor:
                row = cursor.execute(sql, params).fetchone()
        except sqlite3.Error as e:
            logger.exception("Account lookup failed")
            raise StoreError("Account lookup failed", e) from e
        if not row:
            return None
        return cls._row_to_account(row)

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> AccountRead:
        return AccountRead(id=row["id"], username=row["username"], password=row["password"])
