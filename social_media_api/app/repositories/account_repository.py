"""
Data access layer for the ``account`` table.

Storage errors never leave this module: they are logged and turned
into ``None`` or ``False``, the same values callers see when nothing
matched.
"""

import logging
import sqlite3
from typing import Optional

from social_media_api.app.core.db import get_cursor
from social_media_api.app.schemas.account import Account, AccountCreate


logger = logging.getLogger(__name__)


class AccountRepository:
    """Repository for queries on the account table."""

    def insert_account(self, account: AccountCreate) -> Optional[Account]:
        """
        Insert a new account and return it with its assigned id.

        Returns:
            The stored ``Account``, or ``None`` if the insert failed
            (including a username that is already taken).
        """
        sql = "INSERT INTO account (username, password) VALUES (?, ?)"
        try:
            with get_cursor() as cursor:
                cursor.execute(sql, (account.username, account.password))
                account_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            logger.warning("Account %s rejected by the database: %s", account.username, e)
            return None
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to insert account %s", account.username)
            return None
        return Account(account_id=account_id, username=account.username, password=account.password)

    def account_exists(self, username: str) -> bool:
        """Return True if an account with exactly this username exists."""
        sql = "SELECT COUNT(*) AS count FROM account WHERE username = ?"
        try:
            with get_cursor() as cursor:
                row = cursor.execute(sql, (username,)).fetchone()
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to look up username %s", username)
            return False
        return bool(row and row["count"] > 0)

    def get_account_by_username(self, username: str) -> Optional[Account]:
        """Fetch an account by username, or ``None``."""
        sql = "SELECT account_id, username, password FROM account WHERE username = ?"
        try:
            with get_cursor() as cursor:
                row = cursor.execute(sql, (username,)).fetchone()
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to fetch account %s", username)
            return None
        if not row:
            return None
        return Account(account_id=row["account_id"], username=row["username"], password=row["password"])

    def account_id_exists(self, account_id: int) -> bool:
        """Return True if an account with this primary key exists."""
        sql = "SELECT COUNT(*) AS count FROM account WHERE account_id = ?"
        try:
            with get_cursor() as cursor:
                row = cursor.execute(sql, (account_id,)).fetchone()
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to look up account id %s", account_id)
            return False
        return bool(row and row["count"] > 0)
