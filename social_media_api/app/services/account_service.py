"""
Business logic for accounts.

Registration rules and the login check live here; all SQL is
delegated to ``AccountRepository``.  Passwords are stored and compared
in plain text.
"""

import logging
from typing import Optional

from ..repositories.account_repository import AccountRepository
from ..schemas.account import Account, AccountCreate


MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Service for registering and authenticating accounts."""

    repository = AccountRepository()

    @classmethod
    async def create_account(cls, data: AccountCreate) -> Optional[Account]:
        """Register a new account.

        Returns ``None`` if the username is empty, the password is
        shorter than four characters, or the username is already
        taken.  The uniqueness check runs before the insert and is not
        atomic; two concurrent registrations are resolved by the
        UNIQUE constraint on ``account.username``, which also yields
        ``None``.
        """
        logger = logging.getLogger(__name__)
        if not data.username or data.password is None or len(data.password) < MIN_PASSWORD_LENGTH:
            logger.warning("Rejected registration for %r: invalid username or password", data.username)
            return None
        if await cls.account_exists(data.username):
            logger.warning("Rejected registration for %s: username already exists", data.username)
            return None
        account = cls.repository.insert_account(data)
        if account is not None:
            logger.info("Registered account %s with id %d", account.username, account.account_id)
        return account

    @classmethod
    async def account_exists(cls, username: str) -> bool:
        """Check whether ``username`` is already registered."""
        return cls.repository.account_exists(username)

    @classmethod
    async def authenticate_account(cls, username: Optional[str], password: Optional[str]) -> bool:
        """Return True if the account exists and the password matches exactly."""
        if username is None:
            return False
        account = cls.repository.get_account_by_username(username)
        return account is not None and account.password == password

    @classmethod
    async def get_account_by_username(cls, username: str) -> Optional[Account]:
        """Retrieve an account by username."""
        return cls.repository.get_account_by_username(username)

    @classmethod
    async def account_id_exists(cls, account_id: int) -> bool:
        return cls.repository.account_id_exists(account_id)
